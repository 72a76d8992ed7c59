"""Resource clients: endpoint calls returning typed entities.

Each resource pairs a path with a request builder and the entity and
collection types of its responses. Create calls validate parameters with
the builder before the transport is touched.
"""

import logging
from collections.abc import Mapping
from typing import Any

from shippo_client.entity.base import Entity
from shippo_client.http.request.base import RequestBuilder
from shippo_client.http.response.collection import Collection
from shippo_client.http.transport import HttpTransport

logger = logging.getLogger(__name__)


class Resource:
    """create / retrieve / validate / get_list for one Shippo resource."""

    path = ""
    request_class: type[RequestBuilder] = RequestBuilder
    entity_class: type[Entity] = Entity
    collection_class: type[Collection] = Collection

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    def _object_path(self, object_id: str, *parts: str) -> str:
        if not object_id or "/" in object_id:
            raise ValueError(f"Invalid object id: {object_id!r}")
        return "/".join((self.path.rstrip("/"), object_id, *parts)) + "/"

    def create(self, params: Mapping[str, Any]) -> Entity:
        """Validate ``params`` and create the object.

        Raises:
            InvalidAttributeError: If a parameter fails validation; nothing
                is sent in that case.
            ShippoApiError: If the API call fails.
        """
        payload = self.request_class(params).to_dict()
        logger.info("Creating %s", self.path.rstrip("/"))
        return self.entity_class(self._transport.request("POST", self.path, payload))

    def retrieve(self, object_id: str) -> Entity:
        return self.entity_class(
            self._transport.request("GET", self._object_path(object_id))
        )

    def validate(self, object_id: str) -> Entity:
        """Ask the service to validate a stored object.

        The service answers this for addresses; other resources return an
        API error.
        """
        return self.entity_class(
            self._transport.request("GET", self._object_path(object_id, "validate"))
        )

    def get_list(
        self, page: int | None = None, results: int | None = None
    ) -> Collection:
        """Fetch one page of objects.

        Args:
            page: 1-based page number.
            results: Page size.
        """
        return self.collection_class(
            self._transport.request(
                "GET", self.path, params={"page": page, "results": results}
            )
        )
