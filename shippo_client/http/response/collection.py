"""Paginated list responses."""

from collections.abc import Iterator, Mapping
from typing import Any

from shippo_client.attributes import Attributes
from shippo_client.entity.base import Entity


class Collection:
    """One page of a list endpoint: entities plus pagination metadata.

    Subclasses set ``entity_class`` to the entity built for each result.
    """

    entity_class: type[Entity] = Entity

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        self._attributes = Attributes(attributes)
        self._results = self._attributes.may_have("results").as_list_of(
            self.entity_class
        )

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(count={self.get_count()}, "
            f"results={len(self._results)})"
        )

    def get_count(self) -> int:
        """Total number of objects across all pages."""
        return self._attributes.may_have("count").as_integer()

    def get_next(self) -> str:
        """URL of the next page, or "" on the last page."""
        return self._attributes.may_have("next").as_string()

    def get_previous(self) -> str:
        """URL of the previous page, or "" on the first page."""
        return self._attributes.may_have("previous").as_string()

    def get_results(self) -> list:
        return list(self._results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.get_count(),
            "next": self.get_next(),
            "previous": self.get_previous(),
            "results": self.get_results(),
        }
