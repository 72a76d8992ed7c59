"""Shared machinery for request builders.

A builder wraps caller-supplied parameters in ``Attributes`` and exposes
one getter per documented API field. ``to_dict`` evaluates every getter, so
the first invalid field raises before anything is sent, and keeps only the
fields whose value is truthy.
"""

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from shippo_client.attributes import Attributes
from shippo_client.errors.domain import InvalidAttributeError
from shippo_client.validators import max_length

METADATA_MAX_LENGTH = 100


def serialize_value(value: Any) -> Any:
    """Render a coerced value for the JSON payload."""
    if isinstance(value, datetime):
        value = value.astimezone(timezone.utc)
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return value


class RequestBuilder:
    """Validated creation parameters for one resource."""

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        self._attributes = Attributes(attributes)

    def _field_getters(self) -> dict[str, Callable[[], Any]]:
        """Wire key -> getter, in payload order."""
        raise NotImplementedError

    def get_metadata(self) -> str:
        """A string of up to 100 characters with any additional information
        you want to attach to the object."""
        return self._attributes.may_have("metadata").as_string(
            max_length(METADATA_MAX_LENGTH)
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the minimal payload: present, non-empty fields only.

        Raises:
            InvalidAttributeError: On the first field that fails validation.
        """
        payload = {}
        for key, getter in self._field_getters().items():
            value = getter()
            if value:
                payload[key] = serialize_value(value)
        return payload

    def validation_errors(self) -> list[InvalidAttributeError]:
        """Evaluate every field and collect failures instead of raising."""
        errors = []
        for getter in self._field_getters().values():
            try:
                getter()
            except InvalidAttributeError as e:
                errors.append(e)
        return errors

    def is_valid(self) -> bool:
        return not self.validation_errors()
