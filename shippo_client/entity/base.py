"""Base classes for response entities.

An entity wraps decoded JSON in ``Attributes`` and reads every field
through ``may_have``: the response shape is trusted, but any individual
field may be absent or empty. Getters that share a coercion delegate to the
``_may_have_as_*`` helpers below.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from shippo_client.attributes import Attributes


class Entity:
    """Typed read-only view over one decoded JSON object."""

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        if isinstance(attributes, Attributes):
            self._attributes = attributes
        else:
            self._attributes = Attributes(attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes.to_dict()!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._attributes == other._attributes

    def _may_have_as_string(self, key: str) -> str:
        return self._attributes.may_have(key).as_string()

    def _may_have_as_float(self, key: str) -> float:
        return self._attributes.may_have(key).as_float()

    def _may_have_as_integer(self, key: str) -> int:
        return self._attributes.may_have(key).as_integer()

    def _may_have_as_boolean(self, key: str) -> bool:
        return self._attributes.may_have(key).as_boolean()

    def _may_have_as_datetime(self, key: str) -> datetime | None:
        return self._attributes.may_have(key).as_datetime()

    def _may_have_as_array(self, key: str) -> list | dict:
        return self._attributes.may_have(key).as_array()

    def to_dict(self) -> dict[str, Any]:
        """Return the raw fields as received."""
        return self._attributes.to_dict()


class ShippoObject(Entity):
    """Entity carrying the object_* fields every stored Shippo object has."""

    def get_object_id(self) -> str:
        """Unique identifier of the given object."""
        return self._may_have_as_string("object_id")

    def get_object_owner(self) -> str:
        """Username of the user who created the object."""
        return self._may_have_as_string("object_owner")

    def get_object_state(self) -> str:
        """Validity of the object, e.g. VALID or INVALID."""
        return self._may_have_as_string("object_state")

    def get_object_created(self) -> datetime | None:
        """Date and time of object creation."""
        return self._may_have_as_datetime("object_created")

    def get_object_updated(self) -> datetime | None:
        """Date and time of last object update."""
        return self._may_have_as_datetime("object_updated")

    def get_metadata(self) -> str:
        """Free text attached to the object by its creator."""
        return self._may_have_as_string("metadata")

    def get_messages(self) -> list | dict:
        """Informational or warning messages returned with the object."""
        return self._may_have_as_array("messages")
