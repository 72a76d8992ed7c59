"""Location of a tracking event or track endpoint."""

from shippo_client.attributes import register_shape
from shippo_client.entity.base import Entity


@register_shape("location")
class Location(Entity):
    def get_city(self) -> str:
        return self._may_have_as_string("city")

    def get_state(self) -> str:
        return self._may_have_as_string("state")

    def get_zip(self) -> str:
        return self._may_have_as_string("zip")

    def get_country(self) -> str:
        return self._may_have_as_string("country")

    def is_empty(self) -> bool:
        """True when the carrier reported no location fields."""
        return not any(
            (self.get_city(), self.get_state(), self.get_zip(), self.get_country())
        )
