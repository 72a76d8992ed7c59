"""Address responses."""

from shippo_client.attributes import register_shape
from shippo_client.entity.base import ShippoObject
from shippo_client.http.response.collection import Collection


@register_shape("address")
class Address(ShippoObject):
    def get_object_purpose(self) -> str:
        """QUOTE or PURCHASE."""
        return self._may_have_as_string("object_purpose")

    def get_object_source(self) -> str:
        """How the address was created, e.g. FULLY_ENTERED or VALIDATOR."""
        return self._may_have_as_string("object_source")

    def get_name(self) -> str:
        return self._may_have_as_string("name")

    def get_company(self) -> str:
        return self._may_have_as_string("company")

    def get_street_no(self) -> str:
        return self._may_have_as_string("street_no")

    def get_street1(self) -> str:
        return self._may_have_as_string("street1")

    def get_street2(self) -> str:
        return self._may_have_as_string("street2")

    def get_city(self) -> str:
        return self._may_have_as_string("city")

    def get_state(self) -> str:
        return self._may_have_as_string("state")

    def get_zip(self) -> str:
        return self._may_have_as_string("zip")

    def get_country(self) -> str:
        """ISO 3166-1 alpha-2 country code."""
        return self._may_have_as_string("country")

    def get_phone(self) -> str:
        """Phone number as normalized by the service."""
        return self._may_have_as_string("phone")

    def get_email(self) -> str:
        return self._may_have_as_string("email")

    def get_is_residential(self) -> bool:
        return self._may_have_as_boolean("is_residential")

    def get_ip(self) -> str:
        return self._may_have_as_string("ip")


class AddressCollection(Collection):
    entity_class = Address
