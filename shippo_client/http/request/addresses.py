"""Address creation parameters."""

from shippo_client.http.request.base import RequestBuilder
from shippo_client.validators import exact_length, non_empty, one_of

QUOTE = "QUOTE"
PURCHASE = "PURCHASE"
OBJECT_PURPOSES = (QUOTE, PURCHASE)


class CreateAddress(RequestBuilder):
    """Address parameters.

    A QUOTE address only needs enough to rate a shipment; a PURCHASE address
    must be complete enough to print a label, so name, street1, city, state
    and zip become required.
    """

    def _is_purchase(self) -> bool:
        return self._attributes.get("object_purpose") == PURCHASE

    def _purchase_string(self, key: str) -> str:
        """Required and non-empty for PURCHASE, optional otherwise."""
        if self._is_purchase():
            return self._attributes.must_have(key).as_string(non_empty())
        return self._attributes.may_have(key).as_string()

    def get_object_purpose(self) -> str:
        """QUOTE or PURCHASE."""
        return self._attributes.must_have("object_purpose").as_string(
            one_of(*OBJECT_PURPOSES)
        )

    def get_name(self) -> str:
        return self._purchase_string("name")

    def get_company(self) -> str:
        return self._attributes.may_have("company").as_string()

    def get_street_no(self) -> str:
        return self._attributes.may_have("street_no").as_string()

    def get_street1(self) -> str:
        return self._purchase_string("street1")

    def get_street2(self) -> str:
        return self._attributes.may_have("street2").as_string()

    def get_city(self) -> str:
        return self._purchase_string("city")

    def get_state(self) -> str:
        return self._purchase_string("state")

    def get_zip(self) -> str:
        return self._purchase_string("zip")

    def get_country(self) -> str:
        """ISO 3166-1 alpha-2 country code, e.g. US."""
        return self._attributes.must_have("country").as_string(exact_length(2))

    def get_phone(self) -> str:
        return self._attributes.may_have("phone").as_string()

    def get_email(self) -> str:
        return self._attributes.may_have("email").as_string()

    def get_is_residential(self) -> bool:
        return self._attributes.may_have("is_residential").as_boolean()

    def get_ip(self) -> str:
        return self._attributes.may_have("ip").as_string()

    def _field_getters(self):
        return {
            "object_purpose": self.get_object_purpose,
            "name": self.get_name,
            "company": self.get_company,
            "street_no": self.get_street_no,
            "street1": self.get_street1,
            "street2": self.get_street2,
            "city": self.get_city,
            "state": self.get_state,
            "zip": self.get_zip,
            "country": self.get_country,
            "phone": self.get_phone,
            "email": self.get_email,
            "is_residential": self.get_is_residential,
            "ip": self.get_ip,
            "metadata": self.get_metadata,
        }
