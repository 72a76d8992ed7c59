"""Rate responses."""

from shippo_client.attributes import register_shape
from shippo_client.entity.base import ShippoObject
from shippo_client.http.response.collection import Collection


@register_shape("rate")
class Rate(ShippoObject):
    """A carrier quote for a shipment.

    Amounts are kept as the decimal strings the service sends.
    """

    def get_shipment(self) -> str:
        """Object id of the shipment this rate belongs to."""
        return self._may_have_as_string("shipment")

    def get_amount(self) -> str:
        return self._may_have_as_string("amount")

    def get_currency(self) -> str:
        return self._may_have_as_string("currency")

    def get_amount_local(self) -> str:
        return self._may_have_as_string("amount_local")

    def get_currency_local(self) -> str:
        return self._may_have_as_string("currency_local")

    def get_provider(self) -> str:
        """Carrier offering the rate, e.g. USPS."""
        return self._may_have_as_string("provider")

    def get_servicelevel_name(self) -> str:
        return self._may_have_as_string("servicelevel_name")

    def get_servicelevel_token(self) -> str:
        return self._may_have_as_string("servicelevel_token")

    def get_days(self) -> int:
        """Estimated transit time in days."""
        return self._may_have_as_integer("days")

    def get_duration_terms(self) -> str:
        return self._may_have_as_string("duration_terms")

    def get_trackable(self) -> bool:
        return self._may_have_as_boolean("trackable")

    def get_attributes(self) -> list | dict:
        """Tags such as CHEAPEST or FASTEST."""
        return self._may_have_as_array("attributes")


class RateCollection(Collection):
    entity_class = Rate
