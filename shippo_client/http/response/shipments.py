"""Shipment responses."""

from datetime import datetime

from shippo_client.attributes import register_shape
from shippo_client.entity.base import ShippoObject
from shippo_client.http.response.collection import Collection
from shippo_client.http.response.rates import Rate


@register_shape("shipment")
class Shipment(ShippoObject):
    def get_object_status(self) -> str:
        """Rating progress: WAITING, QUEUED, SUCCESS or ERROR."""
        return self._may_have_as_string("object_status")

    def get_object_purpose(self) -> str:
        return self._may_have_as_string("object_purpose")

    def get_address_from(self) -> str:
        return self._may_have_as_string("address_from")

    def get_address_to(self) -> str:
        return self._may_have_as_string("address_to")

    def get_address_return(self) -> str:
        return self._may_have_as_string("address_return")

    def get_parcel(self) -> str:
        return self._may_have_as_string("parcel")

    def get_submission_type(self) -> str:
        """PICKUP or DROPOFF."""
        return self._may_have_as_string("submission_type")

    def get_submission_date(self) -> datetime | None:
        return self._may_have_as_datetime("submission_date")

    def get_return_of(self) -> str:
        return self._may_have_as_string("return_of")

    def get_customs_declaration(self) -> str:
        return self._may_have_as_string("customs_declaration")

    def get_insurance_amount(self) -> float:
        return self._may_have_as_float("insurance_amount")

    def get_insurance_currency(self) -> str:
        return self._may_have_as_string("insurance_currency")

    def get_extra(self) -> list | dict:
        return self._may_have_as_array("extra")

    def get_reference_1(self) -> str:
        return self._may_have_as_string("reference_1")

    def get_reference_2(self) -> str:
        return self._may_have_as_string("reference_2")

    def get_rates_url(self) -> str:
        return self._may_have_as_string("rates_url")

    def get_rates_list(self) -> list[Rate]:
        return self._attributes.may_have("rates_list").as_list_of("rate")

    def get_carrier_accounts(self) -> list | dict:
        return self._may_have_as_array("carrier_accounts")


class ShipmentCollection(Collection):
    entity_class = Shipment
