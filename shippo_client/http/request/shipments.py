"""Shipment creation parameters."""

from datetime import datetime

from shippo_client.http.request.addresses import OBJECT_PURPOSES
from shippo_client.http.request.base import RequestBuilder
from shippo_client.validators import non_negative, one_of

SUBMISSION_TYPES = ("PICKUP", "DROPOFF")


class CreateShipment(RequestBuilder):
    def get_object_purpose(self) -> str:
        """QUOTE or PURCHASE."""
        return self._attributes.must_have("object_purpose").as_string(
            one_of(*OBJECT_PURPOSES)
        )

    def get_address_from(self) -> str:
        """Object id of the sender address."""
        return self._attributes.must_have("address_from").as_string()

    def get_address_to(self) -> str:
        """Object id of the recipient address."""
        return self._attributes.must_have("address_to").as_string()

    def get_parcel(self) -> str:
        """Object id of the parcel."""
        return self._attributes.must_have("parcel").as_string()

    def get_submission_type(self) -> str:
        """Whether the carrier picks the parcel up or it is dropped off."""
        return self._attributes.must_have("submission_type").as_string(
            one_of(*SUBMISSION_TYPES)
        )

    def get_submission_date(self) -> datetime | None:
        """Date the parcel is handed over; defaults to now on the service."""
        return self._attributes.may_have("submission_date").as_datetime()

    def get_address_return(self) -> str:
        return self._attributes.may_have("address_return").as_string()

    def get_customs_declaration(self) -> str:
        return self._attributes.may_have("customs_declaration").as_string()

    def get_insurance_amount(self) -> float:
        return self._attributes.may_have("insurance_amount").as_float(non_negative())

    def get_insurance_currency(self) -> str:
        return self._attributes.may_have("insurance_currency").as_string()

    def get_extra(self) -> list | dict:
        """Carrier-specific options such as signature confirmation."""
        return self._attributes.may_have("extra").as_array()

    def get_reference_1(self) -> str:
        return self._attributes.may_have("reference_1").as_string()

    def get_reference_2(self) -> str:
        return self._attributes.may_have("reference_2").as_string()

    def get_carrier_accounts(self) -> list | dict:
        """Object ids of the carrier accounts to rate against."""
        return self._attributes.may_have("carrier_accounts").as_array()

    def _field_getters(self):
        return {
            "object_purpose": self.get_object_purpose,
            "address_from": self.get_address_from,
            "address_to": self.get_address_to,
            "parcel": self.get_parcel,
            "submission_type": self.get_submission_type,
            "submission_date": self.get_submission_date,
            "address_return": self.get_address_return,
            "customs_declaration": self.get_customs_declaration,
            "insurance_amount": self.get_insurance_amount,
            "insurance_currency": self.get_insurance_currency,
            "extra": self.get_extra,
            "reference_1": self.get_reference_1,
            "reference_2": self.get_reference_2,
            "carrier_accounts": self.get_carrier_accounts,
            "metadata": self.get_metadata,
        }
