"""Transaction (label purchase) responses."""

from shippo_client.attributes import register_shape
from shippo_client.entity.base import ShippoObject
from shippo_client.entity.tracking_status import TrackingStatus
from shippo_client.http.response.collection import Collection


@register_shape("transaction")
class Transaction(ShippoObject):
    def get_object_status(self) -> str:
        """Label purchase progress: WAITING, QUEUED, SUCCESS or ERROR."""
        return self._may_have_as_string("object_status")

    def get_was_test(self) -> bool:
        """True when purchased with a test token."""
        return self._may_have_as_boolean("was_test")

    def get_rate(self) -> str:
        return self._may_have_as_string("rate")

    def get_tracking_number(self) -> str:
        return self._may_have_as_string("tracking_number")

    def get_tracking_status(self) -> TrackingStatus:
        return self._attributes.may_have("tracking_status").as_instance_of(
            "tracking_status"
        )

    def get_tracking_url_provider(self) -> str:
        return self._may_have_as_string("tracking_url_provider")

    def get_label_url(self) -> str:
        return self._may_have_as_string("label_url")

    def get_commercial_invoice_url(self) -> str:
        return self._may_have_as_string("commercial_invoice_url")


class TransactionCollection(Collection):
    entity_class = Transaction
