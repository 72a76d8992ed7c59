from shippo_client.http.request.shipments import CreateShipment
from shippo_client.http.response.rates import RateCollection
from shippo_client.http.response.shipments import Shipment, ShipmentCollection
from shippo_client.resources.base import Resource


class Shipments(Resource):
    path = "shipments/"
    request_class = CreateShipment
    entity_class = Shipment
    collection_class = ShipmentCollection

    def get_rates(self, object_id: str, currency: str | None = None) -> RateCollection:
        """Fetch the rates generated for a shipment.

        Args:
            object_id: Shipment object id.
            currency: ISO 4217 code to convert amounts into, e.g. "EUR".
        """
        path = self._object_path(object_id, "rates")
        if currency:
            path = f"{path}{currency}/"
        return RateCollection(self._transport.request("GET", path))
