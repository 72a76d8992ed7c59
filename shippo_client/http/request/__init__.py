"""Validated request parameters, one builder per resource."""

from shippo_client.http.request.addresses import CreateAddress
from shippo_client.http.request.base import METADATA_MAX_LENGTH, RequestBuilder
from shippo_client.http.request.parcels import CreateParcel
from shippo_client.http.request.shipments import CreateShipment
from shippo_client.http.request.transactions import CreateTransaction

__all__ = [
    "CreateAddress",
    "CreateParcel",
    "CreateShipment",
    "CreateTransaction",
    "METADATA_MAX_LENGTH",
    "RequestBuilder",
]
