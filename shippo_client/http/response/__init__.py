"""Typed views over Shippo API responses."""

from shippo_client.http.response.addresses import Address, AddressCollection
from shippo_client.http.response.collection import Collection
from shippo_client.http.response.parcels import Parcel, ParcelCollection
from shippo_client.http.response.rates import Rate, RateCollection
from shippo_client.http.response.shipments import Shipment, ShipmentCollection
from shippo_client.http.response.tracks import Track
from shippo_client.http.response.transactions import (
    Transaction,
    TransactionCollection,
)

__all__ = [
    "Address",
    "AddressCollection",
    "Collection",
    "Parcel",
    "ParcelCollection",
    "Rate",
    "RateCollection",
    "Shipment",
    "ShipmentCollection",
    "Track",
    "Transaction",
    "TransactionCollection",
]
