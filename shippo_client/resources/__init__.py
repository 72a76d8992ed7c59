"""Resource clients, one per Shippo endpoint family."""

from shippo_client.resources.addresses import Addresses
from shippo_client.resources.base import Resource
from shippo_client.resources.parcels import Parcels
from shippo_client.resources.shipments import Shipments
from shippo_client.resources.tracking import Tracking
from shippo_client.resources.transactions import Transactions

__all__ = [
    "Addresses",
    "Parcels",
    "Resource",
    "Shipments",
    "Tracking",
    "Transactions",
]
