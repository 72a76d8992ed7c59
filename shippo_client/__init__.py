"""Typed client for the Shippo shipping API."""

from shippo_client.attributes import Attributes
from shippo_client.client import ShippoClient
from shippo_client.errors import (
    InvalidAttributeError,
    InvalidAttributeValueError,
    MissingRequiredAttributeError,
    ShippoApiError,
    ShippoClientError,
)

__all__ = [
    "Attributes",
    "InvalidAttributeError",
    "InvalidAttributeValueError",
    "MissingRequiredAttributeError",
    "ShippoApiError",
    "ShippoClient",
    "ShippoClientError",
]
