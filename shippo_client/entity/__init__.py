"""Response entities shared across resources."""

from shippo_client.entity.base import Entity, ShippoObject
from shippo_client.entity.location import Location
from shippo_client.entity.tracking_status import (
    TRACKING_STATUSES,
    TrackingStatus,
)

__all__ = [
    "Entity",
    "ShippoObject",
    "Location",
    "TrackingStatus",
    "TRACKING_STATUSES",
]
