"""Tracking status of a shipment, as reported by the carrier."""

from datetime import datetime

from shippo_client.attributes import register_shape
from shippo_client.entity.base import Entity
from shippo_client.entity.location import Location

UNKNOWN = "UNKNOWN"
TRANSIT = "TRANSIT"
DELIVERED = "DELIVERED"
RETURNED = "RETURNED"
FAILURE = "FAILURE"

TRACKING_STATUSES = (UNKNOWN, TRANSIT, DELIVERED, RETURNED, FAILURE)


@register_shape("tracking_status")
class TrackingStatus(Entity):
    """One status reported for a tracked package. Read-only."""

    def get_object_created(self) -> datetime | None:
        """Date and time of object creation."""
        return self._may_have_as_datetime("object_created")

    def get_object_updated(self) -> datetime | None:
        """Date and time of last object update."""
        return self._may_have_as_datetime("object_updated")

    def get_object_id(self) -> str:
        """Unique identifier of the given object."""
        return self._may_have_as_string("object_id")

    def get_status(self) -> str:
        """Package status.

        - "UNKNOWN"   The package has not been found via the carrier's tracking
                      system, or it has been found but not yet scanned.
        - "TRANSIT"   The package has been scanned by the carrier and is in transit.
        - "DELIVERED" The package has been successfully delivered.
        - "RETURNED"  The package is en route to be returned to the sender,
                      or has been returned successfully.
        - "FAILURE"   The carrier indicated an issue with the delivery. This
                      is a delivery issue, not a technical error.
        """
        return self._may_have_as_string("status")

    def get_status_details(self) -> str:
        return self._may_have_as_string("status_details")

    def get_status_date(self) -> str:
        return self._may_have_as_string("status_date")

    def get_status_datetime(self) -> datetime | None:
        """``status_date`` parsed as a timestamp."""
        return self._may_have_as_datetime("status_date")

    def get_location(self) -> Location:
        return self._attributes.may_have("location").as_instance_of("location")

    def is_final(self) -> bool:
        """True once the carrier will report no further movement."""
        return self.get_status() in (DELIVERED, RETURNED, FAILURE)
