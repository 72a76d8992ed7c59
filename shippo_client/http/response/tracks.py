"""Tracking responses."""

from datetime import datetime

from shippo_client.entity.base import Entity
from shippo_client.entity.location import Location
from shippo_client.entity.tracking_status import TrackingStatus


class Track(Entity):
    """Current status and history of one tracking number. Read-only."""

    def get_carrier(self) -> str:
        return self._may_have_as_string("carrier")

    def get_tracking_number(self) -> str:
        return self._may_have_as_string("tracking_number")

    def get_address_from(self) -> Location:
        return self._attributes.may_have("address_from").as_instance_of("location")

    def get_address_to(self) -> Location:
        return self._attributes.may_have("address_to").as_instance_of("location")

    def get_eta(self) -> datetime | None:
        """Estimated time of arrival reported by the carrier."""
        return self._may_have_as_datetime("eta")

    def get_servicelevel(self) -> list | dict:
        return self._may_have_as_array("servicelevel")

    def get_metadata(self) -> str:
        return self._may_have_as_string("metadata")

    def get_tracking_status(self) -> TrackingStatus:
        return self._attributes.may_have("tracking_status").as_instance_of(
            "tracking_status"
        )

    def get_tracking_history(self) -> list[TrackingStatus]:
        """All statuses reported so far, oldest first."""
        return self._attributes.may_have("tracking_history").as_list_of(
            "tracking_status"
        )
