"""Tracking lookups. Read-only: tracks are never created through the client."""

from shippo_client.http.response.tracks import Track
from shippo_client.http.transport import HttpTransport


class Tracking:
    path = "tracks/"

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    def get_status(self, carrier: str, tracking_number: str) -> Track:
        """Fetch current status and history for a tracking number.

        Args:
            carrier: Carrier token, e.g. "usps" or "fedex".
            tracking_number: Carrier tracking number.
        """
        for value in (carrier, tracking_number):
            if not value or "/" in value:
                raise ValueError(f"Invalid tracking lookup: {value!r}")
        return Track(
            self._transport.request("GET", f"{self.path}{carrier}/{tracking_number}/")
        )
