"""Client facade: one entry point bound to one HTTP transport.

Example:
    with ShippoClient.provider(token) as shippo:
        parcel = shippo.parcels().create({
            "length": 5, "width": 5, "height": 5, "distance_unit": "cm",
            "weight": 2, "mass_unit": "lb",
        })
        print(parcel.get_object_id())
"""

import httpx

from shippo_client.config import DEFAULT_API_BASE, ShippoConfig
from shippo_client.http.transport import HttpTransport
from shippo_client.resources import (
    Addresses,
    Parcels,
    Shipments,
    Tracking,
    Transactions,
)


class ShippoClient:
    """Access to every Shippo resource over a shared transport."""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    @classmethod
    def provider(
        cls,
        access_token: str,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> "ShippoClient":
        """Create a client authenticated with ``access_token``.

        Raises:
            ShippoApiError: E-5002 if the token is empty.
        """
        return cls(HttpTransport(
            access_token, api_base=api_base, timeout=timeout, transport=transport,
        ))

    @classmethod
    def from_config(
        cls,
        config: ShippoConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "ShippoClient":
        return cls.provider(
            config.api.access_token,
            api_base=config.api.api_base,
            timeout=config.api.timeout,
            transport=transport,
        )

    def __enter__(self) -> "ShippoClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def addresses(self) -> Addresses:
        return Addresses(self._transport)

    def parcels(self) -> Parcels:
        return Parcels(self._transport)

    def shipments(self) -> Shipments:
        return Shipments(self._transport)

    def transactions(self) -> Transactions:
        return Transactions(self._transport)

    def tracking(self) -> Tracking:
        return Tracking(self._transport)
