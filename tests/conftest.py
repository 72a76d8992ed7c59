"""Root-level pytest fixtures for all tests.

Provides:
- Canned Shippo API response bodies
- A ShippoClient factory backed by httpx.MockTransport
"""

import json
import os

import httpx
import pytest

from shippo_client.client import ShippoClient

TEST_TOKEN = "shippo_test_0123456789abcdef"
API_BASE = "https://api.goshippo.com/v1/"


# ============================================================================
# Pytest Markers
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring the live Shippo API"
    )


requires_shippo_token = pytest.mark.skipif(
    not os.environ.get("SHIPPO_PRIVATE_ACCESS_TOKEN"),
    reason="SHIPPO_PRIVATE_ACCESS_TOKEN not set",
)


# ============================================================================
# Canned API Responses
# ============================================================================


@pytest.fixture
def address_json() -> dict:
    return {
        "object_state": "VALID",
        "object_purpose": "PURCHASE",
        "object_source": "FULLY_ENTERED",
        "object_created": "2015-03-12T18:25:15.245Z",
        "object_updated": "2015-03-12T18:25:15.245Z",
        "object_id": "d799c2679e644279b59fe661ac8fa488",
        "object_owner": "api@goshippo.com",
        "name": "Address From User",
        "company": "Shippo",
        "street_no": "",
        "street1": "215 Clayton St.",
        "street2": "",
        "city": "San Francisco",
        "state": "CA",
        "zip": "94117",
        "country": "US",
        "phone": "0015553419393",
        "email": "api@goshippo.com",
        "is_residential": True,
        "ip": "",
        "messages": [],
        "metadata": "integration test",
    }


@pytest.fixture
def parcel_json() -> dict:
    return {
        "object_state": "VALID",
        "object_created": "2015-03-12T18:26:02.101Z",
        "object_updated": "2015-03-12T18:26:02.101Z",
        "object_id": "7df2ecf8b4224763ab7c71fae7ec8274",
        "object_owner": "api@goshippo.com",
        "template": "",
        "length": 5.0,
        "width": 5.0,
        "height": 5.0,
        "distance_unit": "cm",
        "weight": 2.0,
        "mass_unit": "lb",
        "value_amount": "",
        "value_currency": "",
        "metadata": "Customer ID 123456",
    }


@pytest.fixture
def rate_json() -> dict:
    return {
        "object_state": "VALID",
        "object_purpose": "PURCHASE",
        "object_created": "2015-03-12T18:27:11.532Z",
        "object_updated": "2015-03-12T18:27:11.532Z",
        "object_id": "cf6fea899f1848b494d9568e8266e076",
        "object_owner": "api@goshippo.com",
        "shipment": "5e40ead7cffe4cc1ad45108696162e42",
        "amount": "5.50",
        "currency": "USD",
        "amount_local": "5.50",
        "currency_local": "USD",
        "provider": "USPS",
        "servicelevel_name": "Priority Mail",
        "servicelevel_token": "usps_priority",
        "days": 2,
        "duration_terms": "Delivery in 1 to 3 business days.",
        "trackable": True,
        "attributes": ["CHEAPEST"],
        "messages": [],
    }


@pytest.fixture
def shipment_json(rate_json) -> dict:
    return {
        "object_created": "2015-03-12T18:27:10.101Z",
        "object_updated": "2015-03-12T18:27:11.601Z",
        "object_id": "5e40ead7cffe4cc1ad45108696162e42",
        "object_owner": "api@goshippo.com",
        "object_state": "VALID",
        "object_status": "QUEUED",
        "object_purpose": "PURCHASE",
        "address_from": "d799c2679e644279b59fe661ac8fa488",
        "address_to": "42236bcf36214f62bcc6d7f12f02a849",
        "parcel": "7df2ecf8b4224763ab7c71fae7ec8274",
        "submission_type": "PICKUP",
        "submission_date": "2015-03-13T12:00:00Z",
        "address_return": "d799c2679e644279b59fe661ac8fa488",
        "return_of": "",
        "customs_declaration": "",
        "insurance_amount": 0,
        "insurance_currency": "",
        "extra": {},
        "reference_1": "",
        "reference_2": "",
        "rates_url": "https://api.goshippo.com/v1/shipments/5e40ead7cffe4cc1ad45108696162e42/rates/",
        "rates_list": [rate_json],
        "carrier_accounts": [],
        "messages": [],
        "metadata": "",
    }


@pytest.fixture
def tracking_status_json() -> dict:
    return {
        "object_created": "2015-03-14T09:21:03.213Z",
        "object_updated": "2015-03-14T09:21:03.213Z",
        "object_id": "ce9e5db5e4fb4d39b3cf1c6d9da4e3a6",
        "status": "TRANSIT",
        "status_details": "Your shipment has departed from the origin.",
        "status_date": "2015-03-14T09:02:00Z",
        "location": {
            "city": "San Francisco",
            "state": "CA",
            "zip": "94103",
            "country": "US",
        },
    }


@pytest.fixture
def track_json(tracking_status_json) -> dict:
    pre_transit = {
        "object_id": "a4b7f2f8e0f54b0f8c6e7b0e5a1c2d3e",
        "status": "UNKNOWN",
        "status_details": "Shipping label created.",
        "status_date": "2015-03-13T16:00:00Z",
        "location": {"city": "", "state": "", "zip": "", "country": ""},
    }
    return {
        "carrier": "usps",
        "tracking_number": "9205590164917312751089",
        "address_from": {"city": "San Francisco", "state": "CA", "zip": "94117", "country": "US"},
        "address_to": {"city": "Chicago", "state": "IL", "zip": "60611", "country": "US"},
        "eta": "2015-03-16T18:00:00Z",
        "servicelevel": {"token": "usps_priority", "name": "Priority Mail"},
        "metadata": None,
        "tracking_status": tracking_status_json,
        "tracking_history": [pre_transit, tracking_status_json],
    }


def _collection_json(*results: dict, next_url: str | None = None) -> dict:
    return {
        "count": len(results),
        "next": next_url,
        "previous": None,
        "results": list(results),
    }


@pytest.fixture
def collection_json():
    """Wrap entity bodies in a list-endpoint page."""
    return _collection_json


# ============================================================================
# Mock Transport
# ============================================================================


class RecordingHandler:
    """httpx.MockTransport handler returning canned responses by route.

    Routes are "METHOD path" keys (path relative to /v1/). Every request is
    recorded so tests can assert on what was sent.
    """

    def __init__(self, routes: dict[str, tuple[int, object]]):
        self._routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v1/")
        key = f"{request.method} {path}"
        if key not in self._routes:
            return httpx.Response(404, json={"detail": "Not found."})
        status, body = self._routes[key]
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=str(body))

    def sent_json(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def make_client():
    """Build a ShippoClient whose transport answers from ``routes``."""
    clients = []

    def _make(routes: dict[str, tuple[int, object]]):
        handler = RecordingHandler(routes)
        client = ShippoClient.provider(
            TEST_TOKEN, api_base=API_BASE, transport=httpx.MockTransport(handler)
        )
        clients.append(client)
        return client, handler

    yield _make

    for client in clients:
        client.close()
