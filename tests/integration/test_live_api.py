"""End-to-end tests against the live Shippo API.

Use a test token (shippo_test_...): these create real addresses, parcels and
shipments on the account.

    SHIPPO_PRIVATE_ACCESS_TOKEN=shippo_test_... pytest -m integration
"""

import os
import re

import pytest

from shippo_client import ShippoClient
from shippo_client.http.response import (
    Address,
    AddressCollection,
    Parcel,
    ParcelCollection,
    RateCollection,
    Shipment,
)

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("SHIPPO_PRIVATE_ACCESS_TOKEN"),
        reason="SHIPPO_PRIVATE_ACCESS_TOKEN not set",
    ),
]

TIMESTAMP = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z")


def _address_params(name: str) -> dict:
    return {
        "object_purpose": "PURCHASE",
        "name": name,
        "company": "Shippo",
        "street1": "215 Clayton St.",
        "street2": "",
        "city": "San Francisco",
        "state": "CA",
        "zip": "94117",
        "country": "US",
        "phone": "+1 555 341 9393",
        "email": "api@goshippo.com",
        "is_residential": True,
        "metadata": "integration test",
    }


@pytest.fixture(scope="module")
def client():
    with ShippoClient.provider(os.environ["SHIPPO_PRIVATE_ACCESS_TOKEN"]) as shippo:
        yield shippo


@pytest.fixture(scope="module")
def address_from(client) -> Address:
    return client.addresses().create(_address_params("Address From User"))


@pytest.fixture(scope="module")
def address_to(client) -> Address:
    return client.addresses().create(_address_params("Address To User"))


@pytest.fixture(scope="module")
def parcel(client) -> Parcel:
    return client.parcels().create({
        "length": 5,
        "width": 5,
        "height": 5,
        "distance_unit": "cm",
        "weight": 2,
        "mass_unit": "lb",
        "template": "",
        "metadata": "Customer ID 123456",
    })


@pytest.fixture(scope="module")
def shipment(client, address_from, address_to, parcel) -> Shipment:
    return client.shipments().create({
        "object_purpose": "PURCHASE",
        "address_from": address_from.get_object_id(),
        "address_to": address_to.get_object_id(),
        "parcel": parcel.get_object_id(),
        "submission_type": "PICKUP",
    })


class TestAddresses:

    def test_create(self, address_from):
        data = address_from.to_dict()
        assert data["object_state"] == "VALID"
        assert TIMESTAMP.fullmatch(data["object_created"])
        assert address_from.get_object_id()
        assert address_from.get_name() == "Address From User"
        assert address_from.get_street2() == ""
        assert address_from.get_is_residential() is True
        assert address_from.get_metadata() == "integration test"

    def test_retrieve(self, client, address_from):
        address = client.addresses().retrieve(address_from.get_object_id())
        assert isinstance(address, Address)
        assert address.get_object_id() == address_from.get_object_id()

    def test_validate(self, client, address_from):
        assert isinstance(client.addresses().validate(address_from.get_object_id()), Address)

    def test_get_list(self, client, address_from):
        page = client.addresses().get_list()
        assert isinstance(page, AddressCollection)
        assert page.get_count() >= 1
        assert all(isinstance(a, Address) for a in page)


class TestParcels:

    def test_create(self, parcel):
        assert parcel.get_object_state() == "VALID"
        assert parcel.get_length() == 5.0
        assert parcel.get_weight() == 2.0
        assert parcel.get_mass_unit() == "lb"
        assert parcel.get_template() == ""
        assert parcel.get_metadata() == "Customer ID 123456"

    def test_retrieve(self, client, parcel):
        assert isinstance(client.parcels().retrieve(parcel.get_object_id()), Parcel)

    def test_get_list(self, client, parcel):
        page = client.parcels().get_list()
        assert isinstance(page, ParcelCollection)
        assert page.get_count() >= 1


class TestShipments:

    def test_create(self, shipment, address_from, parcel):
        assert shipment.get_address_from() == address_from.get_object_id()
        assert shipment.get_parcel() == parcel.get_object_id()
        assert shipment.get_submission_type() == "PICKUP"

    def test_get_rates(self, client, shipment):
        rates = client.shipments().get_rates(shipment.get_object_id())
        assert isinstance(rates, RateCollection)
