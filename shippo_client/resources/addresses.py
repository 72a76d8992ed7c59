from shippo_client.http.request.addresses import CreateAddress
from shippo_client.http.response.addresses import Address, AddressCollection
from shippo_client.resources.base import Resource


class Addresses(Resource):
    path = "addresses/"
    request_class = CreateAddress
    entity_class = Address
    collection_class = AddressCollection
