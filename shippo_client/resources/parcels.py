from shippo_client.http.request.parcels import CreateParcel
from shippo_client.http.response.parcels import Parcel, ParcelCollection
from shippo_client.resources.base import Resource


class Parcels(Resource):
    path = "parcels/"
    request_class = CreateParcel
    entity_class = Parcel
    collection_class = ParcelCollection
