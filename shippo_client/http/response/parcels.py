"""Parcel responses."""

from shippo_client.attributes import register_shape
from shippo_client.entity.base import ShippoObject
from shippo_client.http.response.collection import Collection


@register_shape("parcel")
class Parcel(ShippoObject):
    """A stored parcel.

    Dimensions are sent as integers but echoed back as floating point,
    so the dimension getters return floats.
    """

    def get_length(self) -> float:
        return self._may_have_as_float("length")

    def get_width(self) -> float:
        return self._may_have_as_float("width")

    def get_height(self) -> float:
        return self._may_have_as_float("height")

    def get_distance_unit(self) -> str:
        return self._may_have_as_string("distance_unit")

    def get_weight(self) -> float:
        return self._may_have_as_float("weight")

    def get_mass_unit(self) -> str:
        return self._may_have_as_string("mass_unit")

    def get_template(self) -> str:
        return self._may_have_as_string("template")

    def get_value_amount(self) -> str:
        return self._may_have_as_string("value_amount")

    def get_value_currency(self) -> str:
        return self._may_have_as_string("value_currency")


class ParcelCollection(Collection):
    entity_class = Parcel
