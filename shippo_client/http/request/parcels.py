"""Parcel creation parameters."""

from shippo_client.http.request.base import RequestBuilder
from shippo_client.validators import one_of

DISTANCE_UNITS = ("cm", "in", "ft", "mm", "m", "yd")
MASS_UNITS = ("g", "oz", "lb", "kg")


class CreateParcel(RequestBuilder):
    def get_length(self) -> int:
        """First dimension of the Parcel.

        The length should always be the largest of the three dimensions
        length, width and height; the API will order them automatically if
        this is not the case. Up to six digits in front and four digits after
        the decimal separator are accepted.

        Raises:
            InvalidAttributeError: If missing or not numeric.
        """
        return self._attributes.must_have("length").as_integer()

    def get_width(self) -> int:
        """Second dimension of the Parcel; the second largest of the three.

        Raises:
            InvalidAttributeError: If missing or not numeric.
        """
        return self._attributes.must_have("width").as_integer()

    def get_height(self) -> int:
        """Third dimension of the parcel; the smallest of the three.

        Raises:
            InvalidAttributeError: If missing or not numeric.
        """
        return self._attributes.must_have("height").as_integer()

    def get_distance_unit(self) -> str:
        """The unit used for length, width and height.

        Raises:
            InvalidAttributeError: If missing or not a known unit.
        """
        return self._attributes.must_have("distance_unit").as_string(
            one_of(*DISTANCE_UNITS)
        )

    def get_weight(self) -> int:
        """Weight of the parcel.

        Raises:
            InvalidAttributeError: If missing or not numeric.
        """
        return self._attributes.must_have("weight").as_integer()

    def get_mass_unit(self) -> str:
        """The unit used for weight.

        Raises:
            InvalidAttributeError: If missing or not a known unit.
        """
        return self._attributes.must_have("mass_unit").as_string(
            one_of(*MASS_UNITS)
        )

    def get_template(self) -> str:
        """A parcel template is a predefined package used by one or multiple
        carriers.

        When a template is given, the parcel dimensions still have to be sent
        but are not used for rate generation; the template's dimensions are
        used instead. The parcel weight is not affected by the template.
        """
        return self._attributes.may_have("template").as_string()

    def _field_getters(self):
        return {
            "length": self.get_length,
            "width": self.get_width,
            "height": self.get_height,
            "distance_unit": self.get_distance_unit,
            "weight": self.get_weight,
            "mass_unit": self.get_mass_unit,
            "template": self.get_template,
            "metadata": self.get_metadata,
        }
