"""Attribute accessor: typed, validated reads over a raw mapping.

Request builders wrap caller parameters and response entities wrap decoded
JSON in an ``Attributes`` bag. Every read goes through one of two access
modes:

- ``must_have(key)``: the key must be present; coercion of an absent key
  raises ``MissingRequiredAttributeError``.
- ``may_have(key)``: an absent key coerces to the neutral default of the
  target type (``""``, ``0``, ``0.0``, ``False``, ``None``, ``[]``).

A key is absent when it is missing or ``None``. Through ``may_have``, the
non-string coercions also treat ``""`` as absent, since the API sends empty
strings for unset scalar fields.

Example:
    attrs = Attributes({"distance_unit": "cm"})
    attrs.must_have("distance_unit").as_string(one_of("cm", "in"))  # "cm"
    attrs.may_have("template").as_string()  # ""
"""

import copy
import math
import re
from collections.abc import Callable, Iterator, Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from shippo_client.errors.domain import (
    InvalidAttributeValueError,
    MissingRequiredAttributeError,
)
from shippo_client.validators import Predicate, describe

ShapeFactory = Callable[[Mapping[str, Any]], Any]

# Shape name -> constructor taking a raw mapping
SHAPES: dict[str, ShapeFactory] = {}

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})

# +0900 -> +09:00 so offsets without a colon parse too
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def register_shape(name: str) -> Callable[[ShapeFactory], ShapeFactory]:
    """Register a constructor under ``name`` for ``as_instance_of``.

    Args:
        name: Shape identifier, e.g. "location".

    Returns:
        Decorator that records the class or factory and returns it unchanged.
    """
    def decorator(factory: ShapeFactory) -> ShapeFactory:
        SHAPES[name] = factory
        return factory

    return decorator


def resolve_shape(shape: str | ShapeFactory) -> ShapeFactory:
    """Look up a registered shape, or pass a constructor through."""
    if isinstance(shape, str):
        try:
            return SHAPES[shape]
        except KeyError:
            raise ValueError(f"Unknown shape '{shape}'") from None
    return shape


def parse_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp such as ``2014-06-11T17:01:12.345Z``.

    Naive timestamps are taken as UTC.

    Raises:
        ValueError: If the string is not an ISO-8601 timestamp.
    """
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _COMPACT_OFFSET.sub(r"\1:\2", text)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _to_number(value: Any) -> float | int:
    """Convert a numeric value or numeric string, raising ValueError otherwise."""
    if isinstance(value, bool):
        raise ValueError("booleans are not numeric")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            number = float(text)
    else:
        raise ValueError(f"{type(value).__name__} is not numeric")
    if not math.isfinite(number):
        raise ValueError("number is not finite")
    return number


class Accessor:
    """Typed view of one attribute, produced by must_have or may_have."""

    def __init__(self, key: str, value: Any, required: bool) -> None:
        self.key = key
        self._value = value
        self._required = required

    def _present(self, blank_is_absent: bool = False) -> bool:
        """Report presence, raising for an absent must-have attribute."""
        if self._value is None:
            if self._required:
                raise MissingRequiredAttributeError(self.key)
            return False
        if blank_is_absent and not self._required and self._value == "":
            return False
        return True

    def _invalid(self, expected: str, got: Any = None) -> InvalidAttributeValueError:
        return InvalidAttributeValueError(
            self.key, expected, self._value if got is None else got
        )

    def _check(self, value: Any, expected: str, predicate: Predicate | None) -> Any:
        if predicate is not None and not predicate(value):
            raise self._invalid(describe(predicate, expected), value)
        return value

    def as_integer(self, predicate: Predicate | None = None) -> int:
        """Coerce to int, truncating fractional values. Absent -> 0."""
        if not self._present(blank_is_absent=True):
            return 0
        try:
            number = _to_number(self._value)
        except ValueError:
            raise self._invalid("integer") from None
        return self._check(int(number), "integer", predicate)

    def as_float(self, predicate: Predicate | None = None) -> float:
        """Coerce to float. Absent -> 0.0."""
        if not self._present(blank_is_absent=True):
            return 0.0
        try:
            number = _to_number(self._value)
        except ValueError:
            raise self._invalid("number") from None
        return self._check(float(number), "number", predicate)

    def as_string(self, predicate: Predicate | None = None) -> str:
        """Coerce a scalar to its string form. Absent -> "".

        The predicate is only consulted for present values.
        """
        if not self._present():
            return ""
        value = self._value
        if isinstance(value, bool):
            text = "true" if value else "false"
        elif isinstance(value, (str, int, float)):
            text = str(value)
        else:
            raise self._invalid("string")
        return self._check(text, "string", predicate)

    def as_boolean(self) -> bool:
        """Coerce to bool. Absent -> False."""
        if not self._present(blank_is_absent=True):
            return False
        value = self._value
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise self._invalid("boolean")

    def as_datetime(self) -> datetime | None:
        """Parse an ISO-8601 timestamp into an aware datetime. Absent -> None."""
        if not self._present(blank_is_absent=True):
            return None
        value = self._value
        if isinstance(value, datetime):
            return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
        if isinstance(value, str):
            try:
                return parse_datetime(value)
            except ValueError:
                pass
        raise self._invalid("datetime")

    def as_array(self) -> list | dict:
        """Return a list or string-keyed mapping unchanged (as a copy). Absent -> []."""
        if not self._present():
            return []
        value = self._value
        if isinstance(value, (list, tuple)):
            return copy.deepcopy(list(value))
        if isinstance(value, Mapping):
            return copy.deepcopy(dict(value))
        raise self._invalid("array")

    def as_instance_of(self, shape: str | ShapeFactory) -> Any:
        """Build ``shape`` from a nested mapping.

        ``shape`` is a registered shape name or a constructor taking a
        mapping. ``datetime`` delegates to ``as_datetime``. Absent values
        build the shape from an empty mapping.
        """
        if shape is datetime:
            return self.as_datetime()
        factory = resolve_shape(shape)
        if not self._present():
            return factory({})
        if not isinstance(self._value, Mapping):
            raise self._invalid(f"object for {_shape_name(shape)}")
        return factory(self._value)

    def as_list_of(self, shape: str | ShapeFactory) -> list:
        """Build ``shape`` from each mapping in a nested list. Absent -> []."""
        factory = resolve_shape(shape)
        if not self._present():
            return []
        value = self._value
        if not isinstance(value, (list, tuple)) or not all(
            isinstance(item, Mapping) for item in value
        ):
            raise self._invalid(f"list of {_shape_name(shape)} objects")
        return [factory(item) for item in value]


def _shape_name(shape: str | ShapeFactory) -> str:
    if isinstance(shape, str):
        return shape
    return getattr(shape, "__name__", repr(shape))


class Attributes(Mapping):
    """Immutable, ordered mapping of raw attribute values."""

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        self._attributes = MappingProxyType(copy.deepcopy(dict(attributes or {})))

    def __getitem__(self, key: str) -> Any:
        # Nested containers are handed out as copies
        return copy.deepcopy(self._attributes[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"Attributes({dict(self._attributes)!r})"

    def must_have(self, key: str) -> Accessor:
        """Access a required attribute."""
        return Accessor(key, self._attributes.get(key), required=True)

    def may_have(self, key: str) -> Accessor:
        """Access an optional attribute."""
        return Accessor(key, self._attributes.get(key), required=False)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain copy of the raw attributes."""
        return copy.deepcopy(dict(self._attributes))
