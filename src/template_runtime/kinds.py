"""Value classification and text coercion."""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any

from .config import OBJECT_TEXT


class Kind(Enum):
    """Coarse kind of a runtime value."""

    ARRAY = "Array"
    OBJECT = "Object"
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    NULL = "Null"
    OTHER = "Other"


SCALAR_KINDS = frozenset({Kind.STRING, Kind.NUMBER, Kind.BOOLEAN})


class _Undefined:
    """Marker for an absent value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def classify(value: Any) -> Kind:
    """Return the kind of ``value``; never raises."""
    if value is None or value is UNDEFINED:
        return Kind.NULL
    # bool is an int subclass, so it must be tested first.
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, numbers.Number):
        return Kind.NUMBER
    if isinstance(value, Mapping):
        return Kind.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return Kind.ARRAY
    return Kind.OTHER


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _float_text(value: float) -> str:
    # Positional between 1e-6 and 1e21, otherwise e-notation without exponent padding.
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _number_text(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return _float_text(value)
    return str(value)


def to_text(value: Any) -> str:
    """Coerce ``value`` to text the way the template language prints it."""
    kind = classify(value)
    if kind is Kind.STRING:
        return value
    if kind is Kind.BOOLEAN:
        return "true" if value else "false"
    if kind is Kind.NUMBER:
        return _number_text(value)
    if kind is Kind.NULL:
        return "undefined" if value is UNDEFINED else "null"
    if kind is Kind.ARRAY:
        return ",".join(
            "" if classify(item) is Kind.NULL else to_text(item) for item in value
        )
    if kind is Kind.OBJECT:
        return OBJECT_TEXT
    return str(value)
