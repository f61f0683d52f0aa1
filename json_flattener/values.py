"""JSON value classification and the cell types stored in flat records."""

from __future__ import annotations

import math
from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Union

Scalar = Union[str, int, float, bool, None]

PRIMITIVE = "primitive"
ARRAY = "array"

SIMPLE = "simple"
ADVANCED = "advanced"
POLICIES = (SIMPLE, ADVANCED)


class JsonKind(Enum):
    NULL = "null"
    SCALAR = "scalar"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"


def classify(value: Any) -> JsonKind:
    """Resolve the shape of a value once so callers can dispatch on a tag."""
    if value is None:
        return JsonKind.NULL
    if isinstance(value, (str, bool, int, float)):
        return JsonKind.SCALAR
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    return JsonKind.OTHER


def describe_kind(value: Any) -> str:
    """Human readable kind name used in error messages."""
    kind = classify(value)
    if kind is JsonKind.SCALAR:
        return type(value).__name__
    if kind is JsonKind.OTHER:
        return f"unsupported type {type(value).__name__}"
    return kind.value


def is_primitive(value: Any) -> bool:
    return classify(value) in (JsonKind.NULL, JsonKind.SCALAR)


@dataclass(frozen=True)
class Cell:
    """A tagged cell value produced by the advanced policy.

    `primitive` cells hold a single scalar (or None) with its native type,
    `array` cells hold the elements of an array made only of scalars.
    """

    kind: str
    value: Any

    @classmethod
    def primitive(cls, value: Scalar) -> "Cell":
        return cls(PRIMITIVE, value)

    @classmethod
    def array(cls, values) -> "Cell":
        return cls(ARRAY, list(values))

    @property
    def is_null(self) -> bool:
        return self.kind == PRIMITIVE and self.value is None

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "value": list(self.value) if self.kind == ARRAY else self.value}


def _number_to_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    # Plain decimals between 1e-6 and 1e21, otherwise an unpadded exponent.
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{exponent[0]}{exponent[1:].lstrip('0')}"


def to_display_string(value: Any) -> str:
    """Render a value the way a browser's String() would.

    Booleans are lowercase, integral floats drop the fraction, arrays are
    comma joined with nulls left empty and objects collapse to a fixed tag.
    """
    kind = classify(value)
    if kind is JsonKind.NULL:
        return "null"
    if kind is JsonKind.SCALAR:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            return _number_to_string(value)
        return str(value)
    if kind is JsonKind.ARRAY:
        parts: List[str] = []
        for item in value:
            parts.append("" if item is None else to_display_string(item))
        return ",".join(parts)
    if kind is JsonKind.OBJECT:
        return "[object Object]"
    return str(value)


def check_policy(policy: str) -> str:
    if policy not in POLICIES:
        raise ValueError(f"Unknown flattening policy {policy!r}; expected one of {', '.join(POLICIES)}.")
    return policy
