from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Hashable, Iterable, Tuple

from ..types import MISSING


NUMBER_TYPES = (int, float)
SEQUENCE_TYPES = (list, tuple)


def is_number(value: Any) -> bool:
    """Return True for int/float values; ``bool`` does not count as a number."""
    return isinstance(value, NUMBER_TYPES) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    return is_number(value) and (not isinstance(value, float) or math.isfinite(value))


def is_integer(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, float):
        return value.is_integer()
    return True


def describe_type(value: Any) -> str:
    """Name the kind of *value* the way error messages report it."""
    if value is MISSING:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def _format_number(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def format_value(value: Any) -> str:
    """Render *value* for interpolation into an error message."""
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return _format_number(value)
    if isinstance(value, SEQUENCE_TYPES):
        return ",".join("" if item is None or item is MISSING else format_value(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def identity_key(value: Any) -> Tuple[str, Hashable]:
    """Key under which two values count as the same member of a collection.

    Primitives compare by value (all NaNs are equal, ``1 == 1.0``, but
    ``True`` differs from ``1``); anything else compares by identity.
    """
    if value is None:
        return ("null", None)
    if value is MISSING:
        return ("undefined", None)
    if isinstance(value, bool):
        return ("boolean", value)
    if is_number(value):
        if isinstance(value, float) and math.isnan(value):
            return ("number", "NaN")
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    return ("ref", id(value))


def contains(values: Iterable[Any], item: Any) -> bool:
    key = identity_key(item)
    return any(identity_key(v) == key for v in values)


def distinct_count(values: Iterable[Any]) -> int:
    return len({identity_key(v) for v in values})
