"""Typed-value checks for property values entered as text.

Values are stored as strings; these helpers decide whether a string is a
valid rendering of a declared data type, convert it, and compare or format
converted values.  Failures are reported as :class:`ValidationResult` data.
"""

from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from dynlookup.validation.result import ValidationResult

logger = logging.getLogger(__name__)

KEY_VALUE = "Value"
KEY_RANGE = "Range"

# Integer types and their inclusive bounds
_INTEGER_BOUNDS: dict[str, tuple[int, int]] = {
    "byte": (0, 2**8 - 1),
    "short": (-(2**15), 2**15 - 1),
    "ushort": (0, 2**16 - 1),
    "int": (-(2**31), 2**31 - 1),
    "uint": (0, 2**32 - 1),
    "long": (-(2**63), 2**63 - 1),
    "ulong": (0, 2**64 - 1),
}

_FLOAT_TYPES = ("double", "float")

NUMERIC_TYPES = frozenset(_INTEGER_BOUNDS) | frozenset(_FLOAT_TYPES) | {"decimal"}

DATA_TYPES = NUMERIC_TYPES | {"string", "bool", "datetime", "guid"}

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _normalize(data_type: str | None) -> str:
    return (data_type or "").strip().lower()


def is_valid_data_type(data_type: str | None) -> bool:
    """Return True if *data_type* names a supported type (case-insensitive)."""
    return _normalize(data_type) in DATA_TYPES


def is_numeric_type(data_type: str | None) -> bool:
    return _normalize(data_type) in NUMERIC_TYPES


def validate_identifier(name: str | None) -> bool:
    """Letters, digits and underscores, not starting with a digit."""
    return bool(name) and _IDENTIFIER_RE.fullmatch(name) is not None


def convert_value(value: str | None, data_type: str | None) -> Any:
    """Convert *value* to the Python type for *data_type*.

    Empty input converts to ``None``.  Unknown types return the text
    unchanged.  Raises ``ValueError`` when the text does not parse.
    """
    if value is None or value == "":
        return None

    kind = _normalize(data_type)
    text = value.strip()

    if kind in _INTEGER_BOUNDS:
        number = int(text)
        low, high = _INTEGER_BOUNDS[kind]
        if not low <= number <= high:
            raise ValueError(f"{number} is outside the {kind} range [{low}, {high}]")
        return number
    if kind in _FLOAT_TYPES:
        return float(text.replace(",", ""))
    if kind == "decimal":
        try:
            return Decimal(text.replace(",", ""))
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal: {value!r}") from exc
    if kind == "bool":
        lowered = text.lower()
        if lowered not in ("true", "false"):
            raise ValueError(f"invalid bool: {value!r}")
        return lowered == "true"
    if kind == "datetime":
        return datetime.fromisoformat(text)
    if kind == "guid":
        return uuid.UUID(text)
    return value


def validate_value(value: str | None, data_type: str | None) -> ValidationResult:
    """Check that *value* parses as *data_type*.

    Empty values pass; requiring a value is a separate rule.
    """
    result = ValidationResult()
    if value is None or value == "":
        return result

    if not is_valid_data_type(data_type):
        result.add_error(KEY_VALUE, f"Unsupported data type: {data_type}")
        return result

    try:
        convert_value(value, data_type)
    except ValueError as exc:
        logger.debug("Value %r rejected for %s: %s", value, data_type, exc)
        result.add_error(KEY_VALUE, f"'{value}' is not a valid {_normalize(data_type)}")
    return result


def validate_range(
    min_value: str | None,
    max_value: str | None,
    data_type: str | None,
) -> ValidationResult:
    """Check a min/max pair: both bounds parse and min does not exceed max."""
    result = ValidationResult()
    has_min = bool(min_value and min_value.strip())
    has_max = bool(max_value and max_value.strip())
    if not has_min and not has_max:
        return result

    if not is_numeric_type(data_type):
        result.add_error(KEY_RANGE, "Ranges apply to numeric types only")
        return result

    bounds: list[Any] = []
    for raw in (min_value if has_min else None, max_value if has_max else None):
        if raw is None:
            bounds.append(None)
            continue
        check = validate_value(raw, data_type)
        if not check.is_valid:
            for message in check.messages_for(KEY_VALUE):
                result.add_error(KEY_RANGE, message)
            return result
        bounds.append(convert_value(raw, data_type))

    low, high = bounds
    if low is not None and high is not None and compare_values(low, high) > 0:
        result.add_error(KEY_RANGE, "Minimum must not be greater than maximum")
    return result


def compare_values(first: Any, second: Any) -> int:
    """Three-way comparison; ``None`` sorts first, mixed types compare as text."""
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    try:
        if first < second:
            return -1
        if first > second:
            return 1
        return 0
    except TypeError:
        a, b = str(first), str(second)
        return (a > b) - (a < b)


def default_value(data_type: str | None) -> Any:
    """Zero value for *data_type*, or ``None`` if unsupported."""
    kind = _normalize(data_type)
    if kind in _INTEGER_BOUNDS:
        return 0
    if kind in _FLOAT_TYPES:
        return 0.0
    return {
        "string": "",
        "decimal": Decimal("0"),
        "bool": False,
        "datetime": datetime.min,
        "guid": uuid.UUID(int=0),
    }.get(kind)


def format_value(value: Any, data_type: str | None, fmt: str | None = None) -> str:
    """Render a converted value as text."""
    if value is None:
        return ""
    if fmt:
        try:
            return format(value, fmt)
        except (TypeError, ValueError):
            return str(value)

    kind = _normalize(data_type)
    if kind == "decimal":
        return f"{Decimal(value):.2f}"
    if kind == "datetime" and isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if kind == "bool" and isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
