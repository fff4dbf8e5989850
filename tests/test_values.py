"""Tests for typed-value checks: data types, conversion, ranges, formatting."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

import pytest

from dynlookup.validation.values import (
    compare_values,
    convert_value,
    default_value,
    format_value,
    is_numeric_type,
    is_valid_data_type,
    validate_identifier,
    validate_range,
    validate_value,
)


# ---------------------------------------------------------------------------
# Type names
# ---------------------------------------------------------------------------

class TestTypeNames:

    @pytest.mark.parametrize("name", ["string", "INT", "Double", "guid", "ushort"])
    def test_valid_types(self, name):
        assert is_valid_data_type(name)

    @pytest.mark.parametrize("name", ["", None, "char", "object"])
    def test_invalid_types(self, name):
        assert not is_valid_data_type(name)

    def test_numeric_types(self):
        assert is_numeric_type("decimal")
        assert is_numeric_type("byte")
        assert not is_numeric_type("string")
        assert not is_numeric_type("bool")

    @pytest.mark.parametrize("name", ["Width", "_hidden", "door_width_2"])
    def test_identifiers(self, name):
        assert validate_identifier(name)

    @pytest.mark.parametrize("name", ["", None, "2nd", "door width", "width-mm", "Size\n"])
    def test_non_identifiers(self, name):
        assert not validate_identifier(name)


# ---------------------------------------------------------------------------
# validate_value / convert_value
# ---------------------------------------------------------------------------

class TestValues:

    @pytest.mark.parametrize("value, data_type", [
        ("42", "int"),
        ("-32768", "short"),
        ("255", "byte"),
        ("3.5", "double"),
        ("1,234.5", "float"),
        ("19.99", "decimal"),
        ("True", "bool"),
        ("2026-01-02T03:04:05", "datetime"),
        ("12345678-1234-5678-1234-567812345678", "guid"),
        ("anything", "string"),
    ])
    def test_valid_values(self, value, data_type):
        assert validate_value(value, data_type).is_valid

    @pytest.mark.parametrize("value, data_type", [
        ("abc", "int"),
        ("256", "byte"),
        ("-1", "uint"),
        ("1.5", "int"),
        ("x", "double"),
        ("1.2.3", "decimal"),
        ("yes", "bool"),
        ("not a date", "datetime"),
        ("not-a-guid", "guid"),
    ])
    def test_invalid_values(self, value, data_type):
        result = validate_value(value, data_type)
        assert list(result.errors) == ["Value"]

    def test_empty_value_passes(self):
        assert validate_value("", "int").is_valid
        assert validate_value(None, "int").is_valid

    def test_unsupported_type(self):
        result = validate_value("1", "char")
        assert result.errors["Value"] == ["Unsupported data type: char"]

    def test_conversions(self):
        assert convert_value("42", "int") == 42
        assert convert_value("1,000.5", "double") == 1000.5
        assert convert_value("1.10", "decimal") == Decimal("1.10")
        assert convert_value("false", "bool") is False
        assert convert_value("2026-01-02", "datetime") == datetime(2026, 1, 2)
        assert isinstance(convert_value(str(uuid.uuid4()), "guid"), uuid.UUID)
        assert convert_value("", "int") is None
        assert convert_value("raw", "unknown") == "raw"

    def test_conversion_error(self):
        with pytest.raises(ValueError):
            convert_value("70000", "short")


# ---------------------------------------------------------------------------
# validate_range
# ---------------------------------------------------------------------------

class TestRange:

    def test_no_bounds(self):
        assert validate_range("", None, "string").is_valid

    def test_ordered_bounds(self):
        assert validate_range("1", "10", "int").is_valid

    def test_single_bound(self):
        assert validate_range("1", "", "double").is_valid
        assert validate_range(None, "5", "double").is_valid

    def test_reversed_bounds(self):
        result = validate_range("10", "1", "int")
        assert result.errors["Range"] == ["Minimum must not be greater than maximum"]

    def test_non_numeric_type(self):
        result = validate_range("a", "b", "string")
        assert result.errors["Range"] == ["Ranges apply to numeric types only"]

    def test_unparseable_bound(self):
        result = validate_range("1", "x", "int")
        assert result.errors["Range"] == ["'x' is not a valid int"]


# ---------------------------------------------------------------------------
# compare / default / format
# ---------------------------------------------------------------------------

class TestHelpers:

    def test_compare(self):
        assert compare_values(1, 2) == -1
        assert compare_values(2, 1) == 1
        assert compare_values(2, 2) == 0
        assert compare_values(None, None) == 0
        assert compare_values(None, 1) == -1
        assert compare_values(1, None) == 1

    def test_compare_mixed_types_as_text(self):
        assert compare_values(10, "9") == -1

    def test_defaults(self):
        assert default_value("int") == 0
        assert default_value("double") == 0.0
        assert default_value("decimal") == Decimal("0")
        assert default_value("bool") is False
        assert default_value("string") == ""
        assert default_value("guid") == uuid.UUID(int=0)
        assert default_value("char") is None

    def test_format(self):
        assert format_value(None, "int") == ""
        assert format_value(Decimal("1.5"), "decimal") == "1.50"
        assert format_value(datetime(2026, 1, 2, 3, 4, 5), "datetime") == "2026-01-02 03:04:05"
        assert format_value(True, "bool") == "true"
        assert format_value(3.14159, "double", ".2f") == "3.14"
        assert format_value(7, "int") == "7"
