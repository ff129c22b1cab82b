"""Tests for data parsing and conversion utilities."""

import math

import pytest

from utils.data_utils import cell_to_str, coerce_cell_value, normalize_number, parse_numeric_safe


class TestParseNumericSafe:
    """Tests for parse_numeric_safe function."""

    def test_parses_valid_float(self):
        """Should parse valid float values."""
        assert parse_numeric_safe(1.5) == 1.5
        assert parse_numeric_safe(-3.14) == -3.14

    def test_parses_valid_int(self):
        """Should parse valid integer values."""
        assert parse_numeric_safe(42) == 42.0
        assert parse_numeric_safe(-10) == -10.0

    def test_parses_string_number(self):
        """Should parse numeric strings."""
        assert parse_numeric_safe("3.14") == 3.14
        assert parse_numeric_safe(" -5 ") == -5.0

    def test_returns_default_for_invalid(self):
        """Should return default for invalid input."""
        assert parse_numeric_safe("invalid") == 0.0
        assert parse_numeric_safe(None) == 0.0
        assert parse_numeric_safe("") == 0.0
        assert parse_numeric_safe("   ") == 0.0
        assert parse_numeric_safe(float("nan")) == 0.0

    @pytest.mark.parametrize("val", ["inf", "-Infinity", float("inf"), "1_000", "nan"])
    def test_non_finite_and_underscored_return_default(self, val):
        """Infinities and underscore digit groups are not forces."""
        assert parse_numeric_safe(val) == 0.0

    def test_custom_default(self):
        """Should use custom default when provided."""
        assert parse_numeric_safe("invalid", default=-1.0) == -1.0
        assert parse_numeric_safe("abc", default=None) is None


class TestCoerceCellValue:
    """Tests for coerce_cell_value function."""

    def test_integer_literal_becomes_int(self):
        assert coerce_cell_value("42") == 42
        assert isinstance(coerce_cell_value(" 42 "), int)
        assert coerce_cell_value("-3") == -3

    def test_decimal_becomes_float(self):
        assert coerce_cell_value("2.5") == 2.5
        assert coerce_cell_value("1e3") == 1000.0

    def test_blank_and_missing_become_empty(self):
        assert coerce_cell_value(None) == ""
        assert coerce_cell_value("") == ""
        assert coerce_cell_value("   ") == ""
        assert coerce_cell_value(float("nan")) == ""

    def test_text_is_unchanged(self):
        """Non-numeric text keeps its original spacing."""
        assert coerce_cell_value("NESC Heavy") == "NESC Heavy"
        assert coerce_cell_value(" Rule B ") == " Rule B "

    def test_non_finite_text_is_unchanged(self):
        assert coerce_cell_value("inf") == "inf"
        assert coerce_cell_value("nan") == "nan"

    def test_underscored_digits_are_text(self):
        assert coerce_cell_value("1_000") == "1_000"

    def test_numbers_pass_through(self):
        assert coerce_cell_value(7) == 7
        assert coerce_cell_value(0.25) == 0.25


class TestNormalizeNumber:
    @pytest.mark.parametrize("value,expected", [(2000.0, 2000), (2.5, 2.5), (3, 3), ("x", "x")])
    def test_normalizes(self, value, expected):
        result = normalize_number(value)
        assert result == expected
        assert type(result) is type(expected)

    def test_leaves_non_finite(self):
        assert math.isinf(normalize_number(float("inf")))


class TestCellToStr:
    def test_renders_cells(self):
        assert cell_to_str(None) == ""
        assert cell_to_str(12.0) == "12"
        assert cell_to_str(1.5) == "1.5"
        assert cell_to_str("1. Heavy") == "1. Heavy"
