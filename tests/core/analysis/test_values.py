"""
Tests for cell-level value classification.
"""

import math

import pytest

from csvviz.core.analysis.values import (
    is_numeric,
    label_for,
    parse_date,
    parse_float_prefix,
    to_number,
)


class TestIsNumeric:
    """Tests for is_numeric."""

    @pytest.mark.parametrize(
        "value", ["42", "3.14", "-7", " 12 ", "1e3", ".5", "5.", "+2", "0x1F", 42, 3.5]
    )
    def test_accepts_numbers(self, value):
        assert is_numeric(value) is True

    @pytest.mark.parametrize(
        "value",
        ["12abc", "abc", "", "   ", None, "NaN", "Infinity", "-Infinity", "1e999", "1_000"],
    )
    def test_rejects_non_numbers(self, value):
        assert is_numeric(value) is False

    def test_rejects_booleans(self):
        assert is_numeric(True) is False
        assert is_numeric(False) is False

    def test_signed_radix_literal_is_not_numeric(self):
        assert is_numeric("-0x10") is False

    def test_nan_float_cell_is_not_numeric(self):
        assert is_numeric(float("nan")) is False

    def test_oversized_radix_literal_is_not_numeric(self):
        assert is_numeric("0x" + "f" * 300) is False
        assert is_numeric("0b" + "1" * 2000) is False
        assert to_number("0o" + "7" * 400) is None


class TestToNumber:
    """Tests for to_number."""

    def test_converts_trimmed_text(self):
        assert to_number(" 12 ") == 12.0
        assert to_number("1e3") == 1000.0

    def test_converts_radix_literals(self):
        assert to_number("0x1F") == 31.0
        assert to_number("0b101") == 5.0

    def test_returns_none_for_non_numeric(self):
        assert to_number("abc") is None
        assert to_number(None) is None
        assert to_number("12abc") is None


class TestParseFloatPrefix:
    """Tests for parse_float_prefix."""

    def test_parses_leading_number(self):
        assert parse_float_prefix("12abc") == 12.0
        assert parse_float_prefix("  3.5kg") == 3.5
        assert parse_float_prefix("-.5e2x") == -50.0

    def test_returns_none_without_prefix(self):
        assert parse_float_prefix("abc") is None
        assert parse_float_prefix("") is None
        assert parse_float_prefix(None) is None

    def test_parses_infinity(self):
        assert parse_float_prefix("Infinity") == math.inf
        assert parse_float_prefix("-Infinity") == -math.inf


class TestParseDate:
    """Tests for parse_date."""

    def test_parses_iso_date_as_utc(self):
        assert parse_date("2023-01-01") == 1672531200.0

    def test_orders_dates(self):
        assert parse_date("2023-01-01") < parse_date("2023-01-02")

    def test_respects_explicit_offset(self):
        assert parse_date("2023-01-01T00:00:00+01:00") == 1672531200.0 - 3600

    def test_parses_written_dates(self):
        assert parse_date("Jan 5, 2023") == parse_date("2023-01-05")

    def test_numbers_are_not_dates(self):
        assert parse_date("2023") is None
        assert parse_date("42") is None

    def test_rejects_text_without_digits(self):
        assert parse_date("Monday") is None

    def test_rejects_unparseable_text(self):
        assert parse_date("abc12") is None
        assert parse_date(None) is None
        assert parse_date("") is None


def test_label_for_maps_missing_to_unknown() -> None:
    assert label_for(None) == "Unknown"
    assert label_for("") == "Unknown"
    assert label_for("North") == "North"
    assert label_for(0) == "0"
