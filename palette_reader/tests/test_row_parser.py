#!/usr/bin/env python3
"""
Tests for row_parser.py
Covers field splitting, channel coercion and fault collection
"""

import pytest

from palette_reader.exceptions import (
    MalformedFieldError,
    MissingFieldError,
    OutOfRangeError,
    RowError,
)
from palette_reader.palette import PaletteEntry, RGBColor
from palette_reader.parsing_mode import ParsingMode
from palette_reader.row_parser import ChannelResult, parse_decimal, parse_row, resolve_channel


class TestParseDecimal:
    """Test leading decimal integer parsing"""

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("0", 0), ("255", 255), ("-100", -100), ("+7", 7), ("007", 7),
    ])
    def test_valid(self, text, expected):
        assert parse_decimal(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("12abc", 12), ("1.5", 1), ("-999x", -999), ("0x10", 0), ("1_000", 1),
        ("16 wide", 16),
    ])
    def test_trailing_text_ignored(self, text, expected):
        assert parse_decimal(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "xx", "-", "+", "x12", " 12", "١٢"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_decimal(text)


class TestResolveChannel:
    """Test tagged per-channel results"""

    @pytest.mark.unit
    def test_in_range(self):
        assert resolve_channel("red", "128") == ChannelResult(128)

    @pytest.mark.unit
    def test_clamped_low(self):
        result = resolve_channel("red", "-100")
        assert result.value == 0
        assert isinstance(result.fault, OutOfRangeError)
        assert result.fault.value == -100

    @pytest.mark.unit
    def test_clamped_high(self):
        result = resolve_channel("green", "999")
        assert result.value == 255
        assert isinstance(result.fault, OutOfRangeError)
        assert result.fault.channel == "green"

    @pytest.mark.unit
    def test_malformed_skips_range_check(self):
        """Test that text without a leading integer is reported as malformed only"""
        result = resolve_channel("blue", "x-999")
        assert result.value == 0
        assert isinstance(result.fault, MalformedFieldError)
        assert result.fault.text == "x-999"

    @pytest.mark.unit
    def test_leading_integer_is_range_checked(self):
        result = resolve_channel("blue", "-999x")
        assert result.value == 0
        assert isinstance(result.fault, OutOfRangeError)
        assert result.fault.value == -999


class TestParseRowStrict:
    """Test strict row parsing"""

    @pytest.mark.unit
    def test_three_fields(self):
        assert parse_row("1 2 3", ParsingMode.STRICT) == PaletteEntry("", RGBColor(1, 2, 3))

    @pytest.mark.unit
    def test_name_keeps_inner_whitespace(self):
        entry = parse_row("10\t20   30   dark  sea green", ParsingMode.STRICT)
        assert entry == PaletteEntry("dark  sea green", RGBColor(10, 20, 30))

    @pytest.mark.unit
    def test_missing_field(self):
        with pytest.raises(RowError) as exc_info:
            parse_row("255 255", ParsingMode.STRICT, line_number=7)

        error = exc_info.value
        assert error.has_fault(MissingFieldError)
        assert len(error.errors) == 1
        assert error.line_number == 7
        assert "line 7" in str(error)

    @pytest.mark.unit
    def test_all_faults_collected(self):
        """Test that every faulty field of one row is reported"""
        with pytest.raises(RowError) as exc_info:
            parse_row("xx 300 -1 name", ParsingMode.STRICT)

        errors = exc_info.value.errors
        assert [type(error) for error in errors] == [
            MalformedFieldError, OutOfRangeError, OutOfRangeError
        ]
        assert [error.channel for error in errors] == ["red", "green", "blue"]

    @pytest.mark.unit
    def test_bounds_are_inclusive(self):
        assert parse_row("0 255 0", ParsingMode.STRICT).color == RGBColor(0, 255, 0)

    @pytest.mark.unit
    def test_trailing_text_after_digits(self):
        """Test that only the leading integer of a field is used"""
        entry = parse_row("12abc 0 0 tagged", ParsingMode.STRICT)
        assert entry == PaletteEntry("tagged", RGBColor(12, 0, 0))

    @pytest.mark.unit
    def test_trailing_text_still_range_checked(self):
        with pytest.raises(RowError) as exc_info:
            parse_row("300x 1.5 2", ParsingMode.STRICT)

        assert [type(error) for error in exc_info.value.errors] == [OutOfRangeError]


class TestParseRowLenient:
    """Test lenient row coercion"""

    @pytest.mark.unit
    @pytest.mark.parametrize("line,expected", [
        ("255 255", (255, 255, 0)),
        ("42", (42, 0, 0)),
        ("-100 999 255", (0, 255, 255)),
        ("xx 127 255", (0, 127, 255)),
        ("a b c", (0, 0, 0)),
        ("300x 1.5 2", (255, 1, 2)),
    ])
    def test_coercion(self, line, expected):
        assert parse_row(line, ParsingMode.LENIENT).color.as_tuple() == expected

    @pytest.mark.unit
    def test_name_survives_bad_channels(self):
        entry = parse_row("xx 999 -5 still named", ParsingMode.LENIENT)
        assert entry == PaletteEntry("still named", RGBColor(0, 255, 0))

    @pytest.mark.unit
    def test_short_row_has_no_name(self):
        assert parse_row("1 2", ParsingMode.LENIENT).name == ""
