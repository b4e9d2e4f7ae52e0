"""Tests for value coercion helpers."""

import math

import pytest

from dpp_csv_mapper.domain.services.coercion import (
    is_blank,
    js_string,
    parse_finite_number,
    to_json_number,
)


class TestParseFiniteNumber:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("42", 42.0), (" 10.5 ", 10.5), ("-3", -3.0), (".5", 0.5), ("5.", 5.0), ("1e3", 1000.0)],
    )
    def test_parses_decimals(self, text, expected):
        assert parse_finite_number(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1,5", "0x10", "Infinity", "NaN", "1e999"])
    def test_rejects_non_decimals(self, text):
        assert parse_finite_number(text) is None


class TestJsonNumbers:
    def test_integral_floats_become_ints(self):
        assert to_json_number(7.0) == 7
        assert isinstance(to_json_number(7.0), int)

    def test_fractions_stay_floats(self):
        assert to_json_number(7.25) == 7.25


class TestBlankAndStrings:
    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank(math.nan)
        assert not is_blank(" ")
        assert not is_blank(0)

    def test_js_string(self):
        assert js_string(True) == "true"
        assert js_string(2.0) == "2"
        assert js_string(2.5) == "2.5"
        assert js_string(3) == "3"
