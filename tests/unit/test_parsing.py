"""
Unit tests for lenient environment value parsing.
"""

import logging

import pytest

from dps_config.parsing import (
    U16_MAX,
    U64_MAX,
    parse_bool,
    parse_text,
    parse_u16,
    parse_u64,
)


class TestParseText:
    """Text values: empty means unset."""

    def test_empty_string_is_none(self):
        assert parse_text("") is None

    def test_value_kept_verbatim(self):
        assert parse_text(" example.com ") == " example.com "

    def test_none_passes_through(self):
        assert parse_text(None) is None

    def test_non_utf8_is_none(self):
        assert parse_text("abc\udcff", "auth_api_session_secret") is None


class TestParseBool:
    """Boolean values: only "Y" is true."""

    def test_y_is_true(self):
        assert parse_bool("Y") is True

    @pytest.mark.parametrize("raw", ["y", "yes", "1", "true", "TRUE", "N", ""])
    def test_anything_else_is_false(self, raw):
        assert parse_bool(raw) is False

    def test_non_string_passes_through(self):
        assert parse_bool(True) is True
        assert parse_bool(None) is None


class TestParseUnsigned:
    """Unsigned integers: digits only, bounded by width."""

    def test_plain_digits(self):
        assert parse_u16("3000") == 3000

    def test_leading_plus_accepted(self):
        assert parse_u16("+3000") == 3000

    def test_u16_bounds(self):
        assert parse_u16(str(U16_MAX)) == 65535
        assert parse_u16(str(U16_MAX + 1)) is None

    def test_u64_bounds(self):
        assert parse_u64(str(U64_MAX)) == U64_MAX
        assert parse_u64("18446744073709551616") is None

    @pytest.mark.parametrize("raw", ["abc", "", "-1", " 3000", "3000 ", "1_000", "3.5", "+", "0x10"])
    def test_malformed_is_none(self, raw):
        assert parse_u16(raw) is None

    @pytest.mark.parametrize("raw", ["9" * 5000, "+" + "1" * 4400, "1" * 21])
    def test_oversized_digit_strings_are_none(self, raw):
        assert parse_u16(raw) is None
        assert parse_u64(raw) is None

    def test_leading_zeros_do_not_count_towards_width(self):
        assert parse_u16("0" * 5000 + "3000") == 3000
        assert parse_u16("000") == 0

    def test_int_passes_through(self):
        assert parse_u64(42) == 42

    def test_malformed_value_logged_without_value(self, caplog):
        caplog.set_level(logging.DEBUG, logger="dps_config.parsing")
        assert parse_u16("not-a-port", "auth_api_port") is None
        assert "auth_api_port" in caplog.text
        assert "not-a-port" not in caplog.text
