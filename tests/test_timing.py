"""Tests for drfparse.timing - rate scaling with saturation."""

import pytest

from drfparse.errors import EventSyntaxError
from drfparse.timing import MAX_PERIOD, format_period, parse_time_freq, scale_rate


class TestScaleRate:
    @pytest.mark.parametrize(
        "digits,suffix,expected",
        [
            ("1", "S", 1_000_000),
            ("10", "S", 10_000_000),
            ("1", "s", 1_000_000),
            ("1", "U", 1),
            ("250", "u", 250),
            ("1", "K", 1_000),
            ("2", "K", 500),
            ("1", "H", 1_000_000),
            ("10", "H", 100_000),
            ("10", "h", 100_000),
            ("1000", None, 1_000_000),
            ("5", "M", 5_000),
            ("5", "m", 5_000),
            ("0", None, 0),
        ],
    )
    def test_scaling_table(self, digits, suffix, expected):
        assert scale_rate(digits, suffix) == expected

    @pytest.mark.parametrize(
        "digits,suffix,expected",
        [
            ("4294", "S", 4_294_000_000),
            ("4295", "S", MAX_PERIOD),  # multiply overflows
            ("4294967", "M", 4_294_967_000),
            ("4294968", "M", MAX_PERIOD),
            ("4294967295", "U", MAX_PERIOD),
            ("99999999999999", "U", MAX_PERIOD),  # wider than 32 bits
            ("0", "H", MAX_PERIOD),  # zero frequency
            ("0", "K", MAX_PERIOD),
            ("1000001", "H", 1),  # rounds to 0 -> minimum non-zero
            ("1001", "K", 1),
        ],
    )
    def test_saturation(self, digits, suffix, expected):
        assert scale_rate(digits, suffix) == expected

    def test_max_period_is_u32(self):
        assert MAX_PERIOD == 2**32 - 1

    def test_rejects_non_digits(self):
        with pytest.raises(ValueError, match="decimal digits"):
            scale_rate("", None)
        with pytest.raises(ValueError, match="decimal digits"):
            scale_rate("1a", None)

    def test_rejects_unknown_unit(self):
        with pytest.raises(ValueError, match="Unknown rate unit"):
            scale_rate("1", "X")


class TestParseTimeFreq:
    def test_consumes_digits_and_unit(self):
        assert parse_time_freq("P,1S,TRUE", 2) == (1_000_000, 4)

    def test_no_unit(self):
        assert parse_time_freq("500", 0) == (500_000, 3)

    def test_stops_at_comma(self):
        assert parse_time_freq("10U,=", 0) == (10, 3)

    def test_missing_digits(self):
        with pytest.raises(EventSyntaxError, match="Expected time value"):
            parse_time_freq("P,", 2)

    def test_unknown_unit(self):
        with pytest.raises(EventSyntaxError, match="Unknown unit suffix"):
            parse_time_freq("1X", 0)


def test_format_period():
    assert format_period(0) == "0U"
    assert format_period(1_000_000) == "1000000U"
