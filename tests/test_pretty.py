"""Tests for the pretty-printing helpers."""

import pytest

from perfui.util.pretty import format_pretty_float, format_pretty_time, format_pretty_time_hms


class TestFormatPrettyFloat:
    def test_zero_padded_and_truncated(self):
        assert format_pretty_float(5, 3, 123.4567) == "00123.456"

    def test_truncates_instead_of_rounding(self):
        assert format_pretty_float(1, 2, 1.999) == "1.99"

    def test_shortest_repr_is_used(self):
        # 0.29 is 0.28999… in binary; it must not lose a digit
        assert format_pretty_float(2, 2, 0.29) == "00.29"

    def test_zero_precision_has_no_point(self):
        assert format_pretty_float(5, 0, 42.9) == "00042"

    def test_pads_fraction(self):
        assert format_pretty_float(3, 3, 7.0) == "007.000"

    def test_wider_value_is_not_cut(self):
        assert format_pretty_float(2, 1, 12345.6) == "12345.6"

    def test_negative(self):
        assert format_pretty_float(3, 3, -2.5) == "-002.500"

    def test_negative_that_truncates_to_zero_has_no_sign(self):
        assert format_pretty_float(2, 2, -0.0001) == "00.00"

    def test_non_finite(self):
        assert format_pretty_float(5, 3, float("nan")) == "NaN"
        assert format_pretty_float(5, 3, float("inf")) == "inf"
        assert format_pretty_float(5, 3, float("-inf")) == "-inf"

    @pytest.mark.parametrize("digits,precision,value", [
        (5, 3, 0.0),
        (5, 3, 99999.9999),
        (1, 6, 3.14159265),
        (4, 1, 12.05),
        (3, 0, 5.5),
    ])
    def test_field_widths(self, digits, precision, value):
        text = format_pretty_float(digits, precision, value)
        int_part, point, frac_part = text.partition(".")
        assert len(int_part) == digits
        assert len(frac_part) == precision
        assert point == ("." if precision > 0 else "")


class TestFormatPrettyTimeHms:
    def test_two_digit_fields(self):
        assert format_pretty_time_hms(0, 14, 5, 9, 0) == "14:05:09"
        assert format_pretty_time_hms(0, 0, 0, 0, 999_999_999) == "00:00:00"

    def test_fraction_is_truncated(self):
        assert format_pretty_time_hms(3, 1, 2, 3, 456_789_000) == "01:02:03.456"

    def test_fraction_keeps_leading_zeros(self):
        assert format_pretty_time_hms(2, 0, 0, 1, 5_000_000) == "00:00:01.00"
        assert format_pretty_time_hms(3, 0, 0, 1, 5_000_000) == "00:00:01.005"

    def test_precision_beyond_nanoseconds(self):
        assert format_pretty_time_hms(12, 0, 0, 0, 5) == "00:00:00.000000005000"


class TestFormatPrettyTime:
    def test_hms(self):
        assert format_pretty_time(0, 3725) == "01:02:05"

    def test_with_fraction(self):
        assert format_pretty_time(1, 3725.25) == "01:02:05.2"
        assert format_pretty_time(3, 123.4567) == "00:02:03.456"

    def test_hours_do_not_wrap(self):
        assert format_pretty_time(0, 360_000) == "100:00:00"

    def test_negative_duration(self):
        assert format_pretty_time(0, -2.5) == "-00:00:02"
        assert format_pretty_time(1, -3725.25) == "-01:02:05.2"
