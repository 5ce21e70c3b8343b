"""Tests for signed overpunch encoding."""

from __future__ import annotations

from decimal import Decimal

import pytest

from overpunch.codec.decoder import decode
from overpunch.codec.encoder import MAX_WORKING_INT, encode
from overpunch.core.exceptions import OverpunchError, OverpunchOverflowError, ParseError


class TestEncode:
    def test_end_to_end_example(self):
        assert encode(Decimal("225.8"), 2) == "2258{"

    @pytest.mark.parametrize(
        "value,decimals,expected",
        [
            ("225.80", 2, "2258{"),
            ("225.801", 2, "2258{"),
            ("30.000", 3, "3000{"),
            ("180.592", 3, "18059B"),
            ("1234.5678", 2, "12345G"),
            ("0.004", 3, "000D"),
            ("0.004", 4, "0004{"),
            ("-2", 0, "K"),
            ("7", 0, "G"),
        ],
    )
    def test_known_values(self, value, decimals, expected):
        assert encode(Decimal(value), decimals) == expected

    def test_no_decimal_point_emitted(self):
        assert "." not in encode(Decimal("123.45"), 2)


class TestShortValues:
    def test_zero_pads_to_decimals_plus_one(self):
        assert encode(Decimal("0.0"), 2) == "00{"
        assert encode(Decimal("0.5"), 2) == "05{"
        assert encode(Decimal("-0.5"), 2) == "05}"

    def test_negative_zero_encodes_negative(self):
        assert encode(Decimal("0.0").copy_negate(), 2) == "00}"
        assert encode(Decimal("-0"), 0) == "}"

    def test_rounded_away_to_negative_zero_keeps_sign(self):
        assert encode(Decimal("-0.004"), 2) == "00}"


class TestRounding:
    def test_tie_break_at_fourth_place(self):
        assert encode(Decimal("-12.3450"), 4) == "12345}"
        assert encode(Decimal("-12.3451"), 4) == "12345J"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0.005", "00A"),
            ("-0.005", "00J"),
            ("0.015", "00B"),
            ("0.025", "00C"),
            ("0.008", "00A"),
            ("-0.008", "00J"),
            ("0.004", "00{"),
            ("0.0008", "00{"),
            ("0.08", "00H"),
        ],
    )
    def test_half_away_from_zero(self, value, expected):
        assert encode(Decimal(value), 2) == expected

    def test_carry_into_new_digit(self):
        assert encode(Decimal("9.995"), 2) == "100{"


class TestInputCoercion:
    def test_accepts_int_and_str(self):
        assert encode(225, 0) == "22E"
        assert encode("225.8", 2) == "2258{"

    def test_rejects_float(self):
        with pytest.raises(TypeError):
            encode(225.8, 2)  # type: ignore[arg-type]

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            encode(True, 0)  # type: ignore[arg-type]

    def test_unparseable_string(self):
        with pytest.raises(ParseError):
            encode("12,5", 2)


class TestOverflow:
    def test_largest_working_value(self):
        assert encode(Decimal(MAX_WORKING_INT), 0) == "922337203685477580G"

    def test_one_past_working_range(self):
        with pytest.raises(OverpunchOverflowError) as exc_info:
            encode(Decimal(MAX_WORKING_INT + 1), 0)
        assert exc_info.value.value == Decimal(MAX_WORKING_INT + 1)

    def test_scaling_pushes_out_of_range(self):
        with pytest.raises(OverpunchOverflowError):
            encode(Decimal("92233720368547758.08"), 2)
        assert encode(Decimal("92233720368547758.07"), 2) == "922337203685477580G"

    def test_huge_value(self):
        with pytest.raises(OverpunchOverflowError):
            encode(Decimal("1E+40"), 2)

    def test_negative_magnitude_checked(self):
        with pytest.raises(OverpunchOverflowError):
            encode(-Decimal(MAX_WORKING_INT + 1), 0)

    @pytest.mark.parametrize("value", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite(self, value):
        with pytest.raises(OverpunchOverflowError):
            encode(Decimal(value), 2)

    def test_overflow_is_also_builtin_overflow(self):
        with pytest.raises(OverflowError):
            encode(Decimal("1E+30"), 0)
        with pytest.raises(OverpunchError):
            encode(Decimal("1E+30"), 0)

    def test_zero_with_many_decimals_fits(self):
        assert encode(Decimal("0"), 30) == "0" * 30 + "{"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "value,decimals",
        [
            ("0", 0),
            ("0.00", 2),
            ("225.80", 2),
            ("-225.80", 2),
            ("-0.005", 3),
            ("1.339", 3),
            ("123456789.0123", 4),
            ("-9223372036854775807", 0),
            ("-0.00", 2),
        ],
    )
    def test_decode_inverts_encode(self, value, decimals):
        original = Decimal(value)
        result = decode(encode(original, decimals), decimals)
        assert result == original
        assert result.is_signed() == original.is_signed()
