"""Decimal → signed overpunch."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Final

from overpunch.codec.picture import check_decimal_places
from overpunch.codec.tables import SIGNED_DIGIT_TO_OVERPUNCH, Sign, SignedDigit
from overpunch.core.exceptions import InvalidFieldFormattingError, OverpunchOverflowError, ParseError
from overpunch.core.types import DecimalInput, DecimalPlaces, OverpunchString

# Largest scaled magnitude the codec will emit (signed 64-bit).
MAX_WORKING_INT: Final[int] = 2**63 - 1
_MAX_WORKING_DIGITS: Final[int] = len(str(MAX_WORKING_INT))

# ROUND_HALF_UP rounds ties away from zero; the extra precision covers a carry
# out of the top digit.
_ROUNDING_CONTEXT: Final[Context] = Context(prec=_MAX_WORKING_DIGITS + 2, rounding=ROUND_HALF_UP)


def _as_decimal(value: DecimalInput) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"expected Decimal, int or str, got {type(value).__name__}")
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise ParseError(value) from exc


def encode(value: DecimalInput, decimals: DecimalPlaces) -> OverpunchString:
    """Serialize a Decimal into its signed overpunch representation.

    The absolute value is rounded half away from zero to ``decimals`` places,
    scaled to an integer and zero-padded to at least ``decimals + 1`` digits.
    The last digit is replaced by the overpunch character for the value's sign
    bit, so ``Decimal("-0")`` encodes negative.

    Raises:
        OverpunchOverflowError: If the scaled value exceeds ``MAX_WORKING_INT``
            or is not finite.
        ParseError: If a string value is not a number.

    Example:
        >>> encode(Decimal("225.8"), 2)
        '2258{'
    """
    check_decimal_places(decimals)
    number = _as_decimal(value)
    if not number.is_finite():
        raise OverpunchOverflowError(value)

    sign = Sign.NEGATIVE if number.is_signed() else Sign.POSITIVE
    magnitude = number.copy_abs()
    if magnitude and magnitude.adjusted() + decimals >= _MAX_WORKING_DIGITS:
        raise OverpunchOverflowError(value)

    try:
        rounded = magnitude.quantize(Decimal(1).scaleb(-decimals), context=_ROUNDING_CONTEXT)
    except InvalidOperation as exc:
        raise OverpunchOverflowError(value) from exc

    scaled = int(rounded.scaleb(decimals, context=_ROUNDING_CONTEXT))
    if scaled > MAX_WORKING_INT:
        raise OverpunchOverflowError(value)

    digits = str(scaled).rjust(decimals + 1, "0")
    terminal = SIGNED_DIGIT_TO_OVERPUNCH.get(SignedDigit(sign, int(digits[-1])))
    if terminal is None:
        raise InvalidFieldFormattingError(digits)

    return f"{digits[:-1]}{terminal}"
