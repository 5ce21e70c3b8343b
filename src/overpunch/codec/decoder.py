"""Signed overpunch → Decimal."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from overpunch.codec.picture import check_decimal_places
from overpunch.codec.tables import PLAIN_DIGITS, TERMINAL_CHARS, Sign
from overpunch.core.exceptions import EmptyFieldError, ParseError
from overpunch.core.types import DecimalPlaces, OverpunchString

_PLAIN_DIGITS = frozenset(PLAIN_DIGITS)


def decode(raw: OverpunchString, decimals: DecimalPlaces) -> Decimal:
    """Parse a signed overpunch field into a Decimal.

    Args:
        raw: Field text; every character is a digit except the last, which may
            be an overpunch character.
        decimals: Number of digits after the implied decimal point.

    Returns:
        Decimal whose exponent is ``-decimals``. Short fields are read as
        low-order digits, so ``decode("5", 2)`` is ``Decimal("0.05")``.

    Raises:
        EmptyFieldError: If ``raw`` is empty.
        ParseError: If any character is outside the accepted alphabet.

    Example:
        >>> decode("2258{", 2)
        Decimal('225.80')
    """
    check_decimal_places(decimals)
    if not raw:
        raise EmptyFieldError()

    body, terminal = raw[:-1], raw[-1]
    signed_digit = TERMINAL_CHARS.get(terminal)
    if signed_digit is None or not _PLAIN_DIGITS.issuperset(body):
        raise ParseError(raw)

    digits = f"{body}{signed_digit.digit}"
    if decimals > 0:
        digits = digits.rjust(decimals + 1, "0")
        digits = f"{digits[:-decimals]}.{digits[-decimals:]}"
    if signed_digit.sign is Sign.NEGATIVE:
        digits = f"-{digits}"

    try:
        return Decimal(digits)
    except InvalidOperation as exc:
        raise ParseError(raw) from exc
