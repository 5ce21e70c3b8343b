"""Sign/digit lookup tables for signed overpunch.

The final character of a zoned-decimal field carries both the sign and the
last digit:

    positive  {  A  B  C  D  E  F  G  H  I
    negative  }  J  K  L  M  N  O  P  Q  R
    digit     0  1  2  3  4  5  6  7  8  9

The tables are built once at import and exposed read-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Final, NamedTuple


class Sign(StrEnum):
    POSITIVE = "+"
    NEGATIVE = "-"


class SignedDigit(NamedTuple):
    """Decoded meaning of a terminal overpunch character."""

    sign: Sign
    digit: int


POSITIVE_OVERPUNCH: Final[str] = "{ABCDEFGHI"
NEGATIVE_OVERPUNCH: Final[str] = "}JKLMNOPQR"
PLAIN_DIGITS: Final[str] = "0123456789"


def _build_overpunch_table() -> dict[str, SignedDigit]:
    table: dict[str, SignedDigit] = {}
    for sign, chars in ((Sign.POSITIVE, POSITIVE_OVERPUNCH), (Sign.NEGATIVE, NEGATIVE_OVERPUNCH)):
        for digit, char in enumerate(chars):
            table[char] = SignedDigit(sign, digit)
    return table


OVERPUNCH_TO_SIGNED_DIGIT: Final[Mapping[str, SignedDigit]] = MappingProxyType(
    _build_overpunch_table()
)

SIGNED_DIGIT_TO_OVERPUNCH: Final[Mapping[SignedDigit, str]] = MappingProxyType(
    {signed_digit: char for char, signed_digit in OVERPUNCH_TO_SIGNED_DIGIT.items()}
)

# Accepted at the last position on decode: overpunch characters, plus plain
# digits which read as positive.
TERMINAL_CHARS: Final[Mapping[str, SignedDigit]] = MappingProxyType(
    {
        **OVERPUNCH_TO_SIGNED_DIGIT,
        **{char: SignedDigit(Sign.POSITIVE, digit) for digit, char in enumerate(PLAIN_DIGITS)},
    }
)
