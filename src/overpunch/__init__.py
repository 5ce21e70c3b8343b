"""Signed overpunch (zoned decimal) codec for legacy COBOL record fields."""

from __future__ import annotations

import logging

from overpunch.api import decode_with_picture, encode_with_picture
from overpunch.codec import (
    MAX_WORKING_INT,
    Sign,
    SignedDigit,
    decimal_places_from_picture,
    decode,
    encode,
)
from overpunch.core.exceptions import (
    EmptyFieldError,
    InvalidFieldFormattingError,
    OverpunchError,
    OverpunchOverflowError,
    ParseError,
)
from overpunch.models.field import SignedField

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MAX_WORKING_INT",
    "EmptyFieldError",
    "InvalidFieldFormattingError",
    "OverpunchError",
    "OverpunchOverflowError",
    "ParseError",
    "Sign",
    "SignedDigit",
    "SignedField",
    "decimal_places_from_picture",
    "decode",
    "decode_with_picture",
    "encode",
    "encode_with_picture",
]
