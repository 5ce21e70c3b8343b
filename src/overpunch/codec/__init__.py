"""Signed overpunch codec — strict encode/decode and picture parsing."""

from __future__ import annotations

from overpunch.codec.decoder import decode
from overpunch.codec.encoder import MAX_WORKING_INT, encode
from overpunch.codec.picture import check_decimal_places, decimal_places_from_picture
from overpunch.codec.tables import (
    OVERPUNCH_TO_SIGNED_DIGIT,
    SIGNED_DIGIT_TO_OVERPUNCH,
    TERMINAL_CHARS,
    Sign,
    SignedDigit,
)

__all__ = [
    "MAX_WORKING_INT",
    "OVERPUNCH_TO_SIGNED_DIGIT",
    "SIGNED_DIGIT_TO_OVERPUNCH",
    "TERMINAL_CHARS",
    "Sign",
    "SignedDigit",
    "check_decimal_places",
    "decimal_places_from_picture",
    "decode",
    "encode",
]
