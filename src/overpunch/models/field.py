"""Signed overpunch field definitions, as found in copybook-style record layouts."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from overpunch.api import decode_with_picture, encode_with_picture
from overpunch.codec.decoder import decode
from overpunch.codec.encoder import encode
from overpunch.codec.picture import decimal_places_from_picture
from overpunch.core.types import DecimalInput, OverpunchString


class SignedField(BaseModel):
    """A named field with a signed overpunch picture clause, e.g. ``s9(7)v99``."""

    name: str = ""
    picture: str

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @property
    def decimal_places(self) -> int:
        """Fractional digits implied by the picture."""
        return decimal_places_from_picture(self.picture)

    def decode(self, raw: OverpunchString) -> Decimal:
        return decode(raw, self.decimal_places)

    def encode(self, value: DecimalInput) -> OverpunchString:
        return encode(value, self.decimal_places)

    def try_decode(self, raw: OverpunchString) -> Decimal | None:
        return decode_with_picture(raw, self.picture)

    def try_encode(self, value: DecimalInput) -> OverpunchString | None:
        return encode_with_picture(value, self.picture)
