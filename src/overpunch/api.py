"""Tolerant facade — picture-driven conversions that return None on failure.

Callers that need to know *why* a conversion failed should use
:func:`overpunch.codec.decode` and :func:`overpunch.codec.encode` directly.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from overpunch.codec.decoder import decode
from overpunch.codec.encoder import encode
from overpunch.codec.picture import decimal_places_from_picture
from overpunch.core.exceptions import OverpunchError
from overpunch.core.types import DecimalInput, OverpunchString, PictureFormat

logger = logging.getLogger(__name__)


def decode_with_picture(raw: OverpunchString, picture: PictureFormat) -> Decimal | None:
    """Decode ``raw`` using the fractional digits implied by ``picture``.

    >>> decode_with_picture("2258{", "s9(7)v99")
    Decimal('225.80')
    """
    try:
        return decode(raw, decimal_places_from_picture(picture))
    except OverpunchError as exc:
        logger.debug("decode_with_picture(%r, %r) returned no result: %s", raw, picture, exc)
        return None


def encode_with_picture(value: DecimalInput, picture: PictureFormat) -> OverpunchString | None:
    """Encode ``value`` using the fractional digits implied by ``picture``.

    >>> encode_with_picture(Decimal("225.8"), "s9(7)v99")
    '2258{'
    """
    try:
        return encode(value, decimal_places_from_picture(picture))
    except OverpunchError as exc:
        logger.debug("encode_with_picture(%r, %r) returned no result: %s", value, picture, exc)
        return None
