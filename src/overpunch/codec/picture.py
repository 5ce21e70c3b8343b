"""Picture-format helpers — derive the implied fractional-digit count."""

from __future__ import annotations

from overpunch.core.types import DecimalPlaces, PictureFormat

DECIMAL_MARKER = "v"


def decimal_places_from_picture(picture: PictureFormat) -> DecimalPlaces:
    """Count the picture characters after the first ``v`` marker.

    ``"s9(7)v99"`` gives 2 and ``"s9(7)"`` gives 0. The characters after the
    marker are counted literally, without checking that they are ``9``.
    """
    marker = picture.find(DECIMAL_MARKER)
    if marker == -1:
        return 0
    return len(picture) - marker - 1


def check_decimal_places(decimals: DecimalPlaces) -> DecimalPlaces:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"decimals must be an int, got {type(decimals).__name__}")
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return decimals
