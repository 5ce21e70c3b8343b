"""Type aliases used across the overpunch package."""

from __future__ import annotations

from decimal import Decimal

OverpunchString = str
PictureFormat = str
DecimalPlaces = int
DecimalInput = Decimal | int | str
