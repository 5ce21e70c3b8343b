"""Overpunch exception hierarchy."""

from __future__ import annotations

from typing import Any


class OverpunchError(Exception):
    """Base exception for all overpunch codec errors."""


class EmptyFieldError(OverpunchError, ValueError):
    """Decode was given a zero-length field."""

    def __init__(self) -> None:
        super().__init__("cannot extract from an empty field")


class ParseError(OverpunchError, ValueError):
    """Input could not be interpreted as a signed overpunch number."""

    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"failed to parse result as decimal: {raw!r}")


class InvalidFieldFormattingError(ParseError):
    """An encoded digit has no overpunch character."""


class OverpunchOverflowError(OverpunchError, OverflowError):
    """Scaled value does not fit the codec's working integer range."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"failed with overflow while serializing value: {value}")
