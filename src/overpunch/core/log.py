"""Logging set-up for applications and scripts that use the codec."""

from __future__ import annotations

import logging

from overpunch.core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure root logging from settings.

    The library itself only attaches a NullHandler; call this from entry points.
    """
    if settings is None:
        settings = AppSettings()

    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)
