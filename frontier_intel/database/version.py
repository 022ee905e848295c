"""Helpers deciding whether slash commands need to be re-registered."""
from __future__ import annotations

import logging
from importlib import metadata
from typing import Optional

from .entities import Version

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "frontier-intel"
FALLBACK_VERSION = "0.0.4"


def get_bot_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        logger.error(
            "Failed to read bot version for %s, falling back to %s",
            DISTRIBUTION_NAME,
            FALLBACK_VERSION,
        )
        return FALLBACK_VERSION


def should_register_commands(
    stored_version: Optional[Version], current_version: Optional[str] = None
) -> bool:
    """Re-register on first run, on version change, or when the record is stale."""

    bot_version = current_version or get_bot_version()
    if stored_version is None:
        return True
    if stored_version.version != bot_version:
        return True
    return stored_version.is_stale()


__all__ = ["FALLBACK_VERSION", "get_bot_version", "should_register_commands"]
