"""Intel identifier generation.

Ids look like ``<type>-<suffix>`` with a base-36 suffix. Suffixes are random,
not unique: with the default nine characters a collision is unlikely but
possible.
"""

from __future__ import annotations

import random
import string
from typing import Tuple

ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_SUFFIX_LENGTH = 9

_RANDOM = random.Random()  # nosec B311 - ids are labels, not secrets


def generate_random_string(length: int = DEFAULT_SUFFIX_LENGTH) -> str:
    return "".join(_RANDOM.choice(ALPHABET) for _ in range(length))


def generate_intel_id(intel_type: str) -> str:
    return f"{intel_type}-{generate_random_string()}"


def parse_intel_id(intel_id: str) -> Tuple[str, str]:
    """Split ``intel_id`` on its first hyphen into ``(type, suffix)``."""

    intel_type, sep, suffix = intel_id.partition("-")
    if not sep or not intel_type:
        raise ValueError(f"Malformed intel id: {intel_id!r}")
    return intel_type, suffix


__all__ = [
    "ALPHABET",
    "DEFAULT_SUFFIX_LENGTH",
    "generate_intel_id",
    "generate_random_string",
    "parse_intel_id",
]
