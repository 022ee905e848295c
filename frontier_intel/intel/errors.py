"""Exceptions raised while handling intel reports."""
from __future__ import annotations


class IntelError(RuntimeError):
    """Base class for intel handling failures."""


class IntelInputError(IntelError, ValueError):
    """Raised when raw input cannot be parsed into intel content."""


class UnknownIntelTypeError(IntelError, LookupError):
    """Raised when no handler is registered for an intel type."""

    def __init__(self, intel_type: str) -> None:
        super().__init__(f"Unknown or untracked intel type: {intel_type}")
        self.intel_type = intel_type


__all__ = ["IntelError", "IntelInputError", "UnknownIntelTypeError"]
