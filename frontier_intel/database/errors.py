"""Exceptions raised by the guild document store."""
from __future__ import annotations


class DatabaseError(RuntimeError):
    """Base class for persistence failures."""


class MissingStorageKeyError(DatabaseError, TypeError):
    """Raised when an entity type does not declare a ``storage_key``."""


class DatabaseNotOpenError(DatabaseError):
    """Raised when the document handle is used before it has been opened."""


class DocumentCorruptError(DatabaseError):
    """Raised when the backing file does not hold a JSON object."""


class NotPurgeableError(DatabaseError, TypeError):
    """Raised when age-based purge is requested for a type without timestamps."""


__all__ = [
    "DatabaseError",
    "DatabaseNotOpenError",
    "DocumentCorruptError",
    "MissingStorageKeyError",
    "NotPurgeableError",
]
