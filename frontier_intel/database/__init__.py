"""Guild-scoped JSON persistence.

Use a :class:`Repository` for all reads and writes; it owns the
:class:`DocumentStore` holding the single open document.
"""

from .document import DocumentStore, JSONFileDocument
from .entities import Version
from .errors import (
    DatabaseError,
    DatabaseNotOpenError,
    DocumentCorruptError,
    MissingStorageKeyError,
    NotPurgeableError,
)
from .register import ObjectTypeRegistry, is_database_enabled
from .repository import DEFAULT_PURGE_HOURS, Repository, RepositoryConfig
from .types import DatabaseCollection, DatabaseEntity, Identifiable, Purgeable
from .version import get_bot_version, should_register_commands

__all__ = [
    "DEFAULT_PURGE_HOURS",
    "DatabaseCollection",
    "DatabaseEntity",
    "DatabaseError",
    "DatabaseNotOpenError",
    "DocumentCorruptError",
    "DocumentStore",
    "Identifiable",
    "JSONFileDocument",
    "MissingStorageKeyError",
    "NotPurgeableError",
    "ObjectTypeRegistry",
    "Purgeable",
    "Repository",
    "RepositoryConfig",
    "Version",
    "get_bot_version",
    "is_database_enabled",
    "should_register_commands",
]
