"""In-memory bookkeeping of the storage keys the bot knows about."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from .types import storage_key_for


class ObjectTypeRegistry:
    """Tracks registered entity types by storage key.

    Independent of the repository lifecycle; used when deciding which
    commands to register and for diagnostics.
    """

    def __init__(self) -> None:
        self._keys: Dict[str, None] = {}

    def register(self, entity_type: Type[Any]) -> str:
        key = storage_key_for(entity_type)
        self._keys[key] = None
        return key

    def is_registered(self, storage_key: str) -> bool:
        return storage_key in self._keys

    def registered_keys(self) -> List[str]:
        return list(self._keys)

    def reset_for_testing(self) -> None:
        self._keys.clear()

    def __len__(self) -> int:
        return len(self._keys)


def is_database_enabled(database_path: Optional[Path | str], repository) -> bool:
    """True when a path is configured and ``repository`` has been initialized."""

    if database_path is None:
        return False
    return repository.is_initialized()


__all__ = ["ObjectTypeRegistry", "is_database_enabled"]
