"""Guild and storage-key bucket management beneath the repository."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from .document import DocumentStore
from .errors import DocumentCorruptError

logger = logging.getLogger(__name__)


def ensure_guild_bucket(data: Dict[str, Any], guild_id: str) -> Dict[str, List[Any]]:
    """Return the mapping for ``guild_id``, creating it if absent."""

    bucket = data.get(guild_id)
    if bucket is None:
        bucket = {}
        data[guild_id] = bucket
    elif not isinstance(bucket, dict):
        raise DocumentCorruptError(f"Guild bucket {guild_id!r} is not an object")
    return bucket


def ensure_key_bucket(data: Dict[str, Any], guild_id: str, storage_key: str) -> List[Any]:
    """Return the array stored under ``guild_id``/``storage_key``, creating it if absent."""

    guild = ensure_guild_bucket(data, guild_id)
    items = guild.get(storage_key)
    if items is None:
        items = []
        guild[storage_key] = items
    elif not isinstance(items, list):
        raise DocumentCorruptError(f"{guild_id!r}/{storage_key!r} is not an array")
    return items


def read_bucket(data: Dict[str, Any], guild_id: str, storage_key: str) -> List[Any]:
    guild = data.get(guild_id)
    if guild is None:
        return []
    if not isinstance(guild, dict):
        raise DocumentCorruptError(f"Guild bucket {guild_id!r} is not an object")
    items = guild.get(storage_key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise DocumentCorruptError(f"{guild_id!r}/{storage_key!r} is not an array")
    return items


async def store_data(
    store: DocumentStore,
    path: Path | str,
    guild_id: str,
    storage_key: str,
    record: Dict[str, Any],
) -> None:
    """Append ``record`` to the guild's ``storage_key`` array and persist.

    Storing the same record twice yields two entries.
    """

    document = await store.open(path)
    ensure_key_bucket(document.data, guild_id, storage_key).append(record)
    await document.write()
    logger.debug("Stored %s record for guild %s", storage_key, guild_id)


__all__ = ["ensure_guild_bucket", "ensure_key_bucket", "read_bucket", "store_data"]
