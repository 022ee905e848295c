"""Guild-scoped repository over the JSON document store.

The repository may be used before it has been configured. Until
:meth:`Repository.initialize` is called every operation returns its
"disabled" value instead of raising, so a bot running without persistence
keeps working.
"""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type, TypeVar

from .document import DocumentStore
from .errors import DatabaseNotOpenError, NotPurgeableError
from .operations import ensure_guild_bucket, read_bucket, store_data
from .types import DatabaseCollection, DatabaseEntity, is_purgeable_type, storage_key_for

logger = logging.getLogger(__name__)

DEFAULT_PURGE_HOURS = 168

E = TypeVar("E", bound=DatabaseEntity)


@dataclass(frozen=True)
class RepositoryConfig:
    database_path: Path | str


def requires_initialized(default: Any = None, *, warn: bool = False) -> Callable:
    """Return ``default`` from the wrapped coroutine while the repository is disabled."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self: "Repository", *args, **kwargs):
            if not self.is_initialized():
                if warn:
                    logger.warning(
                        "Repository not initialized; skipping %s", func.__name__
                    )
                return default() if callable(default) else default
            return await func(self, *args, **kwargs)

        return wrapper

    return decorator


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class Repository:
    """Typed, guild-scoped access to the persisted document."""

    def __init__(self, store: Optional[DocumentStore] = None) -> None:
        self._store = store or DocumentStore()
        self._config: Optional[RepositoryConfig] = None
        self._initialized = False

    @property
    def store_handle(self) -> DocumentStore:
        return self._store

    @property
    def config(self) -> Optional[RepositoryConfig]:
        return self._config

    async def initialize(self, config: RepositoryConfig) -> None:
        """Record ``config``; later calls replace it without touching stored data."""

        self._config = config
        self._initialized = True
        logger.info("Repository initialized with %s", config.database_path)

    def is_initialized(self) -> bool:
        return self._initialized and self._config is not None

    @property
    def _path(self) -> Path | str:
        if self._config is None:
            raise DatabaseNotOpenError("Repository has no database path configured")
        return self._config.database_path

    @requires_initialized(warn=True)
    async def store(self, entity: DatabaseEntity) -> None:
        storage_key = storage_key_for(type(entity))
        try:
            await store_data(
                self._store, self._path, entity.guild_id, storage_key, entity.to_dict()
            )
        except Exception:
            logger.exception(
                "Failed to store %s for guild %s", storage_key, entity.guild_id
            )

    @requires_initialized()
    async def store_collection(
        self, storage_key: str, collection: DatabaseCollection
    ) -> None:
        try:
            await store_data(
                self._store,
                self._path,
                collection.guild_id,
                storage_key,
                collection.to_dict(),
            )
        except Exception:
            logger.exception(
                "Failed to store collection %s for guild %s",
                storage_key,
                collection.guild_id,
            )

    @requires_initialized(default=list)
    async def get_all(self, entity_type: Type[E], guild_id: str) -> List[E]:
        storage_key = storage_key_for(entity_type)
        document = await self._store.open(self._path)
        stored = read_bucket(document.data, str(guild_id), storage_key)
        return [entity_type.from_dict(item) for item in stored]

    @requires_initialized()
    async def replace_all(
        self, entity_type: Type[E], guild_id: str, items: Sequence[E]
    ) -> None:
        await self._replace_records(
            entity_type, guild_id, [item.to_dict() for item in items]
        )

    async def _replace_records(
        self, entity_type: Type[E], guild_id: str, records: List[Dict[str, Any]]
    ) -> None:
        # ``records`` are stored verbatim.
        storage_key = storage_key_for(entity_type)
        document = await self._store.open(self._path)
        guild = ensure_guild_bucket(document.data, str(guild_id))
        guild[storage_key] = records
        await document.write()

    async def _read_records(
        self, entity_type: Type[E], guild_id: str
    ) -> List[Tuple[Dict[str, Any], E]]:
        storage_key = storage_key_for(entity_type)
        document = await self._store.open(self._path)
        stored = read_bucket(document.data, str(guild_id), storage_key)
        return [(record, entity_type.from_dict(record)) for record in stored]

    @requires_initialized(default=0)
    async def purge_stale_items(
        self,
        entity_type: Type[E],
        guild_id: str,
        max_age_hours: float = DEFAULT_PURGE_HOURS,
        *,
        now: Optional[datetime] = None,
    ) -> int:
        """Drop items older than ``max_age_hours`` and return how many went.

        Items exactly ``max_age_hours`` old are kept. Surviving records are
        rewritten untouched, so fields this version does not model survive.
        """

        if not is_purgeable_type(entity_type):
            raise NotPurgeableError(f"{entity_type.__name__} has no timestamp field")
        records = await self._read_records(entity_type, guild_id)
        reference = now or datetime.now(timezone.utc)
        if reference.tzinfo is None:
            reference = reference.replace(tzinfo=timezone.utc)
        cutoff = reference - timedelta(hours=max_age_hours)
        fresh = [
            record
            for record, item in records
            if _parse_timestamp(item.timestamp) >= cutoff
        ]
        purged = len(records) - len(fresh)
        if purged > 0:
            await self._replace_records(entity_type, guild_id, fresh)
            logger.info(
                "Purged %d stale %s item(s) for guild %s",
                purged,
                entity_type.storage_key,
                guild_id,
            )
        return purged

    @requires_initialized(default=False)
    async def delete_by_id(self, entity_type: Type[E], guild_id: str, id: str) -> bool:
        records = await self._read_records(entity_type, guild_id)
        for index, (_, item) in enumerate(records):
            if getattr(item, "id", None) == id:
                del records[index]
                await self._replace_records(
                    entity_type, guild_id, [record for record, _ in records]
                )
                return True
        return False


__all__ = [
    "DEFAULT_PURGE_HOURS",
    "Repository",
    "RepositoryConfig",
    "requires_initialized",
]
