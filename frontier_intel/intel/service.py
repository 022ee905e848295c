"""Intel workflows used by the Discord command layer."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

import discord

from ..adapters.discord.builders import build_default_intel_embed
from ..database.repository import DEFAULT_PURGE_HOURS, Repository
from .errors import UnknownIntelTypeError
from .handlers.base import IntelTypeHandler
from .handlers.registry import IntelTypeRegistry
from .types import IntelEntity, IntelItem

logger = logging.getLogger(__name__)


@dataclass
class IntelReport:
    """Result of adding a report: what was stored and how to show it."""

    id: str
    timestamp: str
    entity: IntelEntity
    embed: discord.Embed
    message: str


class IntelService:
    """Adds, lists and deletes intel reports for a guild."""

    def __init__(
        self,
        repository: Repository,
        registry: IntelTypeRegistry,
        *,
        expiration_hours: float = DEFAULT_PURGE_HOURS,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._repository = repository
        self._registry = registry
        self._expiration_hours = expiration_hours
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def registry(self) -> IntelTypeRegistry:
        return self._registry

    def _handler(self, intel_type: str) -> IntelTypeHandler:
        handler = self._registry.get_handler(intel_type)
        if handler is None:
            raise UnknownIntelTypeError(intel_type)
        return handler

    async def add_intel(
        self,
        guild_id: str,
        intel_type: str,
        raw: Mapping[str, Any],
        reporter: str,
        *,
        location: Optional[str] = None,
    ) -> IntelReport:
        handler = self._handler(intel_type)
        content = handler.parse(raw)
        item = IntelItem(
            id=handler.generate_id(),
            timestamp=self._clock().isoformat(),
            reporter=str(reporter),
            content=content,
            location=location,
        )
        entity = IntelEntity(guild_id=guild_id, intel_item=item)
        await self._repository.store(entity)
        logger.info("Stored %s intel %s for guild %s", intel_type, item.id, guild_id)
        return IntelReport(
            id=item.id,
            timestamp=item.timestamp,
            entity=entity,
            embed=handler.create_embed(entity),
            message=handler.success_message(content),
        )

    async def purge_stale(self, guild_id: str, max_age_hours: Optional[float] = None) -> int:
        hours = self._expiration_hours if max_age_hours is None else max_age_hours
        return await self._repository.purge_stale_items(
            IntelEntity, guild_id, hours, now=self._clock()
        )

    async def list_intel(self, guild_id: str) -> List[IntelEntity]:
        """Purge expired reports, then return the rest newest first."""

        await self.purge_stale(guild_id)
        items = await self._repository.get_all(IntelEntity, guild_id)
        return sorted(items, key=lambda entity: entity.timestamp, reverse=True)

    async def delete_intel(self, guild_id: str, intel_type: str, intel_id: str) -> bool:
        if not self._registry.is_supported_type(intel_type):
            raise UnknownIntelTypeError(intel_type)
        deleted = await self._repository.delete_by_id(IntelEntity, guild_id, intel_id)
        if deleted:
            logger.info("Deleted %s intel %s for guild %s", intel_type, intel_id, guild_id)
        return deleted

    def embed_for(self, entity: IntelEntity) -> discord.Embed:
        handler = self._registry.handler_for_content(entity.intel_item.content)
        if handler is None:
            return build_default_intel_embed(entity)
        return handler.create_embed(entity)


__all__ = ["IntelReport", "IntelService"]
