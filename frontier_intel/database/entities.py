"""Core entities persisted alongside intel reports."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import ClassVar, Optional

from .types import DatabaseEntity

STALE_AFTER = timedelta(days=5)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Version(DatabaseEntity):
    """Bot version last seen in a guild, used to decide on command re-registration."""

    storage_key: ClassVar[str] = "versions"

    version: str
    last_updated: str = field(default_factory=_now_iso)

    @property
    def timestamp(self) -> str:
        return self.last_updated

    def to_dict(self):
        return {
            "guildId": self.guild_id,
            "version": self.version,
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data) -> "Version":
        return cls(
            guild_id=data["guildId"],
            version=data["version"],
            last_updated=data.get("lastUpdated") or _now_iso(),
        )

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        updated = datetime.fromisoformat(self.last_updated.replace("Z", "+00:00"))
        if updated.tzinfo is None:
            updated = updated.replace(tzinfo=timezone.utc)
        reference = now or datetime.now(timezone.utc)
        return updated < reference - STALE_AFTER


__all__ = ["STALE_AFTER", "Version"]
