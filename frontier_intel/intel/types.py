"""Intel report data models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from ..database.types import DatabaseEntity


class SiteTrigger(str, Enum):
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


class IntelContent:
    """Marker base for the payload of an intel report."""

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass
class RiftIntel(IntelContent):
    type: str
    system_name: str
    near: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "systemName": self.system_name, "near": self.near}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RiftIntel":
        return cls(type=data["type"], system_name=data["systemName"], near=data.get("near", ""))


@dataclass
class OreIntel(IntelContent):
    ore_type: str
    name: str
    system_name: str
    near: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "oreType": self.ore_type,
            "name": self.name,
            "systemName": self.system_name,
            "near": self.near,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OreIntel":
        return cls(
            ore_type=data["oreType"],
            name=data["name"],
            system_name=data["systemName"],
            near=data.get("near", ""),
        )


@dataclass
class FleetIntel(IntelContent):
    tribe_name: str
    comp: str
    system: str
    near: str
    standing: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tribeName": self.tribe_name,
            "comp": self.comp,
            "system": self.system,
            "near": self.near,
            "standing": self.standing,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FleetIntel":
        return cls(
            tribe_name=data["tribeName"],
            comp=data["comp"],
            system=data["system"],
            near=data["near"],
            standing=data.get("standing", ""),
        )


@dataclass
class SiteIntel(IntelContent):
    name: str
    system: str
    triggered: str
    near: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "system": self.system,
            "triggered": self.triggered,
        }
        if self.near:
            payload["near"] = self.near
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteIntel":
        return cls(
            name=data["name"],
            system=data["system"],
            triggered=data["triggered"],
            near=data.get("near"),
        )


@dataclass
class IntelItem:
    """A single intel report.

    ``content`` is either a typed :class:`IntelContent` or, for reports whose
    type is no longer registered, the raw mapping read from disk.
    """

    id: str
    timestamp: str
    reporter: str
    content: Any
    location: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        content = self.content.to_dict() if isinstance(self.content, IntelContent) else dict(self.content)
        payload: Dict[str, Any] = {
            "id": self.id,
            "timestamp": self.timestamp,
            "reporter": self.reporter,
            "content": content,
        }
        if self.location is not None:
            payload["location"] = self.location
        return payload


def is_intel_item(value: Any) -> bool:
    """Check that ``value`` has the shape of a persisted intel item."""

    if not isinstance(value, dict):
        return False
    for key in ("id", "timestamp", "reporter"):
        item = value.get(key)
        if not isinstance(item, str) or not item.strip():
            return False
    if not isinstance(value.get("content"), dict):
        return False
    location = value.get("location")
    return location is None or isinstance(location, str)


@dataclass
class IntelEntity(DatabaseEntity):
    """Stores an :class:`IntelItem` under the guild's ``intel-items`` array."""

    storage_key: ClassVar[str] = "intel-items"

    intel_item: IntelItem

    @property
    def id(self) -> str:
        return self.intel_item.id

    @property
    def timestamp(self) -> str:
        return self.intel_item.timestamp

    def to_dict(self) -> Dict[str, Any]:
        return {"guildId": self.guild_id, "intelItem": self.intel_item.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IntelEntity":
        from .handlers.registry import content_from_dict

        raw = data["intelItem"]
        item = IntelItem(
            id=raw["id"],
            timestamp=raw["timestamp"],
            reporter=raw["reporter"],
            content=content_from_dict(raw.get("content") or {}),
            location=raw.get("location"),
        )
        return cls(guild_id=data["guildId"], intel_item=item)


__all__ = [
    "FleetIntel",
    "IntelContent",
    "IntelEntity",
    "IntelItem",
    "OreIntel",
    "RiftIntel",
    "SiteIntel",
    "SiteTrigger",
    "is_intel_item",
]
