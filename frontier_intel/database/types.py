"""Base entity types and the capabilities the repository relies on."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Protocol, Type, runtime_checkable

from .errors import MissingStorageKeyError


@runtime_checkable
class Purgeable(Protocol):
    """Anything carrying a single ISO-8601 ``timestamp``."""

    timestamp: str


@runtime_checkable
class Identifiable(Protocol):
    id: str


@dataclass
class DatabaseEntity:
    """A record owned by one guild.

    Subclasses declare ``storage_key`` as a class attribute; it names the
    array the record lives in inside the guild's bucket.
    """

    storage_key: ClassVar[str] = ""

    guild_id: str

    def __post_init__(self) -> None:
        # Snowflakes exceed float precision, keep them opaque.
        self.guild_id = str(self.guild_id)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"guildId": self.guild_id}
        for item in fields(self):
            if item.name == "guild_id":
                continue
            payload[item.name] = getattr(self, item.name)
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DatabaseEntity":
        values = {key: value for key, value in data.items() if key != "guildId"}
        return cls(guild_id=data["guildId"], **values)


@dataclass
class DatabaseCollection:
    """Arbitrary payload list stored under a guild without a dedicated type."""

    guild_id: str
    data: List[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.guild_id = str(self.guild_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"guildId": self.guild_id, "data": list(self.data)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DatabaseCollection":
        return cls(guild_id=data["guildId"], data=list(data.get("data", [])))


def storage_key_for(entity_type: Type[Any]) -> str:
    """Return the declared storage key of ``entity_type``."""

    key = getattr(entity_type, "storage_key", None)
    if not key or not isinstance(key, str):
        name = getattr(entity_type, "__name__", repr(entity_type))
        raise MissingStorageKeyError(f"{name} must have a static storage_key property")
    return key


def is_purgeable_type(entity_type: Type[Any]) -> bool:
    """True when instances of ``entity_type`` expose a ``timestamp`` field."""

    if any(item.name == "timestamp" for item in _dataclass_fields(entity_type)):
        return True
    return isinstance(getattr(entity_type, "timestamp", None), property)


def _dataclass_fields(entity_type: Type[Any]):
    try:
        return fields(entity_type)
    except TypeError:
        return ()


__all__ = [
    "DatabaseCollection",
    "DatabaseEntity",
    "Identifiable",
    "Purgeable",
    "is_purgeable_type",
    "storage_key_for",
]
