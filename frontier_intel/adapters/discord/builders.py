"""Discord embed builders for intel reports.

Pure construction helpers; handlers call these so every intel type renders
the reporter, timestamp and location the same way.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

import discord

if TYPE_CHECKING:
    from ...intel.types import IntelEntity

EMPTY_VALUE = "*( empty )*"
DEFAULT_COLOUR = 0x1E40AF

Field = Tuple[str, str]


def display_value(value: Optional[str]) -> str:
    """Render blank optional values as a visible placeholder."""

    if value is None or not value.strip():
        return EMPTY_VALUE
    return value


def _timestamp(entity: IntelEntity) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(entity.timestamp.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_intel_embed(
    entity: IntelEntity,
    *,
    title: str,
    colour: int,
    fields: Iterable[Field],
    reporter_first: bool = True,
) -> discord.Embed:
    """Construct the embed shown for a stored intel report."""

    item = entity.intel_item
    embed = discord.Embed(
        title=title,
        colour=discord.Colour(colour),
        timestamp=_timestamp(entity),
    )
    reporter = f"<@{item.reporter}>"
    if reporter_first:
        embed.add_field(name="Reporter", value=reporter, inline=True)
    for name, value in fields:
        embed.add_field(name=name, value=value, inline=True)
    if not reporter_first:
        embed.add_field(name="Reporter", value=reporter, inline=True)
    if item.location:
        embed.add_field(name="Location", value=item.location, inline=True)
    return embed


def build_default_intel_embed(entity: IntelEntity) -> discord.Embed:
    """Fallback embed for reports whose type has no registered handler."""

    return build_intel_embed(
        entity,
        title=f"Intel: {entity.id}",
        colour=DEFAULT_COLOUR,
        fields=(),
    )


__all__ = [
    "DEFAULT_COLOUR",
    "EMPTY_VALUE",
    "build_default_intel_embed",
    "build_intel_embed",
    "display_value",
]
