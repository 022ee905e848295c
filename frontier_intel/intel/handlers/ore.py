"""Ore site intel."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

import discord

from ...adapters.discord.builders import build_intel_embed, display_value
from ..types import IntelEntity, OreIntel
from .base import IntelTypeHandler, OptionSpec, _is_str


class OreHandler(IntelTypeHandler):
    type = "ore"
    description = "Add an ore site intel report"
    content_class = OreIntel

    def options(self) -> List[OptionSpec]:
        return [
            OptionSpec("oretype", "Type of ore resource (e.g., carbon, metal, common)"),
            OptionSpec("name", "Name of the ore site (e.g., Carbon Debris Cluster)"),
            OptionSpec("system", "System name where the ore site is located"),
            OptionSpec("near", "What the ore site is near (e.g., P1L4)", required=False),
        ]

    def build_content(self, values: Dict[str, str]) -> OreIntel:
        return OreIntel(
            ore_type=values["oretype"],
            name=values["name"],
            system_name=values["system"],
            near=values["near"],
        )

    def matches_raw(self, data: Mapping[str, Any]) -> bool:
        return _is_str(data, "oreType", "name", "systemName", "near")

    def create_embed(self, entity: IntelEntity) -> discord.Embed:
        content = entity.intel_item.content
        return build_intel_embed(
            entity,
            title=f"⛏️ Ore Site Intel: {entity.id}",
            colour=0xF59E0B,
            fields=[
                ("Ore Type", content.ore_type),
                ("Site Name", content.name),
                ("System", content.system_name),
                ("Near Gravity Well", display_value(content.near)),
            ],
        )

    def success_message(self, content: OreIntel) -> str:
        near = f" near {content.near}" if content.near else ""
        return (
            f"Ore site intel added: {content.name} ({content.ore_type}) "
            f"in {content.system_name}{near}"
        )
