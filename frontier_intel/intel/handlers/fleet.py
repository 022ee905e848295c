"""Fleet intel: tribe sightings and composition."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

import discord

from ...adapters.discord.builders import build_intel_embed, display_value
from ..types import FleetIntel, IntelEntity
from .base import IntelTypeHandler, OptionSpec, _is_str


class FleetHandler(IntelTypeHandler):
    type = "fleet"
    description = "Add a fleet intel report"
    content_class = FleetIntel

    def options(self) -> List[OptionSpec]:
        return [
            OptionSpec("tribename", "Name or identifier of the fleet/tribe"),
            OptionSpec("comp", "Fleet composition details"),
            OptionSpec("system", "System name where the fleet is located"),
            OptionSpec("near", "What the fleet is near (e.g., P1L4)"),
            OptionSpec(
                "standing",
                "Relationship status (e.g., good, bad, neutral)",
                required=False,
            ),
        ]

    def build_content(self, values: Dict[str, str]) -> FleetIntel:
        return FleetIntel(
            tribe_name=values["tribename"],
            comp=values["comp"],
            system=values["system"],
            near=values["near"],
            standing=values["standing"],
        )

    def matches_raw(self, data: Mapping[str, Any]) -> bool:
        return _is_str(data, "tribeName", "comp", "system", "near", "standing")

    def create_embed(self, entity: IntelEntity) -> discord.Embed:
        content = entity.intel_item.content
        return build_intel_embed(
            entity,
            title=f"⚔️ Fleet Intel: {entity.id}",
            colour=0xEF4444,
            fields=[
                ("Tribe/Fleet", content.tribe_name),
                ("Composition", content.comp),
                ("System", content.system),
                ("Near", display_value(content.near)),
                ("Standing", display_value(content.standing)),
            ],
        )

    def success_message(self, content: FleetIntel) -> str:
        near = f" near {content.near}" if content.near else ""
        return f"Fleet intel added: {content.tribe_name} in {content.system}{near}"
