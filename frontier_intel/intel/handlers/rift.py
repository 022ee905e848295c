"""Rift intel: wormholes and other spatial anomalies."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

import discord

from ...adapters.discord.builders import build_intel_embed, display_value
from ..types import IntelEntity, RiftIntel
from .base import IntelTypeHandler, OptionSpec, _is_str


class RiftHandler(IntelTypeHandler):
    type = "rift"
    description = "Add a rift intel report"
    content_class = RiftIntel

    def options(self) -> List[OptionSpec]:
        return [
            OptionSpec("type", "Rift type code"),
            OptionSpec("system", "System name where the rift is located"),
            OptionSpec("near", "What the rift is near (e.g., P1L4)", required=False),
        ]

    def build_content(self, values: Dict[str, str]) -> RiftIntel:
        return RiftIntel(type=values["type"], system_name=values["system"], near=values["near"])

    def matches_raw(self, data: Mapping[str, Any]) -> bool:
        return _is_str(data, "type", "systemName", "near")

    def create_embed(self, entity: IntelEntity) -> discord.Embed:
        content = entity.intel_item.content
        return build_intel_embed(
            entity,
            title=f"🌌 Rift Intel: {entity.id}",
            colour=0x8B5CF6,
            fields=[
                ("Rift Type", content.type),
                ("System", content.system_name),
                ("Near Gravity Well", display_value(content.near)),
            ],
        )

    def success_message(self, content: RiftIntel) -> str:
        near = f" near {content.near}" if content.near else ""
        return f"Rift intel added: {content.type} in {content.system_name}{near}"
