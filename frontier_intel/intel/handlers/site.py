"""Investigation and combat site intel."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

import discord

from ...adapters.discord.builders import build_intel_embed
from ..types import IntelEntity, SiteIntel, SiteTrigger
from .base import IntelTypeHandler, OptionSpec, _is_str


class SiteHandler(IntelTypeHandler):
    type = "site"
    description = "Add a site intel report"
    content_class = SiteIntel

    def options(self) -> List[OptionSpec]:
        return [
            OptionSpec("name", "Name of the investigation or combat site"),
            OptionSpec("system", "System name where the site is located"),
            OptionSpec(
                "triggered",
                "Site trigger status",
                choices=tuple(trigger.value for trigger in SiteTrigger),
            ),
            OptionSpec("near", "What the site is near (optional)", required=False),
        ]

    def build_content(self, values: Dict[str, str]) -> SiteIntel:
        return SiteIntel(
            name=values["name"],
            system=values["system"],
            triggered=values["triggered"],
            near=values["near"] or None,
        )

    def matches_raw(self, data: Mapping[str, Any]) -> bool:
        near = data.get("near")
        return _is_str(data, "name", "system", "triggered") and (
            near is None or isinstance(near, str)
        )

    def create_embed(self, entity: IntelEntity) -> discord.Embed:
        content = entity.intel_item.content
        fields = [
            ("Site Name", content.name),
            ("System", content.system),
            ("Triggered", content.triggered),
        ]
        if content.near:
            fields.append(("Near", content.near))
        return build_intel_embed(
            entity,
            title="🏗️ Site Intelligence Report",
            colour=0x8B4513,
            fields=fields,
            reporter_first=False,
        )

    def success_message(self, content: SiteIntel) -> str:
        near = f" near {content.near}" if content.near else ""
        return (
            f"Site intel added: {content.name} in {content.system}{near} "
            f"(Triggered: {content.triggered})"
        )
