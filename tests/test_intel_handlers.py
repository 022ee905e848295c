"""Tests for intel type handlers, the registry and id helpers."""
from __future__ import annotations

import discord
import pytest

from frontier_intel.adapters.discord.builders import EMPTY_VALUE
from frontier_intel.intel import (
    FleetIntel,
    IntelEntity,
    IntelInputError,
    IntelItem,
    OreIntel,
    RiftIntel,
    SiteIntel,
    is_intel_item,
)
from frontier_intel.intel.handlers import (
    FleetHandler,
    IntelTypeRegistry,
    OreHandler,
    RiftHandler,
    SiteHandler,
    content_from_dict,
    default_registry,
    generate_intel_id,
    generate_random_string,
    parse_intel_id,
)
from frontier_intel.intel.handlers.ids import ALPHABET


def _entity(content, intel_id="rift-abc123xyz", location=None) -> IntelEntity:
    item = IntelItem(
        id=intel_id,
        timestamp="2026-03-01T12:00:00+00:00",
        reporter="42",
        content=content,
        location=location,
    )
    return IntelEntity(guild_id="G1", intel_item=item)


def _fields(embed: discord.Embed) -> dict:
    return {field.name: field.value for field in embed.fields}


def test_registry_scenario():
    """Registered types are enumerable; unknown types return None."""

    registry = IntelTypeRegistry()
    registry.register("rift", RiftHandler())
    registry.register("ore", OreHandler())

    assert registry.registered_types() == ["rift", "ore"]
    assert registry.get_handler("fleet") is None
    assert registry.has_handler("ore")
    assert registry.is_supported_type("rift")
    assert not registry.is_supported_type("fleet")


def test_registry_register_overwrites():
    registry = IntelTypeRegistry()
    first = RiftHandler()
    second = RiftHandler()
    registry.register("rift", first)
    registry.register("ore", OreHandler())
    registry.register("rift", second)

    assert registry.get_handler("rift") is second
    assert registry.registered_types() == ["rift", "ore"]


def test_registry_rejects_invalid_registrations():
    registry = IntelTypeRegistry()
    with pytest.raises(ValueError):
        registry.register("deep-rift", RiftHandler())
    with pytest.raises(TypeError):
        registry.register("rift", object())


def test_default_registry_contains_builtins():
    assert default_registry().registered_types() == ["rift", "ore", "fleet", "site"]


def test_random_string_uses_base36():
    value = generate_random_string()
    assert len(value) == 9
    assert set(value) <= set(ALPHABET)
    assert len(generate_random_string(4)) == 4


def test_intel_ids_round_trip():
    intel_id = generate_intel_id("rift")
    intel_type, suffix = parse_intel_id(intel_id)

    assert intel_type == "rift"
    assert len(suffix) == 9
    assert RiftHandler().generate_id().startswith("rift-")


def test_parse_intel_id_splits_on_first_hyphen():
    assert parse_intel_id("rift-1234567890-abc123") == ("rift", "1234567890-abc123")
    with pytest.raises(ValueError):
        parse_intel_id("nohyphen")
    with pytest.raises(ValueError):
        parse_intel_id("-suffix")


def test_rift_parse_and_message():
    handler = RiftHandler()
    content = handler.parse({"type": "E-type", "system": "ERR-7", "near": "P1L4"})

    assert content == RiftIntel(type="E-type", system_name="ERR-7", near="P1L4")
    assert handler.is_of_type(content)
    assert handler.success_message(content) == "Rift intel added: E-type in ERR-7 near P1L4"


def test_optional_values_default_to_empty():
    handler = RiftHandler()
    content = handler.parse({"type": "E-type", "system": "ERR-7"})

    assert content.near == ""
    assert handler.success_message(content) == "Rift intel added: E-type in ERR-7"


def test_missing_required_option_raises():
    with pytest.raises(IntelInputError, match="system"):
        RiftHandler().parse({"type": "E-type", "system": "  "})


def test_ore_parse_and_message():
    handler = OreHandler()
    content = handler.parse(
        {"oretype": "carbon", "name": "Carbon Debris Cluster", "system": "X-1"}
    )

    assert content == OreIntel(ore_type="carbon", name="Carbon Debris Cluster", system_name="X-1")
    assert (
        handler.success_message(content)
        == "Ore site intel added: Carbon Debris Cluster (carbon) in X-1"
    )


def test_fleet_requires_near():
    handler = FleetHandler()
    with pytest.raises(IntelInputError):
        handler.parse({"tribename": "Reapers", "comp": "5 frigates", "system": "X-1"})

    content = handler.parse(
        {"tribename": "Reapers", "comp": "5 frigates", "system": "X-1", "near": "P2"}
    )
    assert content.standing == ""
    assert handler.success_message(content) == "Fleet intel added: Reapers in X-1 near P2"


def test_site_triggered_choices():
    handler = SiteHandler()
    content = handler.parse({"name": "Relay", "system": "X-1", "triggered": "YES"})

    assert content == SiteIntel(name="Relay", system="X-1", triggered="yes", near=None)
    assert handler.success_message(content) == "Site intel added: Relay in X-1 (Triggered: yes)"
    with pytest.raises(IntelInputError, match="triggered"):
        handler.parse({"name": "Relay", "system": "X-1", "triggered": "maybe"})


def test_option_specs_mark_required_fields():
    options = {option.name: option for option in SiteHandler().options()}
    assert options["triggered"].choices == ("yes", "no", "unknown")
    assert options["near"].required is False
    assert options["name"].required is True


def test_is_of_type_accepts_stored_shapes():
    assert RiftHandler().is_of_type({"type": "A", "systemName": "B", "near": ""})
    assert not RiftHandler().is_of_type({"type": "A", "systemName": "B"})
    assert OreHandler().is_of_type({"oreType": "a", "name": "b", "systemName": "c", "near": ""})
    assert SiteHandler().is_of_type({"name": "a", "system": "b", "triggered": "no"})
    assert not SiteHandler().is_of_type({"name": "a", "system": "b", "triggered": "no", "near": 3})
    assert not FleetHandler().is_of_type("fleet")


def test_content_from_dict_picks_matching_type():
    assert content_from_dict({"type": "A", "systemName": "B", "near": "C"}) == RiftIntel("A", "B", "C")
    fleet = {"tribeName": "T", "comp": "c", "system": "s", "near": "n", "standing": "bad"}
    assert content_from_dict(fleet) == FleetIntel("T", "c", "s", "n", "bad")
    assert content_from_dict({"mystery": 1}) == {"mystery": 1}


def test_rift_embed_fields():
    embed = RiftHandler().create_embed(_entity(RiftIntel("E-type", "ERR-7", "")))

    assert embed.title == "🌌 Rift Intel: rift-abc123xyz"
    assert embed.colour.value == 0x8B5CF6
    assert embed.timestamp is not None
    assert embed.fields[0].name == "Reporter"
    assert _fields(embed) == {
        "Reporter": "<@42>",
        "Rift Type": "E-type",
        "System": "ERR-7",
        "Near Gravity Well": EMPTY_VALUE,
    }


def test_site_embed_puts_reporter_last_and_adds_location():
    content = SiteIntel(name="Relay", system="X-1", triggered="no", near="P1")
    embed = SiteHandler().create_embed(_entity(content, "site-abc", location="Sector 9"))

    names = [field.name for field in embed.fields]
    assert names == ["Site Name", "System", "Triggered", "Near", "Reporter", "Location"]


def test_is_intel_item_validation():
    valid = {"id": "rift-a", "timestamp": "t", "reporter": "1", "content": {}}
    assert is_intel_item(valid)
    assert not is_intel_item({**valid, "id": " "})
    assert not is_intel_item({**valid, "content": None})
    assert not is_intel_item({**valid, "location": 5})
    assert not is_intel_item(["rift-a"])


def test_intel_entity_round_trip():
    entity = _entity(OreIntel("carbon", "Cluster", "X-1", "P1"), "ore-123456789", location="L")
    payload = entity.to_dict()

    assert payload["guildId"] == "G1"
    assert payload["intelItem"]["content"] == {
        "oreType": "carbon",
        "name": "Cluster",
        "systemName": "X-1",
        "near": "P1",
    }
    assert IntelEntity.from_dict(payload) == entity
    assert entity.id == "ore-123456789"
    assert entity.timestamp == "2026-03-01T12:00:00+00:00"
