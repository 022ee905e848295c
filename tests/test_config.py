"""Tests for settings loading and environment overrides."""
from __future__ import annotations

from pathlib import Path

import pytest

from frontier_intel.config import Settings, SettingsLoader, get_settings


@pytest.fixture(autouse=True)
def reset_env(monkeypatch):
    monkeypatch.delenv("FRONTIER_INTEL_DB", raising=False)
    monkeypatch.delenv("FRONTIER_INTEL_EXPIRATION_HOURS", raising=False)
    monkeypatch.delenv("FRONTIER_INTEL_CHANNEL", raising=False)
    yield


def test_default_settings():
    settings = get_settings()
    assert settings.database_path == Path("./data/db.json")
    assert settings.intel_expiration_hours == 168
    assert settings.intel_channel is None
    assert settings.persistence_enabled


def test_loader_reads_yaml_and_caches(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "database:\n  path: /srv/intel.json\nintel:\n  expiration_hours: 24\n  channel: 99\n",
        encoding="utf-8",
    )
    loader = SettingsLoader(path)
    settings = loader.load()

    assert settings.database_path == Path("/srv/intel.json")
    assert settings.intel_expiration_hours == 24
    assert settings.intel_channel == 99

    path.write_text("database:\n  path: /elsewhere.json\n", encoding="utf-8")
    assert loader.load() is settings
    assert loader.load(force=True).database_path == Path("/elsewhere.json")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FRONTIER_INTEL_DB", "/tmp/guilds.json")
    monkeypatch.setenv("FRONTIER_INTEL_EXPIRATION_HOURS", "12")
    monkeypatch.setenv("FRONTIER_INTEL_CHANNEL", "12345")

    settings = get_settings()

    assert settings.database_path == Path("/tmp/guilds.json")
    assert settings.intel_expiration_hours == 12
    assert settings.intel_channel == 12345


def test_env_can_disable_persistence(monkeypatch):
    monkeypatch.setenv("FRONTIER_INTEL_DB", "none")
    settings = get_settings()
    assert settings.database_path is None
    assert not settings.persistence_enabled


def test_invalid_env_values_are_ignored(caplog):
    base = Settings.from_dict({"intel": {"expiration_hours": 72}})
    settings = base.with_env(
        {"FRONTIER_INTEL_EXPIRATION_HOURS": "soon", "FRONTIER_INTEL_CHANNEL": "general"}
    )

    assert settings == base
    assert settings.database_path is None
    assert "Invalid FRONTIER_INTEL_EXPIRATION_HOURS" in caplog.text
    assert "Invalid channel id general" in caplog.text


def test_non_positive_expiration_is_ignored():
    base = Settings.from_dict({})
    assert base.with_env({"FRONTIER_INTEL_EXPIRATION_HOURS": "0"}).intel_expiration_hours == 168


def test_loader_overlays_given_environment(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("database:\n  path: /srv/intel.json\n", encoding="utf-8")
    environ = {"FRONTIER_INTEL_DB": "off"}
    loader = SettingsLoader(path, environ=environ)

    assert loader.load().persistence_enabled is False

    environ["FRONTIER_INTEL_DB"] = "/srv/other.json"
    assert loader.load().database_path is None
    assert loader.load(force=True).database_path == Path("/srv/other.json")


def test_missing_settings_file_uses_defaults(tmp_path, caplog):
    settings = SettingsLoader(tmp_path / "absent.yaml", environ={}).load()

    assert settings == Settings.from_dict({})
    assert "not found" in caplog.text
