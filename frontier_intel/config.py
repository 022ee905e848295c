"""Configuration loading utilities for the intel bot."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).parent / "data" / "settings.yaml"

_DISABLED_PATHS = {"", "none", "null", "off"}


@dataclass(frozen=True)
class Settings:
    """Typed view over the settings YAML file plus environment overrides."""

    database_path: Optional[Path]
    intel_expiration_hours: float
    intel_channel: Optional[int]

    @property
    def persistence_enabled(self) -> bool:
        return self.database_path is not None

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Settings":
        database_cfg = data.get("database") or {}
        intel_cfg = data.get("intel") or {}
        channel = intel_cfg.get("channel")
        return Settings(
            database_path=_parse_path(database_cfg.get("path")),
            intel_expiration_hours=float(intel_cfg.get("expiration_hours", 168)),
            intel_channel=int(channel) if channel else None,
        )

    def with_env(self, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Apply ``FRONTIER_INTEL_*`` overrides, ignoring invalid values."""

        env = os.environ if environ is None else environ
        updates: Dict[str, Any] = {}
        if "FRONTIER_INTEL_DB" in env:
            updates["database_path"] = _parse_path(env["FRONTIER_INTEL_DB"])
        hours = env.get("FRONTIER_INTEL_EXPIRATION_HOURS")
        if hours:
            try:
                value = float(hours)
            except ValueError:
                logger.warning("Invalid FRONTIER_INTEL_EXPIRATION_HOURS value: %s", hours)
            else:
                if value > 0:
                    updates["intel_expiration_hours"] = value
                else:
                    logger.warning("FRONTIER_INTEL_EXPIRATION_HOURS must be positive: %s", hours)
        channel = env.get("FRONTIER_INTEL_CHANNEL")
        if channel:
            try:
                updates["intel_channel"] = int(channel)
            except ValueError:
                logger.warning("Invalid channel id %s for FRONTIER_INTEL_CHANNEL", channel)
        return replace(self, **updates) if updates else self


def _parse_path(value: Any) -> Optional[Path]:
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in _DISABLED_PATHS:
        return None
    return Path(text)


class SettingsLoader:
    """Read the bundled (or a given) settings YAML and overlay the environment.

    The merged result is cached per loader. ``environ`` defaults to
    ``os.environ`` and is consulted again on every forced reload, so a
    long-running bot can pick up a changed ``FRONTIER_INTEL_DB``.
    A missing settings file yields the built-in defaults.
    """

    def __init__(
        self,
        path: Path | None = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._path = path or DEFAULT_SETTINGS_PATH
        self._environ = environ
        self._settings: Settings | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _read_file(self) -> Dict[str, Any]:
        if not self._path.exists():
            logger.warning("Settings file %s not found; using defaults", self._path)
            return {}
        with self._path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh) or {}

    def load(self, force: bool = False) -> Settings:
        if self._settings is None or force:
            self._settings = Settings.from_dict(self._read_file()).with_env(self._environ)
        return self._settings


def get_settings() -> Settings:
    """Settings from the packaged ``settings.yaml`` with ``FRONTIER_INTEL_*`` applied."""

    return SettingsLoader().load()


__all__ = ["Settings", "SettingsLoader", "get_settings"]
