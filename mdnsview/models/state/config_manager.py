"""YAML-backed persistence for AppSettings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from mdnsview.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MDNSVIEW_CONFIG"


class ConfigManager:
    """Load and save settings as YAML.

    The file location is ``$MDNSVIEW_CONFIG`` when set, otherwise
    ``~/.config/mdnsview/settings.yaml``. A missing file is not an error:
    load() returns defaults.
    """

    @staticmethod
    def default_path() -> Path:
        override = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / "mdnsview" / "settings.yaml"

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Read settings from disk.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        config_path = path or cls.default_path()
        if not config_path.exists():
            logger.debug("No settings file at %s; using defaults", config_path)
            return AppSettings()
        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{config_path} must contain a mapping")
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk.

        Raises:
            ConfigSaveError: The file cannot be written.
        """
        config_path = path or cls.default_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(
                yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {config_path}: {exc}") from exc
        return config_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
