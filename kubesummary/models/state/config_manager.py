"""YAML-backed persistence for AppSettings."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubesummary.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "kubesummary" / "settings.yaml"


class ConfigManager:
    """Load, save and reset application settings on disk."""

    @staticmethod
    def load(path: Path | None = None) -> AppSettings:
        """Load settings from YAML, returning defaults when no file exists.

        Raises:
            ConfigLoadError: If the file exists but cannot be read or validated.
        """
        settings_path = path or DEFAULT_SETTINGS_PATH
        if not settings_path.exists():
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {settings_path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{settings_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc

    @staticmethod
    def save(settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings as YAML and return the written path."""
        settings_path = path or DEFAULT_SETTINGS_PATH
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            settings_path.write_text(
                yaml.safe_dump(settings.model_dump(), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {settings_path}: {exc}") from exc
        logger.debug("Saved settings to %s", settings_path)
        return settings_path

    @classmethod
    def reset(cls, path: Path | None = None) -> AppSettings:
        """Overwrite stored settings with defaults."""
        settings = AppSettings()
        cls.save(settings, path)
        return settings


__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
