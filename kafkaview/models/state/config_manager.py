"""Load and save :class:`AppSettings` as YAML."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from kafkaview.constants.defaults import LOG_FILE_NAME, SETTINGS_FILE_NAME
from kafkaview.constants.values import CONFIG_DIR_ENV
from kafkaview.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Settings persistence under the user's config directory.

    The directory is ``$KAFKAVIEW_CONFIG_DIR`` when set, otherwise
    ``~/.config/kafkaview``. A missing file yields default settings.
    """

    @staticmethod
    def config_dir() -> Path:
        override = os.environ.get(CONFIG_DIR_ENV, "").strip()
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / "kafkaview"

    @classmethod
    def settings_path(cls) -> Path:
        return cls.config_dir() / SETTINGS_FILE_NAME

    @classmethod
    def default_log_file(cls) -> Path:
        return cls.config_dir() / LOG_FILE_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Read settings from ``path`` (default: :meth:`settings_path`).

        Raises:
            ConfigLoadError: The file exists but is unreadable or invalid.
        """
        path = path or cls.settings_path()
        if not path.exists():
            logger.debug("No settings file at %s, using defaults", path)
            return AppSettings()
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{path} must contain a mapping")
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to ``path`` (default: :meth:`settings_path`).

        Raises:
            ConfigSaveError: The file could not be written.
        """
        path = path or cls.settings_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                yaml.safe_dump(settings.model_dump(), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {path}: {exc}") from exc
        logger.debug("Settings saved to %s", path)
        return path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
