"""Configuration management for ghosttext."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "ghosttext"
DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "settings" / "defaults.yaml"
USER_SETTINGS_PATH = CONFIG_DIR / "settings.yaml"


@dataclass(frozen=True)
class CompletionSettings:
    """Tunables for the completion formatting pipeline."""

    duplicate_line_similarity: float = 0.8
    current_line_similarity: float = 0.6
    duplicate_line_lookahead: int = 3
    debug: bool = False

    @classmethod
    def from_mapping(cls, values: dict[str, Any] | None) -> "CompletionSettings":
        defaults = cls()
        resolved: dict[str, Any] = {}
        for spec in fields(cls):
            default = getattr(defaults, spec.name)
            raw = (values or {}).get(spec.name, default)
            resolved[spec.name] = _coerce(spec.name, raw, default)
        return cls(**resolved)


def _coerce(name: str, value: Any, default: Any) -> Any:
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        logger.warning(f"Setting completion.{name} must be a boolean, got {value!r}; using {default}")
        return default
    if isinstance(default, int):
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
        logger.warning(f"Setting completion.{name} must be a non-negative integer, got {value!r}; using {default}")
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = -1.0
    if isinstance(value, bool) or not 0.0 <= number <= 1.0:
        logger.warning(f"Setting completion.{name} must be between 0 and 1, got {value!r}; using {default}")
        return default
    return number


class ConfigManager:
    """Loads default and user configuration and provides helpers to query values."""

    def __init__(self) -> None:
        self.defaults = self._load_yaml(DEFAULTS_PATH)
        if USER_SETTINGS_PATH.exists():
            self.user_settings = self._load_yaml(USER_SETTINGS_PATH)
        else:
            self.user_settings = {}
        self.settings = self._deep_merge(self.defaults, self.user_settings)

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    def get(self, key: str, default: Any | None = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def save(self) -> None:
        USER_SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with USER_SETTINGS_PATH.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(self.settings, handle)

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged: dict[str, Any] = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def completion_settings(self) -> CompletionSettings:
        """Build the formatter settings from the ``completion`` section."""

        section = self.settings.get("completion")
        return CompletionSettings.from_mapping(section if isinstance(section, dict) else None)

    def inline_enabled(self) -> bool:
        return bool(self.settings.get("inline", {}).get("enabled", True))

    def inline_delay_ms(self) -> int:
        return int(self.settings.get("inline", {}).get("delay_ms", 600))

    def log_level(self) -> int:
        name = str(self.settings.get("logging", {}).get("level", "INFO")).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            logger.warning(f"Unknown log level {name!r}; using INFO")
            return logging.INFO
        return level
