"""Configuration loading and validation."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from scriptsmith.errors import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["Config", "DEFAULT_TITLE", "DEFAULTS"]

DEFAULT_TITLE = "AI Lab Install Script Builder"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULTS: dict[str, Any] = {
    "generator": {
        "title": DEFAULT_TITLE,
        "strict": False,
        "apply_input_defaults": False,
    },
    "registry": {
        "path": None,
    },
    "logging": {
        "level": "WARNING",
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class _GeneratorSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    strict: bool
    apply_input_defaults: bool


class _RegistrySection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str | Path | None = None


class _LoggingSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level


class _ConfigModel(BaseModel):
    """Shape of the merged configuration. Unknown top-level sections pass through."""

    model_config = ConfigDict(extra="allow")

    generator: _GeneratorSection
    registry: _RegistrySection
    logging: _LoggingSection


class Config:
    """Configuration accessor with dot-path key support.

    Values passed in ``data`` are layered over :data:`DEFAULTS`, so
    ``Config().get("generator.strict")`` is ``False`` without any file.

    Raises:
        ConfigError: If a known key holds a value of the wrong type, or
            ``logging.level`` is not a standard level name.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        merged = _deep_merge(DEFAULTS, data or {})
        try:
            checked = _ConfigModel.model_validate(merged)
        except ValidationError as e:
            raise ConfigError(message=f"Invalid configuration: {e}", cause=e) from e
        merged["generator"] = checked.generator.model_dump()
        merged["registry"] = checked.registry.model_dump()
        merged["logging"] = checked.logging.model_dump()
        self._data: dict[str, Any] = merged

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or not a mapping.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigNotFoundError(config_path=str(config_path))

        content = config_path.read_text(encoding="utf-8")
        try:
            parsed = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file: {config_path}", cause=e) from e

        if parsed is None:
            parsed = {}
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Config file must be a YAML mapping: {config_path}")

        logger.debug("Loaded config from %s", config_path)
        return cls(parsed)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the effective configuration."""
        return copy.deepcopy(self._data)
