"""Catalog loading: YAML module lists into ModuleDefinition objects."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scriptsmith.errors import ConfigError, ConfigNotFoundError
from scriptsmith.registry.types import InputDef, ModuleDefinition, TargetOS

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "load_registry",
    "load_default_registry",
    "parse_module",
]

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "catalog" / "default.yaml"


class _InputEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: str = Field(pattern=r"^[a-zA-Z0-9_]+$")
    label: str
    placeholder: str | None = None
    required: bool = False
    sensitive: bool = False
    default_value: str | None = None
    hint: str | None = None


class _ModuleEntry(BaseModel):
    """Shape of one catalog entry."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    requires: list[str] = Field(default_factory=list)
    script: dict[TargetOS, str] = Field(default_factory=dict)
    category: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    short_desc: str = ""
    suggests: list[str] = Field(default_factory=list)
    inputs: list[_InputEntry] = Field(default_factory=list)
    not_supported_reason: dict[TargetOS, str] = Field(default_factory=dict)
    install_check: dict[TargetOS, str] = Field(default_factory=dict)


def parse_module(raw: dict[str, Any]) -> ModuleDefinition:
    """Validate one raw catalog entry and convert it to a ModuleDefinition.

    Raises:
        ConfigError: If the entry does not match the catalog shape.
    """
    try:
        entry = _ModuleEntry.model_validate(raw)
    except ValidationError as e:
        label = raw.get("id", "<unknown>") if isinstance(raw, dict) else "<unknown>"
        raise ConfigError(message=f"Invalid module entry '{label}': {e}", cause=e) from e

    return ModuleDefinition(
        id=entry.id,
        name=entry.name,
        requires=tuple(entry.requires),
        script_by_os=dict(entry.script),
        category=tuple(entry.category),
        tags=tuple(entry.tags),
        short_desc=entry.short_desc,
        suggests=tuple(entry.suggests),
        inputs=tuple(InputDef(**item.model_dump()) for item in entry.inputs),
        not_supported_reason=dict(entry.not_supported_reason),
        install_check=dict(entry.install_check),
    )


def load_registry(path: str | Path) -> list[ModuleDefinition]:
    """Load a module catalog YAML file.

    The file must be a mapping with a ``modules`` list.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the YAML is invalid or an entry is malformed.
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise ConfigNotFoundError(config_path=str(catalog_path))

    content = catalog_path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in catalog file: {catalog_path}", cause=e) from e

    if not isinstance(parsed, dict) or "modules" not in parsed:
        raise ConfigError(message=f"Catalog must contain a 'modules' list: {catalog_path}")

    entries = parsed["modules"]
    if not isinstance(entries, list):
        raise ConfigError(message=f"Catalog must contain a 'modules' list: {catalog_path}")

    modules: list[ModuleDefinition] = []
    for position, raw in enumerate(entries):
        if not isinstance(raw, dict):
            raise ConfigError(message=f"Catalog entry #{position} must be a mapping: {catalog_path}")
        modules.append(parse_module(raw))

    logger.debug("Loaded %d modules from %s", len(modules), catalog_path)
    return modules


def load_default_registry() -> list[ModuleDefinition]:
    """Load the catalog bundled with the package."""
    return load_registry(DEFAULT_CATALOG_PATH)
