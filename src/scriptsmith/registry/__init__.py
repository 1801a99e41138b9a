"""Module catalog: definitions, lookup, loading and validation.

Usage::

    from scriptsmith.registry import Registry

    registry = Registry.default()
    registry.list(target_os="mac")
"""

from __future__ import annotations

from scriptsmith.registry.index import build_index
from scriptsmith.registry.loader import (
    DEFAULT_CATALOG_PATH,
    load_default_registry,
    load_registry,
    parse_module,
)
from scriptsmith.registry.registry import Registry
from scriptsmith.registry.types import InputDef, ModuleDefinition, TargetOS, parse_os
from scriptsmith.registry.validation import find_cycle, validate_registry

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "InputDef",
    "ModuleDefinition",
    "Registry",
    "TargetOS",
    "build_index",
    "find_cycle",
    "load_default_registry",
    "load_registry",
    "parse_module",
    "parse_os",
    "validate_registry",
]
