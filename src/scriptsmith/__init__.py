"""scriptsmith - assemble setup scripts from dependency-aware shell modules."""

from __future__ import annotations

# Registry
from scriptsmith.registry import (
    InputDef,
    ModuleDefinition,
    Registry,
    TargetOS,
    build_index,
    load_registry,
    validate_registry,
)

# Engine
from scriptsmith.engine import (
    GenerationRequest,
    GenerationResult,
    ScriptGenerator,
    apply_substitution,
    assemble,
    escape_for_double_quotes,
    generate,
    resolve,
)

# Config
from scriptsmith.config import Config

# Errors
from scriptsmith.errors import (
    CircularDependencyError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidInputError,
    ModuleNotFoundError,
    ScriptsmithError,
    UnsupportedOSError,
)

__version__ = "0.1.0"

__all__ = [
    # Registry
    "InputDef",
    "ModuleDefinition",
    "Registry",
    "TargetOS",
    "build_index",
    "load_registry",
    "validate_registry",
    # Engine
    "GenerationRequest",
    "GenerationResult",
    "ScriptGenerator",
    "apply_substitution",
    "assemble",
    "escape_for_double_quotes",
    "generate",
    "resolve",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "ScriptsmithError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidInputError",
    "ModuleNotFoundError",
    "CircularDependencyError",
    "UnsupportedOSError",
]
