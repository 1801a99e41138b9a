"""Script generation engine: resolution, substitution and assembly."""

from __future__ import annotations

from scriptsmith.engine.assembler import assemble
from scriptsmith.engine.generator import ScriptGenerator, generate
from scriptsmith.engine.resolver import resolve, unique_keep_order
from scriptsmith.engine.substitution import (
    PLACEHOLDER_PATTERN,
    apply_substitution,
    escape_for_double_quotes,
    find_placeholders,
)
from scriptsmith.engine.types import GenerationRequest, GenerationResult

__all__ = [
    "GenerationRequest",
    "GenerationResult",
    "PLACEHOLDER_PATTERN",
    "ScriptGenerator",
    "apply_substitution",
    "assemble",
    "escape_for_double_quotes",
    "find_placeholders",
    "generate",
    "resolve",
    "unique_keep_order",
]
