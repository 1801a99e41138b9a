"""ID lookup over a module list."""

from __future__ import annotations

import logging
from typing import Iterable

from scriptsmith.registry.types import ModuleDefinition

logger = logging.getLogger(__name__)

__all__ = ["build_index"]


def build_index(modules: Iterable[ModuleDefinition]) -> dict[str, ModuleDefinition]:
    """Map module ID to definition for O(1) lookup.

    Input order does not matter. Duplicate IDs are not an error: the last
    definition wins. Use ``validate_registry`` to catch duplicates up front.
    """
    index: dict[str, ModuleDefinition] = {}
    for module in modules:
        if module.id in index:
            logger.debug("Duplicate module id '%s', later definition wins", module.id)
        index[module.id] = module
    return index
