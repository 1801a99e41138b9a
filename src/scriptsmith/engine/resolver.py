"""Dependency resolution: expand a selection into an ordered, closed ID list."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping, Sequence

from scriptsmith.errors import CircularDependencyError, ModuleNotFoundError
from scriptsmith.registry.types import ModuleDefinition

logger = logging.getLogger(__name__)

__all__ = ["resolve", "unique_keep_order"]


def resolve(
    selected_ids: Sequence[str],
    index: Mapping[str, ModuleDefinition],
    strict: bool = False,
) -> list[str]:
    """Expand selected module IDs with their transitive hard dependencies.

    Depth-first and dependency-first: a module is appended only after every
    module it requires, so the result is a topological order. Selected IDs
    are walked in the given order, which makes a shared dependency land
    immediately before the first selected module that needs it.

    IDs are marked visited before their requirements are walked, so a cycle
    is cut at its second visit instead of recursing forever. Unknown IDs
    contribute nothing.

    Args:
        selected_ids: Module IDs in caller order (duplicates allowed).
        index: Module ID to definition lookup.
        strict: Raise on unknown IDs and cycles instead of skipping them.

    Returns:
        Duplicate-free list of module IDs, dependencies first.

    Raises:
        ModuleNotFoundError: strict mode only, for an unknown ID.
        CircularDependencyError: strict mode only, for a requirement cycle.
    """
    visited: set[str] = set()
    out: list[str] = []

    for root in selected_ids:
        if root in visited:
            continue
        visited.add(root)
        module = index.get(root)
        if module is None:
            _unknown(root, None, strict)
            continue

        # Explicit stack of (module id, remaining requirements) in place of recursion.
        stack: list[tuple[str, Iterator[str]]] = [(root, iter(module.requires))]
        on_path: list[str] = [root]
        while stack:
            current, pending = stack[-1]
            for dep in pending:
                if dep in visited:
                    if dep in on_path:
                        _cycle(on_path, dep, strict)
                    continue
                visited.add(dep)
                dep_module = index.get(dep)
                if dep_module is None:
                    _unknown(dep, current, strict)
                    continue
                stack.append((dep, iter(dep_module.requires)))
                on_path.append(dep)
                break
            else:
                stack.pop()
                on_path.pop()
                out.append(current)

    return unique_keep_order(out)


def unique_keep_order(ids: Iterable[str]) -> list[str]:
    """Drop repeated IDs, keeping the first occurrence of each."""
    seen: set[str] = set()
    result: list[str] = []
    for module_id in ids:
        if module_id in seen:
            continue
        seen.add(module_id)
        result.append(module_id)
    return result


def _unknown(module_id: str, required_by: str | None, strict: bool) -> None:
    if strict:
        raise ModuleNotFoundError(module_id=module_id, required_by=required_by)
    if required_by is None:
        logger.debug("Skipping unknown selected module '%s'", module_id)
    else:
        logger.debug("Skipping unknown module '%s' required by '%s'", module_id, required_by)


def _cycle(on_path: list[str], dep: str, strict: bool) -> None:
    cycle_path = on_path[on_path.index(dep):] + [dep]
    if strict:
        raise CircularDependencyError(cycle_path=cycle_path)
    logger.debug("Dependency cycle cut: %s", " -> ".join(cycle_path))
