"""Catalog validation: content problems a module author should fix."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from typing import Sequence

from scriptsmith.registry.index import build_index
from scriptsmith.registry.types import ModuleDefinition

__all__ = ["validate_registry", "find_cycle"]


def validate_registry(modules: Sequence[ModuleDefinition]) -> list[str]:
    """Check a module list for authoring problems.

    Returns a list of problem strings. Empty list means valid. Generation
    tolerates every problem reported here; this is a lint, not a gate.
    """
    errors: list[str] = []

    counts = Counter(m.id for m in modules)
    for module_id, count in counts.items():
        if count > 1:
            errors.append(f"Duplicate module id '{module_id}' ({count} definitions, last one wins)")

    index = build_index(modules)
    for module in index.values():
        if not any(module.script_by_os.values()):
            errors.append(f"Module '{module.id}' has no script for any OS")
        for dep in module.requires:
            if dep == module.id:
                errors.append(f"Module '{module.id}' requires itself")
            elif dep not in index:
                errors.append(f"Module '{module.id}' requires unknown module '{dep}'")
        for suggestion in module.suggests:
            if suggestion not in index:
                errors.append(f"Module '{module.id}' suggests unknown module '{suggestion}'")

    cycle = find_cycle(index)
    if cycle is not None:
        errors.append(f"Dependency cycle: {' -> '.join(cycle)}")

    return errors


def find_cycle(index: dict[str, ModuleDefinition]) -> list[str] | None:
    """Return one dependency cycle path, or None if requirements are acyclic.

    Uses Kahn's topological sort; whatever cannot be ordered lies on or
    behind a cycle. Self-requirements and unknown IDs are ignored here.
    """
    graph: dict[str, set[str]] = defaultdict(set)
    in_degree: dict[str, int] = {mod_id: 0 for mod_id in index}

    for mod_id, module in index.items():
        for dep in set(module.requires):
            if dep == mod_id or dep not in index:
                continue
            graph[dep].add(mod_id)
            in_degree[mod_id] += 1

    queue: deque[str] = deque(sorted(mod_id for mod_id, degree in in_degree.items() if degree == 0))
    ordered: set[str] = set()
    while queue:
        mod_id = queue.popleft()
        ordered.add(mod_id)
        for dependent in sorted(graph.get(mod_id, set())):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    remaining = [mod_id for mod_id in index if mod_id not in ordered]
    if not remaining:
        return None
    return _extract_cycle(index, set(remaining), remaining[0])


def _extract_cycle(index: dict[str, ModuleDefinition], remaining: set[str], start: str) -> list[str]:
    """Follow requirement edges inside ``remaining`` until a node repeats."""
    visited: list[str] = [start]
    visited_set: set[str] = {start}
    current = start

    while True:
        nexts = [d for d in index[current].requires if d in remaining and d != current]
        if not nexts:
            break
        nxt = nexts[0]
        if nxt in visited_set:
            idx = visited.index(nxt)
            return visited[idx:] + [nxt]
        visited.append(nxt)
        visited_set.add(nxt)
        current = nxt

    return sorted(remaining) + [sorted(remaining)[0]]
