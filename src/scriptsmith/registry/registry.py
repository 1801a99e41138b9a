"""Read-only module registry built once from a catalog."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator

from scriptsmith.errors import ModuleNotFoundError
from scriptsmith.registry.index import build_index
from scriptsmith.registry.loader import load_default_registry, load_registry
from scriptsmith.registry.types import ModuleDefinition, TargetOS

if TYPE_CHECKING:
    from scriptsmith.config import Config

logger = logging.getLogger(__name__)

__all__ = ["Registry"]


class Registry:
    """Immutable lookup over module definitions.

    The registry is process-wide configuration: build it once, then share it
    between callers. Nothing mutates it after construction.
    """

    def __init__(self, modules: Iterable[ModuleDefinition]) -> None:
        self._modules: tuple[ModuleDefinition, ...] = tuple(modules)
        self._index: dict[str, ModuleDefinition] = build_index(self._modules)

    @classmethod
    def from_file(cls, path: str | Path) -> Registry:
        """Build a registry from a catalog YAML file."""
        return cls(load_registry(path))

    @classmethod
    def default(cls) -> Registry:
        """Build a registry from the bundled catalog."""
        return cls(load_default_registry())

    @classmethod
    def from_config(cls, config: Config) -> Registry:
        """Use ``registry.path`` from config, falling back to the bundled catalog."""
        path = config.get("registry.path")
        if path:
            logger.debug("Loading registry from configured path %s", path)
            return cls.from_file(path)
        return cls.default()

    # ----- Query Methods -----

    @property
    def index(self) -> dict[str, ModuleDefinition]:
        """The ID lookup used by the engine. Treat as read-only."""
        return self._index

    @property
    def modules(self) -> tuple[ModuleDefinition, ...]:
        """Definitions in catalog order, duplicates included."""
        return self._modules

    def get(self, module_id: str) -> ModuleDefinition | None:
        """Look up a module by ID. Returns None if not found."""
        return self._index.get(module_id)

    def require(self, module_id: str) -> ModuleDefinition:
        """Look up a module by ID.

        Raises:
            ModuleNotFoundError: If no module has this ID.
        """
        module = self._index.get(module_id)
        if module is None:
            raise ModuleNotFoundError(module_id=module_id)
        return module

    def has(self, module_id: str) -> bool:
        return module_id in self._index

    def list(
        self,
        tags: list[str] | None = None,
        prefix: str | None = None,
        category: str | None = None,
        target_os: TargetOS | str | None = None,
    ) -> list[str]:
        """Return module IDs in catalog order, optionally filtered.

        Args:
            tags: Keep modules carrying all of these tags.
            prefix: Keep IDs starting with this prefix.
            category: Keep modules in this category.
            target_os: Keep modules with a fragment for this OS.
        """
        ids = list(self._index)

        if prefix is not None:
            ids = [mid for mid in ids if mid.startswith(prefix)]
        if category is not None:
            ids = [mid for mid in ids if category in self._index[mid].category]
        if tags is not None:
            tag_set = set(tags)
            ids = [mid for mid in ids if tag_set.issubset(self._index[mid].tags)]
        if target_os is not None:
            ids = [mid for mid in ids if self._index[mid].supports(target_os)]

        return ids

    def dependents_of(self, module_id: str) -> list[str]:
        """IDs of modules that directly require ``module_id``."""
        return [mid for mid, module in self._index.items() if module_id in module.requires]

    def __iter__(self) -> Iterator[ModuleDefinition]:
        return iter(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._index

    @property
    def count(self) -> int:
        """Number of distinct module IDs."""
        return len(self._index)

    @property
    def module_ids(self) -> list[str]:
        """Sorted list of module IDs."""
        return sorted(self._index)
