"""Engine entry points: resolve a request and assemble its script."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from scriptsmith.config import DEFAULT_TITLE, Config
from scriptsmith.engine.assembler import assemble
from scriptsmith.engine.resolver import resolve
from scriptsmith.engine.types import GenerationRequest, GenerationResult
from scriptsmith.registry.registry import Registry
from scriptsmith.registry.types import ModuleDefinition, TargetOS

logger = logging.getLogger(__name__)

__all__ = ["generate", "ScriptGenerator"]


def generate(
    request: GenerationRequest,
    index: Mapping[str, ModuleDefinition],
    *,
    strict: bool = False,
    title: str = DEFAULT_TITLE,
) -> GenerationResult:
    """Resolve the selection and assemble the script.

    Pure function of its arguments. In the default lenient mode nothing in
    the request makes it raise.
    """
    ordered = resolve(request.selected_ids, index, strict=strict)
    return assemble(ordered, index, request.target_os, request.variables, title=title)


class ScriptGenerator:
    """Binds a registry and configuration for repeated generation calls.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, registry: Registry, config: Config | None = None) -> None:
        self._registry = registry
        self._config = config if config is not None else Config()

    @property
    def registry(self) -> Registry:
        return self._registry

    def generate(self, request: GenerationRequest, strict: bool | None = None) -> GenerationResult:
        """Generate a script for ``request``.

        Args:
            request: OS, selection and variables.
            strict: Override ``generator.strict`` from config for this call.
        """
        if strict is None:
            strict = bool(self._config.get("generator.strict", False))
        title = self._config.get("generator.title", DEFAULT_TITLE)

        variables = dict(request.variables)
        if self._config.get("generator.apply_input_defaults", False):
            variables = self._with_input_defaults(request.selected_ids, variables, strict)
        effective = GenerationRequest(
            target_os=request.target_os,
            selected_ids=list(request.selected_ids),
            variables=variables,
        )

        result = generate(effective, self._registry.index, strict=strict, title=title)
        self._warn_missing_required(result, variables)
        return result

    def generate_script(
        self,
        target_os: TargetOS | str,
        selected_ids: Sequence[str],
        variables: Mapping[str, str] | None = None,
    ) -> GenerationResult:
        """Shorthand for ``generate(GenerationRequest(...))``."""
        request = GenerationRequest(
            target_os=target_os,
            selected_ids=list(selected_ids),
            variables=dict(variables or {}),
        )
        return self.generate(request)

    def _with_input_defaults(
        self, selected_ids: Sequence[str], variables: dict[str, str], strict: bool
    ) -> dict[str, str]:
        merged = dict(variables)
        for module_id in resolve(selected_ids, self._registry.index, strict=strict):
            for input_def in self._registry.index[module_id].inputs:
                if input_def.default_value is not None and merged.get(input_def.key) is None:
                    merged[input_def.key] = input_def.default_value
        return merged

    def _warn_missing_required(self, result: GenerationResult, variables: Mapping[str, str]) -> None:
        for module_id in result.included_ids:
            if module_id in result.skipped_ids:
                continue
            for input_def in self._registry.index[module_id].inputs:
                if input_def.required and not variables.get(input_def.key):
                    logger.warning(
                        "Required input '%s' for module '%s' has no value; substituting empty string",
                        input_def.key,
                        module_id,
                    )
