"""Script assembly: render resolved modules into one shell script."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from scriptsmith.config import DEFAULT_TITLE
from scriptsmith.engine.substitution import apply_substitution, escape_for_double_quotes, find_placeholders
from scriptsmith.engine.types import GenerationResult
from scriptsmith.registry.types import ModuleDefinition, TargetOS, parse_os

logger = logging.getLogger(__name__)

__all__ = [
    "HEADER_RULE",
    "BANNER_RULE",
    "assemble",
    "render_header",
    "render_footer",
    "render_banner",
    "render_skip_notice",
]

HEADER_RULE = "=" * 36
BANNER_RULE = "-" * 44


def render_header(target_os: TargetOS, title: str = DEFAULT_TITLE) -> str:
    return (
        "#!/usr/bin/env bash\n"
        "set -e\n"
        "\n"
        f'echo "{HEADER_RULE}"\n'
        f'echo "{escape_for_double_quotes(title)} - RUN"\n'
        f'echo "OS: {target_os.value}"\n'
        f'echo "{HEADER_RULE}"\n'
    )


def render_footer() -> str:
    return (
        "\n"
        f'echo "{HEADER_RULE}"\n'
        'echo "[DONE] Script finished."\n'
        f'echo "{HEADER_RULE}"\n'
    )


def render_banner(module: ModuleDefinition) -> str:
    return f"\n# {BANNER_RULE}\n# {module.name} ({module.id})\n# {BANNER_RULE}\n"


def render_skip_notice(module: ModuleDefinition, target_os: TargetOS) -> str:
    name = escape_for_double_quotes(module.name)
    return f'echo "[SKIP] {name} (not supported on {target_os.value})"'


def assemble(
    ordered_ids: Sequence[str],
    index: Mapping[str, ModuleDefinition],
    target_os: TargetOS | str,
    variables: Mapping[str, str],
    title: str = DEFAULT_TITLE,
) -> GenerationResult:
    """Concatenate the header, one block per module, and the footer.

    A module without a fragment for ``target_os`` yields a single skip
    notice line in place of its block. ``included_ids`` on the result is
    ``ordered_ids`` as given, whatever text each module produced.
    """
    target_os = parse_os(target_os)
    blocks: list[str] = [render_header(target_os, title)]
    skipped: list[str] = []
    missing: dict[str, None] = {}

    for module_id in ordered_ids:
        module = index.get(module_id)
        if module is None:
            continue

        fragment = module.script_for(target_os)
        if not fragment:
            logger.debug("Module '%s' has no script for %s", module_id, target_os.value)
            blocks.append(render_skip_notice(module, target_os))
            skipped.append(module_id)
            continue

        for name in find_placeholders(fragment):
            if variables.get(name) is None:
                missing[name] = None

        blocks.append(render_banner(module))
        blocks.append(apply_substitution(fragment, variables))

    blocks.append(render_footer())

    return GenerationResult(
        script_text="\n".join(blocks),
        included_ids=list(ordered_ids),
        skipped_ids=skipped,
        missing_variables=list(missing),
    )
