"""Placeholder substitution for script fragments."""

from __future__ import annotations

import re
from typing import Mapping

__all__ = [
    "PLACEHOLDER_PATTERN",
    "apply_substitution",
    "escape_for_double_quotes",
    "find_placeholders",
]

PLACEHOLDER_PATTERN = re.compile(r"\{\{([a-zA-Z0-9_]+)\}\}")


def escape_for_double_quotes(value: str) -> str:
    """Escape a value for use inside a double-quoted shell string.

    Backslash goes first so the escapes added afterwards are not doubled.
    This only holds when the placeholder sits inside ``"..."`` in the
    template; values used unquoted are not made safe by it.
    """
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("`", "\\`")
    )


def apply_substitution(template: str, variables: Mapping[str, str]) -> str:
    """Replace every ``{{name}}`` placeholder with its escaped value.

    Missing names become the empty string. Braces that do not form a
    placeholder are left as they are.
    """

    def _replace(match: re.Match[str]) -> str:
        raw = variables.get(match.group(1))
        return escape_for_double_quotes(raw if raw is not None else "")

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def find_placeholders(template: str) -> list[str]:
    """Placeholder names in order of first appearance, without repeats."""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))
