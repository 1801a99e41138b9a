"""Registry types: TargetOS, InputDef, ModuleDefinition."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from scriptsmith.errors import UnsupportedOSError

__all__ = [
    "TargetOS",
    "InputDef",
    "ModuleDefinition",
    "parse_os",
]


class TargetOS(str, Enum):
    """Operating systems a setup script can be generated for."""

    MAC = "mac"
    UBUNTU = "ubuntu"

    def __str__(self) -> str:
        return self.value


def parse_os(value: str | TargetOS) -> TargetOS:
    """Coerce an OS tag into a TargetOS.

    Raises:
        UnsupportedOSError: If the tag is not one of the supported values.
    """
    if isinstance(value, TargetOS):
        return value
    try:
        return TargetOS(value)
    except ValueError:
        raise UnsupportedOSError(os_tag=str(value), supported=[os.value for os in TargetOS]) from None


@dataclass(frozen=True)
class InputDef:
    """A user-supplied variable declared by a module.

    Attributes:
        key: Placeholder name used as ``{{key}}`` in fragments.
        label: Label shown when asking the user for a value.
        placeholder: Example value for the input field.
        required: Whether the module is meaningless without a value.
        sensitive: Whether the value should be masked when displayed.
        default_value: Value used when the caller supplies none.
        hint: One-line explanation.
    """

    key: str
    label: str
    placeholder: str | None = None
    required: bool = False
    sensitive: bool = False
    default_value: str | None = None
    hint: str | None = None


@dataclass(frozen=True)
class ModuleDefinition:
    """A named, OS-parameterized shell fragment with hard dependencies.

    Only ``id``, ``name``, ``requires`` and ``script_by_os`` matter to script
    generation. The remaining fields are catalog metadata for browsing.
    """

    id: str
    name: str
    requires: tuple[str, ...] = ()
    script_by_os: Mapping[TargetOS, str] = field(default_factory=dict)
    category: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    short_desc: str = ""
    suggests: tuple[str, ...] = ()
    inputs: tuple[InputDef, ...] = ()
    not_supported_reason: Mapping[TargetOS, str] = field(default_factory=dict)
    install_check: Mapping[TargetOS, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Per-OS mappings are copied into read-only views.
        for name in ("script_by_os", "not_supported_reason", "install_check"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def script_for(self, target_os: TargetOS | str) -> str | None:
        """Return the raw fragment for the OS, or None if the module has none."""
        return self.script_by_os.get(target_os)

    def supports(self, target_os: TargetOS | str) -> bool:
        return bool(self.script_for(target_os))
