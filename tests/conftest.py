"""Shared fixtures: small hand-built catalogs for engine and registry tests."""

from __future__ import annotations

from typing import Any

import pytest

from scriptsmith.registry.index import build_index
from scriptsmith.registry.registry import Registry
from scriptsmith.registry.types import InputDef, ModuleDefinition, TargetOS


def make_module(
    module_id: str,
    requires: tuple[str, ...] | list[str] = (),
    mac: str | None = "echo mac",
    ubuntu: str | None = "echo ubuntu",
    **kwargs: Any,
) -> ModuleDefinition:
    """Build a ModuleDefinition with a fragment per OS unless disabled."""
    scripts: dict[TargetOS, str] = {}
    if mac is not None:
        scripts[TargetOS.MAC] = mac
    if ubuntu is not None:
        scripts[TargetOS.UBUNTU] = ubuntu
    kwargs.setdefault("name", module_id.upper())
    return ModuleDefinition(id=module_id, requires=tuple(requires), script_by_os=scripts, **kwargs)


@pytest.fixture
def module_factory():
    """Return the make_module helper for tests that build their own catalogs."""
    return make_module


# === Catalogs ===


@pytest.fixture
def chain_modules() -> list[ModuleDefinition]:
    """dev.git_config -> dev.git -> base.homebrew -> base.clt, plus extras."""
    return [
        make_module("base.clt", name="Xcode Command Line Tools", ubuntu=None),
        make_module("base.homebrew", requires=["base.clt"], name="Homebrew"),
        make_module("dev.git", requires=["base.homebrew"], name="Git"),
        make_module(
            "dev.git_config",
            requires=["dev.git"],
            name="Git identity",
            mac='git config --global user.name "{{git_name}}"\ngit config --global user.email "{{git_email}}"',
            ubuntu='git config --global user.name "{{git_name}}"',
            inputs=(
                InputDef(key="git_name", label="Name", required=True),
                InputDef(key="git_email", label="Email", default_value="dev@example.com"),
            ),
        ),
        make_module("cli.jq", requires=["base.homebrew"], name="jq"),
        make_module("cli.rg", requires=["base.homebrew"], name="ripgrep"),
        make_module("verify.summary", name="Summary"),
    ]


@pytest.fixture
def chain_index(chain_modules: list[ModuleDefinition]) -> dict[str, ModuleDefinition]:
    return build_index(chain_modules)


@pytest.fixture
def chain_registry(chain_modules: list[ModuleDefinition]) -> Registry:
    return Registry(chain_modules)


@pytest.fixture
def cyclic_index() -> dict[str, ModuleDefinition]:
    """A requires B, B requires A; C requires itself."""
    return build_index(
        [
            make_module("A", requires=["B"]),
            make_module("B", requires=["A"]),
            make_module("C", requires=["C"]),
        ]
    )
