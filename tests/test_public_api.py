"""Tests for the scriptsmith public API surface.

Verifies that all expected names are importable from the top-level
``scriptsmith`` package and that ``__all__`` is comprehensive.
"""

import re

import pytest

import scriptsmith


class TestPublicAPIImports:
    """Every public component must be importable from ``import scriptsmith``."""

    @pytest.mark.parametrize(
        "name",
        [
            "Registry",
            "ModuleDefinition",
            "InputDef",
            "TargetOS",
            "GenerationRequest",
            "GenerationResult",
            "ScriptGenerator",
            "Config",
            "generate",
            "resolve",
            "assemble",
            "apply_substitution",
            "escape_for_double_quotes",
            "build_index",
            "load_registry",
            "validate_registry",
        ],
    )
    def test_core_names(self, name):
        assert getattr(scriptsmith, name) is not None

    def test_errors_importable(self):
        from scriptsmith import (
            CircularDependencyError,
            ConfigError,
            ConfigNotFoundError,
            InvalidInputError,
            ModuleNotFoundError,
            ScriptsmithError,
            UnsupportedOSError,
        )

        for error_cls in (
            CircularDependencyError,
            ConfigError,
            ConfigNotFoundError,
            InvalidInputError,
            ModuleNotFoundError,
            UnsupportedOSError,
        ):
            assert issubclass(error_cls, ScriptsmithError)


class TestAllList:
    def test_every_name_in_all_exists(self):
        for name in scriptsmith.__all__:
            assert hasattr(scriptsmith, name), name

    def test_no_duplicates(self):
        assert len(scriptsmith.__all__) == len(set(scriptsmith.__all__))


class TestVersion:
    def test_version_format(self):
        assert re.match(r"^\d+\.\d+\.\d+", scriptsmith.__version__)


class TestEndToEnd:
    def test_bundled_catalog_generation(self):
        generator = scriptsmith.ScriptGenerator(scriptsmith.Registry.default())
        result = generator.generate_script("mac", ["dev.git_config"], {"git_name": "Jane", "git_email": "j@x.io"})
        assert result.included_ids == ["base.clt", "base.homebrew", "dev.git", "dev.git_config"]
        assert result.missing_variables == []
        assert 'git config --global user.name "Jane"' in result.script_text
