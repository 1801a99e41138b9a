"""
scriptsmith CLI.

Usage:
    scriptsmith list --os mac
    scriptsmith show dev.git_config
    scriptsmith generate --os mac -m dev.git_config --var git_name="Jane Doe"
    scriptsmith check
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from scriptsmith import __version__
from scriptsmith.config import Config
from scriptsmith.engine.generator import ScriptGenerator
from scriptsmith.engine.types import GenerationRequest
from scriptsmith.errors import InvalidInputError, ScriptsmithError
from scriptsmith.registry.registry import Registry
from scriptsmith.registry.types import TargetOS
from scriptsmith.registry.validation import validate_registry

logger = logging.getLogger(__name__)

OS_CHOICES = [tag.value for tag in TargetOS]


def _fail(error: ScriptsmithError) -> None:
    click.secho(f"❌ {error}", fg="red", err=True)
    sys.exit(1)


def _load(ctx: click.Context) -> tuple[Config, Registry]:
    """Build config and registry once per invocation."""
    if "registry" not in ctx.obj:
        config_path: Path | None = ctx.obj.get("config_path")
        registry_path: Path | None = ctx.obj.get("registry_path")
        try:
            config = Config.load(config_path) if config_path else Config()
            registry = Registry.from_file(registry_path) if registry_path else Registry.from_config(config)
        except ScriptsmithError as e:
            _fail(e)
        if not ctx.obj.get("level_from_flags"):
            logging.getLogger().setLevel(str(config.get("logging.level", "WARNING")).upper())
        ctx.obj["config"] = config
        ctx.obj["registry"] = registry
    return ctx.obj["config"], ctx.obj["registry"]


def _parse_vars(pairs: tuple[str, ...]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint="--var")
        variables[key] = value
    return variables


@click.group()
@click.version_option(version=__version__, prog_name="scriptsmith")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a scriptsmith YAML config file.",
)
@click.option(
    "--registry",
    "-r",
    "registry_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a module catalog YAML (default: bundled catalog).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    debug: bool,
    config_path: str | None,
    registry_path: str | None,
) -> None:
    """scriptsmith: build setup scripts from shell modules."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["registry_path"] = Path(registry_path) if registry_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"
    ctx.obj["level_from_flags"] = debug or verbose
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command("list")
@click.option("--os", "target_os", type=click.Choice(OS_CHOICES), default=None, help="Only modules supported on this OS.")
@click.option("--tag", "tags", multiple=True, help="Only modules carrying this tag (repeatable).")
@click.option("--category", default=None, help="Only modules in this category.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_modules(
    ctx: click.Context,
    target_os: str | None,
    tags: tuple[str, ...],
    category: str | None,
    as_json: bool,
) -> None:
    """List catalog modules."""
    _, registry = _load(ctx)
    ids = registry.list(tags=list(tags) or None, category=category, target_os=target_os)

    if as_json:
        payload = [
            {
                "id": mid,
                "name": registry.require(mid).name,
                "requires": list(registry.require(mid).requires),
                "os": [tag.value for tag in TargetOS if registry.require(mid).supports(tag)],
            }
            for mid in ids
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    if not ids:
        click.secho("No modules match.", fg="yellow")
        return

    click.secho(f"📦 Modules ({len(ids)}):", fg="cyan", bold=True)
    for mid in ids:
        module = registry.require(mid)
        requires = f" ← {', '.join(module.requires)}" if module.requires else ""
        click.echo(f"   • {mid}  {module.name}{requires}")


@cli.command()
@click.argument("module_id")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, module_id: str, as_json: bool) -> None:
    """Show one module: dependencies, inputs and OS support."""
    _, registry = _load(ctx)
    try:
        module = registry.require(module_id)
    except ScriptsmithError as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "id": module.id,
                    "name": module.name,
                    "description": module.short_desc,
                    "requires": list(module.requires),
                    "suggests": list(module.suggests),
                    "category": list(module.category),
                    "tags": list(module.tags),
                    "inputs": [
                        {"key": i.key, "label": i.label, "required": i.required, "default": i.default_value}
                        for i in module.inputs
                    ],
                    "os": [tag.value for tag in TargetOS if module.supports(tag)],
                },
                indent=2,
            )
        )
        return

    click.secho(f"\n📋 {module.name} ({module.id})", fg="cyan", bold=True)
    if module.short_desc:
        click.echo(f"   {module.short_desc}")
    if module.requires:
        click.echo(f"   Requires: {', '.join(module.requires)}")
    if module.suggests:
        click.echo(f"   Suggests: {', '.join(module.suggests)}")
    for tag in TargetOS:
        if module.supports(tag):
            click.echo(f"   {tag.value}: supported")
        else:
            reason = module.not_supported_reason.get(tag, "no script")
            click.echo(f"   {tag.value}: not supported ({reason})")
    for input_def in module.inputs:
        marker = " (required)" if input_def.required else ""
        click.echo(f"   Input {{{{{input_def.key}}}}}: {input_def.label}{marker}")


@cli.command()
@click.option("--os", "target_os", type=click.Choice(OS_CHOICES), default=None, help="Target operating system.")
@click.option("--module", "-m", "module_ids", multiple=True, help="Module ID to include (repeatable, order kept).")
@click.option("--var", "var_pairs", multiple=True, help="Variable as KEY=VALUE (repeatable).")
@click.option(
    "--request",
    "request_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON/YAML file with targetOS, selectedIds and variables.",
)
@click.option("--strict", is_flag=True, default=False, help="Fail on unknown modules and dependency cycles.")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write the script to this file.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output the full result as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    target_os: str | None,
    module_ids: tuple[str, ...],
    var_pairs: tuple[str, ...],
    request_path: str | None,
    strict: bool,
    output: str | None,
    as_json: bool,
) -> None:
    """Generate a setup script."""
    if as_json and output:
        raise click.UsageError("--json and --output cannot be combined")
    config, registry = _load(ctx)
    variables = _parse_vars(var_pairs)

    try:
        if request_path:
            try:
                raw = yaml.safe_load(Path(request_path).read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                raise InvalidInputError(message=f"Invalid request file {request_path}: {e}", cause=e) from e
            if target_os and isinstance(raw, dict):
                raw = {**raw, "targetOS": target_os}
            request = GenerationRequest.from_dict(raw)
            # Command-line flags extend the request file.
            request.selected_ids.extend(module_ids)
            request.variables.update(variables)
        else:
            if not target_os:
                raise click.UsageError("--os is required unless --request is given")
            request = GenerationRequest(target_os=target_os, selected_ids=list(module_ids), variables=variables)

        result = ScriptGenerator(registry, config).generate(request, strict=True if strict else None)
    except ScriptsmithError as e:
        _fail(e)

    logger.info("Generated script for %s with modules: %s", request.target_os.value, ", ".join(result.included_ids))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif output:
        path = Path(output)
        path.write_text(result.script_text, encoding="utf-8")
        path.chmod(0o755)
        click.secho(f"✅ Wrote {path} ({len(result.included_ids)} modules)", fg="green", err=True)
    else:
        click.echo(result.script_text, nl=False)

    if result.missing_variables:
        click.secho(f"⚠️  Missing variables: {', '.join(result.missing_variables)}", fg="yellow", err=True)


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Validate the module catalog."""
    _, registry = _load(ctx)
    problems = validate_registry(registry.modules)

    if not problems:
        click.secho(f"✅ Catalog OK ({registry.count} modules)", fg="green")
        return

    click.secho(f"❌ {len(problems)} problem(s):", fg="red", bold=True)
    for problem in problems:
        click.echo(f"   • {problem}")
    sys.exit(1)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
