"""CLI entrypoint for schematype."""

import json
import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import ValidatorConfig, load_config
from .constraints import UnknownTypeAtomError
from .pointer import JsonPointer


def _parse_json(text: str, param_hint: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Not valid JSON: {e}", param_hint=param_hint) from e


@click.group()
@click.version_option(__version__, prog_name="schematype")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [validator] table",
)
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """schematype - Check values against a JSON Schema ``type`` declaration."""
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if config_path is None:
        ctx.obj["config"] = ValidatorConfig()
        return
    try:
        ctx.obj["config"] = load_config(config_path)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("declared_type", metavar="TYPE_JSON")
@click.argument("value_json", metavar="VALUE_JSON")
@click.option("--loose", is_flag=True, help="Classify mappings and tuples with the loose strategy")
@click.option(
    "--path",
    "pointer",
    type=str,
    default="#",
    metavar="POINTER",
    help="JSON pointer reported with errors (e.g., '#/items/0')",
)
@click.pass_context
def check(ctx: click.Context, declared_type: str, value_json: str, loose: bool, pointer: str) -> None:
    """Check VALUE_JSON against TYPE_JSON.

    Both arguments are JSON literals, for example:

        schematype check '["integer", "null"]' '1.5'
    """
    from .commands.check import run_check

    declared = _parse_json(declared_type, "TYPE_JSON")
    value = _parse_json(value_json, "VALUE_JSON")
    try:
        path = JsonPointer.parse(pointer)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--path") from e

    config: ValidatorConfig = ctx.obj["config"]
    if loose:
        config = ValidatorConfig(type_check="loose")

    try:
        exit_code = run_check(declared, value, config, path)
    except UnknownTypeAtomError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


@cli.command()
def atoms() -> None:
    """List the type atoms and their message wording."""
    from .commands.check import run_atoms

    sys.exit(run_atoms())


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
