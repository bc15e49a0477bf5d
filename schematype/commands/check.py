"""Check and atoms command implementations."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import ValidatorConfig
from ..constraints.wording import WORDINGS
from ..errors import ErrorCollector
from ..pointer import JsonPointer

console = Console()
err = Console(stderr=True)


def run_check(
    declared: Any,
    value: Any,
    config: ValidatorConfig,
    path: JsonPointer | None = None,
) -> int:
    """
    Check one value against a declared ``type``.

    Args:
        declared: Decoded ``type`` field (name, list or sub-schema)
        value: Decoded value to check
        config: Validator settings
        path: Location reported in error records

    Returns:
        Exit code (0 = value matches, 1 = type errors found)
    """
    factory = config.build_factory()
    errors = ErrorCollector()
    factory.create_instance_for("type", sink=errors).check(value, {"type": declared}, path or JsonPointer())

    if errors.is_valid():
        console.print("[green]✓[/green] Value matches declared type")
        return 0

    err.print(f"[yellow]⚠[/yellow] Found {len(errors)} type error(s):")
    for record in errors.errors:
        err.print(f"  [red]✗[/red] {escape(str(record))}", highlight=False)
    return 1


def run_atoms() -> int:
    """Print the wording catalog."""
    table = Table(title="Type Atoms")
    table.add_column("Atom", style="cyan")
    table.add_column("Wording")

    for atom, phrase in WORDINGS.items():
        table.add_row(atom.value, phrase or "-", style=None if phrase else "dim")

    console.print(table)
    console.print(f"\n[dim]Total: {len(WORDINGS)} atoms[/dim]")
    return 0
