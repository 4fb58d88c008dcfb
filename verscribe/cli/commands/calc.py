"""``verscribe calc [PATH]`` — calculate the version of a repository.

Prints the full result as JSON (default), as a table, or a single field
for use in scripts.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from verscribe.calculator import VersionCalculator
from verscribe.errors import VerscribeError
from verscribe.models.result import VersionResult

console = Console()

_OUTPUT_FORMATS = ("json", "table")


def _render_table(result: VersionResult) -> Table:
    table = Table(title="Version")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for name, value in result.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(name, "" if value is None else str(value))
    return table


def calc_cmd(
    path: str = typer.Argument(
        ".",
        help="Path inside the git repository.",
    ),
    output: str = typer.Option(
        "json",
        "--output",
        "-o",
        help="Output format: json or table.",
    ),
    field: str = typer.Option(
        None,
        "--field",
        "-f",
        help="Print only this result field (e.g. semver2).",
    ),
) -> None:
    """Calculate the version for the repository containing PATH."""
    if output not in _OUTPUT_FORMATS:
        console.print(f"[bold red]Unknown output format:[/bold red] {output}")
        raise typer.Exit(code=2)

    try:
        result = VersionCalculator.default().get_result(path)
    except VerscribeError as exc:
        console.print(f"[bold red]{type(exc).__name__}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if field is not None:
        if field not in VersionResult.model_fields:
            console.print(f"[bold red]Unknown field:[/bold red] {field}")
            raise typer.Exit(code=2)
        value = getattr(result, field)
        if isinstance(value, list):
            value = ", ".join(value)
        typer.echo("" if value is None else value)
        return

    if output == "table":
        console.print(_render_table(result))
    else:
        typer.echo(result.model_dump_json(indent=2))
