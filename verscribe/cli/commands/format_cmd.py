"""``verscribe format TEMPLATE [PATH]`` — render an ad-hoc template.

The full pipeline runs first, so every token sees the same values as the
configured formats.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from verscribe.calculator import VersionCalculator
from verscribe.errors import VerscribeError

console = Console()


def format_cmd(
    template: str = typer.Argument(
        ...,
        help="Template to render, e.g. '{major}.{minor}-{branchname:suffix}'.",
    ),
    path: str = typer.Argument(
        ".",
        help="Path inside the git repository.",
    ),
) -> None:
    """Render TEMPLATE against the repository containing PATH."""
    try:
        context = VersionCalculator.default().calculate(path)
        rendered = context.render(template)
    except VerscribeError as exc:
        console.print(f"[bold red]{type(exc).__name__}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    typer.echo(rendered)
