"""Main Typer application — imports and registers all CLI commands.

Entry point: ``verscribe`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from verscribe.cli.commands.calc import calc_cmd
from verscribe.cli.commands.format_cmd import format_cmd
from verscribe.cli.commands.tokens_cmd import tokens_cmd
from verscribe.config import settings

app = typer.Typer(
    name="verscribe",
    help="verscribe: deterministic version strings from git and a template.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="calc", help="Calculate the version of a repository.")(calc_cmd)
app.command(name="format", help="Render a template against a repository.")(format_cmd)
app.command(name="tokens", help="List available template tokens.")(tokens_cmd)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        settings.log_level,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Configure logging to stderr before any command runs."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
