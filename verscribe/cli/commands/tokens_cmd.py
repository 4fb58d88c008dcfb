"""``verscribe tokens`` — list the registered template tokens."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from verscribe.tokens.registry import DEFAULT_REGISTRY

console = Console()


def tokens_cmd() -> None:
    """List available tokens with their default options."""
    table = Table(title="Tokens")
    table.add_column("Key", style="cyan")
    table.add_column("Default", style="green")
    table.add_column("Description")

    for key in DEFAULT_REGISTRY.keys():
        token = DEFAULT_REGISTRY.get(key)
        table.add_row(key, repr(token.default_option), token.description)

    console.print(table)
