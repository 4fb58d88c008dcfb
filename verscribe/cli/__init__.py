"""verscribe CLI — Typer-based command-line interface.

Provides the ``verscribe`` command with subcommands for calculating a
repository's version, rendering ad-hoc templates and listing tokens.

All output uses Rich for formatted terminal display.
"""
