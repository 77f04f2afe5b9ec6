"""Subcommand modules for sinctl.

Provides register_commands() which uses deferred imports to keep
``sinctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from sinctl.commands.compare import compare
    from sinctl.commands.parse import parse
    from sinctl.commands.styles import styles
    from sinctl.commands.transform import convert, flip
    from sinctl.commands.validate import validate

    cli.add_command(parse)
    cli.add_command(validate)
    cli.add_command(flip)
    cli.add_command(convert)
    cli.add_command(compare)
    cli.add_command(styles)
