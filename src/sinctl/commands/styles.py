"""Command: list valid styles and sides."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sinctl.commands._base import SinCommand

if TYPE_CHECKING:
    from sinctl.commands._context import AppContext


@click.command(cls=SinCommand, examples="  sinctl styles\n  sinctl --json styles")
@click.pass_obj
def styles(app: AppContext) -> None:
    """List the 26 styles and both sides."""
    app.emit(app.service.list_styles())
