"""Command: compare two SIN tokens field by field."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sinctl.commands._base import SinCommand

if TYPE_CHECKING:
    from sinctl.commands._context import AppContext


@click.command(
    cls=SinCommand,
    examples="""\
  sinctl compare C c   # same style, different side
  sinctl compare C S   # same side, different style""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def compare(app: AppContext, left: str, right: str) -> None:
    """Compare the style and side of LEFT and RIGHT."""
    app.emit(app.service.compare(left, right))
