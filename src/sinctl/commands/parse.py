"""Command: decompose a SIN token into style and side."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sinctl.commands._base import SinCommand

if TYPE_CHECKING:
    from sinctl.commands._context import AppContext


@click.command(
    cls=SinCommand,
    examples="""\
  sinctl parse C
  sinctl parse s
  sinctl --json parse c""",
)
@click.argument("token")
@click.pass_obj
def parse(app: AppContext, token: str) -> None:
    """Parse TOKEN and show its style and side."""
    app.emit(app.service.parse(token))
