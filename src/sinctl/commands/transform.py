"""Commands: flip and convert SIN tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sinctl.commands._base import SinCommand
from sinctl.domain.constants import valid_sides, valid_styles

if TYPE_CHECKING:
    from sinctl.commands._context import AppContext


@click.command(
    cls=SinCommand,
    examples="""\
  sinctl flip C      # -> c
  sinctl -q flip s   # prints: S""",
)
@click.argument("token")
@click.pass_obj
def flip(app: AppContext, token: str) -> None:
    """Swap the side of TOKEN."""
    app.emit(app.service.flip(token))


@click.command(
    cls=SinCommand,
    examples="""\
  sinctl convert C --style S            # -> S
  sinctl convert C --side second        # -> c
  sinctl convert c --style X --side first""",
)
@click.argument("token")
@click.option(
    "--style",
    type=click.Choice([s.value for s in valid_styles()], case_sensitive=False),
    default=None,
    help="Replacement style (A-Z).",
)
@click.option(
    "--side",
    type=click.Choice([s.value for s in valid_sides()]),
    default=None,
    help="Replacement side.",
)
@click.pass_obj
def convert(app: AppContext, token: str, style: str | None, side: str | None) -> None:
    """Replace the style and/or side of TOKEN."""
    if style is None and side is None:
        raise click.UsageError("Pass --style, --side, or both.")
    app.emit(app.service.convert(token, style=style, side=side))
