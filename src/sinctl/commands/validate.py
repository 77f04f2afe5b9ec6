"""Command: validate one or more SIN tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sinctl.commands._base import SinCommand

if TYPE_CHECKING:
    from sinctl.commands._context import AppContext


@click.command(
    cls=SinCommand,
    examples="""\
  sinctl validate C s X
  sinctl validate --fail-fast C 1 x
  printf 'C\\nc\\n' | sinctl validate -""",
)
@click.argument("tokens", nargs=-1)
@click.option(
    "--fail-fast",
    is_flag=True,
    help="Stop at the first invalid token (overrides [batch] fail_fast).",
)
@click.pass_obj
def validate(app: AppContext, tokens: tuple[str, ...], fail_fast: bool) -> None:
    """Check each TOKEN; exits 1 if any is invalid.

    Pass ``-`` to read one token per line from stdin.
    """
    if tokens == ("-",):
        stdin = click.get_text_stream("stdin")
        tokens = tuple(line.rstrip("\r\n") for line in stdin)
    if not tokens:
        raise click.UsageError("Provide at least one token, or '-' to read stdin.")

    app.emit(app.service_for(fail_fast=fail_fast).validate(tokens))
