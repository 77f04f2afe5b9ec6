"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the NotationService and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sinctl.config.logging import configure_logging
from sinctl.output.formatters import OutputSettings, format_result
from sinctl.services.notation import NotationService

if TYPE_CHECKING:
    from sinctl.config.settings import SinSettings
    from sinctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SinSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        self.service = NotationService(fail_fast=settings.batch.fail_fast)

    def service_for(self, *, fail_fast: bool = False) -> NotationService:
        """Return the shared service, or a fail-fast one when a command asks for it."""
        if fail_fast and not self.service.fail_fast:
            return NotationService(fail_fast=True)
        return self.service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr outside JSON mode.
        * Failure: writes to stderr, exits with code 1.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=output_settings)
        if result.ok:
            click.echo(output)
            if not output_settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
