"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the CodecService and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fragstrings.config.logging import configure_logging
from fragstrings.output.formatters import OutputSettings, format_result
from fragstrings.services.codec import CodecService

if TYPE_CHECKING:
    from fragstrings.config.settings import FragSettings
    from fragstrings.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FragSettings) -> None:
        self.settings = settings
        self.codec = CodecService(aliases=settings.descriptors)

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            log_level=settings.log_level,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.use_json,
            quiet=self.settings.use_quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
