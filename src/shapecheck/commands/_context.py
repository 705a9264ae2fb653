"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapecheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shapecheck.config.settings import ShapecheckSettings
    from shapecheck.services.result import ServiceResult
    from shapecheck.services.validation import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The validation service is built on first use so ``--help`` and
    ``--version`` never read definitions files.
    """

    def __init__(self, settings: ShapecheckSettings) -> None:
        self.settings = settings
        self._service: ValidationService | None = None

        from shapecheck.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from shapecheck.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> ValidationService:
        """The validation service (created lazily on first access)."""
        if self._service is None:
            from shapecheck.services.validation import ValidationService

            self._service = ValidationService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr and exits with ``result.exit_code``.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(result.exit_code)
