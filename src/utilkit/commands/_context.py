"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazily built services and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from utilkit.config.settings import UtilkitSettings
    from utilkit.services.check import CheckService
    from utilkit.services.result import ServiceResult
    from utilkit.services.transform import TransformService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: UtilkitSettings) -> None:
        self.settings = settings
        self.config = settings.to_config()
        self._checks: CheckService | None = None
        self._transforms: TransformService | None = None

        from utilkit.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def checks(self) -> CheckService:
        if self._checks is None:
            from utilkit.services.check import CheckService

            self._checks = CheckService(self.config)
        return self._checks

    @property
    def transforms(self) -> TransformService:
        if self._transforms is None:
            from utilkit.services.transform import TransformService

            self._transforms = TransformService(self.config)
        return self._transforms

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
