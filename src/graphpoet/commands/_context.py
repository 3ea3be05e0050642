"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the lazy PoetEngine and result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphpoet.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from graphpoet.config.settings import PoetSettings
    from graphpoet.infrastructure.engine import PoetEngine
    from graphpoet.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The engine is created on first use so ``--help`` and ``--version``
    never touch the corpus.
    """

    def __init__(self, settings: PoetSettings) -> None:
        self.settings = settings
        self._engine: PoetEngine | None = None

        from graphpoet.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from graphpoet.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def engine(self) -> PoetEngine:
        if self._engine is None:
            from graphpoet.infrastructure.engine import PoetEngine

            self._engine = PoetEngine(self.settings)
        return self._engine

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 on failure.

        Successes go to stdout with warnings on stderr, so piped poems stay
        clean. Failures go to stderr.
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
