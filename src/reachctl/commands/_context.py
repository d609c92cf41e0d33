"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy GraphEngine construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reachctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from reachctl.config.settings import ReachSettings
    from reachctl.infrastructure.graph.engine import GraphEngine
    from reachctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The engine is created on first use so ``--help`` and ``--examples``
    never touch the graph file.
    """

    def __init__(self, settings: ReachSettings) -> None:
        self.settings = settings
        self._engine: GraphEngine | None = None

        from reachctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from reachctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def engine(self) -> GraphEngine:
        """The graph engine for the configured document (created lazily)."""
        if self._engine is None:
            from reachctl.infrastructure.graph.engine import GraphEngine

            self._engine = GraphEngine(self.settings.graph_file)
        return self._engine

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
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
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
