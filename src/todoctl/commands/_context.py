"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the lazily started :class:`TodoRuntime` and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.config.logging import configure_logging
from todoctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from todoctl.config.settings import TodoSettings
    from todoctl.infrastructure.runtime import TodoRuntime
    from todoctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The runtime is built and started on first use so ``--help`` and
    ``--version`` never touch the data directory.
    """

    def __init__(self, settings: TodoSettings) -> None:
        self.settings = settings
        self._runtime: TodoRuntime | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def runtime(self) -> TodoRuntime:
        """The started runtime (created lazily on first access)."""
        if self._runtime is None:
            from todoctl.infrastructure.runtime import TodoRuntime

            runtime = TodoRuntime(self.settings)
            runtime.start()
            self._runtime = runtime
        return self._runtime

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            width=self.settings.display.width,
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
