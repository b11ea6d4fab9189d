"""AppContext: per-invocation state handed to every subcommand.

The root group builds one from :class:`NsidSettings`; commands receive it
through ``@click.pass_obj`` and hand their ``ServiceResult`` to
:meth:`AppContext.emit`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nsid.config.logging import configure_logging
from nsid.output.formatters import OutputSettings, format_result
from nsid.services.ids import IdService
from nsid.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from nsid.config.settings import NsidSettings
    from nsid.services.result import ServiceResult


class AppContext:
    """Settings, the IdService, and output routing for one CLI run."""

    def __init__(self, settings: NsidSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self.service = IdService(settings.generate)

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successes go to stdout and return.  In quiet mode warnings are
        repeated on stderr, since the bare output carries none.  Failures
        go to stderr and exit with status 1.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if self.output.quiet and not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
