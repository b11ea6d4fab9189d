"""Shared Click building blocks for nsid commands.

``NsidCommand`` adds an eager ``--examples`` flag so ``--help`` stays short
while worked invocations remain one flag away.  ``UTC_DATETIME`` is the
parameter type behind every ``--at`` option.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import click


class NsidCommand(click.Command):
    """Click command that accepts an ``examples`` text block."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class UtcDateTime(click.DateTime):
    """``click.DateTime`` that always yields an aware UTC datetime.

    Values without an offset are taken as UTC; values with one
    (``Z``, ``+02:00``) are converted.
    """

    name = "utc-datetime"

    def __init__(self) -> None:
        super().__init__(
            formats=[
                "%Y-%m-%d",
                "%Y-%m-%dT%H:%M:%S",
                "%Y-%m-%dT%H:%M:%S%z",
                "%Y-%m-%d %H:%M:%S",
            ]
        )

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> datetime:
        parsed: datetime = super().convert(value, param, ctx)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        try:
            return parsed.astimezone(UTC)
        except (OverflowError, ValueError):
            self.fail(f"{value!r} is out of range once converted to UTC.", param, ctx)


UTC_DATETIME = UtcDateTime()
