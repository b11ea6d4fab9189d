"""Command: order two identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nsid.commands._base import NsidCommand

if TYPE_CHECKING:
    from nsid.commands._context import AppContext


@click.command(
    cls=NsidCommand,
    examples="""\
  nsid compare payment_24yPTDCR1QRPZITB83lxvgcz7KI payment_24yPHHYrYySQDhHsqEAFjCtuS9d
  nsid -q compare $A $B""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def compare(app: AppContext, left: str, right: str) -> None:
    """Report whether LEFT is before, equal to, or after RIGHT."""
    app.emit(app.service.compare(left, right))
