"""Command: decode an identifier into its fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nsid.commands._base import NsidCommand

if TYPE_CHECKING:
    from nsid.commands._context import AppContext


@click.command(
    "inspect",
    cls=NsidCommand,
    examples="""\
  nsid inspect user_24yPTDCR1QRPZITB83lxvgcz7KI
  nsid --json inspect user_24yPTDCR1QRPZITB83lxvgcz7KI""",
)
@click.argument("identifier")
@click.pass_obj
def inspect_cmd(app: AppContext, identifier: str) -> None:
    """Show the namespace, creation time and payload of IDENTIFIER."""
    app.emit(app.service.inspect(identifier))
