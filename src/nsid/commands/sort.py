"""Command: sort identifiers chronologically."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nsid.commands._base import NsidCommand

if TYPE_CHECKING:
    from nsid.commands._context import AppContext


@click.command(
    cls=NsidCommand,
    examples="""\
  nsid sort user_24yPTDCR1QRPZITB83lxvgcz7KI user_24yPHHYrYySQDhHsqEAFjCtuS9d
  nsid -q sort $(cat ids.txt)""",
)
@click.argument("identifiers", nargs=-1, required=True)
@click.pass_obj
def sort(app: AppContext, identifiers: tuple[str, ...]) -> None:
    """Sort same-namespace IDENTIFIERS from oldest to newest."""
    app.emit(app.service.sort(list(identifiers)))
