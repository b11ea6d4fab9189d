"""Command: check an identifier's format and namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nsid.commands._base import NsidCommand

if TYPE_CHECKING:
    from nsid.commands._context import AppContext


@click.command(
    cls=NsidCommand,
    examples="""\
  nsid validate user_24yPTDCR1QRPZITB83lxvgcz7KI
  nsid validate user_24yPTDCR1QRPZITB83lxvgcz7KI --namespace user
  nsid -q validate "$ID" && echo ok""",
)
@click.argument("identifier")
@click.option("--namespace", default=None, help="Require this namespace.")
@click.pass_obj
def validate(app: AppContext, identifier: str, namespace: str | None) -> None:
    """Exit 0 if IDENTIFIER is well formed (and in NAMESPACE), else 1."""
    app.emit(app.service.validate(identifier, namespace=namespace))
