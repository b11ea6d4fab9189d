"""Command: mint random identifiers."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from nsid.commands._base import UTC_DATETIME, NsidCommand

if TYPE_CHECKING:
    from nsid.commands._context import AppContext


@click.command(
    cls=NsidCommand,
    examples="""\
  nsid new user
  nsid new payment -n 5
  nsid new user --at 2022-02-11T17:17:38
  nsid -q new user
  nsid --json new order -n 3""",
)
@click.argument("namespace", required=False)
@click.option("-n", "--count", type=int, default=1, show_default=True, help="How many to mint.")
@click.option("--at", "at", type=UTC_DATETIME, default=None, help="Pin the timestamp (UTC).")
@click.pass_obj
def new(app: AppContext, namespace: str | None, count: int, at: datetime | None) -> None:
    """Mint random identifiers in NAMESPACE (or the configured default)."""
    app.emit(app.service.generate(namespace, count=count, at=at))
