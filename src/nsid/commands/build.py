"""Command: build an identifier from explicit parts."""

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
  nsid build person --at 2022-02-11T17:17:38 --payload 76e8fbc01cd81a5b6120178d5d76e9fe
  nsid --json build user --at 2024-01-01 --payload 00000000000000000000000000000000""",
)
@click.argument("namespace")
@click.option("--at", "at", type=UTC_DATETIME, required=True, help="Timestamp (UTC).")
@click.option("--payload", required=True, help="16-byte payload as 32 hex characters.")
@click.pass_obj
def build(app: AppContext, namespace: str, at: datetime, payload: str) -> None:
    """Build a deterministic identifier from NAMESPACE, a timestamp and a payload."""
    app.emit(app.service.build(namespace, at, payload))
