"""Subcommand modules for nsid.

Provides register_commands() which uses deferred imports to keep
``nsid --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nsid.commands.build import build
    from nsid.commands.compare import compare
    from nsid.commands.inspect_cmd import inspect_cmd
    from nsid.commands.new import new
    from nsid.commands.sort import sort
    from nsid.commands.validate import validate

    cli.add_command(new)
    cli.add_command(build)
    cli.add_command(inspect_cmd)
    cli.add_command(validate)
    cli.add_command(compare)
    cli.add_command(sort)
