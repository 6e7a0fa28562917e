"""Subcommand modules for unity-invoker.

Provides register_commands() which uses deferred imports to keep
``unity-invoker --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from unity_invoker.commands.argv import argv
    from unity_invoker.commands.locate import locate
    from unity_invoker.commands.run import run

    cli.add_command(run)
    cli.add_command(argv)
    cli.add_command(locate)
