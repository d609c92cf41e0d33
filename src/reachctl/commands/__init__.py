"""Subcommand modules for reachctl.

Provides register_commands() which uses deferred imports to keep
``reachctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from reachctl.commands.check import check
    from reachctl.commands.reach import closure, reach, walk

    cli.add_command(reach)
    cli.add_command(walk)
    cli.add_command(closure)
    cli.add_command(check)
