"""Command: graph structure inspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reachctl.commands._base import ReachCommand
from reachctl.services.check import CheckService

if TYPE_CHECKING:
    from reachctl.commands._context import AppContext


@click.command(
    cls=ReachCommand,
    examples="""\
  reachctl check
  reachctl -v check
  reachctl --json check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Report cycles, self-loops, duplicate edges and dangling references."""
    app.emit(CheckService(app.engine).check())
