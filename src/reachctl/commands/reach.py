"""Commands: reachability queries (reach, walk, closure)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reachctl.commands._base import ReachCommand
from reachctl.domain.traversal import Order
from reachctl.services.reach import ReachService

if TYPE_CHECKING:
    from reachctl.commands._context import AppContext

_order_option = click.option(
    "--order",
    type=click.Choice([o.value for o in Order]),
    default=None,
    help="Frontier policy (default from [traversal] order).",
)


def _service(app: AppContext) -> ReachService:
    return ReachService(app.engine, default_order=app.settings.traversal.order)


@click.command(
    cls=ReachCommand,
    examples="""\
  reachctl reach app
  reachctl reach app --order breadth_first
  reachctl -g deps.toml reach app
  reachctl --json reach app""",
)
@click.argument("root")
@_order_option
@click.pass_obj
def reach(app: AppContext, root: str, order: str | None) -> None:
    """List every node reachable from ROOT, ROOT included."""
    app.emit(_service(app).reach(root, order=order))


@click.command(
    cls=ReachCommand,
    examples="""\
  reachctl walk app
  reachctl walk app --order breadth_first
  reachctl --quiet walk app""",
)
@click.argument("root")
@_order_option
@click.pass_obj
def walk(app: AppContext, root: str, order: str | None) -> None:
    """Show the order in which nodes are visited from ROOT."""
    app.emit(_service(app).walk(root, order=order))


@click.command(
    cls=ReachCommand,
    examples="""\
  reachctl closure app cli
  reachctl --json closure app cli worker""",
)
@click.argument("roots", nargs=-1, required=True)
@_order_option
@click.pass_obj
def closure(app: AppContext, roots: tuple[str, ...], order: str | None) -> None:
    """List every node reachable from any of ROOTS."""
    app.emit(_service(app).closure(list(roots), order=order))
