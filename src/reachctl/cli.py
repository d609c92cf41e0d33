"""Root CLI group for reachctl with global flags and command registration."""

from __future__ import annotations

import click

from reachctl import __version__
from reachctl.commands import register_commands
from reachctl.commands._base import ReachGroup
from reachctl.commands._context import AppContext
from reachctl.config.settings import ReachSettings


@click.group(
    cls=ReachGroup,
    invoke_without_command=True,
    examples="""\
  reachctl reach app
  reachctl -g deps.json walk app --order breadth_first
  reachctl --json closure app cli
  reachctl check""",
)
@click.version_option(version=__version__, prog_name="reachctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Identifiers only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-g", "--graph", "graph_path", default=None, help="Graph document (JSON or TOML).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    graph_path: str | None,
    config_path: str | None,
) -> None:
    """reachctl — reachability over dependency graphs."""
    settings = ReachSettings.from_cli(
        config_path=config_path,
        graph_path=graph_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
