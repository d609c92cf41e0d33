"""Help and --examples output for every command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from reachctl.cli import cli

HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["reach", "walk", "closure", "check", "--graph"]),
    (["reach", "--help"], ["ROOT", "--order"]),
    (["walk", "--help"], ["ROOT", "--order"]),
    (["closure", "--help"], ["ROOTS", "--order"]),
    (["check", "--help"], ["--examples"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in keywords:
        assert kw in result.output


@pytest.mark.parametrize("command", ["reach", "walk", "closure", "check"])
def test_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert f"reachctl {command}" in result.output


def test_root_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "reachctl reach app" in result.output
