"""Tests for the check command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from reachctl.cli import cli
from tests.conftest import write_graph


@pytest.mark.usefixtures("_isolated_project")
class TestCheckCommand:
    def test_clean_project(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "No issues found" in result.output

    def test_cycle_warning(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        write_graph(tmp_path / "graph.json", {"A": ["B"], "B": ["A"]})
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["count"] == 1
        assert data["data"]["issues"][0]["category"] == "cycle"
        assert data["warnings"]

    def test_verbose_shows_dangling(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "check"])
        assert result.exit_code == 0
        assert "dangling_reference" in result.output
