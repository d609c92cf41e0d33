"""Shared pytest fixtures and test helpers for reachctl tests."""

from __future__ import annotations

import json
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from reachctl.infrastructure.graph.engine import GraphEngine
from reachctl.services.telemetry import disable_telemetry

DIAMOND: dict[str, list[str]] = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}

# app -> {cli, core}, cli -> {core, log}, core -> {log}, worker -> {core}; log is unkeyed.
PROJECT: dict[str, list[str]] = {
    "app": ["cli", "core"],
    "cli": ["core", "log"],
    "core": ["log"],
    "worker": ["core"],
}


def write_graph(path: Path, graph: dict[str, Any]) -> Path:
    """Write *graph* as a JSON adjacency document and return *path*."""
    path.write_text(json.dumps(graph), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` flips a process-wide context var; undo it after each test."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory with a ``graph.json`` holding PROJECT."""
    write_graph(tmp_path / "graph.json", PROJECT)
    return tmp_path


@pytest.fixture
def engine(project_root: Path) -> GraphEngine:
    """GraphEngine over the PROJECT graph."""
    return GraphEngine(project_root / "graph.json")


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI picks up its graph.json.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.delenv("REACHCTL_CONFIG", raising=False)
    monkeypatch.chdir(project_root)
