"""Tests for GraphEngine loading and the NetworkX adapters."""

from __future__ import annotations

import json
from pathlib import Path

import networkx as nx
import pytest

from reachctl.domain.errors import GraphFileError, GraphFormatError, GraphNotFoundError
from reachctl.domain.traversal import reachable
from reachctl.infrastructure.graph.engine import (
    GraphEngine,
    from_digraph,
    load_graph_file,
    to_digraph,
)


class TestLoadGraphFile:
    def test_json(self, tmp_path: Path) -> None:
        p = tmp_path / "deps.json"
        p.write_text(json.dumps({"A": ["B"], "B": []}))
        assert dict(load_graph_file(p)) == {"A": ("B",), "B": ()}

    def test_toml_graph_table(self, tmp_path: Path) -> None:
        p = tmp_path / "deps.toml"
        p.write_text('[graph]\nA = ["B", "C"]\nB = []\n')
        assert dict(load_graph_file(p)) == {"A": ("B", "C"), "B": ()}

    def test_toml_top_level(self, tmp_path: Path) -> None:
        p = tmp_path / "deps.toml"
        p.write_text('A = ["B"]\n')
        assert dict(load_graph_file(p)) == {"A": ("B",)}

    def test_quoted_toml_keys(self, tmp_path: Path) -> None:
        p = tmp_path / "deps.toml"
        p.write_text('[graph]\n"pkg.core" = ["pkg.log"]\n')
        assert load_graph_file(p)["pkg.core"] == ("pkg.log",)

    def test_unknown_suffix_is_json(self, tmp_path: Path) -> None:
        p = tmp_path / "deps.graph"
        p.write_text('{"A": []}')
        assert dict(load_graph_file(p)) == {"A": ()}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GraphNotFoundError) as exc_info:
            load_graph_file(tmp_path / "nope.json")
        assert exc_info.value.path == str(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        p = tmp_path / "bad.json"
        p.write_text("{not json")
        with pytest.raises(GraphFileError, match="Invalid JSON"):
            load_graph_file(p)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        p = tmp_path / "bad.toml"
        p.write_text("[graph\n")
        with pytest.raises(GraphFileError, match="Invalid TOML"):
            load_graph_file(p)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        p = tmp_path / "latin1.json"
        p.write_bytes(b'{"A": ["\xff"]}')
        with pytest.raises(GraphFileError, match="Cannot read") as exc_info:
            load_graph_file(p)
        assert exc_info.value.path == str(p)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_toml_top_level_node_named_graph(self, tmp_path: Path) -> None:
        p = tmp_path / "deps.toml"
        p.write_text('app = ["graph"]\ngraph = ["core"]\n')
        assert dict(load_graph_file(p)) == {"app": ("graph",), "graph": ("core",)}

    def test_wrong_shape(self, tmp_path: Path) -> None:
        p = tmp_path / "list.json"
        p.write_text('["A", "B"]')
        with pytest.raises(GraphFormatError):
            load_graph_file(p)


class TestGraphEngine:
    def test_lazy_load(self, tmp_path: Path) -> None:
        engine = GraphEngine(tmp_path / "later.json")
        # Constructing the engine never touches the file.
        (tmp_path / "later.json").write_text('{"A": ["B"]}')
        assert engine.graph["A"] == ("B",)

    def test_cached_until_invalidated(self, tmp_path: Path) -> None:
        p = tmp_path / "g.json"
        p.write_text('{"A": []}')
        engine = GraphEngine(p)
        first = engine.graph
        p.write_text('{"A": ["B"]}')
        assert engine.graph is first
        engine.invalidate()
        assert engine.graph["A"] == ("B",)

    def test_path(self, tmp_path: Path) -> None:
        assert GraphEngine(tmp_path / "g.json").path == tmp_path / "g.json"


class TestNetworkXAdapters:
    def test_to_digraph(self) -> None:
        g = to_digraph({"A": ["B", "B"], "C": []})
        assert set(g.nodes) == {"A", "B", "C"}
        assert list(g.edges) == [("A", "B")]

    def test_from_digraph_keeps_isolated_and_order(self) -> None:
        g = nx.DiGraph()
        g.add_node("lonely")
        g.add_edge("A", "C")
        g.add_edge("A", "B")
        graph = from_digraph(g)
        assert graph["lonely"] == ()
        assert graph["A"] == ("C", "B")
        assert graph["B"] == ()

    def test_round_trip_preserves_reachability(self) -> None:
        g = nx.gnp_random_graph(25, 0.1, seed=7, directed=True)
        g = nx.relabel_nodes(g, {n: f"m{n}" for n in g.nodes})
        graph = from_digraph(g)
        assert reachable("m0", graph) == {"m0"} | nx.descendants(g, "m0")
