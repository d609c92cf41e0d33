"""GraphEngine — lazy-loaded adjacency graph from a JSON or TOML document.

Loaded per invocation, no cross-invocation cache.
Commands that don't need the graph (``--help``, ``--examples``) never load it.

Also hosts the NetworkX adapters used for structural checks.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import networkx as nx

from reachctl.domain.errors import GraphFileError, GraphNotFoundError
from reachctl.domain.graphs import Graph, freeze_graph

logger = logging.getLogger(__name__)


class GraphEngine:
    """Lazy-loading graph backed by an adjacency document on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._graph: Graph | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def graph(self) -> Graph:
        """Return the graph, loading from disk on first access."""
        if self._graph is None:
            self._graph = load_graph_file(self._path)
        return self._graph

    def invalidate(self) -> None:
        """Clear the cached graph, forcing a reload on next access."""
        self._graph = None


def load_graph_file(path: Path) -> Graph:
    """Read and validate an adjacency document.

    ``.toml`` files are read with :mod:`tomllib`; a ``[graph]`` table is
    used when present, otherwise the top-level keys. Anything else is
    parsed as a JSON object.

    Raises:
        GraphFileError: The file is missing or not parseable.
        GraphFormatError: The parsed document is not an adjacency mapping.
    """
    if not path.is_file():
        msg = f"Graph file not found: {path}"
        raise GraphNotFoundError(msg, path=str(path))

    try:
        raw = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as exc:
        msg = f"Cannot read graph file {path}: {exc}"
        raise GraphFileError(msg, path=str(path)) from exc

    data: Any
    if path.suffix == ".toml":
        try:
            data = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise GraphFileError(msg, path=str(path)) from exc
        # A node named "graph" is an array, not the [graph] table.
        if isinstance(data.get("graph"), dict):
            data = data["graph"]
    else:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {path}: {exc}"
            raise GraphFileError(msg, path=str(path)) from exc

    graph = freeze_graph(data)
    logger.debug("Loaded graph from %s (%d keyed nodes)", path, len(graph))
    return graph


def to_digraph(graph: Graph) -> nx.DiGraph:
    """Build a NetworkX DiGraph from an adjacency mapping.

    Keyed nodes are added first (so isolated nodes are visible to
    algorithms), then edges; neighbors that are not keys become nodes.
    Duplicate edges collapse into one.
    """
    g: nx.DiGraph = nx.DiGraph()
    g.add_nodes_from(graph)
    for source, adjacent in graph.items():
        for target in adjacent:
            g.add_edge(source, target)
    return g


def from_digraph(g: nx.DiGraph) -> Graph:
    """Convert a NetworkX DiGraph into an adjacency mapping.

    Every node becomes a key, in insertion order, with its successors in
    edge insertion order.
    """
    return freeze_graph({str(node): [str(s) for s in g.successors(node)] for node in g.nodes})
