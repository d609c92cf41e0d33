"""Graph model — an immutable adjacency mapping of string identifiers.

A graph maps each node to the ordered sequence of its direct neighbors
(for a dependency graph: the things it depends on). Keys that are absent
mean "no neighbors", so a graph never needs to list leaf nodes.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from reachctl.domain.errors import GraphFormatError

type Graph = Mapping[str, Sequence[str]]


def neighbors(graph: Graph, node: str) -> Sequence[str]:
    """Return the neighbor sequence of *node*, empty if it is not a key."""
    return graph.get(node, ())


def freeze_graph(data: Mapping[Any, Any]) -> Graph:
    """Validate raw adjacency data and return a read-only copy.

    Values become tuples so neither the mapping nor its neighbor lists
    can be mutated after construction. A bare string is rejected as a
    neighbor list, since iterating it would yield characters.

    Raises:
        GraphFormatError: On non-string identifiers or non-sequence values.
    """
    if not isinstance(data, Mapping):
        msg = f"Graph must be a mapping, got {type(data).__name__}"
        raise GraphFormatError(msg)

    frozen: dict[str, tuple[str, ...]] = {}
    for node, adjacent in data.items():
        if not isinstance(node, str):
            msg = f"Node identifier must be a string, got {node!r}"
            raise GraphFormatError(msg)
        if isinstance(adjacent, (str, bytes)) or not isinstance(adjacent, Sequence):
            msg = f"Neighbors of '{node}' must be a list of strings"
            raise GraphFormatError(msg)
        for target in adjacent:
            if not isinstance(target, str):
                msg = f"Neighbor of '{node}' must be a string, got {target!r}"
                raise GraphFormatError(msg)
        frozen[node] = tuple(adjacent)
    return MappingProxyType(frozen)


def edge_count(graph: Graph) -> int:
    """Count directed edges, duplicates included."""
    return sum(len(adjacent) for adjacent in graph.values())


def all_nodes(graph: Graph) -> set[str]:
    """Every identifier that appears as a key or as a neighbor."""
    found = set(graph)
    for adjacent in graph.values():
        found.update(adjacent)
    return found
