"""Reachability traversal — transitive closure from a root over a graph.

A single worklist loop with an owned visited set and frontier. The frontier
is always consumed from the front; the order policy only decides where newly
discovered neighbors go:

- depth-first: pushed onto the front (stack), first-listed neighbor first.
  Peak frontier size stays near the graph's depth.
- breadth-first: appended at the back (queue), giving shortest-hop order.

Both policies reach the same set of nodes. The visited-set check before
expansion is what guarantees termination on cyclic input.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum

from reachctl.domain.graphs import Graph, neighbors


class Order(StrEnum):
    """Frontier policy for a traversal."""

    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"


@dataclass(frozen=True)
class Walk:
    """Instrumented traversal result.

    Attributes:
        roots: The starting node(s), in the order given.
        order: Frontier policy used.
        visited: Every reachable node exactly once, in expansion order.
        peak_frontier: Largest frontier size observed during the run.
    """

    roots: tuple[str, ...]
    order: Order
    visited: tuple[str, ...]
    peak_frontier: int

    @property
    def root(self) -> str:
        return self.roots[0]

    def as_set(self) -> set[str]:
        return set(self.visited)


def _run(
    roots: Iterable[str],
    graph: Graph,
    order: Order,
    on_visit: Callable[[str], None] | None,
) -> tuple[set[str], int]:
    visited: set[str] = set()
    frontier: deque[str] = deque(roots)
    peak = len(frontier)

    while frontier:
        node = frontier.popleft()
        if node in visited:
            continue
        visited.add(node)
        if on_visit is not None:
            on_visit(node)

        adjacent = neighbors(graph, node)
        if order is Order.DEPTH_FIRST:
            frontier.extendleft(reversed(adjacent))
        else:
            frontier.extend(adjacent)
        peak = max(peak, len(frontier))

    return visited, peak


def reachable(
    root: str,
    graph: Graph,
    *,
    order: Order = Order.DEPTH_FIRST,
    on_visit: Callable[[str], None] | None = None,
) -> set[str]:
    """Return every node reachable from *root*, *root* included.

    *root* need not be a key of *graph*; absent keys have no neighbors.
    Cycles, self-loops, duplicate edges and references to unknown nodes are
    all tolerated. Each node is expanded at most once.

    Args:
        root: Starting node identifier.
        graph: Adjacency mapping, read but never modified.
        order: Frontier policy; affects visitation order only.
        on_visit: Called once per node at the moment it is first expanded.
    """
    visited, _ = _run((root,), graph, Order(order), on_visit)
    return visited


def reachable_from(
    roots: Iterable[str],
    graph: Graph,
    *,
    order: Order = Order.DEPTH_FIRST,
) -> set[str]:
    """Union closure of several roots, sharing one visited set."""
    visited, _ = _run(roots, graph, Order(order), None)
    return visited


def walk(
    root: str | Iterable[str],
    graph: Graph,
    *,
    order: Order = Order.DEPTH_FIRST,
) -> Walk:
    """Traverse from *root* (or several roots) and record the visitation sequence."""
    roots = (root,) if isinstance(root, str) else tuple(root)
    sequence: list[str] = []
    _, peak = _run(roots, graph, Order(order), sequence.append)
    return Walk(
        roots=roots,
        order=Order(order),
        visited=tuple(sequence),
        peak_frontier=peak,
    )
