"""CheckService — report the graph irregularities that traversal tolerates.

Nothing found here blocks a traversal: cycles, self-loops, duplicate edges
and dangling references are all handled by the visited-set check. The
report exists so users can tell a surprising closure from a broken graph.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

import networkx as nx

from reachctl.domain.errors import ReachError
from reachctl.domain.graphs import Graph, all_nodes, edge_count
from reachctl.infrastructure.graph.engine import to_digraph
from reachctl.services.base import BaseService
from reachctl.services.result import ServiceResult
from reachctl.services.telemetry import trace_span, traced

SEVERITY_WARNING = "warning"
SEVERITY_INFO = "info"

CAT_SELF_LOOP = "self_loop"
CAT_DUPLICATE = "duplicate_edge"
CAT_DANGLING = "dangling_reference"
CAT_CYCLE = "cycle"


def _issue(category: str, severity: str, node: str, message: str) -> dict[str, Any]:
    return {"category": category, "severity": severity, "node": node, "message": message}


class CheckService(BaseService):
    """Handles graph structure inspection."""

    @traced
    def check(self) -> ServiceResult:
        """Inspect the graph without modifying anything.

        Warning-severity issues are also copied into ``warnings``.
        """
        try:
            graph = self._graph()
        except ReachError as exc:
            return self._graph_failure("check", exc)

        issues: list[dict[str, Any]] = []
        with trace_span("adjacency"):
            issues.extend(self._check_adjacency(graph))
        with trace_span("cycles"):
            issues.extend(self._check_cycles(graph))

        warnings = [i["message"] for i in issues if i["severity"] == SEVERITY_WARNING]
        return ServiceResult(
            ok=True,
            op="check",
            data={
                "nodes": len(all_nodes(graph)),
                "keyed_nodes": len(graph),
                "edges": edge_count(graph),
                "count": len(issues),
                "issues": issues,
            },
            warnings=warnings,
        )

    @staticmethod
    def _check_adjacency(graph: Graph) -> list[dict[str, Any]]:
        """Self-loops, repeated neighbors, and neighbors with no entry."""
        issues: list[dict[str, Any]] = []
        for node, adjacent in graph.items():
            if node in adjacent:
                issues.append(
                    _issue(CAT_SELF_LOOP, SEVERITY_WARNING, node, f"'{node}' lists itself")
                )
            for target, n in Counter(adjacent).items():
                if n > 1:
                    issues.append(
                        _issue(
                            CAT_DUPLICATE,
                            SEVERITY_WARNING,
                            node,
                            f"'{node}' lists '{target}' {n} times",
                        )
                    )
            for target in dict.fromkeys(adjacent):
                if target not in graph:
                    issues.append(
                        _issue(
                            CAT_DANGLING,
                            SEVERITY_INFO,
                            node,
                            f"'{target}' (from '{node}') has no entry; treated as a leaf",
                        )
                    )
        return issues

    @staticmethod
    def _check_cycles(graph: Graph) -> list[dict[str, Any]]:
        """One issue per multi-node strongly connected component."""
        g = to_digraph(graph)
        issues: list[dict[str, Any]] = []
        for component in nx.strongly_connected_components(g):
            if len(component) < 2:
                continue
            members = sorted(component)
            issues.append(
                _issue(
                    CAT_CYCLE,
                    SEVERITY_WARNING,
                    members[0],
                    f"Cycle among {len(members)} nodes: {', '.join(members)}",
                )
            )
        return issues
