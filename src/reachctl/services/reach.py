"""ReachService — reachability queries over the loaded graph.

Three read-only operations built on :mod:`reachctl.domain.traversal`:
``reach`` (closure set), ``walk`` (visitation sequence) and ``closure``
(union over several roots).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from reachctl.domain.errors import ReachError
from reachctl.domain.traversal import Order, reachable, reachable_from, walk
from reachctl.services.base import BaseService
from reachctl.services.result import ServiceResult
from reachctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def _bad_order(op: str, order: str | None) -> ServiceResult:
    choices = ", ".join(o.value for o in Order)
    return ServiceResult.failure(
        op,
        "INVALID_ORDER",
        f"Unknown traversal order '{order}' (expected one of: {choices})",
        order=order,
    )


class ReachService(BaseService):
    """Handles reachability queries."""

    @staticmethod
    def _unknown_root_warnings(roots: Sequence[str], graph: Any) -> list[str]:
        return [f"Root '{r}' has no entry in the graph" for r in roots if r not in graph]

    # ------------------------------------------------------------------
    # reach: transitive closure from one root
    # ------------------------------------------------------------------

    @traced
    def reach(self, root: str, *, order: str | None = None) -> ServiceResult:
        """Return every node reachable from *root*, sorted.

        An unknown root is not an error: it is reported as reachable from
        itself, with a warning.
        """
        resolved = self._resolve_order(order)
        if resolved is None:
            return _bad_order("reach", order)
        try:
            graph = self._graph()
        except ReachError as exc:
            return self._graph_failure("reach", exc)

        with trace_span("traverse") as span:
            found = reachable(root, graph, order=resolved)
            if span:
                span.annotate("visited", len(found))

        logger.debug("reach %s: %d nodes (%s)", root, len(found), resolved)
        return ServiceResult(
            ok=True,
            op="reach",
            data={
                "root": root,
                "order": resolved.value,
                "count": len(found),
                "items": sorted(found),
            },
            warnings=self._unknown_root_warnings([root], graph),
        )

    # ------------------------------------------------------------------
    # walk: instrumented traversal
    # ------------------------------------------------------------------

    @traced
    def walk(self, root: str, *, order: str | None = None) -> ServiceResult:
        """Return the visitation sequence from *root* and the peak frontier size."""
        resolved = self._resolve_order(order)
        if resolved is None:
            return _bad_order("walk", order)
        try:
            graph = self._graph()
        except ReachError as exc:
            return self._graph_failure("walk", exc)

        with trace_span("traverse") as span:
            result = walk(root, graph, order=resolved)
            if span:
                span.annotate("visited", len(result.visited))
                span.annotate("peak_frontier", result.peak_frontier)

        items = [{"id": node, "step": step} for step, node in enumerate(result.visited)]
        return ServiceResult(
            ok=True,
            op="walk",
            data={
                "root": root,
                "order": resolved.value,
                "count": len(items),
                "peak_frontier": result.peak_frontier,
                "items": items,
            },
            warnings=self._unknown_root_warnings([root], graph),
        )

    # ------------------------------------------------------------------
    # closure: union over several roots
    # ------------------------------------------------------------------

    @traced
    def closure(self, roots: Sequence[str], *, order: str | None = None) -> ServiceResult:
        """Return every node reachable from any of *roots*, sorted."""
        if not roots:
            return ServiceResult.failure("closure", "NO_ROOTS", "At least one root is required")
        resolved = self._resolve_order(order)
        if resolved is None:
            return _bad_order("closure", order)
        try:
            graph = self._graph()
        except ReachError as exc:
            return self._graph_failure("closure", exc)

        found = reachable_from(roots, graph, order=resolved)
        return ServiceResult(
            ok=True,
            op="closure",
            data={
                "roots": list(roots),
                "order": resolved.value,
                "count": len(found),
                "items": sorted(found),
            },
            warnings=self._unknown_root_warnings(roots, graph),
        )
