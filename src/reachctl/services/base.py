"""BaseService — foundation for reachctl services.

Every service receives a :class:`GraphEngine` at construction time and
reads the graph through it, so the document is loaded at most once per
engine and only by operations that need it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reachctl.domain.errors import (
    GraphFileError,
    GraphFormatError,
    GraphNotFoundError,
    ReachError,
)
from reachctl.domain.traversal import Order
from reachctl.services.result import ServiceResult

if TYPE_CHECKING:
    from reachctl.domain.graphs import Graph
    from reachctl.infrastructure.graph.engine import GraphEngine

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ReachService(BaseService):
            def reach(self, root: str) -> ServiceResult:
                try:
                    graph = self._graph()
                except ReachError as exc:
                    return self._graph_failure("reach", exc)
                ...
    """

    def __init__(self, engine: GraphEngine, *, default_order: Order = Order.DEPTH_FIRST) -> None:
        self._engine = engine
        self._default_order = default_order

    def _graph(self) -> Graph:
        return self._engine.graph

    def _graph_failure(self, op: str, exc: ReachError) -> ServiceResult:
        """Translate a graph loading error into a failed result."""
        logger.debug("Graph load failed for %s: %s", op, exc)
        if isinstance(exc, GraphNotFoundError):
            return ServiceResult.failure(op, "GRAPH_NOT_FOUND", str(exc), path=exc.path)
        if isinstance(exc, (GraphFileError, GraphFormatError)):
            return ServiceResult.failure(op, "INVALID_GRAPH", str(exc))
        return ServiceResult.failure(op, "ERROR", str(exc))

    def _resolve_order(self, order: str | None) -> Order | None:
        """Return the requested order, the default when None, or None if unknown."""
        if order is None:
            return self._default_order
        try:
            return Order(order)
        except ValueError:
            return None
