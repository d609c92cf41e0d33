"""Exception hierarchy for graph input problems.

The traversal itself never raises. These errors describe input that cannot
be shaped into a graph at all, and are translated into ServiceResult errors
by the service layer.
"""

from __future__ import annotations


class ReachError(Exception):
    """Base class for all reachctl errors."""


class GraphFormatError(ReachError):
    """Adjacency data has the wrong shape (non-string ids, bad neighbor lists)."""


class GraphFileError(ReachError):
    """Adjacency document is missing or cannot be parsed."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class GraphNotFoundError(GraphFileError):
    """Adjacency document does not exist."""
