"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, reachctl.toml only contains overrides.
An empty (or absent) config file is valid.
"""

from __future__ import annotations

from pydantic import BaseModel

from reachctl.domain.traversal import Order


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    path: str = "graph.json"


class TraversalConfig(BaseModel):
    """[traversal] section."""

    model_config = {"frozen": True}

    order: Order = Order.DEPTH_FIRST
