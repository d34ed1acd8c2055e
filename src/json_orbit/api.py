"""Public API functions for json-orbit.

This module provides the user-facing functions layout_json and
layout_nodes_and_edges. Each call creates a fresh JsonMapper to guarantee
zero global state shared between calls.
"""

from __future__ import annotations

from typing import Any

from json_orbit.layout.config import LayoutConfig
from json_orbit.mapper import JsonMapper
from json_orbit.result import GraphLayout

__all__ = ["layout_json", "layout_nodes_and_edges"]


def layout_json(
    value: Any,
    config: LayoutConfig | None = None,
    styled_edges: bool = True,
) -> GraphLayout:
    """Lay out a JSON value as a node-and-edge diagram.

    Args:
        value:        Any JSON value (dict, list, str, int, float, bool, None).
        config:       Layout parameters. Defaults to ``LayoutConfig()`` when None.
        styled_edges: Attach presentation attributes to edges.

    Returns:
        A ``GraphLayout`` whose nodes are in depth-first order starting at
        the ``"root"`` node.
    """
    mapper = JsonMapper(config=config, styled_edges=styled_edges, max_cache_size=0)
    return mapper.layout(value)


def layout_nodes_and_edges(
    value: Any,
    config: LayoutConfig | None = None,
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Return the React Flow ``(nodes, edges)`` lists for a JSON value.

    Args:
        value:  Any JSON value.
        config: Layout parameters. Defaults to ``LayoutConfig()`` when None.

    Returns:
        Two lists of plain dicts, ready to be serialised to JSON.
    """
    flow = layout_json(value, config=config).to_react_flow()
    return flow["nodes"], flow["edges"]
