"""JsonMapper: orchestrator that wires TreeBuilder, TreeMeasurer, LayoutEngine
and GraphFlattener into a single ``layout()`` call.

Every call runs the whole pipeline on a freshly built tree; nothing from a
previous tree is reused or patched. Finished layouts are immutable, so the
mapper memoises them per input: submitting a deeply equal JSON value again
returns the same GraphLayout object instead of recomputing it.

Architecture:
- The input is always built into a tree first, so values that are not JSON
  raise TypeError whether or not a cached layout exists.
- The memo key is the pre-order signature of that tree (depth, kind, box
  size and payload of every node). Key order is part of it, so objects that
  differ only in key order get separate layouts.
- Each mapper owns its own LRU cache; two mappers never share results.
"""

from __future__ import annotations

import logging

from cachetools import LRUCache

from json_orbit.graph.flatten import GraphFlattener
from json_orbit.layout.config import LayoutConfig
from json_orbit.layout.engine import LayoutEngine
from json_orbit.layout.measure import TreeMeasurer
from json_orbit.result import EdgeStyle, GraphLayout
from json_orbit.tree.builder import JsonValue, TreeBuilder
from json_orbit.tree.nodes import NodeKind, Payload, VirtualNode

__all__ = ["JsonMapper"]

logger = logging.getLogger(__name__)

_TreeKey = tuple[tuple[int, NodeKind, int, int, Payload], ...]


class JsonMapper:
    """Turns JSON values into renderer-ready GraphLayouts.

    Example::

        from json_orbit.mapper import JsonMapper

        mapper = JsonMapper()
        graph = mapper.layout({"arr": [1, 2, 3]})
        print(len(graph.nodes), len(graph.edges))   # 5 4
        assert mapper.layout({"arr": [1, 2, 3]}) is graph
    """

    def __init__(
        self,
        config: LayoutConfig | None = None,
        styled_edges: bool = True,
        edge_style: EdgeStyle | None = None,
        max_cache_size: int = 32,
    ) -> None:
        """Initialise the mapper.

        Args:
            config: Layout parameters. Defaults to ``LayoutConfig()`` when None.
            styled_edges: Attach presentation attributes to edges.
            edge_style: Edge presentation. Defaults to ``EdgeStyle()``.
            max_cache_size: Maximum number of layouts memoised by this mapper.
                ``0`` disables memoisation. This is an infrastructure
                parameter, not part of ``LayoutConfig``.
        """
        if max_cache_size < 0:
            msg = f"max_cache_size must be >= 0, got {max_cache_size}"
            raise ValueError(msg)
        self._config: LayoutConfig = config if config is not None else LayoutConfig()
        self._builder = TreeBuilder(self._config)
        self._measurer = TreeMeasurer(self._config)
        self._engine = LayoutEngine(self._config)
        self._flattener = GraphFlattener(styled=styled_edges, style=edge_style)
        self._cache: LRUCache[_TreeKey, GraphLayout] | None = (
            LRUCache(maxsize=max_cache_size) if max_cache_size else None
        )

    @property
    def config(self) -> LayoutConfig:
        return self._config

    @property
    def cache_size(self) -> int:
        """Number of layouts currently memoised."""
        return 0 if self._cache is None else int(self._cache.currsize)

    def layout(self, value: JsonValue) -> GraphLayout:
        """Build, measure, lay out and flatten ``value``.

        Args:
            value: Any JSON value (dict, list, str, int, float, bool, None).

        Returns:
            A GraphLayout with ``len(nodes) == len(edges) + 1``.

        Raises:
            TypeError: If value contains anything that is not a JSON type,
                with or without memoisation.
        """
        root = self._builder.build(value)
        if self._cache is None:
            return self._finish(root)

        key = _tree_key(root)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("reusing layout for %d-node tree", len(key))
            return cached

        graph = self._finish(root)
        self._cache[key] = graph
        return graph

    def _finish(self, root: VirtualNode) -> GraphLayout:
        self._measurer.measure(root)
        self._engine.layout(root)
        graph = self._flattener.flatten(root)
        logger.debug(
            "laid out %d nodes and %d edges (tree height %.1f)",
            len(graph.nodes),
            len(graph.edges),
            root.tree_height,
        )
        return graph


def _tree_key(root: VirtualNode) -> _TreeKey:
    """Pre-order signature of a built tree; equal signatures lay out identically."""
    return tuple(
        (node.depth, node.kind, node.width, node.height, node.payload)
        for node in root.walk()
    )
