"""GraphFlattener: turns a positioned VirtualNode tree into node/edge records."""

from __future__ import annotations

from json_orbit.result import EdgeStyle, GraphLayout, Position, RenderEdge, RenderNode
from json_orbit.tree.nodes import VirtualNode

__all__ = ["GraphFlattener", "edge_id"]


def edge_id(source: str, target: str) -> str:
    """Edge id for the ``source -> target`` relationship, e.g. ``e0-1``."""
    return f"e{source}-{target}"


class GraphFlattener:
    """Depth-first flattening of a laid-out tree.

    Nodes are emitted parent first, children in source order. The edge to a
    child is emitted just before that child's subtree is visited, so edges
    appear in the same depth-first order as their targets.

    Args:
        styled: Attach ``style`` (an EdgeStyle) to every edge. Defaults to True.
        style:  The style to attach. Defaults to ``EdgeStyle()``.
    """

    def __init__(self, styled: bool = True, style: EdgeStyle | None = None) -> None:
        self._style: EdgeStyle | None = None
        if styled:
            self._style = style if style is not None else EdgeStyle()

    def flatten(self, root: VirtualNode) -> GraphLayout:
        nodes: list[RenderNode] = []
        edges: list[RenderEdge] = []
        # Each entry carries the parent id so the edge is emitted right
        # before its target, matching the node order.
        stack: list[tuple[VirtualNode, str | None]] = [(root, None)]
        while stack:
            node, parent_id = stack.pop()
            if parent_id is not None:
                edges.append(
                    RenderEdge(
                        id=edge_id(parent_id, node.id),
                        source=parent_id,
                        target=node.id,
                        style=self._style,
                    )
                )
            nodes.append(
                RenderNode(
                    id=node.id,
                    kind=node.kind,
                    position=Position(node.x, node.y),
                    payload=node.payload,
                    width=node.width,
                    height=node.height,
                )
            )
            stack.extend((child, node.id) for child in reversed(node.children))
        return GraphLayout(nodes=tuple(nodes), edges=tuple(edges))
