"""Renderer-ready output records produced by GraphFlattener.

All records are frozen, and every sequence inside them is a tuple, so a
GraphLayout can be handed to a renderer (or returned again from the
JsonMapper cache) without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_orbit.tree.nodes import ContainerPayload, LeafPayload, NodeKind, Payload

__all__ = ["EdgeStyle", "GraphLayout", "Position", "RenderEdge", "RenderNode"]


@dataclass(frozen=True, slots=True)
class Position:
    """Top-left anchor of a node box."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class EdgeStyle:
    """Presentation attributes of an edge.

    Attributes:
        stroke:       Line colour.
        stroke_width: Line width in pixels.
        marker:       Arrow-head marker type at the target end.
        marker_size:  Arrow-head width and height in pixels.
        edge_type:    Renderer edge type ("default" is a bezier curve).
        animated:     Whether the renderer animates the edge.
    """

    stroke: str = "#94a3b8"
    stroke_width: int = 3
    marker: str = "arrowclosed"
    marker_size: int = 20
    edge_type: str = "default"
    animated: bool = False


def _payload_dict(payload: Payload, *, camel: bool) -> dict[str, Any]:
    if isinstance(payload, LeafPayload):
        return {"label": payload.label}
    value_key = "displayValue" if camel else "display_value"
    nested_key = "isNested" if camel else "nested"
    return {
        "properties": [
            {"key": row.key, value_key: row.display_value}
            for row in payload.properties
        ],
        nested_key: payload.nested,
    }


@dataclass(frozen=True, slots=True)
class RenderNode:
    """One node record for the graph renderer.

    Attributes:
        id:       Node id, unique within the layout.
        kind:     Box type to render.
        position: Top-left anchor computed by LayoutEngine.
        payload:  Rows (ContainerPayload) or label (LeafPayload).
        width:    Box width, used for fit-view bounds.
        height:   Box height, used for fit-view bounds.
    """

    id: str
    kind: NodeKind
    position: Position
    payload: ContainerPayload | LeafPayload
    width: int
    height: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": str(self.kind),
            "position": {"x": self.position.x, "y": self.position.y},
            "payload": _payload_dict(self.payload, camel=False),
        }

    def to_react_flow(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": str(self.kind),
            "position": {"x": self.position.x, "y": self.position.y},
            "data": _payload_dict(self.payload, camel=True),
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True, slots=True)
class RenderEdge:
    """One parent -> child edge record.

    ``style`` is None when the flattener was asked for unstyled edges.
    """

    id: str
    source: str
    target: str
    style: EdgeStyle | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "source": self.source, "target": self.target}

    def to_react_flow(self) -> dict[str, Any]:
        out = self.to_dict()
        if self.style is None:
            return out
        style = self.style
        out.update(
            {
                "type": style.edge_type,
                "animated": style.animated,
                "style": {"stroke": style.stroke, "strokeWidth": style.stroke_width},
                "markerEnd": {
                    "type": style.marker,
                    "color": style.stroke,
                    "width": style.marker_size,
                    "height": style.marker_size,
                },
            }
        )
        return out


@dataclass(frozen=True, slots=True)
class GraphLayout:
    """Result of one build -> measure -> layout -> flatten pass.

    Attributes:
        nodes: Node records, parent before children, children in source order.
        edges: Edge records, one per parent/child pair, in discovery order.
    """

    nodes: tuple[RenderNode, ...]
    edges: tuple[RenderEdge, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    def to_react_flow(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_react_flow() for node in self.nodes],
            "edges": [edge.to_react_flow() for edge in self.edges],
        }
