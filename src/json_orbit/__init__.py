"""JSON Orbit - render JSON values as positioned node-and-edge diagrams."""

from __future__ import annotations

from json_orbit.api import layout_json, layout_nodes_and_edges
from json_orbit.graph.flatten import GraphFlattener
from json_orbit.layout.config import LayoutConfig, NestedArrayMode
from json_orbit.layout.engine import LayoutEngine
from json_orbit.layout.measure import TreeMeasurer
from json_orbit.mapper import JsonMapper
from json_orbit.result import EdgeStyle, GraphLayout, Position, RenderEdge, RenderNode
from json_orbit.tree.builder import TreeBuilder
from json_orbit.tree.nodes import (
    ContainerPayload,
    LeafPayload,
    NodeKind,
    PayloadEntry,
    VirtualNode,
)
from json_orbit.viewport import Viewport, fit_view

__version__: str = "0.1.0"
__all__: list[str] = [
    "ContainerPayload",
    "EdgeStyle",
    "GraphFlattener",
    "GraphLayout",
    "JsonMapper",
    "LayoutConfig",
    "LayoutEngine",
    "LeafPayload",
    "NestedArrayMode",
    "NodeKind",
    "PayloadEntry",
    "Position",
    "RenderEdge",
    "RenderNode",
    "TreeBuilder",
    "TreeMeasurer",
    "VirtualNode",
    "Viewport",
    "fit_view",
    "layout_json",
    "layout_nodes_and_edges",
]
