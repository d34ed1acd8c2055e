"""Tests for the renderer output records and their serialisers."""

from __future__ import annotations

import dataclasses
import json

import pytest

from json_orbit import layout_json
from json_orbit.result import EdgeStyle, GraphLayout, Position, RenderEdge, RenderNode
from json_orbit.tree.nodes import ContainerPayload, LeafPayload, NodeKind, PayloadEntry


@pytest.fixture
def container_node() -> RenderNode:
    return RenderNode(
        id="1",
        kind=NodeKind.CONTAINER,
        position=Position(500.0, -2.0),
        payload=ContainerPayload((PayloadEntry("b", "1"),), nested=True),
        width=280,
        height=64,
    )


class TestRenderNode:
    def test_to_dict(self, container_node: RenderNode) -> None:
        assert container_node.to_dict() == {
            "id": "1",
            "kind": "container",
            "position": {"x": 500.0, "y": -2.0},
            "payload": {
                "properties": [{"key": "b", "display_value": "1"}],
                "nested": True,
            },
        }

    def test_to_react_flow(self, container_node: RenderNode) -> None:
        assert container_node.to_react_flow() == {
            "id": "1",
            "type": "container",
            "position": {"x": 500.0, "y": -2.0},
            "data": {
                "properties": [{"key": "b", "displayValue": "1"}],
                "isNested": True,
            },
            "width": 280,
            "height": 64,
        }

    def test_leaf_payload(self) -> None:
        node = RenderNode("2", NodeKind.LEAF, Position(0, 0), LeafPayload("x"), 70, 70)
        assert node.to_dict()["payload"] == {"label": "x"}
        assert node.to_react_flow()["data"] == {"label": "x"}

    def test_is_frozen(self, container_node: RenderNode) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            container_node.id = "9"  # type: ignore[misc]


class TestRenderEdge:
    def test_plain_edge(self) -> None:
        edge = RenderEdge("e0-1", "0", "1")
        assert edge.to_dict() == {"id": "e0-1", "source": "0", "target": "1"}
        assert edge.to_react_flow() == edge.to_dict()

    def test_styled_edge(self) -> None:
        edge = RenderEdge("e0-1", "0", "1", style=EdgeStyle())
        assert edge.to_react_flow() == {
            "id": "e0-1",
            "source": "0",
            "target": "1",
            "type": "default",
            "animated": False,
            "style": {"stroke": "#94a3b8", "strokeWidth": 3},
            "markerEnd": {
                "type": "arrowclosed",
                "color": "#94a3b8",
                "width": 20,
                "height": 20,
            },
        }

    def test_to_dict_omits_style(self) -> None:
        edge = RenderEdge("e0-1", "0", "1", style=EdgeStyle())
        assert "style" not in edge.to_dict()


class TestGraphLayout:
    def test_empty(self) -> None:
        assert GraphLayout((), ()).to_dict() == {"nodes": [], "edges": []}

    def test_serialises_to_json(self) -> None:
        graph = layout_json({"a": [1, "two", None], "b": {"c": True}})
        flow = json.loads(json.dumps(graph.to_react_flow()))
        assert [n["id"] for n in flow["nodes"]] == [n.id for n in graph.nodes]
        assert len(flow["edges"]) == len(graph.edges)

    def test_root_record(self) -> None:
        data = layout_json({"a": 1}).to_dict()
        assert data["nodes"][0] == {
            "id": "root",
            "kind": "container",
            "position": {"x": 0.0, "y": 0.0},
            "payload": {
                "properties": [
                    {"key": "root", "display_value": ""},
                    {"key": "a", "display_value": "1"},
                ],
                "nested": False,
            },
        }
