"""Tests for GraphFlattener."""

from __future__ import annotations

import pytest

from json_orbit.graph.flatten import GraphFlattener, edge_id
from json_orbit.layout.engine import LayoutEngine
from json_orbit.layout.measure import TreeMeasurer
from json_orbit.result import EdgeStyle, GraphLayout, Position
from json_orbit.tree.builder import TreeBuilder
from json_orbit.tree.nodes import LeafPayload, NodeKind


def _flatten(value: object, flattener: GraphFlattener | None = None) -> GraphLayout:
    root = TreeBuilder().build(value)  # type: ignore[arg-type]
    TreeMeasurer().measure(root)
    LayoutEngine().layout(root)
    return (flattener or GraphFlattener()).flatten(root)


class TestScenarios:
    """The reference inputs and their node kinds, node and edge counts."""

    @pytest.mark.parametrize(
        ("value", "kinds", "edge_count"),
        [
            ({}, ["container"], 0),
            ({"a": 1}, ["container"], 0),
            ({"a": {"b": 1}}, ["container", "property", "container"], 2),
            ({"arr": [1, 2, 3]}, ["container", "container", "leaf", "leaf", "leaf"], 4),
            ([1, {"x": 1}], ["container", "leaf", "container"], 2),
        ],
    )
    def test_kinds_and_counts(self, value: object, kinds: list[str], edge_count: int) -> None:
        graph = _flatten(value)
        assert [str(n.kind) for n in graph.nodes] == kinds
        assert len(graph.nodes) == len(kinds)
        assert len(graph.edges) == edge_count


class TestOrdering:
    def test_nodes_depth_first_parent_before_children(self) -> None:
        graph = _flatten({"a": [1, 2, 3], "b": {"c": 1}})
        assert [n.id for n in graph.nodes] == ["root", "0", "1", "2", "3", "4", "5"]

    def test_edges_follow_depth_first_discovery(self) -> None:
        graph = _flatten({"a": [1, 2, 3], "b": {"c": 1}})
        assert [e.id for e in graph.edges] == [
            "eroot-0",
            "e0-1",
            "e0-2",
            "e0-3",
            "eroot-4",
            "e4-5",
        ]

    def test_element_order_preserved(self) -> None:
        graph = _flatten(["c", "a", "b"])
        labels = [n.payload.label for n in graph.nodes if n.kind == NodeKind.LEAF]  # type: ignore[union-attr]
        assert labels == ["c", "a", "b"]


class TestRecords:
    def test_edge_endpoints(self) -> None:
        graph = _flatten({"a": {"b": 1}})
        edge = graph.edges[0]
        assert (edge.id, edge.source, edge.target) == ("eroot-0", "root", "0")

    def test_edge_id_helper(self) -> None:
        assert edge_id("3", "7") == "e3-7"

    def test_positions_copied_from_tree(self) -> None:
        graph = _flatten({"a": {"b": 1}})
        assert [n.position for n in graph.nodes] == [
            Position(0.0, 0.0),
            Position(500.0, 0.0),
            Position(1000.0, -2.0),
        ]

    def test_payload_and_geometry_carried(self) -> None:
        graph = _flatten([7])
        leaf = graph.nodes[1]
        assert leaf.payload == LeafPayload("7")
        assert (leaf.width, leaf.height) == (70, 70)

    def test_default_style_attached(self) -> None:
        graph = _flatten([1, 2])
        assert all(e.style == EdgeStyle() for e in graph.edges)

    def test_unstyled_edges(self) -> None:
        graph = _flatten([1, 2], GraphFlattener(styled=False))
        assert all(e.style is None for e in graph.edges)

    def test_custom_style(self) -> None:
        style = EdgeStyle(stroke="#000000", stroke_width=1)
        graph = _flatten([1], GraphFlattener(style=style))
        assert graph.edges[0].style is style

    def test_outputs_are_tuples(self) -> None:
        graph = _flatten({"a": [1]})
        assert isinstance(graph.nodes, tuple)
        assert isinstance(graph.edges, tuple)


class TestDeterminism:
    def test_same_input_same_output(self) -> None:
        value = {"k": [{"x": [1, 2]}, "s", {"y": {"z": None}}]}
        assert _flatten(value) == _flatten(value)

    def test_deep_equal_inputs_same_output(self) -> None:
        assert _flatten({"a": [1, {"b": 2}]}) == _flatten({"a": [1, {"b": 2}]})


class TestDeepNesting:
    def test_deep_chain_flattened_without_recursion(self) -> None:
        value: object = 1
        for _ in range(3000):
            value = {"a": value}
        graph = _flatten(value)
        assert len(graph.nodes) == 1 + 2 * 2999
        assert [n.id for n in graph.nodes[:3]] == ["root", "0", "1"]
        assert graph.edges[0].id == edge_id("root", "0")
        assert graph.edges[-1].id == edge_id("5996", "5997")
