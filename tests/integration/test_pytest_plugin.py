"""Integration tests for the json-orbit pytest plugin.

These tests verify that the assert_valid_layout fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-orbit to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from json_orbit import LayoutConfig, layout_json
from json_orbit.integrations._pytest_plugin import layout_problems
from json_orbit.result import GraphLayout, Position


def test_fixture_passes_valid_layout(assert_valid_layout: Any) -> None:
    assert_valid_layout(layout_json({"a": [1, 2, {"b": {"c": 3}}], "d": {}}))


def test_fixture_custom_config(assert_valid_layout: Any) -> None:
    cfg = LayoutConfig(x_spacing=120, y_spacing=0)
    assert_valid_layout(layout_json([[1], {"x": [2, 3]}], config=cfg), cfg)


def test_fixture_detects_wrong_spacing(assert_valid_layout: Any) -> None:
    graph = layout_json([1], config=LayoutConfig(x_spacing=120))
    with pytest.raises(AssertionError, match="spans dx=120"):
        assert_valid_layout(graph)


def test_fixture_detects_overlap(assert_valid_layout: Any) -> None:
    graph = layout_json([1, 2])
    squashed = dataclasses.replace(
        graph.nodes[2], position=Position(graph.nodes[2].position.x, graph.nodes[1].position.y)
    )
    broken = GraphLayout(nodes=(graph.nodes[0], graph.nodes[1], squashed), edges=graph.edges)
    with pytest.raises(AssertionError, match="overlap"):
        assert_valid_layout(broken)


def test_fixture_detects_missing_edge(assert_valid_layout: Any) -> None:
    graph = layout_json([1, 2])
    broken = GraphLayout(nodes=graph.nodes, edges=graph.edges[:1])
    with pytest.raises(AssertionError, match="node count"):
        assert_valid_layout(broken)


def test_layout_problems_empty_for_valid_layout() -> None:
    assert layout_problems(layout_json({"x": {"y": [1]}})) == []


def test_layout_problems_reports_dangling_edge() -> None:
    graph = layout_json([1])
    broken = GraphLayout(nodes=graph.nodes[:1], edges=graph.edges)
    problems = layout_problems(broken)
    assert any("missing node" in p for p in problems)


def test_fixture_returns_callable(assert_valid_layout: Any) -> None:
    assert callable(assert_valid_layout)
