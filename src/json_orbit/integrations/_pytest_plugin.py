"""pytest plugin for json-orbit.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any

import pytest

from json_orbit import GraphLayout, LayoutConfig

_EPS = 1e-6


def layout_problems(layout: GraphLayout, config: LayoutConfig | None = None) -> list[str]:
    """Return every structural or geometric defect found in ``layout``.

    Checks that the layout is a single tree (one more node than edges, one
    parent per non-root node, unique ids), that every edge spans exactly one
    column of ``config.x_spacing``, and that no two boxes in the same column
    overlap vertically.
    """
    cfg = config if config is not None else LayoutConfig()
    problems: list[str] = []

    if len(layout.nodes) != len(layout.edges) + 1:
        problems.append(
            f"node count {len(layout.nodes)} != edge count {len(layout.edges)} + 1"
        )

    by_id = {node.id: node for node in layout.nodes}
    if len(by_id) != len(layout.nodes):
        problems.append("duplicate node ids")

    parents: dict[str, int] = defaultdict(int)
    for edge in layout.edges:
        source = by_id.get(edge.source)
        target = by_id.get(edge.target)
        if source is None or target is None:
            problems.append(f"edge {edge.id} references a missing node")
            continue
        parents[edge.target] += 1
        dx = target.position.x - source.position.x
        if abs(dx - cfg.x_spacing) > _EPS:
            problems.append(f"edge {edge.id} spans dx={dx}, expected {cfg.x_spacing}")

    for node_id, count in parents.items():
        if count > 1:
            problems.append(f"node {node_id} has {count} parents")

    columns: dict[float, list[Any]] = defaultdict(list)
    for node in layout.nodes:
        columns[node.position.x].append(node)
    for x, column in columns.items():
        column.sort(key=lambda n: n.position.y)
        for upper, lower in zip(column, column[1:]):
            if upper.position.y + upper.height > lower.position.y + _EPS:
                problems.append(f"nodes {upper.id} and {lower.id} overlap at x={x}")

    return problems


@pytest.fixture(scope="session")
def assert_valid_layout() -> Any:
    """Fixture that returns a callable layout validity asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_diagram(assert_valid_layout):
            assert_valid_layout(layout_json({"a": [1, 2]}))

    Returns:
        A callable ``_assert(layout, config=None) -> None`` that raises
        ``AssertionError`` listing every defect found.
    """

    def _assert(layout: GraphLayout, config: LayoutConfig | None = None) -> None:
        """Assert that ``layout`` is a well-formed, non-overlapping tree layout.

        Args:
            layout: The GraphLayout under test.
            config: The LayoutConfig it was produced with. Defaults to
                    ``LayoutConfig()``.

        Raises:
            AssertionError: When any check fails, with one line per defect.
        """
        problems = layout_problems(layout, config)
        if problems:
            raise AssertionError(
                "invalid layout:\n  " + "\n  ".join(problems)
            )

    return _assert
