"""TreeMeasurer: post-order pass computing each node's subtree height."""

from __future__ import annotations

from dataclasses import dataclass, field

from json_orbit.layout.config import LayoutConfig
from json_orbit.tree.nodes import VirtualNode

__all__ = ["TreeMeasurer"]


@dataclass
class TreeMeasurer:
    """Fills in ``tree_height`` for every node of a freshly built tree.

    For a node without children ``tree_height == height``. Otherwise::

        tree_height = max(height, sum(child.tree_height) + (n - 1) * y_spacing)

    which is exactly the vertical room LayoutEngine needs to stack the
    children's subtrees without overlap.
    """

    config: LayoutConfig = field(default_factory=LayoutConfig)

    def measure(self, node: VirtualNode) -> float:
        """Measure ``node`` and its subtree; return ``node.tree_height``."""
        # Reversed pre-order visits every child before its parent.
        for current in reversed(node.walk()):
            if not current.children:
                current.tree_height = current.height
                continue
            stacked = sum(child.tree_height for child in current.children)
            stacked += (len(current.children) - 1) * self.config.y_spacing
            current.tree_height = max(current.height, stacked)
        return node.tree_height
