"""LayoutEngine: pre-order pass assigning box coordinates.

Every depth level is one column ``x_spacing`` to the right of its parent.
Vertically, a parent's children are stacked as one block centred on the
parent's vertical centre. Each child gets a slot as tall as its measured
subtree and is centred within that slot, so subtrees of very different sizes
never overlap and stay centred on their own parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from json_orbit.layout.config import LayoutConfig
from json_orbit.tree.nodes import VirtualNode

__all__ = ["LayoutEngine"]


@dataclass
class LayoutEngine:
    """Positions a measured VirtualNode tree.

    ``TreeMeasurer.measure`` must have run on the tree first; the engine
    reads ``tree_height`` and writes ``x`` and ``y``.

    Example::

        root = TreeBuilder().build({"a": [1, 2]})
        TreeMeasurer().measure(root)
        LayoutEngine().layout(root)
        # root at (0, 0), the "a" array at x=500, its leaves at x=1000
    """

    config: LayoutConfig = field(default_factory=LayoutConfig)

    def layout(self, node: VirtualNode, x: float = 0.0, y: float = 0.0) -> None:
        """Place ``node`` with its top-left corner at (x, y) and lay out its subtree."""
        gap = self.config.y_spacing
        stack = [(node, x, y)]
        while stack:
            current, cx, cy = stack.pop()
            current.x = cx
            current.y = cy
            if not current.children:
                continue

            block = sum(child.tree_height for child in current.children)
            block += (len(current.children) - 1) * gap

            slot_y = cy + current.height / 2 - block / 2
            child_x = cx + self.config.x_spacing

            for child in current.children:
                slot = child.tree_height
                stack.append((child, child_x, slot_y + (slot - child.height) / 2))
                slot_y += slot + gap
