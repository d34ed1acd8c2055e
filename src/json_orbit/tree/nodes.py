"""VirtualNode dataclass and NodeKind StrEnum for the JSON-to-diagram tree.

Provides the intermediate representation produced by TreeBuilder and then
measured (TreeMeasurer) and positioned (LayoutEngine) before being flattened
into renderer records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

# Node box geometry (pixels).
ROOT_WIDTH = 150
ROOT_HEIGHT = 60
OBJECT_WIDTH = 280
PROPERTY_WIDTH = 200
PROPERTY_HEIGHT = 60
LEAF_SIZE = 70
ROW_HEIGHT = 22
CONTAINER_PADDING = 42


def container_height(rows: int) -> int:
    """Height of a container box showing ``rows`` key/value lines."""
    return rows * ROW_HEIGHT + CONTAINER_PADDING


class NodeKind(StrEnum):
    """Enumeration of the three renderable node kinds.

    - CONTAINER -> "container" : JSON object or array (and the root)
    - PROPERTY  -> "property"  : Key label between an object and a nested object
    - LEAF      -> "leaf"      : A primitive element inside an array
    """

    CONTAINER = auto()
    PROPERTY = auto()
    LEAF = auto()


@dataclass(frozen=True, slots=True)
class PayloadEntry:
    """One ``key: displayValue`` line of a container or property box.

    ``display_value`` is empty for label-only rows (property nodes, array
    containers and the root label).
    """

    key: str
    display_value: str = ""


@dataclass(frozen=True, slots=True)
class ContainerPayload:
    """Payload of CONTAINER and PROPERTY nodes.

    Attributes:
        properties: Ordered rows shown inside the box.
        nested:     True when the owning object sits below the root level.
    """

    properties: tuple[PayloadEntry, ...] = ()
    nested: bool = False


@dataclass(frozen=True, slots=True)
class LeafPayload:
    """Payload of LEAF nodes: a single string label."""

    label: str


Payload = ContainerPayload | LeafPayload


@dataclass(slots=True)
class VirtualNode:
    """A node in the diagram tree.

    Attributes:
        id:          Unique id within one build pass ("root" for the root).
        depth:       0 for the root; parent depth + 1 for every child.
        kind:        Which box this node renders as (see NodeKind).
        width:       Box width, fixed by kind.
        height:      Box height, fixed by kind and simple-property count.
        payload:     Rows (containers/properties) or label (leaves).
        children:    Owned child nodes in source order. A tuple, so the
                     shape of the tree is fixed once the builder returns it.
        tree_height: Vertical extent of the node and its subtree. Set by
                     TreeMeasurer.
        x, y:        Top-left anchor of the box. Set by LayoutEngine.
    """

    id: str
    depth: int
    kind: NodeKind
    width: int
    height: int
    payload: Payload
    children: tuple[VirtualNode, ...] = ()
    tree_height: float = 0.0
    x: float = 0.0
    y: float = 0.0

    def walk(self) -> list[VirtualNode]:
        """Return this node and all descendants in pre-order."""
        out: list[VirtualNode] = []
        stack = [self]
        while stack:
            node = stack.pop()
            out.append(node)
            stack.extend(reversed(node.children))
        return out

