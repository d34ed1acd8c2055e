"""Tree subpackage for JSON-to-diagram tree construction.

Re-exports the public API for the tree module:
- VirtualNode: dataclass representing a node of the diagram tree
- NodeKind: StrEnum of the three node kinds (CONTAINER, PROPERTY, LEAF)
- PayloadEntry, ContainerPayload, LeafPayload: what a node box displays
- TreeBuilder: converts any valid JSON value into a VirtualNode tree
"""

from json_orbit.tree.builder import TreeBuilder
from json_orbit.tree.nodes import (
    ContainerPayload,
    LeafPayload,
    NodeKind,
    PayloadEntry,
    VirtualNode,
)

__all__ = [
    "ContainerPayload",
    "LeafPayload",
    "NodeKind",
    "PayloadEntry",
    "TreeBuilder",
    "VirtualNode",
]
