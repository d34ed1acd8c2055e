"""TreeBuilder: converts any valid JSON value into a VirtualNode tree.

Object entries are split into *simple* values (scalars, shown as rows inside
the object's box) and *complex* values (arrays and objects, which become
children). A nested object is reached through an intermediate PROPERTY node
carrying its key; a nested array is its own labelled CONTAINER. Primitive
array elements become LEAF nodes.

Node ids come from a counter owned by a single build pass, so two builds of
the same value always produce the same ids. The pass walks the value with an
explicit stack, so nesting depth is not bounded by the interpreter's
recursion limit.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_orbit.layout.config import LayoutConfig, NestedArrayMode
from json_orbit.tree.labels import display_string, truncate_label
from json_orbit.tree.nodes import (
    LEAF_SIZE,
    OBJECT_WIDTH,
    PROPERTY_HEIGHT,
    PROPERTY_WIDTH,
    ROOT_HEIGHT,
    ROOT_WIDTH,
    ContainerPayload,
    LeafPayload,
    NodeKind,
    Payload,
    PayloadEntry,
    VirtualNode,
    container_height,
)

ROOT_ID = "root"
ROOT_LABEL = "root"
ARRAY_LABEL = "array"

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class _Shape(StrEnum):
    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()


def _shape_of(value: Any) -> _Shape:
    if isinstance(value, dict):
        return _Shape.OBJECT
    if isinstance(value, list):
        return _Shape.ARRAY
    if value is None or isinstance(value, (str, int, float, bool)):
        return _Shape.SCALAR
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a VirtualNode tree.

    The returned root is always a CONTAINER with id ``"root"`` and a
    ``root`` label row. What hangs below it depends on the input:

    - object: its simple entries become extra rows on the root, its complex
      entries become children (PROPERTY nodes for nested objects, array
      CONTAINERs for arrays);
    - array: its elements become children directly (object elements as
      CONTAINERs, everything else as LEAFs);
    - scalar: a single LEAF child.

    The root's height counts its ``root`` label row as well as the simple
    rows, so ``{"a": 1}`` gives a 2-row (86px) root box rather than the
    1-row (64px) box an object container with the same entries gets. This is
    intentional: the label row is drawn, so it takes space. A root with no
    simple rows keeps the fixed 60px height.

    Example::

        builder = TreeBuilder()
        root = builder.build({"user": {"name": "John"}})
        # root -> PROPERTY("user") -> CONTAINER(name: John)
    """

    config: LayoutConfig = field(default_factory=LayoutConfig)

    def build(self, value: JsonValue) -> VirtualNode:
        """Convert a JSON value to a VirtualNode tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            The root VirtualNode. ``tree_height``, ``x`` and ``y`` are left at
            zero for TreeMeasurer and LayoutEngine to fill in.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type,
                or an object key is not a string.
        """
        return _BuildPass(self.config).run(value)


# A pending child: the opener to call and its arguments.
_Task = tuple[Callable[..., "_Frame"], tuple[Any, ...]]


@dataclass(slots=True)
class _Frame:
    """A node whose id and box are fixed but whose children are still being built."""

    id: str
    depth: int
    kind: NodeKind
    width: int
    height: int
    payload: Payload
    pending: Iterator[_Task]
    built: list[VirtualNode] = field(default_factory=list)

    def finish(self) -> VirtualNode:
        return VirtualNode(
            id=self.id,
            depth=self.depth,
            kind=self.kind,
            width=self.width,
            height=self.height,
            payload=self.payload,
            children=tuple(self.built),
        )


class _BuildPass:
    """State for one ``TreeBuilder.build`` call: the config and the id counter."""

    def __init__(self, config: LayoutConfig) -> None:
        self._config = config
        self._ids = itertools.count()

    def _next_id(self) -> str:
        return str(next(self._ids))

    def run(self, value: Any) -> VirtualNode:
        # A frame's id is taken when it is opened, before any of its
        # children, so ids come out in pre-order.
        stack = [self._open_root(value)]
        while True:
            frame = stack[-1]
            task = next(frame.pending, None)
            if task is not None:
                opener, args = task
                stack.append(opener(*args))
                continue
            node = frame.finish()
            stack.pop()
            if not stack:
                return node
            stack[-1].built.append(node)

    def _open_root(self, value: Any) -> _Frame:
        rows = [PayloadEntry(ROOT_LABEL)]
        shape = _shape_of(value)

        if shape is _Shape.OBJECT:
            simple, complex_entries = self._partition(value)
            rows.extend(simple)
            pending = self._complex_tasks(complex_entries, depth=0)
        elif shape is _Shape.ARRAY:
            pending = self._element_tasks(value, depth=0)
        else:
            pending = iter([(self._open_leaf, (value, 1))])

        height = ROOT_HEIGHT if len(rows) == 1 else container_height(len(rows))
        return _Frame(
            id=ROOT_ID,
            depth=0,
            kind=NodeKind.CONTAINER,
            width=ROOT_WIDTH,
            height=height,
            payload=ContainerPayload(properties=tuple(rows), nested=False),
            pending=pending,
        )

    def _partition(
        self, obj: dict[str, Any]
    ) -> tuple[list[PayloadEntry], list[tuple[str, Any]]]:
        """Split object entries into display rows and entries needing child nodes."""
        simple: list[PayloadEntry] = []
        complex_entries: list[tuple[str, Any]] = []
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            if _shape_of(val) is _Shape.SCALAR:
                label = truncate_label(
                    display_string(val), self._config.max_label_length
                )
                simple.append(PayloadEntry(key, label))
            else:
                complex_entries.append((key, val))
        return simple, complex_entries

    def _complex_tasks(
        self, entries: list[tuple[str, Any]], depth: int
    ) -> Iterator[_Task]:
        """Children of an object at ``depth`` for its array/object entries."""
        for key, val in entries:
            if isinstance(val, list):
                yield self._open_array, (val, depth + 1, key)
            else:
                yield self._open_property, (key, val, depth + 1)

    def _element_tasks(self, arr: list[Any], depth: int) -> Iterator[_Task]:
        """Children for the elements of an array owned by a node at ``depth``."""
        nest_arrays = self._config.nested_arrays is NestedArrayMode.CONTAINER
        for item in arr:
            shape = _shape_of(item)
            if shape is _Shape.OBJECT:
                yield self._open_object, (item, depth + 1)
            elif shape is _Shape.ARRAY and nest_arrays:
                yield self._open_array, (item, depth + 1, None)
            else:
                yield self._open_leaf, (item, depth + 1)

    def _open_object(self, obj: dict[str, Any], depth: int) -> _Frame:
        node_id = self._next_id()
        simple, complex_entries = self._partition(obj)
        return _Frame(
            id=node_id,
            depth=depth,
            kind=NodeKind.CONTAINER,
            width=OBJECT_WIDTH,
            height=container_height(len(simple)),
            payload=ContainerPayload(properties=tuple(simple), nested=depth > 0),
            pending=self._complex_tasks(complex_entries, depth),
        )

    def _open_property(self, key: str, obj: dict[str, Any], depth: int) -> _Frame:
        return _Frame(
            id=self._next_id(),
            depth=depth,
            kind=NodeKind.PROPERTY,
            width=PROPERTY_WIDTH,
            height=PROPERTY_HEIGHT,
            payload=ContainerPayload(
                properties=(PayloadEntry(key),), nested=depth - 1 > 0
            ),
            pending=iter([(self._open_object, (obj, depth + 1))]),
        )

    def _open_array(self, arr: list[Any], depth: int, key: str | None) -> _Frame:
        return _Frame(
            id=self._next_id(),
            depth=depth,
            kind=NodeKind.CONTAINER,
            width=PROPERTY_WIDTH,
            height=PROPERTY_HEIGHT,
            payload=ContainerPayload(
                properties=(PayloadEntry(key or ARRAY_LABEL),), nested=depth > 0
            ),
            pending=self._element_tasks(arr, depth),
        )

    def _open_leaf(self, value: Any, depth: int) -> _Frame:
        return _Frame(
            id=self._next_id(),
            depth=depth,
            kind=NodeKind.LEAF,
            width=LEAF_SIZE,
            height=LEAF_SIZE,
            payload=LeafPayload(display_string(value)),
            pending=iter(()),
        )
