"""LayoutConfig and NestedArrayMode for diagram layout configuration.

LayoutConfig is a frozen (immutable) dataclass holding the layout
parameters. NestedArrayMode selects how an array found directly inside
another array is drawn.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

X_SPACING = 500
Y_SPACING = 25
MAX_LABEL_LENGTH = 25


class NestedArrayMode(StrEnum):
    """How an array element that is itself an array is rendered.

    - LEAF:      One leaf box labelled with the inner array's compact JSON.
    - CONTAINER: Recurse into the inner array as an "array" container.
    """

    LEAF = auto()
    CONTAINER = auto()


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable configuration for building and laying out the diagram.

    Attributes:
        x_spacing: Horizontal distance between depth columns (> 0).
        y_spacing: Vertical gap between sibling subtrees (>= 0).
        max_label_length: Simple property values longer than this are
            truncated with a trailing ``...`` (>= 1).
        nested_arrays: How arrays nested directly in arrays are drawn.
    """

    x_spacing: float = X_SPACING
    y_spacing: float = Y_SPACING
    max_label_length: int = MAX_LABEL_LENGTH
    nested_arrays: NestedArrayMode = NestedArrayMode.LEAF

    def __post_init__(self) -> None:
        if self.x_spacing <= 0:
            msg = f"x_spacing must be > 0, got {self.x_spacing}"
            raise ValueError(msg)
        if self.y_spacing < 0:
            msg = f"y_spacing must be >= 0, got {self.y_spacing}"
            raise ValueError(msg)
        if self.max_label_length < 1:
            msg = f"max_label_length must be >= 1, got {self.max_label_length}"
            raise ValueError(msg)
        if not isinstance(self.nested_arrays, NestedArrayMode):
            # Accept the plain string values ("leaf", "container").
            object.__setattr__(
                self, "nested_arrays", NestedArrayMode(self.nested_arrays)
            )
