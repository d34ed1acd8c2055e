"""Layout subpackage: configuration, subtree measurement and positioning."""

from json_orbit.layout.config import LayoutConfig, NestedArrayMode
from json_orbit.layout.engine import LayoutEngine
from json_orbit.layout.measure import TreeMeasurer

__all__ = ["LayoutConfig", "LayoutEngine", "NestedArrayMode", "TreeMeasurer"]
