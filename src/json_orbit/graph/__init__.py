"""Graph subpackage: flattening of positioned trees into node/edge records."""

from json_orbit.graph.flatten import GraphFlattener

__all__ = ["GraphFlattener"]
