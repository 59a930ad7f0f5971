"""Breadth-first traversal over 4-connected rasters."""

from .engine import breadth_first
from .neighbours import DIRECTIONS, neighbours, wrap_coordinate
from .operations import UNREACHED, distance_map, flood_fill, shortest_path

__all__ = [
    "DIRECTIONS",
    "UNREACHED",
    "breadth_first",
    "distance_map",
    "flood_fill",
    "neighbours",
    "shortest_path",
    "wrap_coordinate",
]
