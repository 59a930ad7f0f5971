"""Flood fill, shortest path and distance map over a :class:`Grid`.

All three run :func:`breadth_first` and differ only in what they accept and
what they record per visited cell. Missing or off-grid endpoints are reported
through sentinel results (``0``, ``None`` or an all ``-1`` grid), never by
raising.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from raster_map.src.core.grid import Grid
from raster_map.src.core.point import Point
from raster_map.src.traversal.engine import breadth_first
from raster_map.src.utils import config_loader

__all__ = ["UNREACHED", "flood_fill", "shortest_path", "distance_map"]

logger = logging.getLogger(__name__)

UNREACHED = -1

Cell = Tuple[int, int]


def _trace(msg: str, *args: object) -> None:
    level = logging.INFO if config_loader.TRACE_TRAVERSAL else logging.DEBUG
    logger.log(level, msg, *args)


def flood_fill(grid: Grid, start: Optional[Point], new_value: int, wrap: bool = False) -> int:
    """Repaint the 4-connected region of ``start`` with ``new_value``.

    Returns the number of cells changed, ``0`` if ``start`` is missing, off the
    grid, or already holds ``new_value``.
    """
    if not grid.is_inside(start):
        return 0
    orig = grid.get(start.x, start.y)
    if orig == new_value:
        return 0

    filled = 0
    for (x, y), _ in breadth_first(grid, start.as_tuple(), lambda v: v == orig, wrap):
        if grid.get(x, y) == orig:
            grid.set(x, y, new_value)
            filled += 1
    _trace("fill from %s: %d cells %d -> %d (wrap=%s)", start, filled, orig, new_value, wrap)
    return filled


def shortest_path(
    grid: Grid,
    start: Optional[Point],
    goal: Optional[Point],
    obstacle: int,
    wrap: bool = False,
) -> Optional[List[Point]]:
    """Return the cells of a shortest 4-connected path from ``start`` to ``goal``.

    Both endpoints are included. Returns ``None`` if either endpoint is
    missing, off the grid, sits on an ``obstacle`` cell, or the goal cannot be
    reached.
    """
    if not grid.is_inside(start) or not grid.is_inside(goal):
        return None
    if grid.get(start.x, start.y) == obstacle or grid.get(goal.x, goal.y) == obstacle:
        return None

    origin = start.as_tuple()
    target = goal.as_tuple()
    parents: Dict[Cell, Optional[Cell]] = {}
    found = False
    for cell, parent in breadth_first(grid, origin, lambda v: v != obstacle, wrap):
        parents[cell] = parent
        if cell == target:
            found = True
            break

    if not found:
        _trace("no path from %s to %s (obstacle=%d, wrap=%s)", start, goal, obstacle, wrap)
        return None

    path: List[Point] = []
    cell = target
    while cell != origin:
        path.append(Point(*cell))
        cell = parents[cell]
    path.append(Point(*origin))
    path.reverse()
    _trace("path from %s to %s: %d cells (wrap=%s)", start, goal, len(path), wrap)
    return path


def distance_map(grid: Grid, start: Optional[Point], obstacle: int, wrap: bool = False) -> Grid:
    """Return a grid of BFS step counts from ``start``.

    Unreached and obstacle cells hold ``-1``. If ``start`` is missing or off
    the grid every cell is ``-1``.
    """
    result = Grid.create(grid.width, grid.height, UNREACHED)
    if not grid.is_inside(start):
        return result

    reached = 0
    for (x, y), parent in breadth_first(grid, start.as_tuple(), lambda v: v != obstacle, wrap):
        result.set(x, y, 0 if parent is None else result.get(*parent) + 1)
        reached += 1
    _trace("distances from %s: %d cells reached (obstacle=%d, wrap=%s)", start, reached, obstacle, wrap)
    return result
