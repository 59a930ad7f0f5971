"""Per-pixel rasterization of circles, lines and rectangles onto a grid.

Shapes are clipped to the grid silently. Only a missing point is reported as
an error; geometry never is.
"""

from __future__ import annotations

from typing import Optional

from raster_map.src.core.errors import NullCenterError, NullEndpointError
from raster_map.src.core.grid import Grid
from raster_map.src.core.point import Point
from raster_map.src.utils.rounding import round_half_away

__all__ = ["draw_circle", "draw_line", "draw_rect"]


def _plot(grid: Grid, x: int, y: int, color: int) -> None:
    if 0 <= x < grid.width and 0 <= y < grid.height:
        grid.set(x, y, color)


def draw_circle(grid: Grid, center: Optional[Point], radius: float, color: int) -> None:
    """Paint every cell within Euclidean ``radius`` of ``center``."""
    if center is None:
        raise NullCenterError("circle center is None")
    for x in range(grid.width):
        for y in range(grid.height):
            if center.distance(Point(x, y)) <= radius:
                grid.set(x, y, color)


def draw_line(grid: Grid, p1: Optional[Point], p2: Optional[Point], color: int) -> None:
    """Draw a straight line from ``p1`` to ``p2`` inclusive.

    The axis with the larger absolute delta is walked in unit steps (x wins a
    tie) and the other coordinate is interpolated and rounded half away from
    zero.
    """
    if p1 is None or p2 is None:
        raise NullEndpointError("line endpoint is None")
    if p1 == p2:
        if grid.is_inside(p1):
            grid.set(p1.x, p1.y, color)
        return

    x1, y1, x2, y2 = p1.x, p1.y, p2.x, p2.y
    if abs(x2 - x1) >= abs(y2 - y1):
        step = 1 if x1 < x2 else -1
        for xi in range(x1, x2 + step, step):
            t = (xi - x1) / (x2 - x1)
            _plot(grid, xi, round_half_away(y1 + t * (y2 - y1)), color)
    else:
        step = 1 if y1 < y2 else -1
        for yi in range(y1, y2 + step, step):
            t = (yi - y1) / (y2 - y1)
            _plot(grid, round_half_away(x1 + t * (x2 - x1)), yi, color)


def draw_rect(grid: Grid, p1: Optional[Point], p2: Optional[Point], color: int) -> None:
    """Fill the axis-aligned box spanned by ``p1`` and ``p2``, corners included."""
    if p1 is None or p2 is None:
        raise NullEndpointError("rectangle corner is None")
    x_lo, x_hi = sorted((p1.x, p2.x))
    y_lo, y_hi = sorted((p1.y, p2.y))
    for x in range(max(0, x_lo), min(grid.width - 1, x_hi) + 1):
        for y in range(max(0, y_lo), min(grid.height - 1, y_hi) + 1):
            grid.set(x, y, color)
