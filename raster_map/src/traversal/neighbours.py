"""4-connected neighbour resolution with optional toroidal wrap."""

from __future__ import annotations

from typing import Iterator, Tuple

__all__ = ["DIRECTIONS", "wrap_coordinate", "neighbours"]

Cell = Tuple[int, int]

DIRECTIONS: Tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def wrap_coordinate(value: int, dimension: int, wrap: bool) -> int:
    """Fold a single coordinate one step back onto ``[0, dimension)``.

    Only unit overshoots are folded: ``-1`` becomes ``dimension - 1`` and
    ``dimension`` becomes ``0``. Without ``wrap`` the value is returned as is.
    """
    if not wrap:
        return value
    if value < 0:
        return dimension - 1
    if value >= dimension:
        return 0
    return value


def neighbours(cell: Cell, width: int, height: int, wrap: bool) -> Iterator[Cell]:
    """Yield the in-bounds axis-aligned neighbours of ``cell``."""
    cx, cy = cell
    for dx, dy in DIRECTIONS:
        nx = wrap_coordinate(cx + dx, width, wrap)
        ny = wrap_coordinate(cy + dy, height, wrap)
        if 0 <= nx < width and 0 <= ny < height:
            yield nx, ny
