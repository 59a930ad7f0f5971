"""Breadth-first search shared by every traversal operation."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterator, Optional, Tuple

import numpy as np

from raster_map.src.core.grid import Grid
from raster_map.src.traversal.neighbours import neighbours

__all__ = ["breadth_first"]

Cell = Tuple[int, int]


def breadth_first(
    grid: Grid,
    start: Cell,
    accept: Callable[[int], bool],
    wrap: bool = False,
) -> Iterator[Tuple[Cell, Optional[Cell]]]:
    """Yield ``(cell, parent)`` pairs from ``start`` in FIFO order.

    ``start`` must be inside ``grid`` and is yielded first with parent
    ``None``. A neighbour is enqueued when it has not been visited yet and
    ``accept`` returns ``True`` for its current value; it is marked visited at
    enqueue time, so every cell is yielded at most once.

    Neighbours of a cell are expanded only when the consumer asks for the next
    pair. Breaking out of the loop therefore ends the search at the current
    cell, and values written to the grid by the consumer are seen by
    ``accept`` for the cells that follow.
    """

    width, height = grid.shape()
    visited = np.zeros((width, height), dtype=bool)
    queue: Deque[Tuple[Cell, Optional[Cell]]] = deque([(start, None)])
    visited[start] = True

    while queue:
        cell, parent = queue.popleft()
        yield cell, parent
        for nxt in neighbours(cell, width, height, wrap):
            if visited[nxt]:
                continue
            if not accept(grid.get(*nxt)):
                continue
            visited[nxt] = True
            queue.append((nxt, cell))
