"""Nearest-neighbour resampling of raster buffers."""

from __future__ import annotations

import math

import numpy as np

__all__ = ["nearest_neighbour"]


def _source_indices(new_size: int, old_size: int, factor: float) -> np.ndarray:
    return np.array(
        [min(old_size - 1, max(0, math.floor(i / factor))) for i in range(new_size)],
        dtype=np.intp,
    )


def nearest_neighbour(cells: np.ndarray, new_width: int, new_height: int, sx: float, sy: float) -> np.ndarray:
    """Return a new ``(new_width, new_height)`` buffer sampled from ``cells``.

    Destination ``(x, y)`` takes the value of source
    ``(clamp(floor(x / sx)), clamp(floor(y / sy)))``, clamped to the source
    bounds. ``cells`` itself is left untouched.
    """
    old_width, old_height = cells.shape
    src_x = _source_indices(new_width, old_width, sx)
    src_y = _source_indices(new_height, old_height, sy)
    return cells[np.ix_(src_x, src_y)].copy()
