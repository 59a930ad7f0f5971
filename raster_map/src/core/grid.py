"""Dense integer raster used by the traversal and drawing operations."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from raster_map.src.core.errors import (
    InvalidDimensionError,
    InvalidScaleError,
    InvalidShapeError,
    NullPointError,
    OutOfBoundsError,
)
from raster_map.src.core.point import Point
from raster_map.src.utils import config_loader
from raster_map.src.utils.rounding import round_half_away, round_half_away_array

logger = logging.getLogger(__name__)


def _integer_cells(raw: Any) -> np.ndarray:
    """Convert ``raw`` to a 2D integer array in the configured cell dtype.

    Non-numeric and non-integer values are rejected rather than truncated.
    """
    try:
        arr = np.array(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidShapeError(f"buffer cannot be read as integers: {exc}") from exc
    if arr.ndim != 2:
        raise InvalidShapeError(f"buffer must be 2-dimensional, got {arr.ndim} dimensions")
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidShapeError(f"buffer values must be integers, got {arr.dtype}")
    return arr.astype(config_loader.CELL_DTYPE, copy=True)


def _copy_buffer(buffer: Any) -> np.ndarray:
    """Validate ``buffer`` and return a private ``(width, height)`` copy."""
    if isinstance(buffer, Grid):
        return buffer.to_array()
    if isinstance(buffer, np.ndarray):
        if buffer.ndim == 2 and buffer.shape[0] == 0:
            raise InvalidShapeError("buffer is empty")
        if buffer.ndim == 2 and buffer.shape[1] == 0:
            raise InvalidShapeError("buffer has zero height")
        return _integer_cells(buffer)
    if buffer is None or not isinstance(buffer, Sequence) or len(buffer) == 0:
        raise InvalidShapeError("buffer is empty")
    column = buffer[0]
    if not isinstance(column, (Sequence, np.ndarray)):
        raise InvalidShapeError("buffer must be a sequence of sequences")
    height = len(column)
    if height == 0:
        raise InvalidShapeError("buffer has zero height")
    for col in buffer:
        if not isinstance(col, (Sequence, np.ndarray)) or len(col) != height:
            raise InvalidShapeError("ragged buffer: all columns must have the same length")
    return _integer_cells([list(col) for col in buffer])


class Grid:
    """2D grid of integer color values indexed as ``grid.get(x, y)``.

    The first buffer index is ``x`` (``0 <= x < width``) and the second is
    ``y`` (``0 <= y < height``). Buffers are copied on the way in and on the
    way out so callers never alias the internal storage. Incoming values must
    already be integers; floats and other types are rejected, not truncated.
    """

    __hash__ = None  # mutable

    def __init__(self, data: Any) -> None:
        self._cells: np.ndarray = _copy_buffer(data)

    # Construction ------------------------------------------------------

    @classmethod
    def create(cls, width: int, height: int, fill: Optional[int] = None) -> "Grid":
        """Return a ``width`` x ``height`` grid with every cell set to ``fill``."""
        grid = cls.__new__(cls)
        grid._cells = cls._allocate(width, height, fill)
        return grid

    @classmethod
    def square(cls, size: int, fill: Optional[int] = None) -> "Grid":
        """Return a ``size`` x ``size`` grid."""
        return cls.create(size, size, fill)

    @staticmethod
    def _allocate(width: int, height: int, fill: Optional[int]) -> np.ndarray:
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(f"invalid dimensions {width}x{height}")
        if fill is None:
            fill = config_loader.DEFAULT_FILL
        return np.full((width, height), fill, dtype=config_loader.CELL_DTYPE)

    def copy(self) -> "Grid":
        return Grid(self)

    def reset(self, width: int, height: int, fill: Optional[int] = None) -> None:
        """Replace the buffer with a fresh ``width`` x ``height`` one."""
        self._cells = self._allocate(width, height, fill)

    def load(self, buffer: Any) -> None:
        """Replace the buffer with a copy of ``buffer``."""
        self._cells = _copy_buffer(buffer)

    # Accessors ---------------------------------------------------------

    @property
    def width(self) -> int:
        return int(self._cells.shape[0])

    @property
    def height(self) -> int:
        return int(self._cells.shape[1])

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as ``(width, height)``."""
        return self.width, self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise OutOfBoundsError(f"({x},{y}) outside {self.width}x{self.height} grid")

    def get(self, x: int, y: int) -> int:
        """Return the value at ``(x, y)``."""
        self._check_bounds(x, y)
        return int(self._cells[x, y])

    def set(self, x: int, y: int, value: int) -> None:
        """Set the value at ``(x, y)``."""
        self._check_bounds(x, y)
        self._cells[x, y] = value

    def get_at(self, point: Optional[Point]) -> int:
        if point is None:
            raise NullPointError("point is None")
        return self.get(point.x, point.y)

    def set_at(self, point: Optional[Point], value: int) -> None:
        if point is None:
            raise NullPointError("point is None")
        self.set(point.x, point.y, value)

    def is_inside(self, point: Optional[Point]) -> bool:
        """Return ``True`` if ``point`` lies on the grid; ``False`` for ``None``."""
        if point is None:
            return False
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def same_dimensions(self, other: Optional["Grid"]) -> bool:
        if other is None:
            return False
        return self.width == other.width and self.height == other.height

    def to_list(self) -> List[List[int]]:
        """Return a deep list copy of the buffer, outer index ``x``."""
        return self._cells.tolist()

    def to_array(self) -> np.ndarray:
        """Return a copy of the buffer as a ``(width, height)`` array."""
        return self._cells.copy()

    # Pixel-wise arithmetic ---------------------------------------------

    def add(self, other: Optional["Grid"]) -> None:
        """Add ``other`` cell by cell; does nothing if the dimensions differ."""
        if not self.same_dimensions(other):
            logger.debug("add skipped: %r does not match %r", other, self)
            return
        self._cells += other._cells

    def scale(self, factor: float) -> None:
        """Multiply every cell by ``factor``, rounding half away from zero."""
        scaled = round_half_away_array(self._cells * float(factor))
        self._cells = scaled.astype(self._cells.dtype)

    def resize(self, sx: float, sy: float) -> None:
        """Resample the grid by ``sx`` and ``sy`` with nearest-neighbour lookup.

        Raises :class:`InvalidScaleError` before touching the buffer if either
        factor is not strictly positive.
        """
        if sx <= 0 or sy <= 0:
            raise InvalidScaleError(f"scale factors must be positive, got ({sx}, {sy})")
        from raster_map.src.draw.resample import nearest_neighbour

        new_w = max(1, round_half_away(self.width * sx))
        new_h = max(1, round_half_away(self.height * sy))
        self._cells = nearest_neighbour(self._cells, new_w, new_h, sx, sy)

    # Traversal ---------------------------------------------------------

    def fill(self, start: Optional[Point], new_value: int, wrap: bool = False) -> int:
        from raster_map.src.traversal.operations import flood_fill

        return flood_fill(self, start, new_value, wrap)

    def shortest_path(
        self, start: Optional[Point], goal: Optional[Point], obstacle: int, wrap: bool = False
    ) -> Optional[List[Point]]:
        from raster_map.src.traversal.operations import shortest_path

        return shortest_path(self, start, goal, obstacle, wrap)

    def all_distances(self, start: Optional[Point], obstacle: int, wrap: bool = False) -> "Grid":
        from raster_map.src.traversal.operations import distance_map

        return distance_map(self, start, obstacle, wrap)

    # Drawing -----------------------------------------------------------

    def draw_circle(self, center: Optional[Point], radius: float, color: int) -> None:
        from raster_map.src.draw.rasterizer import draw_circle

        draw_circle(self, center, radius, color)

    def draw_line(self, p1: Optional[Point], p2: Optional[Point], color: int) -> None:
        from raster_map.src.draw.rasterizer import draw_line

        draw_line(self, p1, p2, color)

    def draw_rect(self, p1: Optional[Point], p2: Optional[Point], color: int) -> None:
        from raster_map.src.draw.rasterizer import draw_rect

        draw_rect(self, p1, p2, color)

    # Comparison --------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.same_dimensions(other) and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
