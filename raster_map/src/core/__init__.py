"""Core raster data structures."""

from .errors import (
    GridError,
    InvalidDimensionError,
    InvalidScaleError,
    InvalidShapeError,
    NullCenterError,
    NullEndpointError,
    NullPointError,
    OutOfBoundsError,
)
from .grid import Grid
from .point import Point

__all__ = [
    "Grid",
    "Point",
    "GridError",
    "InvalidDimensionError",
    "InvalidScaleError",
    "InvalidShapeError",
    "NullCenterError",
    "NullEndpointError",
    "NullPointError",
    "OutOfBoundsError",
]
