"""Exceptions reported for misuse of the raster API."""

from __future__ import annotations

__all__ = [
    "GridError",
    "InvalidDimensionError",
    "InvalidShapeError",
    "InvalidScaleError",
    "OutOfBoundsError",
    "NullPointError",
    "NullEndpointError",
    "NullCenterError",
]


class GridError(Exception):
    """Base class for every error raised by :mod:`raster_map`."""


class InvalidDimensionError(GridError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class InvalidShapeError(GridError, ValueError):
    """Raised when a buffer is empty, ragged or not two-dimensional."""


class InvalidScaleError(GridError, ValueError):
    """Raised when a resize factor is not strictly positive."""


class OutOfBoundsError(GridError, IndexError):
    """Raised on direct cell access outside ``[0, W) x [0, H)``."""


class NullPointError(GridError, ValueError):
    """Raised when ``None`` is passed where a point is required."""


class NullEndpointError(NullPointError):
    """Raised when a line or rectangle is missing an endpoint."""


class NullCenterError(NullPointError):
    """Raised when a circle is drawn without a center."""
