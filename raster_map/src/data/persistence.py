"""Save and load grids as JSON documents or compressed numpy archives.

Both formats store ``width``, ``height`` and ``data``, where ``data`` is the
buffer in row-major order by the first index (``x``).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import numpy as np

from raster_map.src.core.errors import InvalidShapeError
from raster_map.src.core.grid import Grid

__all__ = ["grid_to_dict", "grid_from_dict", "save_grid", "load_grid"]


def grid_to_dict(grid: Grid) -> Dict[str, Any]:
    """Return a JSON-serialisable description of ``grid``."""
    return {"width": grid.width, "height": grid.height, "data": grid.to_list()}


def grid_from_dict(payload: Dict[str, Any]) -> Grid:
    """Rebuild a grid from :func:`grid_to_dict` output.

    Raises :class:`InvalidShapeError` if the declared dimensions disagree with
    the buffer.
    """
    grid = Grid(payload["data"])
    width = int(payload.get("width", grid.width))
    height = int(payload.get("height", grid.height))
    if (width, height) != grid.shape():
        raise InvalidShapeError(
            f"declared shape {width}x{height} does not match data {grid.width}x{grid.height}"
        )
    return grid


def save_grid(grid: Grid, path: str | Path) -> Path:
    """Write ``grid`` to ``path``; the suffix selects ``.json`` or ``.npz``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(grid_to_dict(grid), f)
    elif path.suffix == ".npz":
        np.savez_compressed(path, width=grid.width, height=grid.height, data=grid.to_array())
    else:
        raise ValueError(f"Unsupported grid format: {path.suffix}")
    return path


def load_grid(path: str | Path) -> Grid:
    """Load a grid previously written by :func:`save_grid`."""
    path = Path(path)
    if path.suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            return grid_from_dict(json.load(f))
    if path.suffix == ".npz":
        with np.load(path) as archive:
            return grid_from_dict(
                {"width": archive["width"], "height": archive["height"], "data": archive["data"]}
            )
    raise ValueError(f"Unsupported grid format: {path.suffix}")
