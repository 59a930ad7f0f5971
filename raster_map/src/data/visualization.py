"""Text and matplotlib renderings of a grid."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib
matplotlib.use("Agg")  # headless
import matplotlib.pyplot as plt

from raster_map.src.core.grid import Grid


def render_text(grid: Grid) -> str:
    """Return the grid as text, one line per ``y`` with ``x`` increasing rightwards."""
    pad = max(len(str(v)) for col in grid.to_list() for v in col)
    lines = []
    for y in range(grid.height):
        lines.append(" ".join(str(grid.get(x, y)).rjust(pad) for x in range(grid.width)))
    return "\n".join(lines)


def plot_grid(grid: Grid, path: Optional[str | Path] = None, *, cmap: str = "viridis") -> plt.Figure:
    """Draw ``grid`` with ``imshow`` and optionally save it as a PNG at ``path``.

    The image is transposed so ``x`` runs horizontally and ``y`` vertically.
    """
    fig = plt.figure(figsize=(4, 4))
    plt.imshow(grid.to_array().T, cmap=cmap, interpolation="nearest")
    plt.axis("off")
    plt.tight_layout()
    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path)
    return fig
