"""Rasterization and resampling helpers."""

from .rasterizer import draw_circle, draw_line, draw_rect
from .resample import nearest_neighbour

__all__ = ["draw_circle", "draw_line", "draw_rect", "nearest_neighbour"]
