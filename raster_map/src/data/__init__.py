"""Grid persistence and visualization."""

from .persistence import grid_from_dict, grid_to_dict, load_grid, save_grid

__all__ = ["grid_from_dict", "grid_to_dict", "load_grid", "save_grid"]
