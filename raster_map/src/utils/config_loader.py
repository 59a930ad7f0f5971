"""Loads YAML/JSON configuration files and the raster runtime settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import yaml


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError(f"Unsupported config format: {path_p.suffix}")


def load_raster_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the packaged raster configuration, or ``{}`` if it is missing."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "raster_config.yaml"
    if path.exists():
        return load_config(path)
    return {}


RASTER_CONFIG: Dict[str, Any] = load_raster_config()
CELL_DTYPE: np.dtype = np.dtype(RASTER_CONFIG.get("cell_dtype", "int64"))
DEFAULT_FILL: int = int(RASTER_CONFIG.get("default_fill", 0))
OBSTACLE_VALUE: int = int(RASTER_CONFIG.get("obstacle_value", 1))
DEFAULT_WRAP: bool = bool(RASTER_CONFIG.get("wrap", False))
TRACE_TRAVERSAL: bool = bool(RASTER_CONFIG.get("trace_traversal", False))

if not np.issubdtype(CELL_DTYPE, np.integer):
    raise ValueError(f"cell_dtype must be an integer type, got {CELL_DTYPE}")


def set_default_wrap(value: bool) -> None:
    """Override the default wrap-around flag used by the CLI."""
    global DEFAULT_WRAP
    DEFAULT_WRAP = value
    RASTER_CONFIG["wrap"] = value


def set_obstacle_value(value: int) -> None:
    """Override the default obstacle value used by the CLI."""
    global OBSTACLE_VALUE
    OBSTACLE_VALUE = value
    RASTER_CONFIG["obstacle_value"] = value


def set_trace_traversal(value: bool) -> None:
    """Log traversal summaries at INFO instead of DEBUG."""
    global TRACE_TRAVERSAL
    TRACE_TRAVERSAL = value
    RASTER_CONFIG["trace_traversal"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "cell_dtype": str(CELL_DTYPE),
        "default_fill": DEFAULT_FILL,
        "obstacle_value": OBSTACLE_VALUE,
        "wrap": DEFAULT_WRAP,
        "trace_traversal": TRACE_TRAVERSAL,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
