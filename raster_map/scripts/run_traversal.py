"""Command line entrypoint running a traversal over a stored grid."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from raster_map.src.core.errors import GridError
from raster_map.src.core.point import Point
from raster_map.src.data.persistence import load_grid, save_grid
from raster_map.src.data.visualization import render_text
from raster_map.src.utils import config_loader
from raster_map.src.utils.logger import get_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a BFS traversal over a grid file")
    parser.add_argument("grid", type=Path, help="Grid file (.json or .npz)")
    parser.add_argument("--wrap", dest="wrap", action="store_true", default=None,
                        help="Treat opposite edges as adjacent")
    parser.add_argument("--no-wrap", dest="wrap", action="store_false",
                        help="Disable wrap-around even if configured")
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    fill = sub.add_parser("fill", help="Flood fill from a start cell")
    fill.add_argument("x", type=int)
    fill.add_argument("y", type=int)
    fill.add_argument("value", type=int, help="New color")
    fill.add_argument("--output", type=Path, default=None, help="Where to save the filled grid")

    path = sub.add_parser("path", help="Shortest path between two cells")
    path.add_argument("x1", type=int)
    path.add_argument("y1", type=int)
    path.add_argument("x2", type=int)
    path.add_argument("y2", type=int)
    path.add_argument("--obstacle", type=int, default=None)

    dist = sub.add_parser("distances", help="Distance map from a start cell")
    dist.add_argument("x", type=int)
    dist.add_argument("y", type=int)
    dist.add_argument("--obstacle", type=int, default=None)
    dist.add_argument("--output", type=Path, default=None, help="Where to save the distance grid")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = get_logger("run_traversal", file_path=args.log_file)

    wrap = config_loader.DEFAULT_WRAP if args.wrap is None else args.wrap
    obstacle = getattr(args, "obstacle", None)
    if obstacle is None:
        obstacle = config_loader.OBSTACLE_VALUE

    try:
        grid = load_grid(args.grid)
        if args.command == "fill":
            count = grid.fill(Point(args.x, args.y), args.value, wrap)
            logger.info("filled %d cells in %s", count, args.grid)
            print(count)
            result = grid
        elif args.command == "path":
            cells = grid.shortest_path(Point(args.x1, args.y1), Point(args.x2, args.y2), obstacle, wrap)
            logger.info("path length: %s", "none" if cells is None else len(cells))
            print(json.dumps(None if cells is None else [list(p.as_tuple()) for p in cells]))
            return 0
        else:
            result = grid.all_distances(Point(args.x, args.y), obstacle, wrap)

        if args.output is not None:
            save_grid(result, args.output)
            logger.info("wrote %s", args.output)
        else:
            print(render_text(result))
    except (GridError, ValueError, OSError) as exc:
        print(f"[ERROR] {args.grid}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
