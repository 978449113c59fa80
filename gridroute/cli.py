#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
import sys
import uuid
from pathlib import Path
from typing import Optional, Sequence

from logging_config import get_logger, set_level, set_run_id

from gridroute.core.grid import CostGrid, make_example_grid
from gridroute.core.heuristics import heuristic_for_grid, list_heuristics
from gridroute.core.puzzle import solve_puzzle
from gridroute.exceptions import GridRouteError
from gridroute.io.grid_io import load_cost_grid, resolve_day_input
from gridroute.settings import settings

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridroute",
        description="Minimum-cost corner-to-corner route on a weighted grid (plain and 5x5 tiled).",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", type=str, default=None, help="Grid text file, one row of digits 1-9 per line")
    source.add_argument("--day", type=str, default=None, help=f"Read <input-dir>/<day>.txt (default day {settings.DAY})")
    source.add_argument("--example", action="store_true", help="Use the built-in 10x10 example grid")
    parser.add_argument("--input-dir", type=str, default=None, help=f"Directory for --day files (default {settings.INPUT_DIR})")
    parser.add_argument(
        "--heuristic",
        type=str,
        default=settings.HEURISTIC,
        choices=list_heuristics(),
        help=f"Search heuristic (default {settings.HEURISTIC})",
    )
    parser.add_argument("--factor", type=int, default=settings.TILE_FACTOR, help="Tile factor for part two")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--log-level", type=str, default=settings.LOG_LEVEL, help="Logging level")
    return parser


def _load_grid(args: argparse.Namespace) -> CostGrid:
    if args.example:
        return make_example_grid()
    if args.input:
        path = Path(args.input)
    else:
        path = resolve_day_input(args.day or settings.DAY, args.input_dir)
    logger.info("loading grid from %s", path)
    return load_cost_grid(path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    set_run_id(uuid.uuid4().hex[:8])

    try:
        set_level(args.log_level)
        grid = _load_grid(args)
        heuristic = heuristic_for_grid(args.heuristic, grid)
        result = solve_puzzle(grid, heuristic=heuristic, factor=args.factor)
    except FileNotFoundError as e:
        logger.error("input file not found: %s", e)
        return 1
    except GridRouteError as e:
        logger.error("%s", e)
        return 2
    except ValueError as e:
        logger.error("invalid argument: %s", e)
        return 2

    if args.json:
        payload = {
            "part_one": result.part_one,
            "part_two": result.part_two,
            "elapsed_us": result.elapsed_us,
            "heuristic": args.heuristic,
            "shape": list(grid.shape()),
        }
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(f"Part one: {result.part_one}")
        print(f"Part two: {result.part_two}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
