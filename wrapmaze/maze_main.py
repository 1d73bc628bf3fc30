#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line entry point

Load a map file, find the entry and exit, plan a path on the torus and print
the grid with the path drawn in. The grid is printed even when an endpoint is
missing or no path exists; only load failures are fatal.
"""

import sys
import argparse
from typing import List, Optional

from loguru import logger

from wrapmaze.config.loader import load_config
from wrapmaze.config.models import LOG_LEVELS, MazeConfig
from wrapmaze.core.grid import Grid
from wrapmaze.core.locator import locate_endpoints
from wrapmaze.core.renderer import mark_path, render
from wrapmaze.errors import ConfigError, EmptyInputError, InputReadError, UsageError
from wrapmaze.path_planner.bfs_planner import BfsPlanner
from wrapmaze.path_planner.map_model import PlanResult
from wrapmaze.utils.logger import SetupLogger


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2"""

    def error(self, message):
        raise UsageError(message)


def _BuildParser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='wrapmaze',
        description='Find a shortest path between the entry and exit of a wrap-around maze',
    )
    parser.add_argument('map_file', help='Map text file, one grid row per line')
    parser.add_argument('--config', type=str, default=None, help='YAML config file')
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help='Log level override (logs go to stderr)',
    )
    return parser


def solve_grid(grid: Grid, cfg: Optional[MazeConfig] = None) -> Optional[PlanResult]:
    """
    Locate endpoints, plan and overlay the path in place

    Args:
        grid: loaded grid, modified in place on success
        cfg: config, defaults to MazeConfig()

    Returns:
        PlanResult, or None when the entry or exit marker is missing
    """
    if cfg is None:
        cfg = MazeConfig()
    markers = cfg.markers

    endpoints = locate_endpoints(grid, markers.entry, markers.exit)
    if not endpoints.complete:
        logger.warning("Entry or exit missing, skipping search")
        return None

    planner = BfsPlanner(wall=markers.wall, wrap=cfg.topology.wrap)
    result = planner.Plan(grid, endpoints.start, endpoints.goal)
    if result.ok:
        mark_path(grid, result.path, markers)
    return result


def _Fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = _BuildParser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        sys.stderr.write(parser.format_usage())
        return _Fail(str(e))

    SetupLogger(args.log_level or MazeConfig().logging.level)

    cfg = MazeConfig()
    if args.config:
        try:
            cfg = load_config(args.config)
        except ConfigError as e:
            return _Fail(str(e))

    try:
        SetupLogger(args.log_level or cfg.logging.level, cfg.logging.log_dir)
    except OSError as e:
        return _Fail(f"Cannot set up log directory {cfg.logging.log_dir}: {e}")

    try:
        grid = Grid.from_file(args.map_file)
    except (InputReadError, EmptyInputError) as e:
        logger.debug(f"Load failed: {e!r}")
        return _Fail(str(e))

    result = solve_grid(grid, cfg)
    if result is not None and not result.ok:
        logger.info("No path found, printing grid unchanged")

    print(render(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())
