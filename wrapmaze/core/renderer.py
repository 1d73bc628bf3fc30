#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Path overlay and text rendering
"""

from typing import Iterable, Optional

from loguru import logger

from wrapmaze.config.models import MarkerConfig
from wrapmaze.core.grid import Coord, Grid


def mark_path(grid: Grid, path: Iterable[Coord], markers: Optional[MarkerConfig] = None) -> int:
    """
    Write the path marker onto every path cell

    Entry and exit cells keep their markers even when the path touches them.

    Args:
        grid: grid to modify in place
        path: cells to mark
        markers: marker characters, defaults to MarkerConfig()

    Returns:
        number of cells written
    """
    if markers is None:
        markers = MarkerConfig()

    protected = (markers.entry, markers.exit)
    written = 0
    for x, y in path:
        if grid.get(x, y) in protected:
            continue
        grid.set(x, y, markers.path)
        written += 1

    logger.debug(f"Path overlay: {written} cells marked")
    return written


def render(grid: Grid) -> str:
    return grid.serialize()
