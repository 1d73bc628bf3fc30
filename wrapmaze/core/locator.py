#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Endpoint lookup
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from wrapmaze.core.grid import Coord, Grid


@dataclass
class Endpoints:
    """Entry and exit cells, None when the marker is absent"""
    start: Optional[Coord]
    goal: Optional[Coord]

    @property
    def complete(self) -> bool:
        return self.start is not None and self.goal is not None


def locate(grid: Grid, marker: str) -> Optional[Coord]:
    """
    Find a marker, warning when it is not unique

    The first match in row-major order wins.
    """
    pos = grid.find(marker)
    if pos is None:
        logger.warning(f"Marker {marker!r} not found in grid")
        return None

    occurrences = grid.count(marker)
    if occurrences > 1:
        logger.warning(f"Marker {marker!r} appears {occurrences} times, using first at {pos}")
    return pos


def locate_endpoints(grid: Grid, entry: str = 'i', exit_: str = 'O') -> Endpoints:
    endpoints = Endpoints(start=locate(grid, entry), goal=locate(grid, exit_))
    logger.debug(f"Endpoints: start={endpoints.start}, goal={endpoints.goal}")
    return endpoints
