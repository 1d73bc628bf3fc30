#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Grid core: storage, endpoint lookup and rendering
"""

from .grid import Coord, Grid, split_lines
from .locator import Endpoints, locate, locate_endpoints
from .renderer import mark_path, render

__all__ = [
    'Coord',
    'Grid',
    'split_lines',
    'Endpoints',
    'locate',
    'locate_endpoints',
    'mark_path',
    'render',
]
