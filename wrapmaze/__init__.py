#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrapmaze

Shortest paths on wrap-around character mazes.
"""

__version__ = "0.1.0"

from .core import Grid, Endpoints, locate_endpoints, mark_path, render
from .path_planner import BfsPlanner, PlanResult
from .errors import MazeError, UsageError, ConfigError, InputReadError, EmptyInputError

__all__ = [
    'Grid',
    'Endpoints',
    'locate_endpoints',
    'mark_path',
    'render',
    'BfsPlanner',
    'PlanResult',
    'MazeError',
    'UsageError',
    'ConfigError',
    'InputReadError',
    'EmptyInputError',
]
