#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Path planning
"""

from .map_model import GridCoord, PlanRequest, PlanResult
from .bfs_planner import BfsPlanner, DIRECTIONS

__all__ = ['GridCoord', 'PlanRequest', 'PlanResult', 'BfsPlanner', 'DIRECTIONS']
