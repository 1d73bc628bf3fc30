#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Path planning module: breadth-first search on a character grid
"""

# standard library
from typing import Dict, List, Optional
from collections import deque

# third party
import numpy as np
from loguru import logger

from wrapmaze.core.grid import Grid
from wrapmaze.path_planner.map_model import GridCoord, PlanRequest, PlanResult


# down, right, up, left; the order decides between equal-length paths
DIRECTIONS = [(0, 1), (1, 0), (0, -1), (-1, 0)]


class BfsPlanner():
    """
    Breadth-first shortest path planner

    Every move costs one step, so BFS gives a shortest path. With ``wrap`` on,
    neighbours are taken on the torus; otherwise moves off the edge are
    dropped.

    Example:
        ```python
        planner = BfsPlanner(wall='#', wrap=True)
        result = planner.Plan(grid, start=(4, 1), goal=(3, 2))
        if result.ok:
            print(result.path)
        ```
    """

    def __init__(self, wall: str = '#', wrap: bool = True):
        """
        Initialize the BFS planner

        Args:
            wall: impassable cell character
            wrap: use toroidal adjacency

        Raises:
            ValueError: invalid arguments
        """
        if not isinstance(wall, str) or len(wall) != 1:
            raise ValueError(f"wall must be a single character: {wall!r}")
        if not isinstance(wrap, bool):
            raise ValueError("wrap must be a bool")

        self.wall_ = wall
        self.wrap_ = wrap
        self.directions_ = list(DIRECTIONS)

    def Plan(self, grid: Grid, start: GridCoord, goal: GridCoord) -> PlanResult:
        """
        Plan a path from start to goal

        Args:
            grid: character grid
            start: start cell (x, y)
            goal: goal cell (x, y)

        Returns:
            PlanResult; ok=False when the goal is unreachable

        Raises:
            ValueError: invalid start or goal
        """
        if grid is None:
            raise ValueError("grid must not be None")
        for name, pos in (("start", start), ("goal", goal)):
            if not isinstance(pos, tuple) or len(pos) != 2:
                raise ValueError(f"{name} must be a tuple of two ints")
            if not grid.in_bounds(*pos):
                raise ValueError(
                    f"{name} outside grid: {name}={pos}, grid_size=({grid.width}, {grid.height})"
                )

        return self.Bfs(grid, start, goal)

    def PlanFromRequest(self, grid: Grid, req: PlanRequest) -> PlanResult:
        return self.Plan(grid, req.start, req.goal)

    def Bfs(self, grid: Grid, start: GridCoord, goal: GridCoord) -> PlanResult:
        """
        BFS core

        Start is marked visited before it is queued. The search stops as soon
        as the goal is dequeued.
        """
        logger.debug(
            f"[BFS] start planning: grid_size=({grid.width}, {grid.height}), "
            f"start={start}, goal={goal}, wrap={self.wrap_}"
        )

        visited = np.zeros((grid.height, grid.width), dtype=bool)
        came_from: Dict[GridCoord, GridCoord] = {}
        queue = deque([start])
        visited[start[1], start[0]] = True
        nodes_explored = 0

        while queue:
            current = queue.popleft()
            nodes_explored += 1

            if current == goal:
                path = self._Reconstruct(came_from, start, goal)
                logger.info(f"[BFS] path found: length={len(path)}, nodes explored={nodes_explored}")
                return PlanResult(ok=True, path=path, nodes_explored=nodes_explored)

            x, y = current
            for dx, dy in self.directions_:
                neighbor = self._Neighbor(grid, x + dx, y + dy)
                if neighbor is None:
                    continue

                nx, ny = neighbor
                if visited[ny, nx] or grid.get(nx, ny) == self.wall_:
                    continue

                visited[ny, nx] = True
                came_from[neighbor] = current
                queue.append(neighbor)

        reason = f"no path from {start} to {goal}, nodes explored={nodes_explored}"
        logger.warning(f"[BFS] {reason}")
        return PlanResult(ok=False, path=[], reason=reason, nodes_explored=nodes_explored)

    def _Neighbor(self, grid: Grid, nx: int, ny: int) -> Optional[GridCoord]:
        if self.wrap_:
            return grid.normalize(nx, ny)
        if not grid.in_bounds(nx, ny):
            return None
        return nx, ny

    @staticmethod
    def _Reconstruct(came_from: Dict[GridCoord, GridCoord], start: GridCoord, goal: GridCoord) -> List[GridCoord]:
        path: List[GridCoord] = []
        cur = goal
        while cur != start:
            path.append(cur)
            cur = came_from[cur]
        path.reverse()
        return path
