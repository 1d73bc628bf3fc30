#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Character grid with toroidal coordinate arithmetic.

The grid is a ``height x width`` numpy array of single characters. Rows shorter
than the longest line are padded with spaces, which count as open terrain.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np
from loguru import logger

from wrapmaze.errors import EmptyInputError, InputReadError

Coord = Tuple[int, int]  # (x, y)

PAD_CHAR = ' '


def split_lines(text: str) -> List[str]:
    """
    Split text into lines

    Splits on ``\\n`` only and strips one trailing ``\\r`` per line. A final
    newline does not start an extra (empty) line.
    """
    if not text:
        return []
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


class Grid:
    """
    Mutable character field addressed as (x, y)

    Example:
        ```python
        grid = Grid.from_text("#i \\n O#")
        start = grid.find('i')
        x, y = grid.normalize(-1, 3)
        ```
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2 or cells.shape[0] == 0:
            raise ValueError(f"cells must be a non-empty 2D array, got shape {cells.shape}")
        self.cells_ = cells
        self.height, self.width = cells.shape

    @classmethod
    def from_lines(cls, lines: List[str]) -> 'Grid':
        """
        Build a grid from a list of rows

        Raises:
            EmptyInputError: no rows
        """
        if not lines:
            raise EmptyInputError()

        height = len(lines)
        width = max(len(line) for line in lines)
        cells = np.full((height, width), PAD_CHAR, dtype='<U1')
        for y, line in enumerate(lines):
            if line:
                cells[y, :len(line)] = list(line)

        logger.debug(f"Grid loaded: size=({width}, {height})")
        return cls(cells)

    @classmethod
    def from_text(cls, text: str) -> 'Grid':
        """
        Build a grid from map text

        Raises:
            EmptyInputError: text has zero lines
        """
        return cls.from_lines(split_lines(text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'Grid':
        """
        Load a grid from a UTF-8 text file

        Args:
            path: map file path

        Returns:
            loaded Grid

        Raises:
            InputReadError: file missing, unreadable or not valid UTF-8
            EmptyInputError: file has zero lines
        """
        try:
            text = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Reading {path} failed: {e!r}")
            raise InputReadError(str(path), e) from e

        lines = split_lines(text)
        if not lines:
            raise EmptyInputError(str(path))

        logger.info(f"Map file loaded: {path}")
        return cls.from_lines(lines)

    # ------------------------------------------------------------------
    # cell access
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside grid of size ({self.width}, {self.height})")

    def get(self, x: int, y: int) -> str:
        self._check(x, y)
        return str(self.cells_[y, x])

    def set(self, x: int, y: int, value: str) -> None:
        self._check(x, y)
        if len(value) != 1:
            raise ValueError(f"cell value must be a single character: {value!r}")
        self.cells_[y, x] = value

    def normalize(self, x: int, y: int) -> Coord:
        """
        Wrap any integer offset onto the torus

        Leaving the left edge re-enters on the right, leaving the top re-enters
        at the bottom, and vice versa.
        """
        w, h = self.width, self.height
        return ((x % w) + w) % w, ((y % h) + h) % h

    def find(self, target: str) -> Optional[Coord]:
        """
        First cell equal to target in row-major order

        Returns:
            (x, y) of the first match, None when absent
        """
        hits = np.argwhere(self.cells_ == target)
        if hits.size == 0:
            return None
        # argwhere yields (row, col) sorted row-major
        y, x = hits[0]
        return int(x), int(y)

    def count(self, target: str) -> int:
        return int(np.count_nonzero(self.cells_ == target))

    # ------------------------------------------------------------------
    # output
    # ------------------------------------------------------------------
    def rows(self) -> Iterator[str]:
        for row in self.cells_:
            yield ''.join(row)

    def serialize(self) -> str:
        """Rows joined by newlines, padding kept, no trailing newline"""
        return '\n'.join(self.rows())

    def copy(self) -> 'Grid':
        return Grid(self.cells_.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells_.shape == other.cells_.shape and bool(np.array_equal(self.cells_, other.cells_))

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
