#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error types raised by wrapmaze.

Only hard failures live here. A missing endpoint or an unreachable exit are
ordinary outcomes and are reported through return values instead.
"""

from typing import Optional


class MazeError(Exception):
    """Base class for all wrapmaze errors"""


class UsageError(MazeError):
    """Command line arguments are wrong"""


class ConfigError(MazeError):
    """Config file is missing, malformed or fails validation"""


class InputReadError(MazeError):
    """Map file cannot be read"""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"Failed to read file '{path}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class EmptyInputError(MazeError):
    """Map text has no lines at all"""

    def __init__(self, source: Optional[str] = None):
        self.source = source
        if source is None:
            super().__init__("Input is empty")
        else:
            super().__init__(f"File is empty: {source}")
