#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration module

Provides validated configuration for markers, topology and logging.
"""

from .models import (
    MazeConfig,
    MarkerConfig,
    TopologyConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    'MazeConfig',
    'MarkerConfig',
    'TopologyConfig',
    'LoggingConfig',
    'load_config'
]
