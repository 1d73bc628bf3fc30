#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utility helpers
"""

from .logger import SetupLogger

__all__ = ['SetupLogger']
