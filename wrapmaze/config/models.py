#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Maze configuration models

Type-safe configuration defined with Pydantic. Every field has a default so an
empty config section (or no config file at all) yields the stock behaviour.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class MarkerConfig(BaseModel):
    """Reserved cell characters"""
    wall: str = Field('#', description="Impassable cell")
    entry: str = Field('i', description="Entry marker")
    exit: str = Field('O', description="Exit marker")
    path: str = Field('.', description="Character written along the found path")

    @field_validator('wall', 'entry', 'exit', 'path')
    @classmethod
    def validate_single_char(cls, v: str) -> str:
        """Markers must be exactly one character"""
        if len(v) != 1:
            raise ValueError(f"marker must be a single character: {v!r}")
        return v

    @model_validator(mode='after')
    def validate_distinct(self) -> 'MarkerConfig':
        """Markers must not collide with each other"""
        values = [self.wall, self.entry, self.exit, self.path]
        if len(set(values)) != len(values):
            raise ValueError(f"markers must be distinct: {values}")
        return self


class TopologyConfig(BaseModel):
    """Adjacency rule"""
    wrap: bool = Field(True, description="Wrap around the grid edges (torus)")


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = Field("WARNING", description="Log level")
    log_dir: Optional[str] = Field(None, description="Log file directory, None disables file logging")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level name"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {v}, expected one of {LOG_LEVELS}")
        return level


class MazeConfig(BaseModel):
    """Top level config"""
    markers: MarkerConfig = Field(default_factory=MarkerConfig)
    topology: TopologyConfig = Field(default_factory=TopologyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
