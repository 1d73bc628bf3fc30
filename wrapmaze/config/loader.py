#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Config loader

Loads configuration from a YAML file and validates it with Pydantic.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger
from pydantic import ValidationError

from wrapmaze.config.models import MazeConfig
from wrapmaze.errors import ConfigError


def load_config(config_path: Union[str, Path], base_dir: Optional[Path] = None) -> MazeConfig:
    """
    Load config from a YAML file

    Args:
        config_path: config file path
        base_dir: directory used to resolve relative paths, defaults to the
            directory holding the config file

    Returns:
        validated MazeConfig

    Raises:
        ConfigError: file missing, bad YAML, empty file or validation failure
    """
    config_path = Path(config_path)
    if base_dir is None:
        base_dir = config_path.resolve().parent
    else:
        base_dir = Path(base_dir).resolve()

    if not config_path.exists():
        error_msg = f"Config file not found: {config_path}"
        logger.error(error_msg)
        raise ConfigError(error_msg)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"Invalid YAML in config file {config_path}: {e}"
        logger.error(error_msg)
        raise ConfigError(error_msg) from e
    except (OSError, UnicodeDecodeError) as e:
        error_msg = f"Failed to read config file {config_path}: {e}"
        logger.error(error_msg)
        raise ConfigError(error_msg) from e

    if raw_config is None:
        error_msg = f"Config file is empty: {config_path}"
        logger.error(error_msg)
        raise ConfigError(error_msg)

    if not isinstance(raw_config, dict):
        error_msg = f"Config root must be a mapping: {config_path}"
        logger.error(error_msg)
        raise ConfigError(error_msg)

    _apply_relative_paths(raw_config, base_dir)

    try:
        config = MazeConfig(**raw_config)
    except ValidationError as e:
        error_msg = f"Config validation failed:\n{e}"
        logger.error(error_msg)
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise ConfigError(error_msg) from e

    logger.info(f"Config loaded: {config_path}")
    return config


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[str]:
    """Resolve a relative path against base_dir"""
    if value is None:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path.resolve())


def _apply_relative_paths(raw_config: Dict[str, Any], base_dir: Path) -> None:
    """Turn relative path fields into absolute ones"""
    logging_cfg = raw_config.get('logging')
    if isinstance(logging_cfg, dict) and logging_cfg.get('log_dir'):
        logging_cfg['log_dir'] = _resolve_path(logging_cfg['log_dir'], base_dir)
