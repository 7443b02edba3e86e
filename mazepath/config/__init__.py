"""
Configuration management for mazepath.

Quick Start
-----------
>>> from mazepath.config import MazepathConfig, MazeConfig
>>> config = MazepathConfig(maze=MazeConfig(width=30, height=20, seed=7))

>>> # Or load from YAML
>>> from mazepath.config import load_config
>>> config = load_config("experiments/maze.yaml")
"""

from .core import (
    MAZE_DIMENSION_DEFAULT,
    MAZE_DIMENSION_MAX,
    MAZE_DIMENSION_MIN,
    LoggingConfig,
    MazeConfig,
    MazepathConfig,
    SearchConfig,
)
from .io import load_config, save_config, validate_yaml_config

__all__ = [
    "MAZE_DIMENSION_DEFAULT",
    "MAZE_DIMENSION_MAX",
    "MAZE_DIMENSION_MIN",
    "LoggingConfig",
    "MazeConfig",
    "MazepathConfig",
    "SearchConfig",
    "load_config",
    "save_config",
    "validate_yaml_config",
]
