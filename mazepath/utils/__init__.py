"""Shared utilities: exceptions and logging."""

from .exceptions import (
    InvalidDimensionError,
    MazeError,
    MazeGenerationError,
    NodeNotFoundError,
    validate_dimensions,
)
from .maze_logging import LoggedOperation, configure_logging, get_logger

__all__ = [
    "InvalidDimensionError",
    "LoggedOperation",
    "MazeError",
    "MazeGenerationError",
    "NodeNotFoundError",
    "configure_logging",
    "get_logger",
    "validate_dimensions",
]
