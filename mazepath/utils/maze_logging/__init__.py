"""
Logging utilities for mazepath.

Usage:
    >>> from mazepath.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Generating maze...")
"""

from __future__ import annotations

from .logger import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "LoggedOperation",
    "MazeFormatter",
    "MazeLogger",
    "configure_logging",
    "get_logger",
]
