"""
Logging for mazepath.

All package loggers are registered with ``MazeLogger`` so a single
``configure_logging()`` call re-targets every one of them: level, colors,
source locations and an optional log file. Console output goes to stderr,
leaving stdout free for rendered mazes.
"""

from __future__ import annotations

import inspect
import logging
import sys
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import ClassVar

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


class MazeFormatter(logging.Formatter):
    """Plain or colored record formatter, optionally tagged with ``[file:line]``."""

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        self.use_colors = use_colors
        self.include_location = include_location

        fmt = LOG_FORMAT + (" [%(filename)s:%(lineno)d]" if include_location else "")
        super().__init__(fmt, datefmt=DATE_FORMAT)
        self._color = (
            colorlog.ColoredFormatter("%(log_color)s" + fmt, datefmt=DATE_FORMAT, log_colors=LEVEL_COLORS)
            if use_colors
            else None
        )

    def format(self, record):
        if self._color is not None:
            return self._color.format(record)
        return super().format(record)


@dataclass
class LogSettings:
    """Current global logging settings."""

    level: int = logging.WARNING
    use_colors: bool = False
    include_location: bool = False
    log_file: Path | None = None


def _to_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return value


def _default_log_file() -> Path:
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path.cwd() / "logs" / f"mazepath_{stamp}.log"


class MazeLogger:
    """
    Registry of mazepath loggers.

    Loggers are created under a lock with a second membership check, so
    concurrent ``get_logger`` calls for the same name attach handlers once.
    """

    _lock: ClassVar[threading.Lock] = threading.Lock()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _settings: ClassVar[LogSettings] = LogSettings()

    @classmethod
    def configure(
        cls,
        level: str | int = "INFO",
        log_to_file: bool = False,
        log_file_path: str | Path | None = None,
        use_colors: bool = False,
        include_location: bool = False,
    ):
        """
        Replace the global settings and re-apply them to every registered logger.

        Args:
            level: Level name or number
            log_to_file: Also write records to a file
            log_file_path: Target file; ``logs/mazepath_<timestamp>.log`` if omitted
            use_colors: Color console records by level
            include_location: Append ``[file:line]`` to each record
        """
        log_file = None
        if log_to_file:
            log_file = Path(log_file_path) if log_file_path is not None else _default_log_file()
            log_file.parent.mkdir(parents=True, exist_ok=True)

        with cls._lock:
            cls._settings = LogSettings(
                level=_to_level(level),
                use_colors=use_colors,
                include_location=include_location,
                log_file=log_file,
            )
            for logger in cls._loggers.values():
                cls._attach_handlers(logger)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Return the registered logger for ``name``, creating it on first use."""
        logger = cls._loggers.get(name)
        if logger is not None:
            return logger

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)
                cls._attach_handlers(logger)
                cls._loggers[name] = logger
            return cls._loggers[name]

    @classmethod
    def log_file_path(cls) -> Path | None:
        return cls._settings.log_file

    @classmethod
    def _attach_handlers(cls, logger: logging.Logger):
        settings = cls._settings

        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()

        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        handlers[0].setFormatter(MazeFormatter(settings.use_colors, settings.include_location))
        if settings.log_file is not None:
            # No color codes in files
            file_handler = logging.FileHandler(settings.log_file)
            file_handler.setFormatter(MazeFormatter(False, settings.include_location))
            handlers.append(file_handler)

        logger.setLevel(settings.level)
        for handler in handlers:
            handler.setLevel(settings.level)
            logger.addHandler(handler)
        logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a mazepath logger.

    Args:
        name: Logger name; defaults to the calling module's ``__name__``
    """
    if name is None:
        caller = inspect.currentframe().f_back
        name = caller.f_globals.get("__name__", "mazepath") if caller is not None else "mazepath"

    return MazeLogger.get_logger(name)


def configure_logging(**kwargs):
    """Configure all mazepath loggers; see ``MazeLogger.configure`` for keywords."""
    MazeLogger.configure(**kwargs)


class LoggedOperation:
    """
    Time a block and log its start, completion and failure.

    Example:
        >>> with LoggedOperation(logger, "graph build") as op:
        ...     graph = build_graph(grid)
        >>> op.duration  # seconds
    """

    def __init__(self, logger: logging.Logger, operation_name: str, log_level: int = logging.DEBUG):
        self.logger = logger
        self.operation_name = operation_name
        self.log_level = log_level
        self.duration: float | None = None
        self._t0: float | None = None

    def __enter__(self):
        self.logger.log(self.log_level, f"Starting {self.operation_name}")
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self._t0
        if exc_type is not None:
            self.logger.error(f"Failed {self.operation_name} after {self.duration:.3f}s: {exc_val}")
        else:
            self.logger.log(self.log_level, f"Completed {self.operation_name} in {self.duration:.3f}s")
        return False
