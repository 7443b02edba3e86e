"""
Configuration models for maze generation and solving.

Configurations describe HOW a maze run is performed (dimensions, seed,
search algorithm, logging), and can be loaded from or saved to YAML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

if TYPE_CHECKING:
    from pathlib import Path

MAZE_DIMENSION_MIN = 1
MAZE_DIMENSION_MAX = 10000
MAZE_DIMENSION_DEFAULT = 20


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
        Logging level (default: WARNING)
    use_colors : bool
        Colored console output (default: False)
    log_to_file : bool
        Also write log records to a file (default: False)
    log_file_path : str | None
        File for log records; a timestamped file under ``logs/`` if omitted
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    use_colors: bool = False
    log_to_file: bool = False
    log_file_path: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    def apply(self) -> None:
        """Install these settings as the global logging configuration."""
        from mazepath.utils.maze_logging import configure_logging

        configure_logging(
            level=self.level,
            log_to_file=self.log_to_file,
            log_file_path=self.log_file_path,
            use_colors=self.use_colors,
        )


class MazeConfig(BaseModel):
    """
    Configuration for maze generation.

    Attributes
    ----------
    width : int
        Number of columns (default: 20)
    height : int
        Number of rows (default: 20)
    seed : int | None
        Random seed; None draws a fresh maze every run
    start : tuple[int, int]
        Cell where carving begins, as (row, col)
    """

    width: int = Field(default=MAZE_DIMENSION_DEFAULT, ge=MAZE_DIMENSION_MIN, le=MAZE_DIMENSION_MAX)
    height: int = Field(default=MAZE_DIMENSION_DEFAULT, ge=MAZE_DIMENSION_MIN, le=MAZE_DIMENSION_MAX)
    seed: int | None = None
    start: tuple[int, int] = (0, 0)

    @model_validator(mode="after")
    def validate_start(self) -> MazeConfig:
        row, col = self.start
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise ValueError(f"start {self.start} lies outside the {self.width} x {self.height} maze")
        return self


class SearchConfig(BaseModel):
    """
    Configuration for path search.

    Attributes
    ----------
    algorithm : Literal["astar"]
        Search algorithm (default: astar)
    edge_weight : float
        Movement cost between adjacent cells (default: 1.0)
    start : tuple[int, int]
        Start cell (default: (0, 0))
    goal : tuple[int, int] | None
        Goal cell; the bottom-right cell if omitted
    """

    algorithm: Literal["astar"] = "astar"
    edge_weight: float = Field(default=1.0, gt=0)
    start: tuple[int, int] = (0, 0)
    goal: tuple[int, int] | None = None

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v):
        if isinstance(v, str):
            return v.lower().replace("*", "star").replace("-", "").replace("_", "")
        return v


class MazepathConfig(BaseModel):
    """
    Root configuration.

    Examples
    --------
    >>> config = MazepathConfig(maze=MazeConfig(width=10, height=8, seed=3))
    >>> config.resolved_goal()
    (7, 9)

    >>> # From YAML file
    >>> config = MazepathConfig.from_yaml("maze.yaml")
    """

    maze: MazeConfig = Field(default_factory=MazeConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_endpoints(self) -> MazepathConfig:
        for name, cell in (("start", self.search.start), ("goal", self.search.goal)):
            if cell is None:
                continue
            row, col = cell
            if not (0 <= row < self.maze.height and 0 <= col < self.maze.width):
                raise ValueError(f"search {name} {cell} lies outside the {self.maze.width} x {self.maze.height} maze")
        return self

    def resolved_goal(self) -> tuple[int, int]:
        if self.search.goal is not None:
            return self.search.goal
        return (self.maze.height - 1, self.maze.width - 1)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        from .io import save_config

        save_config(self, path)

    @classmethod
    def from_yaml(cls, path: str | Path) -> MazepathConfig:
        """Load and validate configuration from a YAML file."""
        from .io import load_config

        return load_config(path)
