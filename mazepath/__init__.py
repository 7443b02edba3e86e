"""
mazepath: perfect maze generation and shortest-path search.

Quick Start
-----------
>>> from mazepath import build_graph, find_path, generate_maze
>>> grid = generate_maze(20, 20, seed=42)
>>> graph = build_graph(grid)
>>> result = find_path(graph, (0, 0), (19, 19))
>>> result.found
True
"""

from importlib.metadata import PackageNotFoundError, version

from mazepath.alg import AStarPathFinder, PathResult, find_path
from mazepath.config import MazepathConfig, load_config
from mazepath.geometry import (
    Direction,
    Grid,
    MazeGraph,
    Node,
    PerfectMazeGenerator,
    build_graph,
    generate_maze,
    verify_perfect_maze,
)
from mazepath.utils import (
    InvalidDimensionError,
    MazeError,
    MazeGenerationError,
    NodeNotFoundError,
    configure_logging,
    get_logger,
)

try:
    __version__ = version("mazepath")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "AStarPathFinder",
    "Direction",
    "Grid",
    "InvalidDimensionError",
    "MazeError",
    "MazeGenerationError",
    "MazeGraph",
    "MazepathConfig",
    "Node",
    "NodeNotFoundError",
    "PathResult",
    "PerfectMazeGenerator",
    "__version__",
    "build_graph",
    "configure_logging",
    "find_path",
    "generate_maze",
    "get_logger",
    "load_config",
    "verify_perfect_maze",
]
