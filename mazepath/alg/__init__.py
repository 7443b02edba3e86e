"""
Algorithms operating on maze graphs.

Only A* is provided; ``PATHFINDERS`` maps the algorithm names accepted by the
configuration and CLI to their implementations.
"""

from .pathfinding import AStarPathFinder, PathResult, SearchState, find_path, manhattan_distance

PATHFINDERS = {
    "astar": AStarPathFinder,
}

__all__ = [
    "PATHFINDERS",
    "AStarPathFinder",
    "PathResult",
    "SearchState",
    "find_path",
    "manhattan_distance",
]
