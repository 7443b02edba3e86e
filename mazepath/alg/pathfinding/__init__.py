"""Path search on maze graphs."""

from .astar import AStarPathFinder, PathResult, SearchState, find_path, manhattan_distance

__all__ = ["AStarPathFinder", "PathResult", "SearchState", "find_path", "manhattan_distance"]
