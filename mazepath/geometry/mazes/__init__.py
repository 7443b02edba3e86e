"""
Perfect maze generation.

The grid stores every interior wall once; the generator carves a spanning
tree into it with randomized depth-first backtracking.

Examples
--------
>>> from mazepath.geometry.mazes import generate_maze, verify_perfect_maze
>>> grid = generate_maze(20, 20, seed=42)
>>> verify_perfect_maze(grid)["is_perfect"]
True
"""

from .grid import Cell, Direction, Grid, Position
from .maze_generator import PerfectMazeGenerator, RandomSource, generate_maze, pick_neighbor, verify_perfect_maze

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "PerfectMazeGenerator",
    "Position",
    "RandomSource",
    "generate_maze",
    "pick_neighbor",
    "verify_perfect_maze",
]
