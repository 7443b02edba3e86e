"""Maze grids and the graphs derived from them."""

from .graph import Edge, MazeGraph, Node, build_graph
from .mazes import Cell, Direction, Grid, PerfectMazeGenerator, generate_maze, verify_perfect_maze

__all__ = [
    "Cell",
    "Direction",
    "Edge",
    "Grid",
    "MazeGraph",
    "Node",
    "PerfectMazeGenerator",
    "build_graph",
    "generate_maze",
    "verify_perfect_maze",
]
