"""
Graph representation of mazes.

Examples
--------
>>> from mazepath.geometry.mazes import generate_maze
>>> from mazepath.geometry.graph import build_graph
>>> graph = build_graph(generate_maze(10, 10, seed=1))
>>> graph.num_edges == graph.num_nodes - 1
True
"""

from .maze_graph import Edge, MazeGraph, Node, build_graph

__all__ = ["Edge", "MazeGraph", "Node", "build_graph"]
