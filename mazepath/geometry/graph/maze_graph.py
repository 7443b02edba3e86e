"""
Graph representation of a carved maze.

Key concepts:
- Nodes: one per maze cell, identified by its ``(row, col)`` position
- Edges: one undirected connection per open wall between adjacent cells
- Weights: uniform positive movement cost between adjacent cells

A graph built from a perfect maze is a spanning tree of the cells. The graph
keeps no reference to the grid it came from.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components

from mazepath.geometry.mazes.grid import Direction, Grid
from mazepath.utils.maze_logging import get_logger

logger = get_logger(__name__)


class Node(NamedTuple):
    """Graph node identified by the position of its maze cell."""

    row: int
    col: int

    @classmethod
    def coerce(cls, value: Node | tuple[int, int]) -> Node:
        if isinstance(value, Node):
            return value
        row, col = value
        return cls(row, col)


@dataclass(frozen=True)
class Edge:
    """
    Undirected weighted edge between two 4-adjacent nodes.

    Endpoints are stored in canonical order (``u < v``) so that an edge and its
    reverse compare equal.
    """

    u: Node
    v: Node
    weight: float = 1.0

    def __post_init__(self):
        u, v = Node.coerce(self.u), Node.coerce(self.v)
        if v < u:
            u, v = v, u
        object.__setattr__(self, "u", u)
        object.__setattr__(self, "v", v)

    @property
    def key(self) -> tuple[Node, Node]:
        return (self.u, self.v)

    def other(self, node: Node) -> Node:
        if node == self.u:
            return self.v
        if node == self.v:
            return self.u
        raise ValueError(f"{node} is not an endpoint of {self}")


def _coerce_edge(value) -> Edge:
    """Accept an ``Edge`` or a ``(u, v)`` / ``(u, v, weight)`` tuple."""
    if isinstance(value, Edge):
        return value
    try:
        return Edge(*value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot interpret {value!r} as an edge") from e


@dataclass
class MazeGraph:
    """
    Set of nodes plus a set of undirected weighted edges.

    Attributes:
        nodes: Node identities (kept sorted)
        edges: Edges between 4-adjacent nodes (kept sorted by endpoints)
    """

    nodes: tuple[Node, ...]
    edges: tuple[Edge, ...] = ()
    _adjacency: dict[Node, list[tuple[Node, float]]] = field(init=False, repr=False)
    _node_index: dict[Node, int] = field(init=False, repr=False)
    _edge_weights: dict[tuple[Node, Node], float] = field(init=False, repr=False)

    def __post_init__(self):
        self.nodes = tuple(sorted({Node.coerce(n) for n in self.nodes}))
        self.edges = tuple(sorted((_coerce_edge(e) for e in self.edges), key=lambda e: e.key))
        self._validate_graph_data()

        self._node_index = {node: i for i, node in enumerate(self.nodes)}
        self._edge_weights = {edge.key: edge.weight for edge in self.edges}
        self._adjacency = {node: [] for node in self.nodes}
        for edge in self.edges:
            self._adjacency[edge.u].append((edge.v, edge.weight))
            self._adjacency[edge.v].append((edge.u, edge.weight))
        for neighbors in self._adjacency.values():
            neighbors.sort()

    def _validate_graph_data(self):
        """Validate edge consistency against the node set."""
        node_set = set(self.nodes)
        seen = set()
        for edge in self.edges:
            if edge.u not in node_set or edge.v not in node_set:
                raise ValueError(f"Edge {edge.u}-{edge.v} references a node outside the graph")
            if edge.u == edge.v:
                raise ValueError(f"Self-loop at {edge.u} is not allowed")
            if abs(edge.u.row - edge.v.row) + abs(edge.u.col - edge.v.col) != 1:
                raise ValueError(f"Edge {edge.u}-{edge.v} does not join adjacent cells")
            if not edge.weight > 0:
                raise ValueError(f"Edge {edge.u}-{edge.v} has non-positive weight {edge.weight}")
            if edge.key in seen:
                raise ValueError(f"Duplicate edge {edge.u}-{edge.v}")
            seen.add(edge.key)

    @classmethod
    def from_edge_list(
        cls,
        nodes: Iterable[tuple[int, int]],
        edges: Iterable[tuple[tuple[int, int], tuple[int, int]]],
        weight: float = 1.0,
    ) -> MazeGraph:
        """Build a graph from plain position tuples."""
        return cls(
            nodes=tuple(Node.coerce(n) for n in nodes),
            edges=tuple(Edge(Node.coerce(a), Node.coerce(b), weight) for a, b in edges),
        )

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def min_edge_weight(self) -> float:
        """Smallest edge weight (1.0 for an edgeless graph)."""
        if not self.edges:
            return 1.0
        return min(edge.weight for edge in self.edges)

    def __contains__(self, node) -> bool:
        return self.has_node(node)

    def has_node(self, node: Node | tuple[int, int]) -> bool:
        try:
            return Node.coerce(node) in self._node_index
        except (TypeError, ValueError):
            return False

    def neighbors(self, node: Node | tuple[int, int]) -> list[tuple[Node, float]]:
        """Neighbors of ``node`` with edge weights, sorted by position."""
        return list(self._adjacency[Node.coerce(node)])

    def degree(self, node: Node | tuple[int, int]) -> int:
        return len(self._adjacency[Node.coerce(node)])

    def edge_weight(self, a: Node | tuple[int, int], b: Node | tuple[int, int]) -> float:
        """Weight of the edge joining ``a`` and ``b``; KeyError if there is none."""
        a, b = Node.coerce(a), Node.coerce(b)
        key = (a, b) if a < b else (b, a)
        return self._edge_weights[key]

    def path_cost(self, path: Sequence[Node | tuple[int, int]]) -> float:
        """Total weight along consecutive nodes of ``path``."""
        return float(sum(self.edge_weight(a, b) for a, b in zip(path, path[1:])))

    def adjacency_matrix(self) -> csr_matrix:
        """Symmetric sparse adjacency matrix; row ``i`` is ``self.nodes[i]``."""
        n = self.num_nodes
        rows, cols, data = [], [], []
        for edge in self.edges:
            i, j = self._node_index[edge.u], self._node_index[edge.v]
            rows.extend([i, j])
            cols.extend([j, i])
            data.extend([edge.weight, edge.weight])
        return csr_matrix(
            (np.asarray(data, dtype=float), (np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp))),
            shape=(n, n),
        )

    def connected_components(self) -> int:
        """Number of connected components."""
        if self.num_nodes == 0:
            return 0
        n_components, _labels = connected_components(self.adjacency_matrix(), directed=False)
        return int(n_components)

    def is_tree(self) -> bool:
        """Connected and acyclic (``|E| = |V| - 1``)."""
        return self.num_nodes > 0 and self.num_edges == self.num_nodes - 1 and self.connected_components() == 1


def build_graph(grid: Grid, edge_weight: float = 1.0) -> MazeGraph:
    """
    Convert a carved grid into a graph.

    Only the south and east walls of each cell are inspected, so every open
    wall yields exactly one edge. The grid is not modified.

    Args:
        grid: Generated maze grid
        edge_weight: Movement cost between adjacent cells

    Returns:
        Graph with one node per cell and one edge per open wall
    """
    if not edge_weight > 0:
        raise ValueError(f"edge_weight must be positive, got {edge_weight}")

    nodes = tuple(Node(row, col) for row, col in grid.all_positions())
    edges = []
    for row, col in grid.all_positions():
        for direction in (Direction.SOUTH, Direction.EAST):
            neighbor = grid.neighbor(row, col, direction)
            if neighbor is not None and not grid.has_wall(row, col, direction):
                edges.append(Edge(Node(row, col), Node(*neighbor), edge_weight))

    graph = MazeGraph(nodes=nodes, edges=tuple(edges))
    logger.debug(f"Built graph with {graph.num_nodes} nodes and {graph.num_edges} edges")
    return graph
