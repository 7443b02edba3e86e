"""
A* shortest-path search on maze graphs.

The open set is a binary heap keyed by ``(f, h, insertion counter)``: nodes
with equal f-cost are expanded lowest heuristic first, then in insertion
order, which makes every search reproducible. Outdated heap entries are
skipped on pop instead of being removed.

Heuristic:
    h(n) = w_min * (|row_n - row_goal| + |col_n - col_goal|)

Edges only join 4-adjacent cells and each costs at least ``w_min``, so the
heuristic is admissible and consistent and the returned path is optimal.
"""

from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass, field

from mazepath.geometry.graph import MazeGraph, Node
from mazepath.utils.exceptions import NodeNotFoundError
from mazepath.utils.maze_logging import get_logger

logger = get_logger(__name__)


def manhattan_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class SearchState:
    """Best known costs and predecessor for one node during a single search."""

    g_cost: float
    h_cost: float
    parent: Node | None = None

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a path search.

    Attributes:
        nodes: Path from start to goal inclusive; empty when no path exists
        cost: Total edge weight along the path (0.0 when empty)
        nodes_expanded: Number of nodes moved to the closed set
        execution_time: Wall-clock search time in seconds
    """

    nodes: tuple[Node, ...] = ()
    cost: float = 0.0
    nodes_expanded: int = 0
    execution_time: float = field(default=0.0, compare=False)

    @property
    def found(self) -> bool:
        return len(self.nodes) > 0

    @property
    def start(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    @property
    def goal(self) -> Node | None:
        return self.nodes[-1] if self.nodes else None

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __bool__(self) -> bool:
        return self.found

    def positions(self) -> list[tuple[int, int]]:
        return [(node.row, node.col) for node in self.nodes]


class AStarPathFinder:
    """A* search over a fixed graph."""

    def __init__(self, graph: MazeGraph):
        self.graph = graph
        self._heuristic_scale = graph.min_edge_weight

    def heuristic(self, node: Node, goal: Node) -> float:
        return self._heuristic_scale * manhattan_distance(node, goal)

    def _resolve(self, node, role: str) -> Node:
        if not self.graph.has_node(node):
            raise NodeNotFoundError(node, role=role, num_nodes=self.graph.num_nodes)
        return Node.coerce(node)

    def find_path(self, start: Node | tuple[int, int], goal: Node | tuple[int, int]) -> PathResult:
        """
        Compute a lowest-cost path between two nodes.

        Args:
            start: Start node or ``(row, col)`` position
            goal: Goal node or ``(row, col)`` position

        Returns:
            PathResult; empty (``found == False``) if goal is unreachable

        Raises:
            NodeNotFoundError: If start or goal is not in the graph
        """
        start = self._resolve(start, "start")
        goal = self._resolve(goal, "goal")
        t0 = time.perf_counter()

        counter = itertools.count()
        h_start = self.heuristic(start, goal)
        states: dict[Node, SearchState] = {start: SearchState(g_cost=0.0, h_cost=h_start)}
        open_heap: list[tuple[float, float, int, Node]] = [(h_start, h_start, next(counter), start)]
        closed: set[Node] = set()

        while open_heap:
            f_cost, _h, _order, current = heapq.heappop(open_heap)
            if current in closed:
                continue
            state = states[current]
            if f_cost > state.f_cost:
                # Stale entry superseded by a cheaper one
                continue

            if current == goal:
                path = self._reconstruct_path(states, goal)
                result = PathResult(
                    nodes=path,
                    cost=state.g_cost,
                    nodes_expanded=len(closed),
                    execution_time=time.perf_counter() - t0,
                )
                logger.debug(
                    f"A* {start} -> {goal}: length {len(path)}, cost {state.g_cost:g}, "
                    f"expanded {len(closed)} nodes"
                )
                return result

            closed.add(current)

            for neighbor, weight in self.graph.neighbors(current):
                if neighbor in closed:
                    continue
                tentative_g = state.g_cost + weight
                known = states.get(neighbor)
                if known is not None and tentative_g >= known.g_cost:
                    continue
                h = known.h_cost if known is not None else self.heuristic(neighbor, goal)
                states[neighbor] = SearchState(g_cost=tentative_g, h_cost=h, parent=current)
                heapq.heappush(open_heap, (tentative_g + h, h, next(counter), neighbor))

        logger.warning(f"No path from {start} to {goal} after expanding {len(closed)} nodes")
        return PathResult(nodes_expanded=len(closed), execution_time=time.perf_counter() - t0)

    @staticmethod
    def _reconstruct_path(states: dict[Node, SearchState], goal: Node) -> tuple[Node, ...]:
        path = [goal]
        current = states[goal].parent
        while current is not None:
            path.append(current)
            current = states[current].parent
        path.reverse()
        return tuple(path)


def find_path(graph: MazeGraph, start: Node | tuple[int, int], goal: Node | tuple[int, int]) -> PathResult:
    """
    Find a shortest path with A*.

    Example:
        >>> from mazepath import build_graph, generate_maze
        >>> graph = build_graph(generate_maze(5, 5, seed=42))
        >>> result = find_path(graph, (0, 0), (4, 4))
        >>> result.nodes[0], result.nodes[-1]
        (Node(row=0, col=0), Node(row=4, col=4))
    """
    return AStarPathFinder(graph).find_path(start, goal)
