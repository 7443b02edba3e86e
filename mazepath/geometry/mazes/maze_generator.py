"""
Perfect maze carving.

A perfect maze is a spanning tree of the cell lattice: every cell can be
reached from every other, along exactly one route. Carving uses randomized
depth-first backtracking, which produces long winding corridors with few
short dead ends.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

import random
from collections import deque
from typing import Any, Protocol

from mazepath.utils.exceptions import MazeGenerationError, validate_dimensions
from mazepath.utils.maze_logging import LoggedOperation, get_logger

from .grid import Grid, Position

logger = get_logger(__name__)


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning floats in [0, 1) (``random.Random`` qualifies)."""

    def random(self) -> float: ...


def pick_neighbor(rng: RandomSource, candidates: list):
    """
    Select one candidate uniformly.

    A lone candidate is returned without drawing, so forced moves consume no
    randomness. Otherwise one ``rng.random()`` draw picks index
    ``floor(x * len(candidates))``. ``random.Random.random`` yields the same
    sequence for a given seed on every Python version.
    """
    if len(candidates) == 1:
        return candidates[0]
    return candidates[int(rng.random() * len(candidates))]


def _describe_source(seed: int | None, rng: RandomSource | None) -> str:
    if rng is not None:
        return f"injected {type(rng).__name__}"
    return f"seed={seed}"


class PerfectMazeGenerator:
    """
    Perfect maze generator using randomized recursive backtracking.

    The recursion is replaced by an explicit stack whose size is bounded by
    the number of cells. Push and pop order match the recursive formulation,
    so a given random source always carves the same maze.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: RandomSource | None = None,
        start: Position = (0, 0),
    ):
        """
        Initialize maze generator.

        Args:
            width: Number of columns in maze
            height: Number of rows in maze
            rng: Random source with a ``random`` method. When omitted a
                ``random.Random`` seeded at ``generate()`` time is used.
            start: Cell where carving begins
        """
        self.width, self.height = validate_dimensions(width, height, component="PerfectMazeGenerator")
        self.rng = rng
        self.start = start
        self.grid = Grid(self.width, self.height)
        if not self.grid.in_bounds(*start):
            raise IndexError(f"Start cell {start} is outside the {self.width} x {self.height} grid")

    def generate(self, seed: int | None = None) -> Grid:
        """
        Carve a perfect maze into a fresh grid.

        Args:
            seed: Seed for the default random source. Ignored when an
                explicit ``rng`` was passed to the constructor.

        Returns:
            Generated maze grid
        """
        rng = self.rng if self.rng is not None else random.Random(seed)
        source = _describe_source(seed, self.rng)
        self.grid = Grid(self.width, self.height)

        with LoggedOperation(logger, f"maze generation {self.width}x{self.height} ({source})"):
            self._recursive_backtracking(rng)

        logger.debug(f"Carved {self.grid.passage_count()} passages into {self.grid.num_cells} cells")
        return self.grid

    def _recursive_backtracking(self, rng: RandomSource) -> None:
        """
        Depth-first carving with an explicit stack.

        Algorithm:
        1. Mark the start cell visited and push it
        2. While the stack is not empty:
           - Choose a random unvisited neighbor of the top cell
           - Open the shared wall, mark it visited and push it
        3. Backtrack (pop) when the top cell has no unvisited neighbors
        """
        grid = self.grid
        capacity = grid.num_cells
        stack: deque[Position] = deque()

        grid.mark_visited(*self.start)
        stack.append(self.start)
        carved = 0

        while stack:
            row, col = stack[-1]
            unvisited = grid.unvisited_neighbors(row, col)

            if not unvisited:
                stack.pop()
                continue

            direction, (nr, nc) = pick_neighbor(rng, unvisited)
            if len(stack) >= capacity:
                raise MazeGenerationError(
                    "Backtracking stack exceeded the number of cells",
                    diagnostic_data={"capacity": capacity, "top": (row, col)},
                )
            grid.open_wall(row, col, direction)
            grid.mark_visited(nr, nc)
            stack.append((nr, nc))
            carved += 1

        if carved != capacity - 1:
            raise MazeGenerationError(
                f"Carved {carved} passages, expected {capacity - 1}",
                diagnostic_data={"width": self.width, "height": self.height},
            )


def verify_perfect_maze(grid: Grid) -> dict[str, Any]:
    """
    Check a grid for the perfect-maze properties.

    Cells reachable from ``(0, 0)`` are counted with a breadth-first walk over
    open walls; a connected grid with ``n - 1`` passages for ``n`` cells has no
    loops. The grid's visited flags are left untouched.

    Returns:
        Report with keys ``is_perfect``, ``is_connected``, ``is_no_loops``,
        ``visited_cells``, ``total_cells``, ``passage_count`` and
        ``expected_passages``
    """
    start = (0, 0)
    seen = {start}
    queue = deque([start])

    while queue:
        row, col = queue.popleft()
        for neighbor in grid.open_neighbors(row, col):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    total_cells = grid.num_cells
    visited_count = len(seen)
    is_connected = visited_count == total_cells

    passage_count = grid.passage_count()
    expected_passages = total_cells - 1
    # Connected with n-1 edges implies a tree
    is_no_loops = passage_count == expected_passages

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "visited_cells": visited_count,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }


def generate_maze(
    width: int,
    height: int,
    seed: int | None = None,
    rng: RandomSource | None = None,
    start: Position = (0, 0),
) -> Grid:
    """
    Carve a perfect maze and check the result.

    Args:
        width: Number of columns
        height: Number of rows
        seed: Seed for the default ``random.Random`` source
        rng: Explicit random source (overrides ``seed``)
        start: Cell where carving begins

    Raises:
        InvalidDimensionError: If a dimension is not a positive integer
        MazeGenerationError: If the carved grid is not a perfect maze

    Example:
        >>> grid = generate_maze(20, 10, seed=42)
        >>> grid.to_numpy_array().shape
        (21, 41)
    """
    generator = PerfectMazeGenerator(width, height, rng=rng, start=start)
    grid = generator.generate(seed=seed)

    verification = verify_perfect_maze(grid)
    if not verification["is_perfect"]:
        raise MazeGenerationError("Generated maze is not perfect", diagnostic_data=verification)

    logger.info(f"Generated perfect {width}x{height} maze ({_describe_source(seed, rng)})")
    return grid
