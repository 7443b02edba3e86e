"""
Cell grid for maze generation.

The grid owns every wall of the maze. Each interior wall is stored exactly
once, in one of two boolean arrays:

- ``east_walls[r, c]``: wall between ``(r, c)`` and ``(r, c + 1)``, shape ``(height, width - 1)``
- ``south_walls[r, c]``: wall between ``(r, c)`` and ``(r + 1, c)``, shape ``(height - 1, width)``

The outer boundary is always walled. ``Cell`` objects are read-only snapshots
derived from these arrays, so the two sides of a wall can never disagree.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from mazepath.utils.exceptions import validate_dimensions

if TYPE_CHECKING:
    from numpy.typing import NDArray

Position = tuple[int, int]


class Direction(Enum):
    """Compass directions; iteration order (N, S, W, E) fixes the carve order."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    WEST = (0, -1)
    EAST = (0, 1)

    @property
    def drow(self) -> int:
        return self.value[0]

    @property
    def dcol(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}


@dataclass(frozen=True)
class Cell:
    """
    Snapshot of a single maze cell.

    Attributes:
        row: Row index in grid
        col: Column index in grid
        north: Wall present on the north side
        south: Wall present on the south side
        east: Wall present on the east side
        west: Wall present on the west side
        visited: Generation flag
    """

    row: int
    col: int
    north: bool = True
    south: bool = True
    east: bool = True
    west: bool = True
    visited: bool = False

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, direction.name.lower())

    @property
    def open_directions(self) -> list[Direction]:
        return [d for d in Direction if not self.has_wall(d)]


class Grid:
    """Fixed-size grid of cells with shared wall state."""

    def __init__(self, width: int, height: int):
        """
        Initialize a fully walled, unvisited grid.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)

        Raises:
            InvalidDimensionError: If either dimension is not a positive integer
        """
        self.width, self.height = validate_dimensions(width, height, component="Grid")
        self.east_walls = np.ones((self.height, self.width - 1), dtype=bool)
        self.south_walls = np.ones((self.height - 1, self.width), dtype=bool)
        self.visited = np.zeros((self.height, self.width), dtype=bool)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, passages={self.passage_count()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.east_walls, other.east_walls)
            and np.array_equal(self.south_walls, other.south_walls)
        )

    __hash__ = None

    @property
    def num_cells(self) -> int:
        return self.width * self.height

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.width} x {self.height} grid")

    def neighbor(self, row: int, col: int, direction: Direction) -> Position | None:
        """
        Get the adjacent position in a compass direction.

        Returns:
            ``(row, col)`` of the neighbor, or None at the grid boundary
        """
        self._check(row, col)
        nr, nc = row + direction.drow, col + direction.dcol
        if self.in_bounds(nr, nc):
            return (nr, nc)
        return None

    def neighbors(self, row: int, col: int) -> list[tuple[Direction, Position]]:
        """All in-bounds neighbors, in Direction order."""
        result = []
        for direction in Direction:
            pos = self.neighbor(row, col, direction)
            if pos is not None:
                result.append((direction, pos))
        return result

    def _wall_index(self, row: int, col: int, direction: Direction):
        """Locate the shared wall; returns (array, index) or None for a boundary wall."""
        if self.neighbor(row, col, direction) is None:
            return None
        if direction is Direction.EAST:
            return self.east_walls, (row, col)
        if direction is Direction.WEST:
            return self.east_walls, (row, col - 1)
        if direction is Direction.SOUTH:
            return self.south_walls, (row, col)
        return self.south_walls, (row - 1, col)

    def has_wall(self, row: int, col: int, direction: Direction) -> bool:
        location = self._wall_index(row, col, direction)
        if location is None:
            return True
        walls, index = location
        return bool(walls[index])

    def _set_wall(self, row: int, col: int, direction: Direction, present: bool) -> None:
        location = self._wall_index(row, col, direction)
        if location is None:
            if present:
                return
            raise ValueError(f"Cannot open boundary wall {direction.name} of cell ({row}, {col})")
        walls, index = location
        walls[index] = present

    def open_wall(self, row: int, col: int, direction: Direction) -> None:
        """Remove the wall shared with the neighbor in ``direction``."""
        self._set_wall(row, col, direction, False)

    def close_wall(self, row: int, col: int, direction: Direction) -> None:
        """Restore the wall shared with the neighbor in ``direction``."""
        self._set_wall(row, col, direction, True)

    def is_visited(self, row: int, col: int) -> bool:
        self._check(row, col)
        return bool(self.visited[row, col])

    def mark_visited(self, row: int, col: int, visited: bool = True) -> None:
        self._check(row, col)
        self.visited[row, col] = visited

    def reset_visited(self) -> None:
        self.visited[:] = False

    def unvisited_neighbors(self, row: int, col: int) -> list[tuple[Direction, Position]]:
        return [(d, pos) for d, pos in self.neighbors(row, col) if not self.visited[pos]]

    def open_neighbors(self, row: int, col: int) -> list[Position]:
        """Neighbors reachable through an open wall."""
        return [pos for d, pos in self.neighbors(row, col) if not self.has_wall(row, col, d)]

    def cell(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return Cell(
            row,
            col,
            north=self.has_wall(row, col, Direction.NORTH),
            south=self.has_wall(row, col, Direction.SOUTH),
            east=self.has_wall(row, col, Direction.EAST),
            west=self.has_wall(row, col, Direction.WEST),
            visited=bool(self.visited[row, col]),
        )

    def all_positions(self) -> Iterator[Position]:
        """Row-major iteration over every cell position."""
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def all_cells(self) -> list[Cell]:
        return [self.cell(row, col) for row, col in self.all_positions()]

    def passage_count(self) -> int:
        """Number of open interior walls."""
        return int(np.count_nonzero(~self.east_walls) + np.count_nonzero(~self.south_walls))

    def to_numpy_array(self) -> NDArray[np.int32]:
        """
        Convert the maze to a block representation.

        Returns:
            Array of shape ``(2 * height + 1, 2 * width + 1)`` where 1 = wall and
            0 = passage. Cell ``(r, c)`` sits at ``(2r + 1, 2c + 1)``.
        """
        maze = np.ones((2 * self.height + 1, 2 * self.width + 1), dtype=np.int32)
        maze[1::2, 1::2] = 0
        maze[1::2, 2:-1:2] = self.east_walls.astype(np.int32)
        maze[2:-1:2, 1::2] = self.south_walls.astype(np.int32)
        return maze
