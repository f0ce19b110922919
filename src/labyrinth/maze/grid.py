from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..errors import InvalidDimensions, NonAdjacentCells

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class Direction(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def offset(self) -> Coord:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


# North is +y: row 0 is the bottom edge of the maze.
_OFFSETS: Dict[Direction, Coord] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}


@dataclass(frozen=True)
class Cell:
    """Immutable cell state; the grid swaps in a new Cell on every change."""

    visited: bool = False
    north: bool = True
    east: bool = True
    south: bool = True
    west: bool = True

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, direction.value)

    def walls(self) -> Tuple[bool, bool, bool, bool]:
        return (self.north, self.east, self.south, self.west)


class MazeGrid:
    """
    A width x height grid of cells with four wall flags each.

    Created fully walled and unvisited. The only wall mutation is
    remove_wall_between(), which always clears both sides of a shared wall so
    the two neighbours never disagree. Cells are frozen, so cell() and
    iter_cells() hand out read-only state. Cells are stored as cells[y][x].
    """

    def __init__(self, width: int, height: int) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensions(f"Maze {name} must be an integer, got {value!r}")
            if value < 1:
                raise InvalidDimensions(f"Maze {name} must be at least 1, got {value}")
        self._width = width
        self._height = height
        self._cells: List[List[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]
        self.wall_removals = 0
        logger.debug("Created fully walled %dx%d grid", width, height)

    @classmethod
    def create(cls, width: int, height: int) -> "MazeGrid":
        return cls(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # ---- Bounds / access -------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell out of bounds: ({x},{y}) not in [0,{self._width})x[0,{self._height})")
        return self._cells[y][x]

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        return self.cell(x, y).has_wall(direction)

    def coords(self) -> Iterator[Coord]:
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y)

    def iter_cells(self) -> Iterator[Tuple[Coord, Cell]]:
        for x, y in self.coords():
            yield (x, y), self._cells[y][x]

    # ---- Topology --------------------------------------------------------
    def neighbor(self, x: int, y: int, direction: Direction) -> Optional[Coord]:
        dx, dy = direction.offset
        nx, ny = x + dx, y + dy
        if self.in_bounds(nx, ny):
            return (nx, ny)
        return None

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[Direction, Coord]]:
        # Ordered north, east, south, west for deterministic carving
        for direction in Direction:
            n = self.neighbor(x, y, direction)
            if n is not None:
                yield direction, n

    def open_neighbors(self, x: int, y: int) -> List[Coord]:
        """In-bounds neighbours reachable from (x, y) without crossing a wall."""
        cell = self.cell(x, y)
        return [n for direction, n in self.neighbors(x, y) if not cell.has_wall(direction)]

    def direction_between(self, a: Coord, b: Coord) -> Optional[Direction]:
        dx, dy = b[0] - a[0], b[1] - a[1]
        for direction, offset in _OFFSETS.items():
            if offset == (dx, dy):
                return direction
        return None

    # ---- Mutation --------------------------------------------------------
    def visit(self, coord: Coord) -> None:
        x, y = coord
        self._cells[y][x] = replace(self.cell(x, y), visited=True)

    def remove_wall_between(self, a: Coord, b: Coord) -> None:
        if not (self.in_bounds(*a) and self.in_bounds(*b)):
            raise NonAdjacentCells(f"Cells {a} and {b} must both lie inside the {self._width}x{self._height} grid")
        direction = self.direction_between(a, b)
        if direction is None:
            raise NonAdjacentCells(f"Cells {a} and {b} are not adjacent")
        first = self._cells[a[1]][a[0]]
        second = self._cells[b[1]][b[0]]
        if first.has_wall(direction):
            self.wall_removals += 1
        self._cells[a[1]][a[0]] = replace(first, **{direction.value: False})
        self._cells[b[1]][b[0]] = replace(second, **{direction.opposite.value: False})

    # ---- Queries ---------------------------------------------------------
    def all_visited(self) -> bool:
        return all(cell.visited for _, cell in self.iter_cells())

    def any_visited(self) -> bool:
        return any(cell.visited for _, cell in self.iter_cells())

    # ---- Export / Compare -----------------------------------------------
    def snapshot(self) -> Tuple[Tuple[Tuple[bool, bool, bool, bool], ...], ...]:
        """
        Deterministic, hashable snapshot of the wall flags for equality tests.
        """
        return tuple(tuple(cell.walls() for cell in row) for row in self._cells)

    def signature(self) -> str:
        """Deterministic signature of the wall layout."""
        raw = f"{self._width}x{self._height}:{self.snapshot()!r}".encode("utf-8")
        return hashlib.blake2b(raw, digest_size=16).hexdigest()

    def to_str_lines(self, markers: Optional[Mapping[Coord, str]] = None) -> List[str]:
        """ASCII drawing with north at the top; markers put one character in a cell."""
        markers = markers or {}
        lines: List[str] = []
        for y in range(self._height - 1, -1, -1):
            row = self._cells[y]
            lines.append("+" + "".join(("--" if c.north else "  ") + "+" for c in row))
            mid = ["|" if row[0].west else " "]
            for x, c in enumerate(row):
                mid.append(markers.get((x, y), " ")[:1].ljust(2))
                mid.append("|" if c.east else " ")
            lines.append("".join(mid))
        lines.append("+" + "".join(("--" if c.south else "  ") + "+" for c in self._cells[0]))
        return lines

    def __str__(self) -> str:
        return "\n".join(self.to_str_lines())
