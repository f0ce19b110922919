from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence, TypeVar

from ..errors import GridAlreadyCarved, InvalidStartCell
from .grid import Coord, MazeGrid

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChoiceSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T:
        ...


@dataclass(frozen=True)
class CarveStats:
    start: Coord
    walls_removed: int
    cells_visited: int
    max_depth: int


class MazeCarver:
    """Randomized recursive backtracker.

    Walks the grid depth-first from the start cell, knocking down the wall to a
    random unvisited neighbour and backtracking when none is left. The frontier
    is an explicit stack, so grid size is not limited by the interpreter's
    recursion depth. The result is a spanning tree: width*height - 1 walls are
    removed and every cell is visited exactly once.
    """

    def __init__(self, start: Coord = (0, 0)) -> None:
        self.start = (int(start[0]), int(start[1]))

    def carve(self, grid: MazeGrid, rng: ChoiceSource) -> CarveStats:
        if not grid.in_bounds(*self.start):
            raise InvalidStartCell(f"Start cell {self.start} is outside the {grid.width}x{grid.height} grid")
        if grid.any_visited():
            raise GridAlreadyCarved("Grid has already been carved; create a new grid to regenerate")

        removed_before = grid.wall_removals
        grid.visit(self.start)
        stack: List[Coord] = [self.start]
        visited = 1
        max_depth = 1

        while stack:
            x, y = stack[-1]
            candidates = [n for _, n in grid.neighbors(x, y) if not grid.cell(*n).visited]
            if not candidates:
                stack.pop()
                continue
            chosen = rng.choice(candidates)
            grid.remove_wall_between((x, y), chosen)
            grid.visit(chosen)
            stack.append(chosen)
            visited += 1
            if len(stack) > max_depth:
                max_depth = len(stack)

        stats = CarveStats(
            start=self.start,
            walls_removed=grid.wall_removals - removed_before,
            cells_visited=visited,
            max_depth=max_depth,
        )
        logger.debug(
            "Carved %dx%d maze from %s: %d walls removed, max depth %d",
            grid.width,
            grid.height,
            self.start,
            stats.walls_removed,
            stats.max_depth,
        )
        return stats


def carve_maze(grid: MazeGrid, rng: ChoiceSource, start: Coord = (0, 0)) -> CarveStats:
    return MazeCarver(start).carve(grid, rng)
