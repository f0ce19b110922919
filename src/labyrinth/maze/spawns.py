from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from ..errors import NoValidAdversarySpot
from .grid import Coord, MazeGrid

logger = logging.getLogger(__name__)


class RangeSource(Protocol):
    def randrange(self, stop: int) -> int:
        ...


@dataclass(frozen=True)
class SpawnSet:
    player: Coord
    adversary: Coord
    goal: Coord


class SpawnPlacer:
    """Picks player, adversary and goal cells on a carved grid.

    Any cell is a valid spawn because a perfect maze is fully connected. The
    goal is always the corner opposite the carving entry, (width-1, height-1).
    The goal is allowed to share a cell with either spawn.
    """

    @staticmethod
    def _random_cell(grid: MazeGrid, rng: RangeSource) -> Coord:
        x = rng.randrange(grid.width)
        y = rng.randrange(grid.height)
        return (x, y)

    @staticmethod
    def place_player(grid: MazeGrid, rng: RangeSource) -> Coord:
        coord = SpawnPlacer._random_cell(grid, rng)
        logger.info("Player placed at random cell: %s", coord)
        return coord

    @staticmethod
    def place_goal(grid: MazeGrid) -> Coord:
        coord = (grid.width - 1, grid.height - 1)
        logger.info("Goal placed at: %s", coord)
        return coord

    @staticmethod
    def place_adversary(grid: MazeGrid, rng: RangeSource, exclude: Coord) -> Coord:
        """Rejection-sample a cell different from ``exclude`` (the player)."""
        if grid.width * grid.height <= 1:
            raise NoValidAdversarySpot(
                f"A {grid.width}x{grid.height} maze has no cell distinct from the player at {exclude}"
            )
        # An exclude outside the grid can never be drawn, so the first draw wins.
        while True:
            coord = SpawnPlacer._random_cell(grid, rng)
            if coord != tuple(exclude):
                break
        logger.info("Adversary placed at random cell: %s", coord)
        return coord

    @classmethod
    def place_all(cls, grid: MazeGrid, rng: RangeSource) -> SpawnSet:
        # Draw order (player, adversary) is part of the reproducibility contract.
        player = cls.place_player(grid, rng)
        adversary = cls.place_adversary(grid, rng, exclude=player)
        goal = cls.place_goal(grid)
        return SpawnSet(player=player, adversary=adversary, goal=goal)
