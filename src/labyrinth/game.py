from __future__ import annotations

import dataclasses
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from .config import MazeSettings
from .maze.carver import CarveStats, MazeCarver
from .maze.grid import MazeGrid
from .maze.layout import wall_segments, world_position
from .maze.spawns import SpawnPlacer, SpawnSet
from .rng import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class MazeInstance:
    """One generated maze: the carved grid plus its spawn placements.

    The grid is finished before this object exists; consumers only read it.
    """

    settings: MazeSettings
    seed: Optional[int]
    grid: MazeGrid
    spawns: SpawnSet
    stats: CarveStats

    def signature(self) -> str:
        return self.grid.signature()

    def ascii(self) -> str:
        markers = {self.spawns.goal: "G", self.spawns.adversary: "A", self.spawns.player: "P"}
        return "\n".join(self.grid.to_str_lines(markers))

    def to_dict(self) -> Dict[str, Any]:
        """Serializable summary so runs can be diffed across seeds and versions."""
        s = self.settings
        spawns = {name: list(coord) for name, coord in asdict(self.spawns).items()}
        world = {
            name: list(world_position(coord, s.cell_size, s.spawn_elevation))
            for name, coord in asdict(self.spawns).items()
        }
        cells = [
            {
                "x": x,
                "y": y,
                "walls": {"north": c.north, "east": c.east, "south": c.south, "west": c.west},
            }
            for (x, y), c in self.grid.iter_cells()
        ]
        return {
            "seed": self.seed,
            "width": self.grid.width,
            "height": self.grid.height,
            "grid": self.grid.to_str_lines(),
            "cells": cells,
            "spawns": spawns,
            "world": world,
            "wall_segments": len(wall_segments(self.grid, s.cell_size, s.wall_height, s.wall_thickness)),
            "stats": {
                "start": list(self.stats.start),
                "walls_removed": self.stats.walls_removed,
                "cells_visited": self.stats.cells_visited,
                "max_depth": self.stats.max_depth,
            },
            "signature": self.signature(),
        }


def generate_maze(settings: MazeSettings, rng: Optional[RandomSource] = None) -> MazeInstance:
    """High-level API: create a walled grid, carve it, then place spawns.

    Carving and placement share one random stream, so the same seed and
    dimensions always reproduce the same walls and spawn cells.
    """
    if rng is None:
        rng = RandomSource(settings.seed)
    logger.info("Generating %dx%d maze", settings.width, settings.height)
    grid = MazeGrid.create(settings.width, settings.height)
    stats = MazeCarver(settings.start).carve(grid, rng)
    spawns = SpawnPlacer.place_all(grid, rng)
    instance = MazeInstance(
        settings=settings,
        seed=getattr(rng, "effective_seed", None),
        grid=grid,
        spawns=spawns,
        stats=stats,
    )
    logger.debug("Generated maze signature: %s", instance.signature())
    return instance


def regenerate(instance: MazeInstance, seed: Optional[Union[int, str]] = None) -> MazeInstance:
    """Discard a maze and build a fresh one from the same settings.

    With no seed a new random seed is drawn; the old grid is never re-carved.
    """
    settings = dataclasses.replace(instance.settings, seed=seed)
    return generate_maze(settings)
