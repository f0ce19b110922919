from .grid import Cell, Coord, Direction, MazeGrid
from .carver import CarveStats, MazeCarver, carve_maze
from .spawns import SpawnPlacer, SpawnSet
from .layout import FloorTile, WallSegment, floor_tiles, wall_segments, world_position

__all__ = [
    "Cell",
    "Coord",
    "Direction",
    "MazeGrid",
    "CarveStats",
    "MazeCarver",
    "carve_maze",
    "SpawnPlacer",
    "SpawnSet",
    "FloorTile",
    "WallSegment",
    "floor_tiles",
    "wall_segments",
    "world_position",
]
