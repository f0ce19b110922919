"""
World-space export of a carved maze.

Pure data for whatever engine instantiates the geometry: cell centers, floor
tiles and the wall segments to build. Cell (x, y) maps to world
(x * cell_size, elevation, y * cell_size), so maze north is world +z.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .grid import Coord, Direction, MazeGrid

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class WallSegment:
    cell: Coord
    direction: Direction
    center: Vec3
    yaw: float  # degrees about the vertical axis


@dataclass(frozen=True)
class FloorTile:
    cell: Coord
    center: Vec3


def world_position(coord: Coord, cell_size: float = 10.0, elevation: float = 1.0) -> Vec3:
    x, y = coord
    return (x * cell_size, elevation, y * cell_size)


def floor_tiles(grid: MazeGrid, cell_size: float = 10.0) -> List[FloorTile]:
    return [FloorTile(c, world_position(c, cell_size, 0.0)) for c in grid.coords()]


def _segment(
    coord: Coord, direction: Direction, cell_size: float, wall_height: float, wall_thickness: float
) -> WallSegment:
    dx, dy = direction.offset
    inset = cell_size / 2 - wall_thickness / 2
    cx, _, cz = world_position(coord, cell_size, 0.0)
    center = (cx + dx * inset, wall_height / 2, cz + dy * inset)
    yaw = 0.0 if direction in (Direction.NORTH, Direction.SOUTH) else 90.0
    return WallSegment(coord, direction, center, yaw)


def wall_segments(
    grid: MazeGrid,
    cell_size: float = 10.0,
    wall_height: float = 5.0,
    wall_thickness: float = 0.5,
) -> List[WallSegment]:
    """List every standing wall once.

    Shared walls are owned by the cell to their south or west, so each cell
    contributes its north and east walls; the bottom row adds its south
    boundary and the leftmost column its west boundary.
    """
    segments: List[WallSegment] = []
    for (x, y), cell in grid.iter_cells():
        owned = [Direction.NORTH, Direction.EAST]
        if y == 0:
            owned.append(Direction.SOUTH)
        if x == 0:
            owned.append(Direction.WEST)
        for direction in owned:
            if cell.has_wall(direction):
                segments.append(_segment((x, y), direction, cell_size, wall_height, wall_thickness))
    return segments
