"""
Geometry helpers for grid coordinates.
"""

import math
from typing import Tuple

Coord = Tuple[int, int]

SQRT2 = math.sqrt(2)


def heuristic(a: Coord, b: Coord) -> float:
    """
    Euclidean distance between two cells, used as the A* estimate.

    Args:
        a: (x, y) of the first cell
        b: (x, y) of the second cell

    Returns:
        Straight-line distance in cell units
    """
    dx = abs(b[0] - a[0])
    dy = abs(b[1] - a[1])
    return math.sqrt(dx * dx + dy * dy)


def step_distance(a: Coord, b: Coord) -> float:
    """
    Cost of moving between two adjacent cells.

    A diagonal step costs sqrt(2); anything else is the Manhattan sum,
    which is 1 for an orthogonal step.
    """
    dx = abs(b[0] - a[0])
    dy = abs(b[1] - a[1])
    if dx == 1 and dy == 1:
        return SQRT2
    return dx + dy


def direction_angle(a: Coord, b: Coord) -> float:
    """Angle in radians of the vector a -> b."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def is_diagonal_step(dx: int, dy: int) -> bool:
    return dx != 0 and dy != 0


def world_to_grid(world_x: float, world_y: float, cell_size: float = 1.0) -> Coord:
    """
    Convert world coordinates to the grid cell containing them.

    Args:
        world_x: X position in world units
        world_y: Y position in world units
        cell_size: Size of one cell in world units

    Returns:
        (x, y) grid coordinates
    """
    return int(math.floor(world_x / cell_size)), int(math.floor(world_y / cell_size))


def grid_to_world(grid_x: int, grid_y: int, cell_size: float = 1.0) -> Tuple[float, float]:
    """
    Convert grid coordinates to the world position of the cell centre.

    Args:
        grid_x: Cell column
        grid_y: Cell row
        cell_size: Size of one cell in world units

    Returns:
        (x, y) world coordinates of the cell centre
    """
    return grid_x * cell_size + cell_size / 2, grid_y * cell_size + cell_size / 2
