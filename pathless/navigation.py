"""
Bridge between numpy occupancy grids and the Grid model.

Occupancy arrays follow the (nx, nz) convention: index [i, j] is the
cell at x=i, y=j, with 0=free and 1=occupied.
"""

from typing import List, Optional, Tuple

import numpy as np

from .grid import CellKind, Grid, KIND_CODES
from .pathfinding import AStar


def grid_from_occupancy(occupancy_grid, traffic_mask=None):
    """
    Build a Grid from an occupancy array.

    Args:
        occupancy_grid: 2D array (nx, nz) where 0=free, nonzero=occupied
        traffic_mask: Optional boolean array (nx, nz) of slow free cells

    Returns:
        Grid with walls on occupied cells and traffic on masked free cells
    """
    occupancy_grid = np.asarray(occupancy_grid)
    nx, nz = occupancy_grid.shape
    grid = Grid(nx, nz)

    for i, j in np.argwhere(occupancy_grid != 0):
        grid.set_cell_type(int(i), int(j), CellKind.WALL)

    if traffic_mask is not None:
        traffic_mask = np.asarray(traffic_mask, dtype=bool)
        for i, j in np.argwhere(traffic_mask & (occupancy_grid == 0)):
            grid.set_cell_type(int(i), int(j), CellKind.TRAFFIC)

    return grid


def grid_to_occupancy(grid: Grid) -> np.ndarray:
    """
    Convert a Grid to an occupancy array.

    Returns:
        (width, height) uint8 array where 1 marks walls
    """
    codes = grid.kind_array()
    return (codes == KIND_CODES[CellKind.WALL]).astype(np.uint8).T


def find_free_paths(occupancy_grid, start_cell: Tuple[int, int],
                    goal_cell: Tuple[int, int]) -> Optional[List[Tuple[int, int]]]:
    """
    A* path finding on an occupancy grid.

    Args:
        occupancy_grid: 2D array where 0=free, 1=occupied
        start_cell: Tuple of (i, j) grid coordinates for start
        goal_cell: Tuple of (i, j) grid coordinates for goal

    Returns:
        List of grid coordinates (i, j) representing the path, or None if no path found
    """
    grid = grid_from_occupancy(occupancy_grid)
    return AStar(grid).find_path(int(start_cell[0]), int(start_cell[1]),
                                 int(goal_cell[0]), int(goal_cell[1]))
