# tests/test_navigation.py
"""
Tests for the occupancy-grid bridge and grid rendering.
"""

import numpy as np

from pathless.config import DEFAULT_RENDER_CONFIG
from pathless.grid import CellKind, Grid
from pathless.navigation import find_free_paths, grid_from_occupancy, grid_to_occupancy
from pathless.visualization import create_grid_image, path_to_world


def test_grid_from_occupancy_axes() -> None:
    occupancy = np.zeros((6, 4))
    occupancy[5, 1] = 1

    grid = grid_from_occupancy(occupancy)

    assert (grid.width, grid.height) == (6, 4)
    assert grid.get_cell_type(5, 1) is CellKind.WALL
    assert grid.get_stats().walls == 1


def test_traffic_mask_only_on_free_cells() -> None:
    occupancy = np.zeros((3, 3))
    occupancy[0, 0] = 1
    traffic = np.ones((3, 3), dtype=bool)

    grid = grid_from_occupancy(occupancy, traffic)

    assert grid.get_cell_type(0, 0) is CellKind.WALL
    assert grid.get_stats().traffic == 8


def test_occupancy_round_trip() -> None:
    rng = np.random.default_rng(7)
    occupancy = (rng.random((8, 5)) < 0.3).astype(np.uint8)

    assert np.array_equal(grid_to_occupancy(grid_from_occupancy(occupancy)), occupancy)


def test_find_free_paths_around_obstacle() -> None:
    occupancy = np.zeros((7, 7))
    occupancy[3, 0:6] = 1

    path = find_free_paths(occupancy, (0, 0), (6, 0))

    assert path[0] == (0, 0)
    assert path[-1] == (6, 0)
    assert all(occupancy[i, j] == 0 for i, j in path)
    assert (3, 6) in path


def test_find_free_paths_no_route() -> None:
    occupancy = np.zeros((5, 5))
    occupancy[2, :] = 1

    assert find_free_paths(occupancy, (0, 0), (4, 4)) is None


def test_create_grid_image_colors() -> None:
    grid = Grid(4, 3)
    grid.set_cell_type(1, 0, CellKind.WALL)
    grid.set_cell_type(0, 2, CellKind.START)
    grid.set_cell_type(3, 2, CellKind.END)
    colors = DEFAULT_RENDER_CONFIG.colors

    image = create_grid_image(grid, path=[(0, 2), (1, 2), (2, 2), (3, 2)])

    assert image.shape == (3, 4, 3)
    assert image.dtype == np.uint8
    assert tuple(image[0, 1]) == colors['wall']
    assert tuple(image[2, 0]) == colors['start']
    assert tuple(image[2, 3]) == colors['end']
    assert tuple(image[2, 1]) == colors['path']
    assert tuple(image[0, 0]) == colors['empty']


def test_create_grid_image_scaling() -> None:
    grid = Grid(4, 3)
    grid.set_cell_type(3, 2, CellKind.TRAFFIC)

    image = create_grid_image(grid, cell_pixels=5)

    assert image.shape == (15, 20, 3)
    assert tuple(image[14, 19]) == DEFAULT_RENDER_CONFIG.colors['traffic']
    assert tuple(image[10, 14]) == DEFAULT_RENDER_CONFIG.colors['empty']


def test_path_to_world_cell_centres() -> None:
    points = path_to_world([(0, 0), (2, 1)])
    assert points.tolist() == [[0.5, 0.5], [2.5, 1.5]]

    scaled = path_to_world([(1, 0)], cell_size=2.0)
    assert scaled.tolist() == [[3.0, 1.0]]

    assert path_to_world([]).shape == (0, 2)
