# tests/test_grid.py
"""
Unit tests for the Grid cell model: kinds, costs, markers, neighbors
and bulk resets.
"""

import math

import numpy as np

from pathless.config import DEFAULT_GRID_CONFIG
from pathless.grid import Cell, CellKind, Grid, KIND_CODES


def coords(cells):
    return [cell.coord for cell in cells]


def test_new_grid_is_empty_and_walkable() -> None:
    grid = Grid(4, 3)

    assert grid.width == 4
    assert grid.height == 3
    assert grid.start_point is None
    assert grid.end_point is None
    for cell in grid.iter_cells():
        assert cell.kind is CellKind.EMPTY
        assert cell.walkable
        assert cell.cost == 1


def test_default_grid_size() -> None:
    grid = Grid()
    assert (grid.width, grid.height) == (30, 30)


def test_is_valid_position_bounds() -> None:
    grid = Grid(4, 3)

    assert grid.is_valid_position(0, 0)
    assert grid.is_valid_position(3, 2)
    assert not grid.is_valid_position(4, 0)
    assert not grid.is_valid_position(0, 3)
    assert not grid.is_valid_position(-1, 1)


def test_set_cell_type_derives_cost_and_walkability() -> None:
    grid = Grid(5, 5)

    assert grid.set_cell_type(1, 1, CellKind.WALL)
    assert grid.set_cell_type(2, 2, "traffic")
    assert grid.set_cell_type(3, 3, CellKind.PATH)

    wall = grid.get_cell(1, 1)
    assert not wall.walkable
    assert math.isinf(wall.cost)

    traffic = grid.get_cell(2, 2)
    assert traffic.walkable
    assert traffic.cost == 2

    path = grid.get_cell(3, 3)
    assert path.walkable
    assert path.cost == 1

    # Back to empty restores defaults
    grid.set_cell_type(1, 1, CellKind.EMPTY)
    assert grid.is_walkable(1, 1)
    assert grid.get_cell(1, 1).cost == 1


def test_set_cell_type_rejects_invalid_position() -> None:
    grid = Grid(3, 3)

    assert grid.set_cell_type(3, 0, CellKind.WALL) is False
    assert grid.set_cell_type(-1, 0, CellKind.START) is False
    assert grid.start_point is None


def test_bounds_checked_reads() -> None:
    grid = Grid(3, 3)
    grid.set_cell_type(0, 0, CellKind.WALL)

    assert grid.get_cell(5, 5) is None
    assert grid.get_cell_type(5, 5) is None
    assert grid.get_cell_type(0, 0) is CellKind.WALL
    assert not grid.is_walkable(0, 0)
    assert not grid.is_walkable(-1, 0)
    assert isinstance(grid.get_cell(1, 1), Cell)


def test_start_and_end_markers_are_unique() -> None:
    grid = Grid(5, 5)

    grid.set_cell_type(0, 0, CellKind.START)
    grid.set_cell_type(4, 4, CellKind.END)
    assert grid.start_point == (0, 0)
    assert grid.end_point == (4, 4)

    # Moving the start clears the old marker cell
    grid.set_cell_type(1, 2, CellKind.START)
    assert grid.start_point == (1, 2)
    assert grid.get_cell_type(0, 0) is CellKind.EMPTY

    kinds = [cell.kind for cell in grid.iter_cells()]
    assert kinds.count(CellKind.START) == 1
    assert kinds.count(CellKind.END) == 1


def test_overwriting_marker_clears_pointer() -> None:
    grid = Grid(5, 5)
    grid.set_cell_type(2, 2, CellKind.START)
    grid.set_cell_type(3, 3, CellKind.END)

    grid.set_cell_type(2, 2, CellKind.WALL)
    grid.set_cell_type(3, 3, CellKind.START)

    assert grid.start_point == (3, 3)
    assert grid.end_point is None


def test_neighbors_order_open_grid() -> None:
    grid = Grid(3, 3)

    neighbors = coords(grid.get_neighbors(1, 1))

    assert neighbors == [
        (1, 0), (2, 1), (1, 2), (0, 1),   # up, right, down, left
        (2, 0), (2, 2), (0, 2), (0, 0),   # up-right, down-right, down-left, up-left
    ]


def test_neighbors_without_diagonals() -> None:
    grid = Grid(3, 3)

    assert coords(grid.get_neighbors(1, 1, allow_diagonal=False)) == [(1, 0), (2, 1), (1, 2), (0, 1)]


def test_neighbors_at_corner_of_grid() -> None:
    grid = Grid(3, 3)

    assert coords(grid.get_neighbors(0, 0)) == [(1, 0), (0, 1), (1, 1)]


def test_neighbors_skip_walls_and_blocked_corners() -> None:
    grid = Grid(3, 3)
    grid.set_cell_type(2, 1, CellKind.WALL)

    neighbors = coords(grid.get_neighbors(1, 1))

    # Right is a wall, and both right-hand diagonals cut its corner
    assert neighbors == [(1, 0), (1, 2), (0, 1), (0, 2), (0, 0)]


def test_diagonal_blocked_by_single_corner() -> None:
    grid = Grid(2, 2)
    grid.set_cell_type(0, 1, CellKind.WALL)

    assert grid.has_diagonal_corner_blocked(0, 0, 1, 1)
    assert (1, 1) not in coords(grid.get_neighbors(0, 0))
    assert grid.is_diagonal_move(1, -1)
    assert not grid.is_diagonal_move(0, 1)


def test_traffic_does_not_block_corners() -> None:
    grid = Grid(2, 2)
    grid.set_cell_type(1, 0, CellKind.TRAFFIC)
    grid.set_cell_type(0, 1, CellKind.TRAFFIC)

    assert (1, 1) in coords(grid.get_neighbors(0, 0))


def test_clear_walls_keeps_markers_and_path() -> None:
    grid = Grid(5, 5)
    grid.set_cell_type(0, 0, CellKind.START)
    grid.set_cell_type(4, 4, CellKind.END)
    grid.set_cell_type(2, 2, CellKind.WALL)
    grid.set_cell_type(3, 2, CellKind.TRAFFIC)
    grid.set_cell_type(1, 1, CellKind.PATH)

    grid.clear_walls()

    assert grid.get_cell_type(2, 2) is CellKind.EMPTY
    assert grid.get_cell(2, 2).cost == 1
    assert grid.get_cell(2, 2).walkable
    assert grid.get_cell_type(3, 2) is CellKind.EMPTY
    assert grid.get_cell(3, 2).cost == 1
    assert grid.get_cell_type(1, 1) is CellKind.PATH
    assert grid.start_point == (0, 0)
    assert grid.end_point == (4, 4)


def test_clear_path_only_resets_path_cells() -> None:
    grid = Grid(5, 5)
    grid.set_cell_type(1, 1, CellKind.PATH)
    grid.set_cell_type(2, 2, CellKind.WALL)

    grid.clear_path()

    assert grid.get_cell_type(1, 1) is CellKind.EMPTY
    assert grid.get_cell_type(2, 2) is CellKind.WALL


def test_clear_all_resets_everything() -> None:
    grid = Grid(5, 5)
    grid.set_cell_type(0, 0, CellKind.START)
    grid.set_cell_type(4, 4, CellKind.END)
    grid.set_cell_type(2, 2, CellKind.WALL)

    grid.clear_all()

    assert grid.start_point is None
    assert grid.end_point is None
    assert all(cell.kind is CellKind.EMPTY for cell in grid.iter_cells())
    assert grid.width == 5 and grid.height == 5


def test_get_stats_counts() -> None:
    grid = Grid(6, 4)
    grid.set_cell_type(0, 0, CellKind.WALL)
    grid.set_cell_type(1, 0, CellKind.WALL)
    grid.set_cell_type(2, 0, CellKind.TRAFFIC)
    grid.set_cell_type(3, 0, CellKind.PATH)
    grid.set_cell_type(5, 3, CellKind.START)

    stats = grid.get_stats()

    assert stats.total_cells == 24
    assert stats.walls == 2
    assert stats.traffic == 1
    assert stats.path_cells == 1
    assert stats.start_point == (5, 3)
    assert stats.has_start
    assert not stats.has_end
    assert stats.to_dict()['has_end'] is False


def test_kind_array_layout() -> None:
    grid = Grid(4, 2)
    grid.set_cell_type(3, 1, CellKind.WALL)

    codes = grid.kind_array()

    assert codes.shape == (2, 4)
    assert codes[1, 3] == KIND_CODES[CellKind.WALL]
    assert np.count_nonzero(codes) == 1


def test_world_grid_conversion() -> None:
    grid = Grid(10, 10)

    assert grid.world_to_grid(2.7, 5.1) == (2, 5)
    assert grid.world_to_grid(5.0, 3.9, cell_size=2) == (2, 1)
    assert grid.grid_to_world(2, 5) == (2.5, 5.5)
    assert grid.grid_to_world(1, 0, cell_size=2) == (3.0, 1.0)


def test_world_grid_conversion_uses_configured_cell_size() -> None:
    grid = Grid(10, 10)
    size = DEFAULT_GRID_CONFIG.cell_size

    assert grid.grid_to_world(3, 4) == grid.grid_to_world(3, 4, cell_size=size)
    assert grid.world_to_grid(3.5 * size, 4.5 * size) == (3, 4)
