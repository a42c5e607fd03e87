"""
Grid model for pathfinding.

A fixed-size 2D grid of cells. Each cell carries a kind (empty, wall,
start, end, path, traffic) from which its walkability and traversal
cost are derived. Cells are created once and mutated in place through
set_cell_type().
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import numpy as np

from .config import DEFAULT_GRID_CONFIG
from .geometry import Coord, grid_to_world, is_diagonal_step, world_to_grid

logger = logging.getLogger(__name__)


class CellKind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"
    PATH = "path"
    TRAFFIC = "traffic"


# Integer codes used by kind_array()
KIND_CODES = {
    CellKind.EMPTY: 0,
    CellKind.WALL: 1,
    CellKind.START: 2,
    CellKind.END: 3,
    CellKind.PATH: 4,
    CellKind.TRAFFIC: 5,
}

# Up, Right, Down, Left
ORTHOGONAL_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))
# Up-Right, Down-Right, Down-Left, Up-Left
DIAGONAL_DIRECTIONS = ((1, -1), (1, 1), (-1, 1), (-1, -1))


def cost_for_kind(kind: CellKind) -> Tuple[bool, float]:
    """Return (walkable, cost) for a cell kind."""
    if kind is CellKind.WALL:
        return False, math.inf
    if kind is CellKind.TRAFFIC:
        return True, 2.0
    return True, 1.0


@dataclass
class Cell:
    x: int
    y: int
    kind: CellKind = CellKind.EMPTY
    walkable: bool = True
    cost: float = 1.0

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def reset(self) -> None:
        self.kind = CellKind.EMPTY
        self.walkable = True
        self.cost = 1.0


@dataclass
class GridStats:
    """Summary counts for a grid."""
    total_cells: int
    walls: int
    traffic: int
    path_cells: int
    start_point: Optional[Coord]
    end_point: Optional[Coord]

    @property
    def has_start(self) -> bool:
        return self.start_point is not None

    @property
    def has_end(self) -> bool:
        return self.end_point is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_cells': self.total_cells,
            'walls': self.walls,
            'traffic': self.traffic,
            'path_cells': self.path_cells,
            'start_point': self.start_point,
            'end_point': self.end_point,
            'has_start': self.has_start,
            'has_end': self.has_end,
        }


class Grid:
    """
    Dense width x height grid of cells, indexed as cells[y][x].

    Holds at most one start and one end cell; their coordinates are
    mirrored in start_point and end_point.
    """

    def __init__(self, width: int = DEFAULT_GRID_CONFIG.width,
                 height: int = DEFAULT_GRID_CONFIG.height):
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = []
        self.start_point: Optional[Coord] = None
        self.end_point: Optional[Coord] = None
        self._initialize_cells()

    def _initialize_cells(self) -> None:
        self.cells = [[Cell(x, y) for x in range(self.width)] for y in range(self.height)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        if self.is_valid_position(x, y):
            return self.cells[y][x]
        return None

    def get_cell_type(self, x: int, y: int) -> Optional[CellKind]:
        cell = self.get_cell(x, y)
        return cell.kind if cell is not None else None

    def is_walkable(self, x: int, y: int) -> bool:
        cell = self.get_cell(x, y)
        return cell.walkable if cell is not None else False

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_cell_type(self, x: int, y: int, kind: Union[CellKind, str]) -> bool:
        """
        Set the kind of the cell at (x, y).

        Walkability and cost follow from the kind. Placing a start or end
        marker moves it: the previous marker cell, if any, becomes empty.

        Args:
            x: Cell column
            y: Cell row
            kind: CellKind or its string value

        Returns:
            True if the cell was updated, False if (x, y) is outside the grid
        """
        kind = CellKind(kind)
        if not self.is_valid_position(x, y):
            return False

        cell = self.cells[y][x]

        if cell.kind is CellKind.START:
            self.start_point = None
        elif cell.kind is CellKind.END:
            self.end_point = None

        if kind is CellKind.START and self.start_point is not None:
            self._clear_marker(self.start_point)
        elif kind is CellKind.END and self.end_point is not None:
            self._clear_marker(self.end_point)

        cell.kind = kind
        cell.walkable, cell.cost = cost_for_kind(kind)

        if kind is CellKind.START:
            self.start_point = (x, y)
        elif kind is CellKind.END:
            self.end_point = (x, y)

        return True

    def _clear_marker(self, coord: Coord) -> None:
        self.cells[coord[1]][coord[0]].reset()

    # ------------------------------------------------------------------
    # Neighbors
    # ------------------------------------------------------------------

    def get_neighbors(self, x: int, y: int, allow_diagonal: bool = True) -> Iterator[Cell]:
        """
        Yield walkable neighbors of (x, y).

        Order is up, right, down, left, then (with allow_diagonal)
        up-right, down-right, down-left, up-left. A diagonal neighbor is
        skipped when either orthogonal corner next to it is blocked.
        """
        directions = ORTHOGONAL_DIRECTIONS
        if allow_diagonal:
            directions = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS

        for dx, dy in directions:
            nx, ny = x + dx, y + dy
            if not self.is_walkable(nx, ny):
                continue
            if self.is_diagonal_move(dx, dy) and self.has_diagonal_corner_blocked(x, y, dx, dy):
                logger.debug("Diagonal move blocked from (%d, %d) to (%d, %d)", x, y, nx, ny)
                continue
            yield self.cells[ny][nx]

    @staticmethod
    def is_diagonal_move(dx: int, dy: int) -> bool:
        return is_diagonal_step(dx, dy)

    def has_diagonal_corner_blocked(self, x: int, y: int, dx: int, dy: int) -> bool:
        """
        Check the two orthogonal cells shared by (x, y) and (x+dx, y+dy).

        A corner outside the grid does not block.
        """
        corner1 = (x + dx, y)
        corner2 = (x, y + dy)
        corner1_blocked = self.is_valid_position(*corner1) and not self.is_walkable(*corner1)
        corner2_blocked = self.is_valid_position(*corner2) and not self.is_walkable(*corner2)
        return corner1_blocked or corner2_blocked

    # ------------------------------------------------------------------
    # Bulk resets
    # ------------------------------------------------------------------

    def clear_all(self) -> None:
        """Reset every cell to empty and drop the start/end markers."""
        self._initialize_cells()
        self.start_point = None
        self.end_point = None

    def clear_walls(self) -> None:
        """Reset wall and traffic cells to empty."""
        for cell in self.iter_cells():
            if cell.kind in (CellKind.WALL, CellKind.TRAFFIC):
                cell.reset()

    def clear_path(self) -> None:
        """Reset path markers left by a previous search."""
        for cell in self.iter_cells():
            if cell.kind is CellKind.PATH:
                cell.reset()

    # ------------------------------------------------------------------
    # Stats and conversions
    # ------------------------------------------------------------------

    def get_stats(self) -> GridStats:
        codes = self.kind_array()
        return GridStats(
            total_cells=self.width * self.height,
            walls=int((codes == KIND_CODES[CellKind.WALL]).sum()),
            traffic=int((codes == KIND_CODES[CellKind.TRAFFIC]).sum()),
            path_cells=int((codes == KIND_CODES[CellKind.PATH]).sum()),
            start_point=self.start_point,
            end_point=self.end_point,
        )

    def kind_array(self) -> np.ndarray:
        """
        Cell kinds as integer codes.

        Returns:
            (height, width) int8 array of KIND_CODES values
        """
        codes = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in self.iter_cells():
            codes[cell.y, cell.x] = KIND_CODES[cell.kind]
        return codes

    def world_to_grid(self, world_x: float, world_y: float,
                      cell_size: float = DEFAULT_GRID_CONFIG.cell_size) -> Coord:
        return world_to_grid(world_x, world_y, cell_size)

    def grid_to_world(self, grid_x: int, grid_y: int,
                      cell_size: float = DEFAULT_GRID_CONFIG.cell_size) -> Tuple[float, float]:
        return grid_to_world(grid_x, grid_y, cell_size)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, start={self.start_point}, end={self.end_point})"
