"""
Weighted A* pathfinding over a Grid.

- 8-directional movement; diagonal steps may not cut blocked corners.
- Euclidean heuristic, step cost sqrt(2) diagonal / 1 orthogonal,
  scaled by the target cell's cost, plus a flat penalty for traffic.
- Search scores live in a SearchState owned by the pathfinder, not on
  the grid cells. The grid is only touched to mark the found path.
"""

import logging
from dataclasses import dataclass
from heapq import heappush, heappop
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .geometry import Coord, direction_angle, heuristic, step_distance
from .grid import CellKind, Grid

logger = logging.getLogger(__name__)

Path = List[Coord]


@dataclass
class PathStats:
    """Statistics for a computed path."""
    path_length: int = 0
    path_cost: float = 0.0
    nodes_explored: int = 0
    success: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path_length': self.path_length,
            'path_cost': self.path_cost,
            'nodes_explored': self.nodes_explored,
            'success': self.success,
        }


class SearchState:
    """
    Per-cell working storage for one search.

    g, h and f are (height, width) float arrays. parent holds the flat
    index (y * width + x) of each cell's predecessor, or -1.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.g = np.zeros((height, width), dtype=np.float64)
        self.h = np.zeros((height, width), dtype=np.float64)
        self.f = np.zeros((height, width), dtype=np.float64)
        self.parent = np.full((height, width), -1, dtype=np.int64)

    def reset(self) -> None:
        self.g.fill(0.0)
        self.h.fill(0.0)
        self.f.fill(0.0)
        self.parent.fill(-1)

    def index_of(self, x: int, y: int) -> int:
        return y * self.width + x

    def coord_of(self, index: int) -> Coord:
        return (index % self.width, index // self.width)

    def parent_of(self, x: int, y: int) -> Optional[Coord]:
        index = int(self.parent[y, x])
        return self.coord_of(index) if index >= 0 else None

    def explored_count(self) -> int:
        """Number of cells reached with a positive g score."""
        return int(np.count_nonzero(self.g > 0))

    def trace_back(self, x: int, y: int) -> Path:
        """Follow parent links from (x, y) and return the start -> (x, y) route."""
        path: Path = []
        index = self.index_of(x, y)
        while index >= 0:
            path.append(self.coord_of(index))
            index = int(self.parent.flat[index])
        path.reverse()
        return path


def optimize_path(path: Sequence[Coord],
                  angle_tolerance: float = DEFAULT_SEARCH_CONFIG.angle_tolerance) -> Path:
    """
    Drop interior points that do not change the direction of travel.

    The incoming direction is measured from the last kept point, the
    outgoing one towards the next point. Angles are compared without
    wrapping.

    Args:
        path: Ordered (x, y) points
        angle_tolerance: Minimum direction change in radians to keep a point

    Returns:
        Simplified path with the same first and last points
    """
    if not path or len(path) <= 2:
        return path

    optimized = [path[0]]
    for i in range(1, len(path) - 1):
        prev = optimized[-1]
        current = path[i]
        following = path[i + 1]

        angle_in = direction_angle(prev, current)
        angle_out = direction_angle(current, following)
        if abs(angle_in - angle_out) > angle_tolerance:
            optimized.append(current)

    optimized.append(path[-1])
    return optimized


class AStar:
    """
    A* pathfinder bound to one grid.

    Not reentrant: one search at a time per instance, and the grid must
    not be edited while a search runs.
    """

    def __init__(self, grid: Grid, config: SearchConfig = DEFAULT_SEARCH_CONFIG):
        self.grid = grid
        self.config = config
        self._state = SearchState(grid.width, grid.height)

    @property
    def last_state(self) -> SearchState:
        return self._state

    heuristic = staticmethod(heuristic)
    distance = staticmethod(step_distance)

    def find_path(self, start_x: int, start_y: int, end_x: int, end_y: int) -> Optional[Path]:
        """
        Find the cheapest route from (start_x, start_y) to (end_x, end_y).

        Path markers from any previous search are cleared first, and on
        success the interior cells of the new route that are empty are
        marked as path.

        Returns:
            List of (x, y) from start to end inclusive, or None if either
            endpoint is invalid or blocked, or no route exists
        """
        grid = self.grid
        if not grid.is_valid_position(start_x, start_y) or not grid.is_valid_position(end_x, end_y):
            return None
        if not grid.is_walkable(start_x, start_y) or not grid.is_walkable(end_x, end_y):
            return None

        grid.clear_path()
        state = self._state
        state.reset()

        goal = (end_x, end_y)
        start = (start_x, start_y)
        state.h[start_y, start_x] = heuristic(start, goal)
        state.f[start_y, start_x] = state.h[start_y, start_x]

        # Entries are (f, insertion order, x, y). A cell enters the open set
        # at most once, so insertion order breaks f ties the same way a
        # first-occurrence scan of an ordered open list would.
        open_heap: List[Tuple[float, int, int, int]] = [(float(state.f[start_y, start_x]), 0, start_x, start_y)]
        opened: Dict[Coord, int] = {start: 0}  # insertion order of every cell ever opened
        closed_set: Set[Coord] = set()
        expanded = 0

        while open_heap:
            f, _, x, y = heappop(open_heap)
            if (x, y) in closed_set or f > state.f[y, x]:
                # stale entry left behind by a cheaper update
                continue

            if x == end_x and y == end_y:
                path = state.trace_back(x, y)
                self._mark_path(path)
                logger.debug("Path found: %d points, %d nodes expanded", len(path), expanded)
                return path

            closed_set.add((x, y))
            expanded += 1
            g_current = float(state.g[y, x])

            for neighbor in grid.get_neighbors(x, y, self.config.allow_diagonal):
                coord = neighbor.coord
                if coord in closed_set:
                    continue

                movement_cost = step_distance((x, y), coord)
                traffic_penalty = self.config.traffic_penalty if neighbor.kind is CellKind.TRAFFIC else 0.0
                tentative_g = g_current + movement_cost * neighbor.cost + traffic_penalty

                nx, ny = coord
                if coord not in opened:
                    opened[coord] = len(opened)
                elif tentative_g >= state.g[ny, nx]:
                    continue

                state.parent[ny, nx] = state.index_of(x, y)
                state.g[ny, nx] = tentative_g
                state.h[ny, nx] = heuristic(coord, goal)
                state.f[ny, nx] = tentative_g + state.h[ny, nx]
                heappush(open_heap, (float(state.f[ny, nx]), opened[coord], nx, ny))

        logger.debug("No path from %s to %s, %d nodes expanded", start, goal, expanded)
        return None

    def find_path_from_grid(self) -> Optional[Path]:
        """Search between the grid's own start and end markers."""
        if self.grid.start_point is None or self.grid.end_point is None:
            return None
        start_x, start_y = self.grid.start_point
        end_x, end_y = self.grid.end_point
        return self.find_path(start_x, start_y, end_x, end_y)

    def get_pathfinding_stats(self, path: Optional[Sequence[Coord]]) -> PathStats:
        """
        Summarize a path.

        path_cost is recomputed from step distances only; cell costs and
        the traffic penalty used during the search are not included.

        nodes_explored comes from this pathfinder's most recent search
        state. Grid resets such as clear_path() and clear_all() do not
        touch it; only the next find_path() call starts it over.
        """
        if not path:
            return PathStats()

        path_cost = 0.0
        for current, following in zip(path, path[1:]):
            path_cost += step_distance(current, following)

        return PathStats(
            path_length=len(path),
            path_cost=path_cost,
            nodes_explored=self._state.explored_count(),
            success=True,
        )

    def optimize_path(self, path: Sequence[Coord]) -> Path:
        return optimize_path(path, self.config.angle_tolerance)

    def _mark_path(self, path: Path) -> None:
        for x, y in path[1:-1]:
            if self.grid.get_cell_type(x, y) is CellKind.EMPTY:
                self.grid.set_cell_type(x, y, CellKind.PATH)
