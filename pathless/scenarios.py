"""
Built-in example scenarios.

All scenarios are laid out for the default 30x30 grid.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .geometry import Coord
from .grid import CellKind, Grid


@dataclass
class Scenario:
    """A start/end pair plus obstacles to place on a grid."""
    name: str
    title: str
    description: str
    start_point: Optional[Coord]
    end_point: Optional[Coord]
    walls: List[Coord] = field(default_factory=list)
    traffic: List[Coord] = field(default_factory=list)


def _column(x: int, y_from: int, y_to: int) -> List[Coord]:
    return [(x, y) for y in range(y_from, y_to + 1)]


def _row(y: int, x_from: int, x_to: int) -> List[Coord]:
    return [(x, y) for x in range(x_from, x_to + 1)]


SCENARIOS: Dict[str, Scenario] = {
    'simple': Scenario(
        name='simple',
        title="Simple route",
        description="A direct route with no obstacles",
        start_point=(3, 3),
        end_point=(27, 27),
    ),
    'l_shape': Scenario(
        name='l_shape',
        title="L-shaped route",
        description="A vertical wall in the middle forces a turn",
        start_point=(3, 3),
        end_point=(27, 27),
        walls=_column(15, 6, 25),
    ),
    'maze': Scenario(
        name='maze',
        title="Maze",
        description="Several wall runs that require careful navigation",
        start_point=(2, 2),
        end_point=(28, 28),
        walls=(
            _row(6, 6, 25)
            + _column(10, 10, 29)
            + _row(12, 20, 29)
            + _column(18, 18, 29)
        ),
    ),
    'long_wall': Scenario(
        name='long_wall',
        title="Interrupted wall",
        description="A long wall between start and end; the route must go around its ends",
        start_point=(3, 3),
        end_point=(27, 27),
        walls=_column(15, 3, 27),
    ),
    'blocked': Scenario(
        name='blocked',
        title="Blocked",
        description="A full-height wall separates start and end, so no route exists",
        start_point=(3, 3),
        end_point=(27, 27),
        walls=_column(15, 0, 29),
    ),
    'traffic': Scenario(
        name='traffic',
        title="Traffic band",
        description="A band of slow traffic cells across the direct route",
        start_point=(3, 15),
        end_point=(27, 15),
        traffic=[(x, y) for x in range(13, 18) for y in range(5, 26)],
    ),
}


def list_scenarios() -> List[str]:
    return list(SCENARIOS)


def get_scenario(name: str) -> Optional[Scenario]:
    return SCENARIOS.get(name)


def apply_scenario(grid: Grid, scenario: Scenario) -> Grid:
    """
    Reset the grid and lay out a scenario on it.

    Entries outside the grid are skipped.

    Args:
        grid: Grid to modify in place
        scenario: Scenario to apply

    Returns:
        The same grid, for chaining
    """
    grid.clear_all()
    for x, y in scenario.walls:
        grid.set_cell_type(x, y, CellKind.WALL)
    for x, y in scenario.traffic:
        grid.set_cell_type(x, y, CellKind.TRAFFIC)
    if scenario.start_point is not None:
        grid.set_cell_type(*scenario.start_point, CellKind.START)
    if scenario.end_point is not None:
        grid.set_cell_type(*scenario.end_point, CellKind.END)
    return grid
