"""
Grid pathfinding: weighted A* over cells with walls and traffic.
"""

from .grid import Cell, CellKind, Grid, GridStats
from .pathfinding import AStar, PathStats, SearchState, optimize_path
from .geometry import heuristic, step_distance, world_to_grid, grid_to_world
from .navigation import grid_from_occupancy, grid_to_occupancy, find_free_paths
from .scenarios import Scenario, SCENARIOS, get_scenario, list_scenarios, apply_scenario
from .visualization import (
    setup_pathfinding_viewer_blueprint,
    create_grid_image,
    log_grid,
    log_path,
    path_to_world
)
from .config import (
    GridConfig,
    SearchConfig,
    RenderConfig,
    DEFAULT_GRID_CONFIG,
    DEFAULT_SEARCH_CONFIG,
    DEFAULT_RENDER_CONFIG,
    get_output_dir
)
from .io_utils import (
    load_json,
    save_json,
    load_grid,
    save_grid,
    grid_to_layout,
    grid_from_layout,
    path_to_json,
    save_path_result,
    save_image
)

__all__ = [
    # Grid
    'Cell',
    'CellKind',
    'Grid',
    'GridStats',
    # Pathfinding
    'AStar',
    'PathStats',
    'SearchState',
    'optimize_path',
    # Geometry
    'heuristic',
    'step_distance',
    'world_to_grid',
    'grid_to_world',
    # Occupancy grids
    'grid_from_occupancy',
    'grid_to_occupancy',
    'find_free_paths',
    # Scenarios
    'Scenario',
    'SCENARIOS',
    'get_scenario',
    'list_scenarios',
    'apply_scenario',
    # Visualization
    'setup_pathfinding_viewer_blueprint',
    'create_grid_image',
    'log_grid',
    'log_path',
    'path_to_world',
    # Config
    'GridConfig',
    'SearchConfig',
    'RenderConfig',
    'DEFAULT_GRID_CONFIG',
    'DEFAULT_SEARCH_CONFIG',
    'DEFAULT_RENDER_CONFIG',
    'get_output_dir',
    # IO utilities
    'load_json',
    'save_json',
    'load_grid',
    'save_grid',
    'grid_to_layout',
    'grid_from_layout',
    'path_to_json',
    'save_path_result',
    'save_image',
]
