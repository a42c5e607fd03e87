"""
Visualization utilities: grid images and Rerun logging.
"""

from typing import Optional, Sequence

import numpy as np
import rerun as rr

from .config import DEFAULT_GRID_CONFIG, DEFAULT_RENDER_CONFIG, RenderConfig
from .geometry import Coord, grid_to_world
from .grid import CellKind, Grid, KIND_CODES


def setup_pathfinding_viewer_blueprint():
    """
    Set up the blueprint for the pathfinding viewer.

    Returns:
        Blueprint configuration for Rerun viewer
    """
    blueprint = rr.blueprint.Blueprint(
        rr.blueprint.Horizontal(
            rr.blueprint.Spatial2DView(name="Grid (Top-Down)", origin="grid"),
            rr.blueprint.Spatial3DView(name="3D Route", origin="world"),
            column_shares=[1, 1]
        ),
        collapse_panels=False,
    )
    return blueprint


def create_grid_image(grid: Grid, path: Optional[Sequence[Coord]] = None,
                      cell_pixels: int = 1, config: RenderConfig = DEFAULT_RENDER_CONFIG):
    """
    Create colored visualization of a grid.

    Args:
        grid: Grid to render
        path: Optional path to draw; its interior points use the path color
        cell_pixels: Pixels per cell side
        config: Render configuration with the color palette

    Returns:
        Colored image array (height * cell_pixels, width * cell_pixels, 3) with uint8 dtype
    """
    codes = grid.kind_array()
    image = np.zeros((*codes.shape, 3), dtype=np.uint8)
    for kind, code in KIND_CODES.items():
        image[codes == code] = config.colors[kind.value]

    if path:
        for x, y in path[1:-1]:
            if codes[y, x] != KIND_CODES[CellKind.WALL]:
                image[y, x] = config.colors[CellKind.PATH.value]

    if cell_pixels > 1:
        image = np.repeat(np.repeat(image, cell_pixels, axis=0), cell_pixels, axis=1)
    return image


def _cells_of_kind(grid: Grid, kind: CellKind) -> np.ndarray:
    codes = grid.kind_array()
    ys, xs = np.nonzero(codes == KIND_CODES[kind])
    return np.stack([xs, ys], axis=1)


def path_to_world(path: Sequence[Coord], cell_size: float = DEFAULT_GRID_CONFIG.cell_size) -> np.ndarray:
    """
    Convert grid points to world positions of the cell centres.

    Args:
        path: Ordered (x, y) points
        cell_size: Size of one cell in world units

    Returns:
        Array of world positions (N, 2)
    """
    return np.array([grid_to_world(x, y, cell_size) for x, y in path], dtype=np.float64).reshape(-1, 2)


def log_grid(grid: Grid, config: RenderConfig = DEFAULT_RENDER_CONFIG,
             cell_size: float = DEFAULT_GRID_CONFIG.cell_size):
    """
    Log the grid as a top-down image and walls as 3D boxes.

    Args:
        grid: Grid to log
        config: Render configuration
        cell_size: Size of one cell in world units
    """
    rr.log("grid/cells", rr.Image(create_grid_image(grid, cell_pixels=config.cell_pixels, config=config)))

    walls = _cells_of_kind(grid, CellKind.WALL)
    if len(walls) > 0:
        centers = np.column_stack([path_to_world(walls, cell_size), np.full(len(walls), config.wall_height / 2)])
        half_sizes = np.tile([cell_size / 2, cell_size / 2, config.wall_height / 2], (len(walls), 1))
        color = np.array(config.colors["wall"]) / 255.0
        rr.log(
            "world/walls",
            rr.Boxes3D(
                centers=centers,
                half_sizes=half_sizes,
                colors=np.tile(color, (len(walls), 1))
            )
        )

    traffic = _cells_of_kind(grid, CellKind.TRAFFIC)
    if len(traffic) > 0:
        centers = np.column_stack([path_to_world(traffic, cell_size), np.full(len(traffic), 0.05)])
        half_sizes = np.tile([cell_size / 2, cell_size / 2, 0.05], (len(traffic), 1))
        color = np.array(config.colors["traffic"]) / 255.0
        rr.log(
            "world/traffic",
            rr.Boxes3D(
                centers=centers,
                half_sizes=half_sizes,
                colors=np.tile(color, (len(traffic), 1))
            )
        )

    for name, point in (("start", grid.start_point), ("end", grid.end_point)):
        if point is None:
            continue
        wx, wy = grid_to_world(point[0], point[1], cell_size)
        rr.log(
            f"world/{name}",
            rr.Points3D(
                positions=np.array([[wx, wy, config.path_height]]),
                colors=np.array([config.colors[name]]) / 255.0,
                radii=np.array([0.4])
            )
        )


def log_path(path: Sequence[Coord], entity_name: str = "path",
             config: RenderConfig = DEFAULT_RENDER_CONFIG,
             cell_size: float = DEFAULT_GRID_CONFIG.cell_size):
    """
    Log a path as line strips in the top-down image and the 3D view.

    Args:
        path: Ordered (x, y) points
        entity_name: Entity name under grid/ and world/
        config: Render configuration
        cell_size: Size of one cell in world units
    """
    if not path:
        return

    color = np.array(config.colors["path"]) / 255.0
    pixels = path_to_world(path, config.cell_pixels)
    points = path_to_world(path, cell_size)

    rr.log(
        f"grid/{entity_name}",
        rr.LineStrips2D(
            [pixels],
            colors=np.array([color]),
            radii=np.array([config.cell_pixels * 0.15])
        )
    )
    rr.log(
        f"world/{entity_name}",
        rr.LineStrips3D(
            [np.column_stack([points, np.full(len(points), config.path_height)])],
            colors=np.array([color]),
            radii=np.array([0.1])
        )
    )
