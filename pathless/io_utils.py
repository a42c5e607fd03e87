"""
Input/Output utilities for grid layouts and search results.
"""

import json
import numpy as np
from pathlib import Path
from typing import Dict, Any, Optional, List, Sequence
from PIL import Image

from .geometry import Coord
from .grid import CellKind, Grid


def load_json(file_path: Path) -> Optional[Dict[str, Any]]:
    """
    Load JSON file safely.

    Args:
        file_path: Path to JSON file

    Returns:
        Dictionary with JSON data, or None if loading fails
    """
    try:
        with open(file_path, 'r') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        print(f"Error loading JSON from {file_path}: {e}")
        return None


def save_json(data: Dict[str, Any], file_path: Path, indent: int = 2) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Dictionary to save
        file_path: Path to save JSON file
        indent: JSON indentation

    Returns:
        True if successful, False otherwise
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=indent)
        return True
    except (OSError, TypeError) as e:
        print(f"Error saving JSON to {file_path}: {e}")
        return False


def _point(coord: Optional[Coord]) -> Optional[Dict[str, int]]:
    if coord is None:
        return None
    return {'x': int(coord[0]), 'y': int(coord[1])}


def path_to_json(path: Sequence[Coord]) -> List[Dict[str, int]]:
    """Convert a path to a list of {"x", "y"} points."""
    return [_point(p) for p in path]


def grid_to_layout(grid: Grid) -> Dict[str, Any]:
    """
    Serialize the persistent parts of a grid.

    Path markers are not included; they belong to a search result.
    """
    walls = []
    traffic = []
    for cell in grid.iter_cells():
        if cell.kind is CellKind.WALL:
            walls.append(_point(cell.coord))
        elif cell.kind is CellKind.TRAFFIC:
            traffic.append(_point(cell.coord))

    return {
        'width': grid.width,
        'height': grid.height,
        'start': _point(grid.start_point),
        'end': _point(grid.end_point),
        'walls': walls,
        'traffic': traffic,
    }


def grid_from_layout(data: Dict[str, Any]) -> Optional[Grid]:
    """
    Build a grid from a layout dictionary.

    Args:
        data: Layout as produced by grid_to_layout()

    Returns:
        Grid, or None if the layout is malformed
    """
    try:
        grid = Grid(int(data['width']), int(data['height']))
        for point in data.get('walls', []):
            grid.set_cell_type(int(point['x']), int(point['y']), CellKind.WALL)
        for point in data.get('traffic', []):
            grid.set_cell_type(int(point['x']), int(point['y']), CellKind.TRAFFIC)
        if data.get('start'):
            grid.set_cell_type(int(data['start']['x']), int(data['start']['y']), CellKind.START)
        if data.get('end'):
            grid.set_cell_type(int(data['end']['x']), int(data['end']['y']), CellKind.END)
        return grid
    except (KeyError, TypeError, ValueError) as e:
        print(f"Error reading grid layout: {e}")
        return None


def load_grid(file_path: Path) -> Optional[Grid]:
    """Load a grid layout from a JSON file."""
    data = load_json(file_path)
    if data is None:
        return None
    return grid_from_layout(data)


def save_grid(grid: Grid, file_path: Path) -> bool:
    """Save a grid layout to a JSON file."""
    return save_json(grid_to_layout(grid), file_path)


def save_path_result(path: Optional[Sequence[Coord]], stats: Dict[str, Any], file_path: Path,
                     optimized: Optional[Sequence[Coord]] = None) -> bool:
    """
    Export a search result to JSON.

    Args:
        path: Found path, or None
        stats: Path statistics dictionary
        file_path: Output JSON file
        optimized: Optional simplified path

    Returns:
        True if successful, False otherwise
    """
    data = {
        'success': path is not None,
        'path': path_to_json(path) if path else [],
        'stats': stats,
    }
    if optimized is not None:
        data['optimized_path'] = path_to_json(optimized)
    return save_json(data, file_path)


def save_image(image: np.ndarray, image_path: Path) -> bool:
    """
    Save numpy array as image.

    Args:
        image: Numpy array of image (H, W) or (H, W, 3)
        image_path: Path to save image

    Returns:
        True if successful, False otherwise
    """
    try:
        image_path.parent.mkdir(parents=True, exist_ok=True)
        # Convert to uint8 if needed
        if image.dtype != np.uint8:
            if image.max() <= 1.0:
                image = (image * 255).astype(np.uint8)
            else:
                image = image.astype(np.uint8)

        Image.fromarray(image).save(image_path)
        return True
    except (OSError, ValueError) as e:
        print(f"Error saving image to {image_path}: {e}")
        return False
