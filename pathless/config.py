"""
Configuration utilities and default settings.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass
class GridConfig:
    """Configuration for grid construction."""
    width: int = 30
    height: int = 30
    cell_size: float = 1.0  # World units per cell


@dataclass
class SearchConfig:
    """Configuration for the A* search."""
    allow_diagonal: bool = True
    traffic_penalty: float = 2.0  # Added on top of the traffic cost multiplier
    angle_tolerance: float = 0.1  # Radians, used by path optimization


@dataclass
class RenderConfig:
    """Configuration for grid rendering."""
    cell_pixels: int = 16
    wall_height: float = 1.0
    path_height: float = 0.3
    colors: Dict[str, Tuple[int, int, int]] = field(default_factory=lambda: {
        "empty": (0x2A, 0x2A, 0x2A),
        "wall": (0x8B, 0x45, 0x13),
        "start": (0x4C, 0xAF, 0x50),
        "end": (0xF4, 0x43, 0x36),
        "path": (0x21, 0x96, 0xF3),
        "traffic": (0xFF, 0xD7, 0x00),
    })


# Default configurations
DEFAULT_GRID_CONFIG = GridConfig()
DEFAULT_SEARCH_CONFIG = SearchConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()


def get_output_dir(base_dir: Path, name: Optional[str] = None) -> Path:
    """
    Get standardized output directory path.

    Args:
        base_dir: Base output directory
        name: Optional scenario or layout name for subdirectory

    Returns:
        Path to output directory
    """
    if name:
        return base_dir / f"output_{name}"
    return base_dir / "output"
