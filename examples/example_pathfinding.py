#!/usr/bin/env python3
"""
Example: Finding a route on a grid with walls and traffic.

This demonstrates how to build a grid, run the A* search, read the
route statistics, simplify the route, and show it in Rerun.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathless import (
    AStar,
    CellKind,
    Grid,
    setup_pathfinding_viewer_blueprint,
    log_grid,
    log_path
)
import rerun as rr


def pathfinding_example(visualize: bool = True):
    """Example of a search around a wall and through traffic."""
    grid = Grid(30, 30)

    # Wall with a gap near the bottom
    for y in range(0, 24):
        grid.set_cell_type(15, y, CellKind.WALL)

    # Slow traffic in front of the gap
    for y in range(24, 30):
        grid.set_cell_type(18, y, CellKind.TRAFFIC)

    grid.set_cell_type(3, 3, CellKind.START)
    grid.set_cell_type(27, 3, CellKind.END)

    stats = grid.get_stats()
    print(f"Grid: {stats.total_cells} cells, {stats.walls} walls, {stats.traffic} traffic")

    astar = AStar(grid)
    path = astar.find_path_from_grid()
    if path is None:
        print("No path found")
        return

    path_stats = astar.get_pathfinding_stats(path)
    print(f"  Path length: {path_stats.path_length} cells")
    print(f"  Path cost: {path_stats.path_cost:.2f}")
    print(f"  Nodes explored: {path_stats.nodes_explored}")

    optimized = astar.optimize_path(path)
    print(f"  Waypoints after optimization: {len(optimized)}")
    for x, y in optimized:
        print(f"    ({x}, {y})")

    if visualize:
        rr.init("Pathfinding Example", spawn=True)
        rr.send_blueprint(setup_pathfinding_viewer_blueprint())
        log_grid(grid)
        log_path(path)
        log_path(optimized, entity_name="optimized_path")
        print("Route ready! Close the window when done.")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Pathfinding example")
    parser.add_argument("--no-viewer", action="store_true",
                       help="Print results only, do not open Rerun")
    args = parser.parse_args()

    pathfinding_example(visualize=not args.no_viewer)
