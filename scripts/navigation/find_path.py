#!/usr/bin/env python3
"""
Find a route on a grid scenario or layout file.

Runs weighted A* between the start and end markers, prints the route
statistics, and optionally exports the result, renders a top-down
image, or streams the grid and route to a Rerun viewer.
"""

import argparse
import logging
import sys
import time
from pathlib import Path
import rerun as rr

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from pathless.grid import CellKind, Grid
from pathless.pathfinding import AStar
from pathless.scenarios import apply_scenario, get_scenario, list_scenarios, SCENARIOS
from pathless.io_utils import load_grid, save_image, save_path_result
from pathless.config import DEFAULT_GRID_CONFIG, DEFAULT_RENDER_CONFIG, get_output_dir
from pathless.visualization import (
    setup_pathfinding_viewer_blueprint,
    create_grid_image,
    log_grid,
    log_path
)


def build_grid(args):
    """Create the grid from --input or --scenario."""
    if args.input:
        if not args.input.exists():
            print(f"Error: {args.input} does not exist")
            return None
        grid = load_grid(args.input)
        if grid is None:
            print(f"Error: Failed to read grid layout from {args.input}")
        return grid

    scenario = get_scenario(args.scenario)
    grid = Grid(DEFAULT_GRID_CONFIG.width, DEFAULT_GRID_CONFIG.height)
    apply_scenario(grid, scenario)
    print(f"Scenario: {scenario.title} - {scenario.description}")
    return grid


def visualize_result(grid, path, optimized=None):
    """Stream the grid and route to a Rerun viewer."""
    rr.init("Pathless", spawn=True)
    rr.log("/", rr.ViewCoordinates.RIGHT_HAND_Z_UP, static=True)
    rr.send_blueprint(setup_pathfinding_viewer_blueprint())

    log_grid(grid)
    if path:
        log_path(path)
    if optimized:
        log_path(optimized, entity_name="optimized_path")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find a route on a pathfinding grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Built-in scenario
  python find_path.py --scenario maze

  # Grid layout file with custom endpoints
  python find_path.py -i layout.json --start 0 0 --goal 20 25

  # Simplify the route and export it
  python find_path.py --scenario l_shape --optimize -o route.json --image route.png

  # Write route.json and grid.png under runs/output_maze/
  python find_path.py --scenario maze --output-dir runs
        """
    )

    parser.add_argument("-s", "--scenario", default="simple", choices=list_scenarios(),
                       help="Built-in scenario (default: simple)")
    parser.add_argument("-i", "--input", type=Path, help="Grid layout JSON file")
    parser.add_argument("--start", nargs=2, type=int, help="Start cell (x y)")
    parser.add_argument("--goal", nargs=2, type=int, help="Goal cell (x y)")
    parser.add_argument("--optimize", action="store_true", help="Remove collinear points from the route")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the route")
    parser.add_argument("--image", type=Path, help="Save a top-down PNG of the grid and route")
    parser.add_argument("--output-dir", type=Path,
                       help="Base directory; writes route.json and grid.png to output_<scenario>/ inside it")
    parser.add_argument("--cell-pixels", type=int, default=DEFAULT_RENDER_CONFIG.cell_pixels,
                       help=f"Pixels per cell in the image (default: {DEFAULT_RENDER_CONFIG.cell_pixels})")
    parser.add_argument("--visualize", action="store_true", help="Show the result in a Rerun viewer")
    parser.add_argument("--list", action="store_true", help="List built-in scenarios and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    if args.list:
        for name, scenario in SCENARIOS.items():
            print(f"  {name:<12} {scenario.description}")
        return 0

    grid = build_grid(args)
    if grid is None:
        return 1

    for option, point, kind in (("--start", args.start, CellKind.START), ("--goal", args.goal, CellKind.END)):
        if point and not grid.set_cell_type(point[0], point[1], kind):
            print(f"Error: {option} ({point[0]}, {point[1]}) is outside the {grid.width}x{grid.height} grid")
            return 1

    stats = grid.get_stats()
    print(f"Grid: {grid.width}x{grid.height}, {stats.walls} walls, {stats.traffic} traffic cells")
    if not stats.has_start or not stats.has_end:
        print("Error: The grid needs both a start and an end cell")
        return 1
    print(f"Start: {stats.start_point}  End: {stats.end_point}")

    print("\nSearching...")
    astar = AStar(grid)
    started = time.perf_counter()
    path = astar.find_path_from_grid()
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    path_stats = astar.get_pathfinding_stats(path)
    optimized = None
    if path:
        print(f"  ✓ Found path with {path_stats.path_length} cells in {elapsed_ms:.1f}ms")
        print(f"  Path cost: {path_stats.path_cost:.2f}")
        print(f"  Nodes explored: {path_stats.nodes_explored:,}")
        if args.optimize:
            optimized = astar.optimize_path(path)
            print(f"  Optimized route: {len(optimized)} waypoints")
    else:
        print(f"  ✗ No path found ({elapsed_ms:.1f}ms)")

    if args.output_dir:
        run_name = args.input.stem if args.input else args.scenario
        run_dir = get_output_dir(args.output_dir, run_name)
        args.output = args.output or run_dir / "route.json"
        args.image = args.image or run_dir / "grid.png"

    if args.output:
        if save_path_result(path, path_stats.to_dict(), args.output, optimized):
            print(f"\n✓ Exported route to {args.output}")

    if args.image:
        image = create_grid_image(grid, path, cell_pixels=args.cell_pixels)
        if save_image(image, args.image):
            print(f"✓ Saved grid image to {args.image}")

    if args.visualize:
        print("\nVisualizing in Rerun...")
        visualize_result(grid, path, optimized)

    return 0 if path else 2


if __name__ == "__main__":
    sys.exit(main())
