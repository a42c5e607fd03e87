#!/usr/bin/env python3
"""
Benchmark A* on random grids.

Generates grids with a given wall and traffic density, runs one search
per grid between random free cells, and reports timing and route
statistics.
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np
from tqdm import tqdm

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from pathless.navigation import grid_from_occupancy
from pathless.pathfinding import AStar
from pathless.io_utils import save_json


def random_grid(rng, width, height, wall_density, traffic_density):
    """Create a grid with randomly placed walls and traffic cells."""
    occupancy = (rng.random((width, height)) < wall_density).astype(np.uint8)
    traffic = rng.random((width, height)) < traffic_density
    return grid_from_occupancy(occupancy, traffic), occupancy


def pick_free_cell(rng, occupancy):
    free = np.argwhere(occupancy == 0)
    i, j = free[rng.integers(len(free))]
    return int(i), int(j)


def run_benchmark(runs, width, height, wall_density, traffic_density, seed=None):
    """
    Run searches on random grids.

    Returns:
        Dictionary with per-run results and aggregate statistics
    """
    rng = np.random.default_rng(seed)
    results = []

    for _ in tqdm(range(runs), desc="Searching"):
        grid, occupancy = random_grid(rng, width, height, wall_density, traffic_density)
        if not (occupancy == 0).any():
            continue
        start = pick_free_cell(rng, occupancy)
        goal = pick_free_cell(rng, occupancy)

        astar = AStar(grid)
        started = time.perf_counter()
        path = astar.find_path(start[0], start[1], goal[0], goal[1])
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        stats = astar.get_pathfinding_stats(path)
        results.append({
            'start': start,
            'goal': goal,
            'time_ms': elapsed_ms,
            **stats.to_dict(),
        })

    times = np.array([r['time_ms'] for r in results]) if results else np.zeros(1)
    found = [r for r in results if r['success']]
    summary = {
        'runs': len(results),
        'found': len(found),
        'mean_time_ms': float(times.mean()),
        'max_time_ms': float(times.max()),
        'mean_path_length': float(np.mean([r['path_length'] for r in found])) if found else 0.0,
        'mean_nodes_explored': float(np.mean([r['nodes_explored'] for r in found])) if found else 0.0,
    }
    return {'summary': summary, 'results': results}


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark A* on random grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python benchmark_search.py --runs 200
  python benchmark_search.py --width 100 --height 100 --walls 0.3 -o bench.json
        """
    )
    parser.add_argument("--runs", type=int, default=100, help="Number of searches (default: 100)")
    parser.add_argument("--width", type=int, default=30, help="Grid width (default: 30)")
    parser.add_argument("--height", type=int, default=30, help="Grid height (default: 30)")
    parser.add_argument("--walls", type=float, default=0.2, help="Wall density (default: 0.2)")
    parser.add_argument("--traffic", type=float, default=0.1, help="Traffic density (default: 0.1)")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for results")

    args = parser.parse_args()

    print(f"Benchmarking {args.runs} searches on {args.width}x{args.height} grids...")
    print("=" * 60)

    report = run_benchmark(args.runs, args.width, args.height, args.walls, args.traffic, args.seed)
    summary = report['summary']

    print(f"\n  Paths found: {summary['found']}/{summary['runs']}")
    print(f"  Mean time: {summary['mean_time_ms']:.2f}ms (max {summary['max_time_ms']:.2f}ms)")
    print(f"  Mean path length: {summary['mean_path_length']:.1f} cells")
    print(f"  Mean nodes explored: {summary['mean_nodes_explored']:.1f}")

    if args.output:
        if save_json(report, args.output):
            print(f"\n✓ Exported results to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
