#!/usr/bin/env python3
"""
Benchmark A* on random grids and check its costs against Dijkstra.
"""

import argparse
import math
import sys
import time
from pathlib import Path

import numpy as np
from tqdm import tqdm

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath.config import SearchConfig
from gridpath.dijkstra import grid_distance
from gridpath.grid import OccupancyGrid
from gridpath.pathfinding import AStar


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def random_grid(rng, size, density):
    data = (rng.random((size, size)) < density).astype(np.int8)
    data[0, 0] = 0
    data[-1, -1] = 0
    return OccupancyGrid(data)


def run_benchmark(trials, size, density, seed=0):
    """
    Run both duplicate policies over the same random grids.

    Returns:
        Dictionary of per-policy stats and the number of cost mismatches
    """
    rng = np.random.default_rng(seed)
    policies = ("lazy", "contains")
    stats = {p: {'expanded': [], 'seconds': 0.0, 'found': 0} for p in policies}
    mismatches = {p: 0 for p in policies}

    for _ in tqdm(range(trials), desc="Searching"):
        grid = random_grid(rng, size, density)
        start, goal = (0, 0), (size - 1, size - 1)
        reference = grid_distance(grid, start, goal)

        for policy in policies:
            engine = AStar(grid, SearchConfig(duplicate_policy=policy))
            t0 = time.perf_counter()
            result = engine.search(start, goal)
            stats[policy]['seconds'] += time.perf_counter() - t0
            stats[policy]['expanded'].append(result.nodes_expanded)
            if result.found:
                stats[policy]['found'] += 1
            if not math.isclose(result.cost, reference):
                mismatches[policy] += 1

    return stats, mismatches


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark grid A* against Dijkstra")
    parser.add_argument("--trials", type=positive_int, default=200, help="Number of random grids")
    parser.add_argument("--size", type=positive_int, default=32, help="Grid side length")
    parser.add_argument("--density", type=float, default=0.25, help="Obstacle probability")
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)

    print(f"Benchmarking {args.trials} grids of {args.size}x{args.size} (density {args.density})")
    print("=" * 60)

    stats, mismatches = run_benchmark(args.trials, args.size, args.density, args.seed)

    for policy, s in stats.items():
        expanded = np.array(s['expanded'])
        print(f"\n{policy}:")
        print(f"  Paths found: {s['found']}/{args.trials}")
        print(f"  Mean expanded: {expanded.mean():.1f} (max {expanded.max()})")
        print(f"  Total time: {s['seconds'] * 1000:.1f} ms")
        print(f"  Cost mismatches vs Dijkstra: {mismatches[policy]}")

    return 1 if mismatches["lazy"] else 0


if __name__ == "__main__":
    sys.exit(main())
