#!/usr/bin/env python3
"""
Example: view a search result in Rerun.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath import REFERENCE_GRID, AStar, load_grid
from gridpath.visualization import setup_pathfinding_blueprint, log_search_result
import rerun as rr


def visualization_example(grid_path=None, start=(0, 0), goal=None):
    """Example of logging a path to Rerun."""
    grid = load_grid(grid_path) if grid_path else REFERENCE_GRID
    if grid is None:
        print(f"Failed to load {grid_path}")
        return
    if goal is None:
        goal = (grid.rows - 1, grid.cols - 1)

    result = AStar(grid).search(start, goal)
    print(f"Status: {result.status.value}, expanded {result.nodes_expanded} cells")

    rr.init("Pathfinding Example", spawn=True)
    rr.send_blueprint(setup_pathfinding_blueprint())
    log_search_result(grid, result)

    print("Visualization ready! Close the window when done.")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Example visualization")
    parser.add_argument("-i", "--input", type=Path, help="Grid file (default: reference grid)")
    parser.add_argument("--start", nargs=2, type=int, default=[0, 0])
    parser.add_argument("--goal", nargs=2, type=int)
    args = parser.parse_args()

    visualization_example(args.input, args.start, args.goal)
