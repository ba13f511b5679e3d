#!/usr/bin/env python3
"""
Example: shortest path across the reference grid.

Searches from the top-left to the bottom-right corner of the built-in
10x10 grid and prints the grid with the path marked by '*'.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath import REFERENCE_GRID, AStar, render_grid


def pathfinding_example(start=(0, 0), goal=(9, 9)):
    """Example of finding and printing a path."""
    result = AStar(REFERENCE_GRID).search(start, goal)

    if result.found:
        print("Path found.")
        print(render_grid(REFERENCE_GRID, result.path))
        print(f"\n{len(result.path)} cells, cost {result.cost:.0f}, "
              f"{result.nodes_expanded} cells expanded")
    else:
        print("No path found.")
    return result


if __name__ == "__main__":
    pathfinding_example()
