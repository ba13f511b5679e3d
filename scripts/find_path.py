#!/usr/bin/env python3
"""
Find the shortest path between two cells of an occupancy grid.

Grids are read from .npy arrays, images (dark pixels = obstacles) or text
files (one row per line of 0/1 values). Without an input file the built-in
10x10 reference grid is used.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath.config import DEFAULT_RENDER_CONFIG, SearchConfig, load_search_config
from gridpath.errors import InvalidEndpointError, SearchLimitExceeded
from gridpath.grid import REFERENCE_GRID
from gridpath.io_utils import load_grid, result_to_dict, save_image, save_json
from gridpath.pathfinding import AStar
from gridpath.rendering import create_path_image, render_grid


def build_config(args) -> SearchConfig:
    config = load_search_config(args.config) if args.config else SearchConfig()
    if args.policy:
        config.duplicate_policy = args.policy
    if args.max_iterations is not None:
        config.max_iterations = args.max_iterations
    if args.precheck:
        config.precheck_connectivity = True
    return config.validate()


def stream_to_rerun(grid, result):
    """Send the grid and path to a spawned Rerun viewer."""
    import rerun as rr
    from gridpath.visualization import log_search_result, setup_pathfinding_blueprint

    rr.init("Grid Pathfinding", spawn=True)
    rr.send_blueprint(setup_pathfinding_blueprint())
    log_search_result(grid, result)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="A* shortest path on a 2D occupancy grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reference grid, corner to corner
  python find_path.py --start 0 0 --goal 9 9

  # Custom grid with JSON export
  python find_path.py -i maze.txt --start 0 0 --goal 20 31 -o result.json

  # Export a picture of the path and cap the search
  python find_path.py -i floor.png --start 5 5 --goal 80 60 --image path.png --max-iterations 50000
        """
    )

    parser.add_argument("-i", "--input", type=Path, help="Grid file (.npy, image or text)")
    parser.add_argument("--start", nargs=2, type=int, default=[0, 0], metavar=("ROW", "COL"),
                        help="Start cell (default: 0 0)")
    parser.add_argument("--goal", nargs=2, type=int, metavar=("ROW", "COL"),
                        help="Goal cell (default: bottom-right corner)")
    parser.add_argument("--config", type=Path, help="JSON file with search settings")
    parser.add_argument("--policy", choices=["lazy", "contains"],
                        help="Open-set duplicate policy (default: lazy)")
    parser.add_argument("--max-iterations", type=int, help="Abort after this many expansions")
    parser.add_argument("--precheck", action="store_true",
                        help="Skip the search when start and goal are in separate regions")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the result")
    parser.add_argument("--image", type=Path, help="Output PNG with the path drawn on the grid")
    parser.add_argument("--rerun", action="store_true", help="Stream the result to a Rerun viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.input is not None:
        if not args.input.exists():
            print(f"Error: {args.input} does not exist")
            return 2
        grid = load_grid(args.input)
        if grid is None:
            print(f"Error: failed to load grid from {args.input}")
            return 2
    else:
        grid = REFERENCE_GRID

    goal = args.goal if args.goal is not None else [grid.rows - 1, grid.cols - 1]

    try:
        config = build_config(args)
    except (TypeError, ValueError) as e:
        print(f"Error: {e}")
        return 2

    print(f"Grid {grid.rows}x{grid.cols}, {grid.obstacle_count()} obstacle cells")
    print(f"Searching {tuple(args.start)} -> {tuple(goal)} (policy: {config.duplicate_policy})")

    try:
        result = AStar(grid, config).search(args.start, goal)
    except InvalidEndpointError as e:
        print(f"Error: {e}")
        return 2
    except SearchLimitExceeded as e:
        print(f"✗ {e}")
        return 1

    if result.found:
        print("Path found.")
        print(render_grid(grid, result.path, DEFAULT_RENDER_CONFIG.path_marker))
        print(f"  Cells: {len(result.path)}")
        print(f"  Cost: {result.cost:.1f}")
    else:
        print("No path found.")
    print(f"  Expanded: {result.nodes_expanded}")

    if args.output:
        if save_json(result_to_dict(result), args.output):
            print(f"✓ Exported result to {args.output}")

    if args.image:
        image = create_path_image(grid, result.path, result.start, result.goal)
        if save_image(image, args.image, scale=DEFAULT_RENDER_CONFIG.cell_size):
            print(f"✓ Saved image to {args.image}")

    if args.rerun:
        stream_to_rerun(grid, result)

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
