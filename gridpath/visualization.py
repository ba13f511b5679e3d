"""
Visualization setup utilities for Rerun.
"""

import numpy as np
import rerun as rr

from .rendering import create_path_image, START_COLOR, GOAL_COLOR, PATH_COLOR


def setup_pathfinding_blueprint(origin: str = "grid"):
    """
    Set up the blueprint for the pathfinding viewer.

    Returns:
        Blueprint configuration for Rerun viewer
    """
    blueprint = rr.blueprint.Blueprint(
        rr.blueprint.Spatial2DView(name="Occupancy Grid + Path", origin=origin),
        collapse_panels=False,
    )
    return blueprint


def _cell_centers(cells):
    # image space is (x, y) = (col, row); offset to pixel centers
    return np.array([[c.col + 0.5, c.row + 0.5] for c in cells], dtype=np.float32)


def log_search_result(grid, result, entity_path: str = "grid"):
    """
    Log a grid and a search result to the active Rerun recording.

    Args:
        grid: OccupancyGrid searched
        result: SearchResult from AStar.search
        entity_path: Root entity path for the logged data
    """
    rr.log(f"{entity_path}/occupancy", rr.Image(create_path_image(grid, result.path)))

    if result.path and len(result.path) > 1:
        rr.log(
            f"{entity_path}/path",
            rr.LineStrips2D(
                [_cell_centers(result.path)],
                colors=np.array([PATH_COLOR], dtype=np.uint8),
                radii=np.array([0.15]),
            )
        )

    rr.log(
        f"{entity_path}/endpoints",
        rr.Points2D(
            _cell_centers([result.start, result.goal]),
            colors=np.array([START_COLOR, GOAL_COLOR], dtype=np.uint8),
            radii=np.array([0.35, 0.35]),
        )
    )
