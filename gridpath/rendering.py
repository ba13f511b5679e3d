"""
Text and image rendering of grids and paths.
"""

import numpy as np
from typing import Iterable, Optional

from .cell import Cell
from .grid import OccupancyGrid

FREE_COLOR = [0, 255, 0]       # Green
OBSTACLE_COLOR = [255, 0, 0]   # Red
PATH_COLOR = [0, 255, 255]     # Cyan
START_COLOR = [255, 255, 0]    # Yellow
GOAL_COLOR = [255, 0, 255]     # Magenta


def _grid_cell(grid: OccupancyGrid, value) -> Cell:
    cell = Cell.of(value)
    if not grid.in_bounds(cell):
        raise ValueError(f"{cell} is outside the {grid.rows}x{grid.cols} grid")
    return cell


def render_grid(grid, path: Optional[Iterable] = None, path_marker: str = "*") -> str:
    """
    Render a grid as text, one row per line.

    Args:
        grid: OccupancyGrid or 2D array where 0=free, 1=occupied
        path: Optional sequence of cells to mark
        path_marker: Token written in place of path cells

    Returns:
        Rows of "0"/"1"/marker tokens separated by single spaces

    Raises:
        ValueError: a path cell lies outside the grid
    """
    grid = OccupancyGrid.coerce(grid)
    tokens = [[str(int(v)) for v in row] for row in grid.data]
    for value in path or ():
        cell = _grid_cell(grid, value)
        tokens[cell.row][cell.col] = path_marker
    return "\n".join(" ".join(row) for row in tokens)


def create_path_image(grid, path: Optional[Iterable] = None,
                      start: Optional[Cell] = None, goal: Optional[Cell] = None) -> np.ndarray:
    """
    Create colored visualization of a grid and path.

    Args:
        grid: OccupancyGrid or 2D array where 0=free, 1=occupied
        path: Optional sequence of cells, drawn in cyan
        start: Optional start cell (yellow); defaults to the first path cell
        goal: Optional goal cell (magenta); defaults to the last path cell

    Returns:
        Colored image array (H, W, 3) with uint8 dtype
    """
    grid = OccupancyGrid.coerce(grid)
    image = np.zeros((*grid.shape, 3), dtype=np.uint8)
    image[grid.data == 0] = FREE_COLOR
    image[grid.data == 1] = OBSTACLE_COLOR

    cells = [_grid_cell(grid, c) for c in path] if path else []
    for cell in cells:
        image[cell.row, cell.col] = PATH_COLOR

    if start is None and cells:
        start = cells[0]
    if goal is None and cells:
        goal = cells[-1]
    if start is not None:
        start = _grid_cell(grid, start)
        image[start.row, start.col] = START_COLOR
    if goal is not None:
        goal = _grid_cell(grid, goal)
        image[goal.row, goal.col] = GOAL_COLOR
    return image
