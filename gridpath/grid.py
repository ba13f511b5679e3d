"""
Immutable occupancy grid for pathfinding.
"""

import numpy as np
from scipy import ndimage
from typing import List, Sequence

from .cell import Cell
from .errors import InvalidGridError

FREE = 0
OBSTACLE = 1

# 4-connectivity: diagonal cells are not neighbours
_CROSS = np.array([
    [0, 1, 0],
    [1, 1, 1],
    [0, 1, 0],
])


class OccupancyGrid:
    """
    Read-only 2D grid where 0 = passable and 1 = obstacle.

    Input may mark obstacles with any non-zero ``obstacle_value``; the stored
    array is always normalised to 0/1. The input is copied and locked, so a
    grid can be shared between searches (and threads) without being mutated.
    """

    def __init__(self, data, obstacle_value: int = OBSTACLE):
        if obstacle_value == FREE:
            raise InvalidGridError("obstacle_value must differ from the free value 0")
        try:
            array = np.array(data)
        except ValueError as e:
            raise InvalidGridError(f"Grid rows must have equal length: {e}") from e
        if array.ndim != 2 or array.size == 0:
            raise InvalidGridError(f"Grid must be a non-empty 2D array, got shape {array.shape}")
        if not np.isin(array, (FREE, obstacle_value)).all():
            raise InvalidGridError(
                f"Grid values must be 0 (free) or {obstacle_value} (obstacle)"
            )
        array = (array == obstacle_value).astype(np.int8)
        array.flags.writeable = False
        self.obstacle_value = obstacle_value
        self._data = array
        self._labels = None

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "OccupancyGrid":
        """Build a grid from a nested list literal."""
        return cls(rows)

    @classmethod
    def coerce(cls, grid) -> "OccupancyGrid":
        if isinstance(grid, cls):
            return grid
        return cls(grid)

    @property
    def data(self) -> np.ndarray:
        """Normalised grid: 0 = free, 1 = obstacle."""
        return self._data

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    def __repr__(self) -> str:
        return f"OccupancyGrid({self.rows}x{self.cols}, obstacles={self.obstacle_count()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, OccupancyGrid):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def is_obstacle(self, cell: Cell) -> bool:
        return self._data[cell.row, cell.col] == OBSTACLE

    def is_passable(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and not self.is_obstacle(cell)

    def passable_neighbors(self, cell: Cell) -> List[Cell]:
        """
        Get the walkable orthogonal neighbours of a cell.

        Args:
            cell: Cell to expand

        Returns:
            In-bounds, non-obstacle neighbours in down, up, right, left order
        """
        return [n for n in cell.neighbors4() if self.is_passable(n)]

    def free_cells(self) -> List[Cell]:
        rows, cols = np.nonzero(self._data != OBSTACLE)
        return [Cell(int(r), int(c)) for r, c in zip(rows, cols)]

    def obstacle_count(self) -> int:
        return int((self._data == OBSTACLE).sum())

    def connected_components(self) -> np.ndarray:
        """
        Label 4-connected regions of passable cells.

        Returns:
            Integer array shaped like the grid; 0 for obstacles, 1..N for regions
        """
        if self._labels is None:
            labels, _ = ndimage.label(self._data != OBSTACLE, structure=_CROSS)
            labels.flags.writeable = False
            self._labels = labels
        return self._labels

    def are_connected(self, a: Cell, b: Cell) -> bool:
        """True when both cells are passable and share a region."""
        if not (self.is_passable(a) and self.is_passable(b)):
            return False
        labels = self.connected_components()
        return labels[a.row, a.col] == labels[b.row, b.col]


# Two obstacle corridors separated by open rows and columns
REFERENCE_GRID = OccupancyGrid.from_rows([
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 1, 1, 0, 1, 1, 0],
    [0, 1, 0, 1, 1, 1, 0, 1, 1, 0],
    [0, 0, 0, 1, 1, 1, 0, 1, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 1, 1, 0, 1, 1, 0],
    [0, 1, 0, 1, 1, 1, 0, 1, 1, 0],
    [0, 1, 0, 1, 1, 1, 0, 1, 1, 0],
    [0, 0, 0, 1, 1, 1, 0, 1, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
])
