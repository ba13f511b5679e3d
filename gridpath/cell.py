"""
Grid cell coordinates and distance helpers.
"""

import math
import operator
from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True, order=True)
class Cell:
    """A (row, col) coordinate on an occupancy grid."""
    row: int
    col: int

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.col

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"

    @classmethod
    def of(cls, value) -> "Cell":
        """
        Coerce a cell-like value into a Cell.

        Args:
            value: Cell, or any 2-element sequence (tuple, list, numpy row)

        Returns:
            Cell with integer coordinates

        Raises:
            TypeError: a coordinate is not an integer (floats are not truncated)
        """
        if isinstance(value, cls):
            return value
        row, col = value
        return cls(operator.index(row), operator.index(col))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def neighbors4(self) -> List["Cell"]:
        """Orthogonal neighbours in the order down, up, right, left."""
        return [
            Cell(self.row + 1, self.col),
            Cell(self.row - 1, self.col),
            Cell(self.row, self.col + 1),
            Cell(self.row, self.col - 1),
        ]


def euclidean_distance(a: Cell, b: Cell) -> float:
    """Straight-line distance between two cells."""
    return math.sqrt((a.row - b.row) ** 2 + (a.col - b.col) ** 2)


def is_adjacent(a: Cell, b: Cell) -> bool:
    """True when the cells differ by exactly 1 in exactly one axis."""
    return abs(a.row - b.row) + abs(a.col - b.col) == 1
