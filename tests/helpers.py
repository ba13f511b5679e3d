"""Shared helpers for the test suite."""

from collections import deque

import numpy as np

from gridpath.cell import Cell
from gridpath.grid import OccupancyGrid


def bfs_distance(grid: OccupancyGrid, start: Cell, goal: Cell):
    """Exhaustive breadth-first step count, or None if unreachable."""
    if not (grid.is_passable(start) and grid.is_passable(goal)):
        return None
    seen = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            return seen[cell]
        for n in grid.passable_neighbors(cell):
            if n not in seen:
                seen[n] = seen[cell] + 1
                queue.append(n)
    return None


def random_grids(count, max_size=8, density=0.3, seed=1234):
    """Yield (grid, start, goal) triples with passable endpoints."""
    rng = np.random.default_rng(seed)
    for _ in range(count):
        rows, cols = rng.integers(1, max_size + 1, size=2)
        data = (rng.random((rows, cols)) < density).astype(np.int8)
        start = Cell(int(rng.integers(rows)), int(rng.integers(cols)))
        goal = Cell(int(rng.integers(rows)), int(rng.integers(cols)))
        data[start.row, start.col] = 0
        data[goal.row, goal.col] = 0
        yield OccupancyGrid(data), start, goal
