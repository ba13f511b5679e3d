import sys
from pathlib import Path

import pytest

# Make the repository importable without installing it
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from gridpath.grid import OccupancyGrid, REFERENCE_GRID


@pytest.fixture
def reference_grid():
    return REFERENCE_GRID


@pytest.fixture
def walled_goal_grid():
    # goal (2, 2) boxed in on all four sides
    return OccupancyGrid.from_rows([
        [0, 0, 0, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 1, 0, 1, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 0, 0, 0],
    ])
