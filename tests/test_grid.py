import math

import numpy as np
import pytest

from gridpath.cell import Cell, euclidean_distance, is_adjacent
from gridpath.errors import InvalidGridError
from gridpath.grid import OccupancyGrid


def test_cell_value_semantics():
    assert Cell(1, 2) == Cell(1, 2)
    assert hash(Cell(1, 2)) == hash(Cell(1, 2))
    assert len({Cell(1, 2), Cell(1, 2), Cell(2, 1)}) == 2
    assert {Cell(0, 0): "a"}[Cell(0, 0)] == "a"


def test_cell_of_coerces_sequences():
    assert Cell.of((3, 4)) == Cell(3, 4)
    assert Cell.of([3, 4]) == Cell(3, 4)
    assert Cell.of(np.array([3, 4])) == Cell(3, 4)
    c = Cell(1, 1)
    assert Cell.of(c) is c
    row, col = Cell(5, 6)
    assert (row, col) == (5, 6)


def test_neighbors4_order():
    assert Cell(2, 2).neighbors4() == [Cell(3, 2), Cell(1, 2), Cell(2, 3), Cell(2, 1)]


def test_euclidean_distance():
    assert euclidean_distance(Cell(0, 0), Cell(3, 4)) == 5.0
    assert euclidean_distance(Cell(1, 1), Cell(1, 2)) == 1.0
    assert euclidean_distance(Cell(2, 2), Cell(2, 2)) == 0.0
    assert math.isclose(euclidean_distance(Cell(0, 0), Cell(1, 1)), math.sqrt(2))


def test_is_adjacent():
    assert is_adjacent(Cell(0, 0), Cell(0, 1))
    assert is_adjacent(Cell(1, 0), Cell(0, 0))
    assert not is_adjacent(Cell(0, 0), Cell(1, 1))
    assert not is_adjacent(Cell(0, 0), Cell(0, 0))
    assert not is_adjacent(Cell(0, 0), Cell(0, 2))


def test_grid_is_read_only():
    source = [[0, 1], [0, 0]]
    grid = OccupancyGrid(source)
    source[0][0] = 1
    assert grid.data[0, 0] == 0
    with pytest.raises(ValueError):
        grid.data[0, 0] = 1


def test_grid_shape_and_bounds(reference_grid):
    assert reference_grid.shape == (10, 10)
    assert reference_grid.rows == 10 and reference_grid.cols == 10
    assert reference_grid.in_bounds(Cell(9, 9))
    assert not reference_grid.in_bounds(Cell(10, 0))
    assert not reference_grid.in_bounds(Cell(0, -1))


def test_passable_neighbors_filters_bounds_and_obstacles(reference_grid):
    # (0, 1) sits above the obstacle at (1, 1)
    assert reference_grid.passable_neighbors(Cell(0, 1)) == [Cell(0, 2), Cell(0, 0)]
    assert reference_grid.passable_neighbors(Cell(0, 0)) == [Cell(1, 0), Cell(0, 1)]


@pytest.mark.parametrize("data", [
    [],
    [[]],
    [0, 1, 0],
    [[0, 2], [0, 0]],
    [[0, 1], [0]],
])
def test_invalid_grids_rejected(data):
    with pytest.raises(InvalidGridError):
        OccupancyGrid(data)


def test_connected_components(walled_goal_grid):
    assert walled_goal_grid.are_connected(Cell(0, 0), Cell(4, 4))
    assert not walled_goal_grid.are_connected(Cell(0, 0), Cell(2, 2))
    # obstacle cells are never connected
    assert not walled_goal_grid.are_connected(Cell(1, 2), Cell(1, 2))
    labels = walled_goal_grid.connected_components()
    assert labels[1, 2] == 0
    assert len(np.unique(labels[labels > 0])) == 2


def test_free_cells_and_obstacle_count(walled_goal_grid):
    assert walled_goal_grid.obstacle_count() == 4
    free = walled_goal_grid.free_cells()
    assert len(free) == 21
    assert free[0] == Cell(0, 0)
    assert Cell(1, 2) not in free


def test_custom_obstacle_marker():
    grid = OccupancyGrid([[0, 9, 0], [0, 0, 9]], obstacle_value=9)
    assert grid.obstacle_value == 9
    assert grid.is_obstacle(Cell(0, 1))
    assert grid.is_passable(Cell(1, 1))
    assert grid.obstacle_count() == 2
    assert grid.data.tolist() == [[0, 1, 0], [0, 0, 1]]
    assert grid.are_connected(Cell(0, 0), Cell(1, 1))
    assert not grid.are_connected(Cell(0, 0), Cell(0, 2))


def test_custom_obstacle_marker_rejects_other_values():
    # with a marker of 9, a stray 1 is neither free nor obstacle
    with pytest.raises(InvalidGridError):
        OccupancyGrid([[0, 1], [9, 0]], obstacle_value=9)
    with pytest.raises(InvalidGridError):
        OccupancyGrid([[0, 0]], obstacle_value=0)


@pytest.mark.parametrize("value", [(0.9, 9.7), (1, 2.0), ("1", 2)])
def test_cell_of_rejects_non_integers(value):
    with pytest.raises(TypeError):
        Cell.of(value)
