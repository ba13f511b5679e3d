"""
A* pathfinding on occupancy grids.
"""

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .cell import Cell, euclidean_distance
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .errors import InvalidEndpointError, NoPathFound, SearchLimitExceeded
from .grid import OccupancyGrid
from .priority_queue import PriorityQueue

logger = logging.getLogger(__name__)


class SearchStatus(enum.Enum):
    FOUND = "found"
    NO_PATH = "no_path"


@dataclass
class SearchResult:
    """Outcome of a single A* search."""
    start: Cell
    goal: Cell
    status: SearchStatus
    path: Optional[List[Cell]] = None
    cost: float = math.inf
    nodes_expanded: int = 0
    stale_skipped: int = field(default=0, repr=False)

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    def raise_for_status(self) -> "SearchResult":
        """Raise NoPathFound unless a path was found."""
        if not self.found:
            raise NoPathFound(self.start, self.goal)
        return self


def path_cost(path: List[Cell]) -> float:
    """Total Euclidean step cost along a path."""
    return sum(euclidean_distance(a, b) for a, b in zip(path, path[1:]))


def reconstruct_path(came_from: Dict[Cell, Cell], current: Cell) -> List[Cell]:
    """Follow predecessor links back to the start, returned start-first."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


class AStar:
    """
    A* search over a fixed occupancy grid.

    The grid is held by reference and never modified; every call to
    ``search`` keeps its bookkeeping local, so one instance can serve
    repeated or concurrent searches.
    """

    def __init__(self, grid, config: Optional[SearchConfig] = None):
        self.grid = OccupancyGrid.coerce(grid)
        self.config = (config or DEFAULT_SEARCH_CONFIG).validate()

    def heuristic(self, cell: Cell, goal: Cell) -> float:
        return euclidean_distance(cell, goal)

    def _endpoint(self, value) -> Cell:
        try:
            cell = Cell.of(value)
        except (TypeError, ValueError):
            raise InvalidEndpointError(value, "not an integer (row, col) pair") from None
        self._check_endpoint(cell)
        return cell

    def _check_endpoint(self, cell: Cell) -> None:
        if not self.grid.in_bounds(cell):
            raise InvalidEndpointError(cell, "out of bounds")
        if self.grid.is_obstacle(cell):
            raise InvalidEndpointError(cell, "obstacle")

    def search(self, start, goal) -> SearchResult:
        """
        Find the shortest 4-directional path between two cells.

        Args:
            start: Start cell (Cell or (row, col))
            goal: Goal cell (Cell or (row, col))

        Returns:
            SearchResult with status FOUND and the path (start and goal
            inclusive), or status NO_PATH when the goal is unreachable

        Raises:
            InvalidEndpointError: start or goal is not an integer pair, out of
                bounds or an obstacle
            SearchLimitExceeded: more dequeues than config.max_iterations
        """
        start = self._endpoint(start)
        goal = self._endpoint(goal)

        if self.config.precheck_connectivity and not self.grid.are_connected(start, goal):
            logger.debug("%s and %s lie in different regions, skipping search", start, goal)
            return SearchResult(start, goal, SearchStatus.NO_PATH)

        lazy = self.config.duplicate_policy == "lazy"
        max_iterations = self.config.max_iterations

        open_set = PriorityQueue()
        came_from: Dict[Cell, Cell] = {}
        g_score: Dict[Cell, float] = {start: 0.0}
        f_score: Dict[Cell, float] = {start: self.heuristic(start, goal)}
        closed = set()

        open_set.enqueue(start, f_score[start])
        iterations = 0
        stale = 0

        while open_set:
            current, priority = open_set.dequeue_with_priority()

            if lazy and (current in closed or priority > f_score[current]):
                stale += 1
                continue

            iterations += 1
            if max_iterations is not None and iterations > max_iterations:
                raise SearchLimitExceeded(max_iterations)

            if current == goal:
                path = reconstruct_path(came_from, current)
                logger.debug(
                    "Path %s -> %s: %d cells, cost %.2f, %d expanded",
                    start, goal, len(path), g_score[current], iterations,
                )
                return SearchResult(
                    start, goal, SearchStatus.FOUND,
                    path=path,
                    cost=g_score[current],
                    nodes_expanded=iterations,
                    stale_skipped=stale,
                )

            closed.add(current)

            for neighbor in self.grid.passable_neighbors(current):
                if neighbor in closed:
                    continue

                tentative_g = g_score[current] + euclidean_distance(current, neighbor)

                if neighbor not in g_score or tentative_g < g_score[neighbor]:
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative_g
                    f_score[neighbor] = tentative_g + self.heuristic(neighbor, goal)

                    if lazy or not open_set.contains(neighbor):
                        open_set.enqueue(neighbor, f_score[neighbor])

        logger.debug("No path %s -> %s after %d expansions", start, goal, iterations)
        return SearchResult(
            start, goal, SearchStatus.NO_PATH,
            nodes_expanded=iterations,
            stale_skipped=stale,
        )

    def find_path(self, start, goal) -> Optional[List[Cell]]:
        return self.search(start, goal).path


def find_path(grid, start, goal, config: Optional[SearchConfig] = None) -> Optional[List[Cell]]:
    """
    Shortest walkable path on an occupancy grid using A*.

    Args:
        grid: OccupancyGrid or 2D array where 0=free, 1=obstacle
        start: (row, col) of the start cell
        goal: (row, col) of the goal cell
        config: Optional SearchConfig

    Returns:
        List of Cells from start to goal inclusive, or None if no path exists
    """
    return AStar(grid, config).search(start, goal).path
