"""
Dijkstra shortest paths over an explicit weighted graph.

Independent of the grid-based A* engine; mainly useful for arbitrary
graphs and as a reference when checking A* results.
"""

import math
from collections import defaultdict
from typing import Dict, Hashable, List, Optional, Tuple

from .cell import Cell
from .grid import OccupancyGrid
from .priority_queue import PriorityQueue


class WeightedGraph:
    """Directed graph stored as an adjacency list of (target, cost) pairs."""

    def __init__(self):
        self._edges: Dict[Hashable, List[Tuple[Hashable, float]]] = defaultdict(list)

    def add_edge(self, source, target, cost: float) -> None:
        if cost < 0:
            raise ValueError(f"Edge cost must be non-negative, got {cost}")
        self._edges[source].append((target, cost))
        # make sure sink-only nodes are still listed
        self._edges.setdefault(target, [])

    def add_undirected_edge(self, a, b, cost: float) -> None:
        self.add_edge(a, b, cost)
        self.add_edge(b, a, cost)

    @property
    def nodes(self) -> List[Hashable]:
        return list(self._edges)

    def neighbors(self, node) -> List[Tuple[Hashable, float]]:
        return list(self._edges.get(node, ()))

    def __contains__(self, node) -> bool:
        return node in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    @classmethod
    def from_grid(cls, grid) -> "WeightedGraph":
        """
        Build a unit-cost graph from the passable cells of a grid.

        Args:
            grid: OccupancyGrid or 2D array where 0=free, 1=obstacle

        Returns:
            WeightedGraph whose nodes are Cells
        """
        grid = OccupancyGrid.coerce(grid)
        graph = cls()
        for cell in grid.free_cells():
            graph._edges.setdefault(cell, [])
            for neighbor in grid.passable_neighbors(cell):
                graph.add_edge(cell, neighbor, 1.0)
        return graph


def dijkstra(graph: WeightedGraph, source) -> Tuple[Dict[Hashable, float], Dict[Hashable, Hashable]]:
    """
    Single-source shortest distances.

    Args:
        graph: WeightedGraph
        source: Start node

    Returns:
        distances: Best known cost per reachable node
        previous: Predecessor of each reachable node on its shortest path
    """
    distances = {source: 0.0}
    previous: Dict[Hashable, Hashable] = {}
    visited = set()
    queue = PriorityQueue()
    queue.enqueue(source, 0.0)

    while queue:
        current = queue.dequeue()
        if current in visited:
            continue
        visited.add(current)

        for target, cost in graph.neighbors(current):
            candidate = distances[current] + cost
            if candidate < distances.get(target, math.inf):
                distances[target] = candidate
                previous[target] = current
                queue.enqueue(target, candidate)

    return distances, previous


def shortest_path(graph: WeightedGraph, source, target) -> Optional[List[Hashable]]:
    """Shortest node sequence from source to target, or None if unreachable."""
    if source == target:
        return [source]
    if source not in graph or target not in graph:
        return None

    distances, previous = dijkstra(graph, source)
    if target not in distances:
        return None

    path = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def grid_distance(grid, start, goal) -> float:
    """Shortest 4-directional step count between two cells, inf if unreachable."""
    start = Cell.of(start)
    goal = Cell.of(goal)
    distances, _ = dijkstra(WeightedGraph.from_grid(grid), start)
    return distances.get(goal, math.inf)
