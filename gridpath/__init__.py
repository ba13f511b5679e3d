"""
Grid pathfinding: A* search on 2D occupancy grids.
"""

from .cell import Cell, euclidean_distance, is_adjacent
from .grid import OccupancyGrid, REFERENCE_GRID, FREE, OBSTACLE
from .priority_queue import PriorityQueue
from .pathfinding import (
    AStar,
    SearchResult,
    SearchStatus,
    find_path,
    path_cost,
    reconstruct_path
)
from .dijkstra import WeightedGraph, dijkstra, shortest_path, grid_distance
from .rendering import render_grid, create_path_image
from .config import (
    SearchConfig,
    RenderConfig,
    DEFAULT_SEARCH_CONFIG,
    DEFAULT_RENDER_CONFIG,
    load_search_config
)
from .io_utils import (
    load_json,
    save_json,
    load_grid,
    save_grid,
    parse_grid_text,
    save_image,
    result_to_dict
)
from .errors import (
    PathfindingError,
    NoPathFound,
    EmptyQueueError,
    InvalidEndpointError,
    InvalidGridError,
    SearchLimitExceeded
)

__all__ = [
    # Cells and grids
    'Cell',
    'euclidean_distance',
    'is_adjacent',
    'OccupancyGrid',
    'REFERENCE_GRID',
    'FREE',
    'OBSTACLE',
    # Search
    'PriorityQueue',
    'AStar',
    'SearchResult',
    'SearchStatus',
    'find_path',
    'path_cost',
    'reconstruct_path',
    'WeightedGraph',
    'dijkstra',
    'shortest_path',
    'grid_distance',
    # Rendering
    'render_grid',
    'create_path_image',
    # Config
    'SearchConfig',
    'RenderConfig',
    'DEFAULT_SEARCH_CONFIG',
    'DEFAULT_RENDER_CONFIG',
    'load_search_config',
    # IO utilities
    'load_json',
    'save_json',
    'load_grid',
    'save_grid',
    'parse_grid_text',
    'save_image',
    'result_to_dict',
    # Errors
    'PathfindingError',
    'NoPathFound',
    'EmptyQueueError',
    'InvalidEndpointError',
    'InvalidGridError',
    'SearchLimitExceeded',
]
