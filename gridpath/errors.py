"""
Exception types raised by the pathfinding package.
"""


class PathfindingError(Exception):
    """Base class for all gridpath errors."""


class NoPathFound(PathfindingError):
    """The open set was exhausted before the goal was reached."""

    def __init__(self, start, goal):
        self.start = start
        self.goal = goal
        super().__init__(f"No path from {start} to {goal}")


class EmptyQueueError(PathfindingError, IndexError):
    """Dequeue or peek on an empty priority queue."""


class InvalidEndpointError(PathfindingError, ValueError):
    """Start or goal cell is out of bounds or sits on an obstacle."""

    def __init__(self, cell, reason: str):
        self.cell = cell
        self.reason = reason
        super().__init__(f"Invalid endpoint {cell}: {reason}")


class InvalidGridError(PathfindingError, ValueError):
    """Grid data is not a non-empty 2D array of 0/1 values."""


class SearchLimitExceeded(PathfindingError):
    """The search dequeued more cells than the configured cap allows."""

    def __init__(self, max_iterations: int):
        self.max_iterations = max_iterations
        super().__init__(f"Search aborted after {max_iterations} iterations")
