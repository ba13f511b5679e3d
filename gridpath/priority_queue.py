"""
Binary min-heap priority queue used by the search algorithms.
"""

import itertools
from heapq import heappush, heappop
from typing import Any, List, Tuple

from .errors import EmptyQueueError


class PriorityQueue:
    """
    Minimum-priority queue over a binary heap.

    Duplicate items are accepted; callers decide whether to check
    ``contains`` before enqueueing or to skip stale entries on dequeue.
    Items with equal priority come out in no guaranteed order.
    """

    def __init__(self):
        # (priority, sequence, item); sequence stops comparisons reaching item
        self._heap: List[Tuple[float, int, Any]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, item, priority: float) -> None:
        """
        Insert an item with the given priority (sift-up, O(log n)).

        Args:
            item: Hashable or comparable-by-value item
            priority: Lower values are dequeued first
        """
        heappush(self._heap, (priority, next(self._counter), item))

    def dequeue(self):
        """Remove and return the item with the lowest priority."""
        item, _ = self.dequeue_with_priority()
        return item

    def dequeue_with_priority(self) -> Tuple[Any, float]:
        """
        Remove the minimum entry (swap with last, shrink, sift-down).

        Returns:
            Tuple of (item, priority)

        Raises:
            EmptyQueueError: if the queue is empty
        """
        if not self._heap:
            raise EmptyQueueError("dequeue from an empty priority queue")
        priority, _, item = heappop(self._heap)
        return item, priority

    def peek(self):
        if not self._heap:
            raise EmptyQueueError("peek into an empty priority queue")
        return self._heap[0][2]

    def contains(self, item) -> bool:
        """Linear scan for an entry equal (by value) to ``item``."""
        return any(entry[2] == item for entry in self._heap)

    def clear(self) -> None:
        self._heap.clear()
