import pytest

from gridpath.cell import Cell
from gridpath.errors import EmptyQueueError
from gridpath.priority_queue import PriorityQueue


def test_dequeue_returns_items_in_priority_order():
    pq = PriorityQueue()
    for item, priority in [("c", 3.0), ("a", 1.0), ("e", 5.0), ("b", 2.0), ("d", 4.0)]:
        pq.enqueue(item, priority)
    assert [pq.dequeue() for _ in range(5)] == ["a", "b", "c", "d", "e"]


def test_size_tracks_enqueue_and_dequeue():
    pq = PriorityQueue()
    assert pq.size() == 0 and pq.is_empty()
    pq.enqueue(Cell(0, 0), 1.0)
    pq.enqueue(Cell(0, 1), 0.5)
    assert pq.size() == 2 and len(pq) == 2
    pq.dequeue()
    assert pq.size() == 1
    assert not pq.is_empty()


def test_duplicates_are_accepted():
    pq = PriorityQueue()
    pq.enqueue(Cell(1, 1), 4.0)
    pq.enqueue(Cell(1, 1), 2.0)
    assert pq.size() == 2
    assert pq.dequeue_with_priority() == (Cell(1, 1), 2.0)
    assert pq.dequeue_with_priority() == (Cell(1, 1), 4.0)


def test_contains_uses_value_equality():
    pq = PriorityQueue()
    pq.enqueue(Cell(2, 3), 1.0)
    assert pq.contains(Cell(2, 3))
    assert Cell(2, 3) in pq
    assert not pq.contains(Cell(3, 2))


def test_equal_priorities_do_not_compare_items():
    class Opaque:
        pass

    pq = PriorityQueue()
    a, b = Opaque(), Opaque()
    pq.enqueue(a, 1.0)
    pq.enqueue(b, 1.0)
    assert {pq.dequeue(), pq.dequeue()} == {a, b}


def test_peek_does_not_remove():
    pq = PriorityQueue()
    pq.enqueue("x", 2.0)
    pq.enqueue("y", 1.0)
    assert pq.peek() == "y"
    assert pq.size() == 2


def test_empty_queue_raises():
    pq = PriorityQueue()
    with pytest.raises(EmptyQueueError):
        pq.dequeue()
    with pytest.raises(EmptyQueueError):
        pq.peek()
    # also an IndexError for callers that treat it as one
    with pytest.raises(IndexError):
        pq.dequeue_with_priority()


def test_clear_empties_queue():
    pq = PriorityQueue()
    for i in range(10):
        pq.enqueue(i, float(-i))
    pq.clear()
    assert not pq
    assert pq.size() == 0


def test_heap_order_with_many_items():
    pq = PriorityQueue()
    priorities = [7, 3, 9, 1, 4, 4, 8, 0, 2, 6, 5, 3]
    for i, p in enumerate(priorities):
        pq.enqueue(i, float(p))
    out = []
    while pq:
        out.append(pq.dequeue_with_priority()[1])
    assert out == sorted(float(p) for p in priorities)
