import pytest

from dsakit.queues import (
    CircularQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_demo_sequence():
    for q in (CircularQueue(), LinkedQueue()):
        q.enqueue(2)
        assert list(q) == [2]
        q.enqueue(4)
        q.enqueue(6)
        assert list(q) == [2, 4, 6]
        assert q.dequeue() == 2
        assert list(q) == [4, 6]
        q.enqueue(8)
        assert list(q) == [4, 6, 8]


def test_fifo_order():
    items = list(range(50))
    for q in (CircularQueue(), LinkedQueue()):
        for item in items:
            q.enqueue(item)
        assert len(q) == len(items)
        assert [q.dequeue() for _ in items] == items
        assert q.is_empty()


def test_front_does_not_remove():
    for q in (CircularQueue(), LinkedQueue()):
        q.enqueue(5)
        q.enqueue(10)
        assert q.front() == 5
        assert len(q) == 2
        assert list(q) == [5, 10]


def test_empty_queue_errors():
    for q in (CircularQueue(), LinkedQueue()):
        assert q.is_empty()
        with pytest.raises(QueueEmptyError):
            q.dequeue()
        with pytest.raises(QueueEmptyError):
            q.front()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        CircularQueue().dequeue()
    with pytest.raises(IndexError):
        LinkedQueue().dequeue()


def test_drain_then_reuse():
    for q in (CircularQueue(), LinkedQueue()):
        q.enqueue(1)
        q.dequeue()
        assert q.is_empty()
        q.enqueue(9)
        assert q.front() == 9
        assert list(q) == [9]


def test_circular_default_capacity():
    q = CircularQueue()
    for item in range(101):
        q.enqueue(item)
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(101)


def test_circular_full_raises():
    q = CircularQueue(3)
    for item in (1, 2, 3):
        q.enqueue(item)
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(4)
    assert list(q) == [1, 2, 3]


def test_circular_wraps_around():
    q = CircularQueue(3)
    for item in (1, 2, 3):
        q.enqueue(item)
    assert q.dequeue() == 1
    assert q.dequeue() == 2
    q.enqueue(4)
    q.enqueue(5)
    assert q.is_full()
    assert list(q) == [3, 4, 5]
    assert [q.dequeue() for _ in range(3)] == [3, 4, 5]


def test_circular_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linked_queue_unbounded():
    q = LinkedQueue()
    for item in range(1000):
        q.enqueue(item)
    assert len(q) == 1000
    assert q.front() == 0