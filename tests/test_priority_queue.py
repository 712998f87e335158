import pytest

from algokit.priority_queue import ArrayPriorityQueue


@pytest.fixture
def source_queue():
    queue = ArrayPriorityQueue()
    queue.enqueue(10, 2)
    queue.enqueue(14, 4)
    queue.enqueue(16, 4)
    queue.enqueue(12, 3)
    return queue


def test_source_example_sequence(source_queue):
    assert source_queue.peek() == 16
    assert source_queue.dequeue() == 16
    assert source_queue.peek() == 14
    assert source_queue.dequeue() == 14
    assert source_queue.peek() == 12


def test_peek_does_not_remove(source_queue):
    assert source_queue.peek() == source_queue.peek()
    assert len(source_queue) == 4


def test_dequeue_shrinks_queue(source_queue):
    source_queue.dequeue()
    assert len(source_queue) == 3


def test_drain_in_priority_order(source_queue):
    drained = [source_queue.dequeue() for _ in range(4)]
    assert drained == [16, 14, 12, 10]
    assert len(source_queue) == 0


def test_equal_priority_prefers_larger_value():
    queue = ArrayPriorityQueue()
    queue.enqueue(3, 1)
    queue.enqueue(8, 1)
    queue.enqueue(5, 1)
    assert queue.peek() == 8


def test_priority_beats_value():
    queue = ArrayPriorityQueue()
    queue.enqueue(100, 1)
    queue.enqueue(1, 2)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 100


def test_negative_priorities_are_ordered():
    queue = ArrayPriorityQueue()
    queue.enqueue("low", -5)
    queue.enqueue("high", -1)
    assert queue.dequeue() == "high"
    assert queue.dequeue() == "low"


def test_empty_queue_peek_raises():
    with pytest.raises(IndexError):
        ArrayPriorityQueue().peek()


def test_empty_queue_dequeue_raises():
    queue = ArrayPriorityQueue()
    queue.enqueue(1, 1)
    queue.dequeue()
    with pytest.raises(IndexError):
        queue.dequeue()