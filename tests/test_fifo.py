import pytest

from peernet.fifo import Queue


def test_values_leave_in_arrival_order():
    queue = Queue()
    for value in ["one", "two", "three"]:
        queue.push(value)
    assert [queue.pop() for _ in range(3)] == ["one", "two", "three"]
    assert len(queue) == 0


def test_peek_does_not_remove():
    queue = Queue()
    queue.push(10)
    queue.push(20)
    assert queue.peek() == 10
    assert queue.peek() == 10
    assert len(queue) == 2


def test_peek_empty_is_none():
    assert Queue().peek() is None


def test_pop_advances_front():
    queue = Queue()
    queue.push("a")
    queue.push("b")
    queue.pop()
    assert queue.peek() == "b"
    assert len(queue) == 1


def test_pop_empty_raises():
    queue = Queue()
    with pytest.raises(IndexError):
        queue.pop()