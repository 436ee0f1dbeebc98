import pytest

from algobox.containers import EmptyContainerError, Queue, Stack


def test_queue_is_fifo():
    queue = Queue()
    values = [10, 20, 30]
    for value in values:
        queue.enqueue(value)
    assert list(queue) == values
    assert queue.peek() == 10
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_queue_interleaved_operations():
    queue = Queue()
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.dequeue() == 10
    queue.enqueue(40)
    assert list(queue) == [20, 40]
    assert len(queue) == 2


def test_queue_render():
    queue = Queue()
    queue.enqueue(10)
    queue.enqueue(20)
    assert str(queue) == "Queue: 10 20"


def test_empty_queue_raises():
    queue = Queue()
    with pytest.raises(EmptyContainerError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_stack_is_lifo():
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.peek() == 30
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    assert popped == [30, 20, 10]
    assert len(stack) == 0


def test_empty_stack_raises():
    stack = Stack()
    with pytest.raises(EmptyContainerError):
        stack.pop()
    with pytest.raises(EmptyContainerError):
        stack.peek()


def test_default_capacity_is_one_hundred():
    stack = Stack()
    for value in range(100):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(100)
    assert len(stack) == 100


def test_custom_capacity():
    stack = Stack(capacity=2)
    stack.push("a")
    assert not stack.is_full()
    stack.push("b")
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push("c")
    assert stack.pop() == "b"


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(capacity=-1)