import pytest

from dsakit.linked import LinkedQueue, LinkedStack


def test_queue_is_first_in_first_out():
    queue = LinkedQueue()
    for value in [10, 20, 30]:
        queue.push(value)
    assert queue.front() == 10
    assert [queue.pop() for _ in range(3)] == [10, 20, 30]


def test_queue_length_and_truthiness():
    queue = LinkedQueue()
    assert queue.empty()
    assert not queue
    queue.push("a")
    queue.push("b")
    assert len(queue) == 2
    assert bool(queue)
    assert not queue.empty()
    queue.pop()
    queue.pop()
    assert len(queue) == 0
    assert queue.empty()


def test_queue_front_after_pop():
    queue = LinkedQueue()
    for value in [10, 20, 30]:
        queue.push(value)
    queue.pop()
    assert queue.front() == 20


def test_queue_empty_errors():
    queue = LinkedQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.front()


def test_queue_reuse_after_draining():
    queue = LinkedQueue()
    queue.push(1)
    queue.pop()
    queue.push(2)
    queue.push(3)
    assert queue.pop() == 2
    assert queue.pop() == 3
    assert queue.empty()


def test_stack_is_last_in_first_out():
    stack = LinkedStack()
    values = [1, 2, 3, 4]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == list(reversed(values))


def test_stack_iterates_bottom_to_top():
    stack = LinkedStack()
    for value in [5, 6, 7]:
        stack.push(value)
    assert list(stack) == [5, 6, 7]
    assert len(stack) == 3


def test_stack_display():
    stack = LinkedStack()
    assert str(stack) == "NULL"
    stack.push(1)
    stack.push(2)
    assert str(stack) == "1 -> 2 -> NULL"


def test_stack_pop_empty():
    stack = LinkedStack()
    with pytest.raises(IndexError):
        stack.pop()
    stack.push(9)
    assert stack.pop() == 9
    with pytest.raises(IndexError):
        stack.pop()