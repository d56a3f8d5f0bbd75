import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.containers import ArrayQueue, ContainerEmptyError, ContainerFullError, Stack


def test_stack_is_last_in_first_out():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.peek() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = Stack()
    stack.push("a")
    assert stack.peek() == "a"
    assert len(stack) == 1


def test_empty_stack_errors():
    stack = Stack()
    with pytest.raises(ContainerEmptyError):
        stack.pop()
    with pytest.raises(ContainerEmptyError):
        stack.peek()


def test_stack_capacity():
    stack = Stack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(ContainerFullError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(capacity=-1)
    with pytest.raises(ValueError):
        ArrayQueue(-1)


@given(st.lists(st.integers()))
def test_stack_pops_in_reverse(values):
    stack = Stack()
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()


def test_queue_is_first_in_first_out():
    queue = ArrayQueue(3)
    for value in (1, 2, 3):
        queue.insert(value)
    assert list(queue) == [1, 2, 3]
    assert queue.delete() == 1
    assert list(queue) == [2, 3]


def test_queue_full_and_empty():
    queue = ArrayQueue(1)
    queue.insert(7)
    with pytest.raises(ContainerFullError):
        queue.insert(8)
    assert queue.delete() == 7
    assert queue.is_empty()
    with pytest.raises(ContainerEmptyError):
        queue.delete()


@given(st.lists(st.integers(), max_size=20))
def test_queue_preserves_order(values):
    queue = ArrayQueue(20)
    for value in values:
        queue.insert(value)
    assert [queue.delete() for _ in values] == values
    assert len(queue) == 0