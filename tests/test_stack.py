import pytest

from algokit.stack import BoundedStack, StackOverflowError, StackUnderflowError


def test_default_capacity_is_two():
    stack = BoundedStack()
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert list(stack) == [1, 2]


def test_pop_is_last_in_first_out():
    stack = BoundedStack(5)
    for value in [10, 20, 30]:
        stack.push(value)
    assert stack.pop() == 30
    assert stack.pop() == 20
    assert list(stack) == [10]
    assert len(stack) == 1


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack().pop()


def test_underflow_is_index_error():
    stack = BoundedStack(1)
    stack.push(4)
    stack.pop()
    with pytest.raises(IndexError):
        stack.pop()


def test_push_after_pop_when_full():
    stack = BoundedStack(1)
    stack.push(1)
    stack.pop()
    stack.push(2)
    assert list(stack) == [2]