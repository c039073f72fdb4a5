import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stack import (
    BoundedStack,
    StackOverflowError,
    StackUnderflowError,
    is_valid_parentheses,
)


def test_demo_sequence():
    stack = BoundedStack(10)
    for value in (10, 20, 30, 40, 50):
        stack.push(value)
    assert list(stack) == [50, 40, 30, 20, 10]
    assert stack.pop() == 50
    assert stack.pop() == 40
    assert not stack.is_empty()
    assert stack.peek() == 30
    assert list(stack) == [30, 20, 10]


def test_default_capacity_is_ten():
    stack = BoundedStack()
    for value in range(10):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(99)


def test_overflow_leaves_stack_unchanged():
    stack = BoundedStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2
    assert stack.peek() == 2


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack(3).pop()


def test_peek_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack(3).peek()


def test_underflow_is_index_error():
    with pytest.raises(IndexError):
        BoundedStack(1).pop()


def test_empty_and_full_flags():
    stack = BoundedStack(1)
    assert stack.is_empty()
    assert not stack.is_full()
    stack.push("x")
    assert not stack.is_empty()
    assert stack.is_full()


def test_zero_capacity_is_always_full():
    stack = BoundedStack(0)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_peek_does_not_remove():
    stack = BoundedStack(3)
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 1


@given(st.lists(st.integers(), max_size=20))
def test_pop_returns_reverse_of_pushes(values):
    stack = BoundedStack(len(values))
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert stack.is_empty()


def test_source_example_is_valid():
    assert is_valid_parentheses("({[]}[])") is True


@pytest.mark.parametrize("text", ["", "()", "[]{}()", "{[()()]}"])
def test_balanced(text):
    assert is_valid_parentheses(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "(()", "())", "{a}"])
def test_unbalanced(text):
    assert is_valid_parentheses(text) is False


@given(st.lists(st.sampled_from(["()", "[]", "{}"]), max_size=10))
def test_wrapping_keeps_validity(pieces):
    body = "".join(pieces)
    assert is_valid_parentheses(body)
    assert is_valid_parentheses("(" + body + ")")
    assert not is_valid_parentheses(body + "(")