"""A fixed-capacity stack and a bracket-matching check built on stacks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_PAIRS.values())


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


class BoundedStack(Generic[T]):
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack overflow: cannot push element")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow: cannot pop element")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow: cannot peek element")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return whether the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Return whether the stack has reached its capacity."""
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={self._items!r})"


def is_valid_parentheses(text: str) -> bool:
    """Return whether every bracket in ``text`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closing one
    and must match the most recent unclosed opening bracket.
    """
    open_brackets: list[str] = []
    for char in text:
        if char in _OPENING:
            open_brackets.append(char)
            continue
        if not open_brackets:
            return False
        if _PAIRS.get(char) != open_brackets[-1]:
            return False
        open_brackets.pop()
    return not open_brackets