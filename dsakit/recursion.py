"""Classic recursive algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache
from typing import Any, TypeVar

T = TypeVar("T")


def subsets(items: Iterable[T]) -> Iterator[list[T]]:
    """Yield every subset, choosing to include each item before excluding it."""
    pool = list(items)

    def walk(index: int, chosen: list[T]) -> Iterator[list[T]]:
        if index == len(pool):
            yield list(chosen)
            return
        chosen.append(pool[index])
        yield from walk(index + 1, chosen)
        chosen.pop()
        yield from walk(index + 1, chosen)

    yield from walk(0, [])


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``items``, or None."""

    def search(low: int, high: int) -> int | None:
        if low > high:
            return None
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] <= target:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(items) - 1)


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n in (0, 1):
        return n
    return _fib(n - 1) + _fib(n - 2)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting from ``F(0) = 0``."""
    if n < 0:
        raise ValueError("Fibonacci numbers are indexed from zero")
    return _fib(n)


def fibonacci_sequence(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers."""
    if n < 0:
        raise ValueError("length must not be negative")
    return [fibonacci(i) for i in range(n)]


def is_sorted(items: Sequence[Any]) -> bool:
    """Return whether ``items`` is in non-decreasing order."""

    def check(length: int) -> bool:
        if length <= 1:
            return True
        return items[length - 1] >= items[length - 2] and check(length - 1)

    return check(len(items))


def permutations(items: Iterable[T]) -> Iterator[list[T]]:
    """Yield every permutation, generated by swapping each item into place."""
    pool = list(items)

    def walk(index: int) -> Iterator[list[T]]:
        if index == len(pool):
            yield list(pool)
            return
        for other in range(index, len(pool)):
            pool[index], pool[other] = pool[other], pool[index]
            yield from walk(index + 1)
            pool[index], pool[other] = pool[other], pool[index]

    yield from walk(0)


def _count_down(n: int) -> Iterator[int]:
    yield n
    if n != 1:
        yield from _count_down(n - 1)


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    if n < 1:
        raise ValueError("count must start at 1 or above")
    return list(_count_down(n))


def sum_to_n(n: int) -> int:
    """Return the sum of the integers from ``n`` down to 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return n + sum_to_n(n - 1)