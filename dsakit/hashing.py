"""Array problems solved with hashing and pointer tricks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain, combinations


def three_sum(nums: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct triplet that sums to zero.

    Each triplet is sorted in ascending order. Triplets appear in the order in
    which they are first found when scanning index triples lexicographically.
    """
    seen: set[tuple[int, int, int]] = set()
    found: list[tuple[int, int, int]] = []
    for combo in combinations(nums, 3):
        if sum(combo) == 0:
            triplet = tuple(sorted(combo))
            if triplet not in seen:
                seen.add(triplet)
                found.append(triplet)
    return found


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value using Floyd's cycle detection.

    Every value must be a valid index into ``nums``.
    """
    values = list(nums)
    if not values:
        raise ValueError("sequence is empty")
    size = len(values)
    if any(not 0 <= value < size for value in values):
        raise ValueError("every value must be a valid index into the sequence")

    slow = fast = values[0]
    while True:
        slow = values[slow]
        fast = values[values[fast]]
        if slow == fast:
            break

    fast = values[0]
    while slow != fast:
        slow = values[slow]
        fast = values[fast]
    return slow


def find_repeat_and_missing(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(repeated, missing)`` for an n x n grid meant to hold 1..n*n."""
    rows = [list(row) for row in grid]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("grid must be square")

    expected_sum = (size * size) * (size * size + 1) // 2
    actual_sum = 0
    seen: set[int] = set()
    repeated: int | None = None
    for value in chain.from_iterable(rows):
        actual_sum += value
        if value in seen:
            repeated = value
        seen.add(value)

    if repeated is None:
        raise ValueError("grid has no repeated value")
    return repeated, expected_sum + repeated - actual_sum


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int]:
    """Return ``(i, j)`` with ``j < i`` and ``nums[i] + nums[j] == target``.

    The first such ``i`` is chosen; ``j`` is the latest earlier index holding
    the needed complement.
    """
    index_of: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in index_of:
            return index, index_of[complement]
        index_of[value] = index
    raise ValueError(f"no two values sum to {target}")