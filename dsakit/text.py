"""String manipulation routines."""

from __future__ import annotations

import string
from collections.abc import Iterable
from itertools import groupby

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``part`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order.

    Runs of spaces collapse and leading or trailing spaces are dropped.
    """
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def compress(chars: Iterable[str]) -> list[str]:
    """Run-length encode ``chars``.

    Each run becomes its character followed by the digits of its length; runs
    of a single character keep just the character.
    """
    encoded: list[str] = []
    for char, run in groupby(chars):
        count = sum(1 for _ in run)
        encoded.append(char)
        if count > 1:
            encoded.extend(str(count))
    return encoded


def is_palindrome(s: str) -> bool:
    """Return whether ``s`` reads the same both ways.

    Only ASCII letters and digits are compared, ignoring case.
    """
    kept = [char.lower() for char in s if char in _ALPHANUMERIC]
    return kept == kept[::-1]