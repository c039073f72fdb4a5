"""Number utilities working digit by digit."""

from __future__ import annotations

from collections.abc import Iterator

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_REVERSE_UPPER = INT_MAX // 10
_REVERSE_LOWER = -(-INT_MIN // 10)


def _signed_digits(n: int) -> Iterator[int]:
    """Yield the digits of ``n`` from least significant, carrying its sign."""
    sign = -1 if n < 0 else 1
    n = abs(n)
    while n:
        n, digit = divmod(n, 10)
        yield sign * digit


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def is_armstrong(n: int) -> bool:
    """Return whether the sum of the cubes of the digits of ``n`` equals ``n``."""
    return sum(digit**3 for digit in _signed_digits(n)) == n


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, by trial division."""
    if n <= 1:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def digits(n: int) -> list[int]:
    """Return the digits of ``n`` from least to most significant.

    Digits of a negative number are negative; zero has no digits.
    """
    return list(_signed_digits(n))


def count_digits(n: int) -> int:
    """Return how many digits ``n`` has; zero counts as having none."""
    return sum(1 for _ in _signed_digits(n))


def sum_digits(n: int) -> int:
    """Return the sum of the digits of ``n``, negative when ``n`` is."""
    return sum(_signed_digits(n))


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by repeated remainders."""
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm is undefined when the gcd is zero")
    return _truncating_div(a * b, divisor)


def is_palindrome_number(n: int) -> bool:
    """Return whether ``n`` reads the same with its digits reversed."""
    reversed_value = 0
    for digit in _signed_digits(n):
        reversed_value = reversed_value * 10 + digit
    return reversed_value == n


def reverse_number(n: int) -> int:
    """Reverse the digits of a 32-bit integer, or return 0 on overflow."""
    if not INT_MIN <= n <= INT_MAX:
        raise ValueError(f"{n} is outside the 32-bit signed range")
    reversed_value = 0
    for digit in _signed_digits(n):
        if reversed_value > _REVERSE_UPPER or reversed_value < _REVERSE_LOWER:
            return 0
        reversed_value = reversed_value * 10 + digit
    return reversed_value