"""Small number and text routines: primes, digits, series and patterns."""

from __future__ import annotations

import math

_GREETINGS = {
    "a": "Hello",
    "b": "Abhay",
    "c": "Chao",
    "d": "Yoo",
}

NOT_FOUND = "not found"


def _digits(n: int):
    """Yield the decimal digits of a positive integer, least significant first."""
    while n > 0:
        n, digit = divmod(n, 10)
        yield digit


def is_armstrong(n: int) -> bool:
    """Return True when the sum of the cubes of the digits of ``n`` equals ``n``."""
    return sum(digit**3 for digit in _digits(n)) == n


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting with 0 and 1."""
    terms = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def primes_between(low: int, high: int) -> list[int]:
    """Return the primes in the inclusive range ``low`` to ``high``."""
    return [n for n in range(low, high + 1) if is_prime(n)]


def reverse_number(n: int) -> int:
    """Return the digits of ``n`` in reverse order; non-positive input gives 0."""
    result = 0
    for digit in _digits(n):
        result = result * 10 + digit
    return result


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def max_of_three(a, b, c):
    """Return the largest of three values."""
    if a > b:
        return a if a > c else c
    return b if b > c else c


def add(a, b):
    """Return the sum of two values."""
    return a + b


def shift_left(value: int, bits: int) -> int:
    """Shift ``value`` left by ``bits``, that is multiply it by 2 to the ``bits``."""
    return value << bits


def hollow_rectangle(rows: int, cols: int) -> list[str]:
    """Return the lines of a hollow rectangle of asterisks."""
    width = max(cols, 0)
    lines = []
    for row in range(rows):
        if row in (0, rows - 1) or width <= 2:
            lines.append("*" * width)
        else:
            lines.append("*" + " " * (width - 2) + "*")
    return lines


def greeting_for(button: str) -> str:
    """Return the word bound to a button key, or ``"not found"``."""
    return _GREETINGS.get(button, NOT_FOUND)