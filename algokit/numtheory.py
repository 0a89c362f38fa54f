"""Small number-theory helpers: digits, factorials, primes, bit tricks and ages."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from itertools import combinations

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class Age:
    """An age expressed as whole years, months and days."""

    years: int
    months: int
    days: int

    def __str__(self) -> str:
        return f"Present Age Years: {self.years} Months: {self.months} Days: {self.days}"


def reverse_digits(n: int) -> int:
    """Return ``n`` with its decimal digits reversed; the sign is kept."""
    sign = -1 if n < 0 else 1
    n = abs(n)
    reversed_value = 0
    while n:
        n, digit = divmod(n, 10)
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value


def is_palindrome_number(n: int) -> bool:
    """Tell whether ``n`` reads the same with its digits reversed."""
    return reverse_digits(n) == n


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` below 1 gives 1."""
    return math.prod(range(1, n + 1))


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, always at least ``[0, 1]``."""
    sequence = [0, 1]
    while len(sequence) < count:
        sequence.append(sequence[-1] + sequence[-2])
    return sequence


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm.

    The remainder follows truncating division, so the sign of the result
    follows the operands as the classic recursive formulation does.
    """
    while b != 0:
        a, b = b, _truncated_mod(a, b)
    return a


def is_perfect_square(n: int) -> bool:
    """Tell whether ``n`` is the square of a non-negative integer."""
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def is_prime(n: int) -> bool:
    """Tell whether ``n`` has no divisor between 2 and its square root.

    Trial division finds no divisor for 0 and 1, so they are reported as
    prime. Negative numbers have no real square root and are rejected.
    """
    if n < 0:
        raise ValueError("cannot test a negative number for primality")
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; non-positive gives 0."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def swap(x, y):
    """Return the two values in the opposite order."""
    return y, x


def max_bitwise(n: int, k: int) -> tuple[int, int, int]:
    """Return the largest AND, OR and XOR below ``k`` over pairs ``1 <= i < j <= n``.

    Each maximum starts at 0 and only grows, so 0 is reported when no pair
    gives a positive value below ``k``.
    """
    best_and = best_or = best_xor = 0
    for i, j in combinations(range(1, n + 1), 2):
        if best_and < (i & j) < k:
            best_and = i & j
        if best_or < (i | j) < k:
            best_or = i | j
        if best_xor < (i ^ j) < k:
            best_xor = i ^ j
    return best_and, best_or, best_xor


def age_between(present: date, birth: date) -> Age:
    """Return the age on ``present`` of someone born on ``birth``.

    Borrowed days are taken from a fixed month table (February has 28 days),
    indexed by the birth month.
    """
    present_day, present_month, present_year = present.day, present.month, present.year
    if birth.day > present_day:
        present_day += _MONTH_DAYS[birth.month - 1]
        present_month -= 1
    if birth.month > present_month:
        present_year -= 1
        present_month += 12
    return Age(
        years=present_year - birth.year,
        months=present_month - birth.month,
        days=present_day - birth.day,
    )