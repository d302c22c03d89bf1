"""Small integer and digit puzzles."""

from __future__ import annotations

import itertools
from typing import Iterator, Sequence

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def add_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    if not digits:
        raise ValueError("add_one() requires at least one digit")
    result: list[int] = []
    carry = 1
    for digit in reversed(digits):
        carry, digit = divmod(digit + carry, 10)
        result.append(digit)
    if carry == 1:
        result.append(1)
    return result[::-1]


def digit_sum(num: int) -> int:
    """Return the sum of the decimal digits of a positive integer (0 otherwise)."""
    total = 0
    while num > 0:
        num, digit = divmod(num, 10)
        total += digit
    return total


def add_digits(num: int) -> int:
    """Repeatedly sum digits while the value exceeds 10."""
    if num < 10:
        return num
    while num > 10:
        num = digit_sum(num)
    return num


def quotient(m: int, n: int) -> int:
    """Integer division truncating toward zero, as by repeated subtraction."""
    if n == 0:
        raise ZeroDivisionError("division by zero")
    sign = -1 if (m < 0) != (n < 0) else 1
    return sign * (abs(m) // abs(n))


def atoi(s: str) -> int:
    """Parse a decimal string with an optional leading minus.

    Bytes that are not ASCII digits count as the digit 0.
    """
    if not s:
        raise ValueError("atoi() requires a non-empty string")
    negative = s.startswith("-")
    if negative:
        s = s[1:]
    value = 0
    for byte in s.encode():
        digit = byte - 48 if 48 <= byte <= 57 else 0
        value = value * 10 + digit
    return -value if negative else value


def is_palindrome(num: int) -> bool:
    """Tell whether the decimal text of ``num`` reads the same both ways."""
    text = str(num)
    return text == text[::-1]


def reverse_number(num: int) -> int:
    """Reverse the decimal digits of a positive integer (0 otherwise)."""
    reversed_value = 0
    while num > 0:
        num, digit = divmod(num, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def is_palindrome_numeric(num: int) -> bool:
    """Tell whether ``num`` equals its digit reversal, without string conversion."""
    return reverse_number(num) == num


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral; unknown characters count as 0."""
    values = [_ROMAN.get(ch, 0) for ch in s]
    total = 0
    for current, following in itertools.zip_longest(values, values[1:]):
        if following is not None and current < following:
            total -= current
        else:
            total += current
    return total


def factorial(x: int) -> int:
    """Return x! for x >= 1 and 1 for anything smaller."""
    if x <= 1:
        return 1
    return x * factorial(x - 1)


def factorial_tail(x: int, total: int = 1) -> int:
    """Accumulator form of the factorial: returns ``total * x!``."""
    if x < 0:
        raise ValueError("factorial_tail() requires a non-negative integer")
    while x:
        total *= x
        x -= 1
    return total


def squares() -> Iterator[int]:
    """Yield 1, 4, 9, ... without end."""
    for n in itertools.count(1):
        yield n * n


def sum_of_squares(count: int = 10) -> int:
    """Return the sum of the first ``count`` squares."""
    return sum(itertools.islice(squares(), count))