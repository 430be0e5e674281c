"""Small request/response computations: series, grading, lookups and CRC-3."""

from __future__ import annotations

import math
import string
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

_PATTERN_LIMIT = 50
_FACTOR_LIMIT = 1000
_STUDENT_ROLLS = range(1, 12)
_CRC_GENERATOR = 0b1011
_CRC_BITS = 3
_DATA_BITS = 4
_PASSWORD = "password"


def fibonacci_term(n: int) -> int:
    """The ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_series(count: int) -> list[int]:
    """The first ``count`` values of the series 0, 1, 2, 3, 5, 8, ..."""
    if count < 0:
        raise ValueError("count must be non-negative")
    series = []
    previous = current = 0
    for index in range(count):
        value = previous + current
        previous, current = current, value
        if index == 0:
            current = 1
        series.append(value)
    return series


def factorial(n: int) -> int:
    """``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return math.factorial(n)


def grade(marks: int) -> str:
    """Letter grade for a mark out of 100."""
    if 85 <= marks <= 100:
        return "Grade A"
    if 75 <= marks <= 84:
        return "Grade B"
    if 60 <= marks <= 74:
        return "Grade C"
    if 50 <= marks <= 59:
        return "Grade D"
    return "fail"


def arithmetic(a: int, b: int) -> tuple[int, int, int, int]:
    """Sum, difference, product and quotient truncated toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return a + b, a - b, a * b, quotient


def star_pattern(n: int) -> list[str]:
    """Inverted triangle of stars, ``n`` rows each ``2 * n`` characters wide."""
    if not 0 <= n <= _PATTERN_LIMIT:
        raise ValueError(f"n must be between 0 and {_PATTERN_LIMIT}")
    rows = []
    for i in range(n):
        stars = "".join("*" if j % 2 == 0 else " " for j in range(2 * (n - i) - 1))
        rows.append((" " * i + stars).ljust(2 * n))
    return rows


def series_term(n: int) -> int:
    """Term ``n`` of the series 3, 3, 7, 15, 27, ... (3 + 2n(n - 1))."""
    n += 1
    return 3 + 2 * (n - 1) * (n - 2)


def prime_exponents(n: int) -> dict[int, int]:
    """Prime factorisation of ``n`` as a mapping of prime to exponent."""
    if n > _FACTOR_LIMIT:
        raise ValueError(f"n must be at most {_FACTOR_LIMIT}")
    remaining = n
    exponents = {}
    for factor in range(2, n + 1):
        count = 0
        while remaining % factor == 0:
            count += 1
            remaining //= factor
        if count:
            exponents[factor] = count
    return exponents


def char_with_count(n: int, word: str) -> str | None:
    """First letter occurring exactly ``n`` times, else the most frequent one.

    Letters are scanned from 'a' to 'z'; the most frequent letter seen before
    a letter with exactly ``n`` occurrences is returned if none has it.
    """
    if any(ch not in string.ascii_lowercase for ch in word):
        raise ValueError("word must contain only lowercase ASCII letters")
    counts = Counter(word)
    result = None
    best = 0
    for letter in string.ascii_lowercase:
        count = counts[letter]
        if count > best:
            best = count
            result = letter
        if count == n:
            result = letter
            break
    return result


def leave_balance(total: int, taken: int, extra: int) -> int:
    """Leave days still available, never below zero."""
    if total <= taken + extra:
        return 0
    return total - taken - extra


def lookup_meaning(entries: Iterable[tuple[str, str]], word: str) -> str:
    """Meaning of the first entry for ``word``; KeyError if there is none."""
    for entry_word, meaning in entries:
        if entry_word == word:
            return meaning
    raise KeyError(word)


@dataclass(frozen=True)
class StudentRecord:
    """A student's roll number and three marks."""

    roll: int
    m1: int
    m2: int
    m3: int

    @property
    def average(self) -> float:
        return (self.m1 + self.m2 + self.m3) / 3.0


def student_record(roll: int) -> StudentRecord:
    """The stored record for roll numbers 1 to 11."""
    if roll not in _STUDENT_ROLLS:
        raise ValueError(f"roll must be between {_STUDENT_ROLLS.start} and {_STUDENT_ROLLS.stop - 1}")
    square = roll * roll
    return StudentRecord(roll, (square + 5) % 10, (square + 6) % 10, (square + 4) % 10)


def _crc_remainder(value: int) -> int:
    width = _DATA_BITS + _CRC_BITS
    for bit in range(width - 1, _CRC_BITS - 1, -1):
        if value >> bit & 1:
            value ^= _CRC_GENERATOR << (bit - _CRC_BITS)
    return value


def crc_encode(data: int) -> int:
    """Append a 3-bit CRC (generator x^3 + x + 1) to 4 bits of data."""
    if not 0 <= data < 1 << _DATA_BITS:
        raise ValueError(f"data must fit in {_DATA_BITS} bits")
    shifted = data << _CRC_BITS
    return shifted | _crc_remainder(shifted)


def crc_check(codeword: int) -> bool:
    """Whether a 7-bit codeword leaves no remainder."""
    if not 0 <= codeword < 1 << (_DATA_BITS + _CRC_BITS):
        raise ValueError(f"codeword must fit in {_DATA_BITS + _CRC_BITS} bits")
    return _crc_remainder(codeword) == 0


def check_password(password: str) -> bool:
    """Whether ``password`` is the accepted one."""
    return password == _PASSWORD


@dataclass
class _Item:
    name: str
    price: int
    quantity: int


class Inventory:
    """Priced stock from which orders are filled while quantity lasts."""

    def __init__(self, items: Iterable[tuple[str, int, int]]) -> None:
        self._items = [_Item(name, price, quantity) for name, price, quantity in items]

    def order(self, name: str, quantity: int) -> int:
        """Take ``quantity`` of ``name`` from stock and return its cost.

        Returns 0 when the item is unknown or there is not enough left.
        """
        total = 0
        for item in self._items:
            if item.name == name and item.quantity >= quantity:
                item.quantity -= quantity
                total = item.price * quantity
        return total