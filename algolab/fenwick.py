"""Fenwick tree pair supporting range additions and range sums."""

from __future__ import annotations


class RangeFenwickTree:
    """Array of ``size`` integers, indexed from 1, all starting at zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._slope = [0] * (size + 1)
        self._offset = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._size:
            raise IndexError(f"range [{left}, {right}] outside 1..{self._size}")

    def _update(self, tree: list[int], index: int, value: int) -> None:
        while index <= self._size:
            tree[index] += value
            index += index & -index

    def _query(self, tree: list[int], index: int) -> int:
        total = 0
        while index > 0:
            total += tree[index]
            index -= index & -index
        return total

    def _prefix(self, index: int) -> int:
        return self._query(self._slope, index) * index - self._query(self._offset, index)

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element from ``left`` to ``right`` inclusive."""
        self._check(left, right)
        self._update(self._slope, left, value)
        self._update(self._slope, right + 1, -value)
        self._update(self._offset, left, value * (left - 1))
        self._update(self._offset, right + 1, -value * right)

    def sum(self, left: int, right: int) -> int:
        """Sum of the elements from ``left`` to ``right`` inclusive."""
        self._check(left, right)
        return self._prefix(right) - self._prefix(left - 1)