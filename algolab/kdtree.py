"""A k-dimensional binary search tree over integer points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(eq=False)
class _Node:
    point: tuple
    left: _Node | None = None
    right: _Node | None = None


class KDTree:
    """Points split by one coordinate per level, cycling through the axes."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError("dimension must be at least 1")
        self.k = k
        self._root: _Node | None = None
        self._size = 0

    def _check(self, point: Sequence) -> tuple:
        point = tuple(point)
        if len(point) != self.k:
            raise ValueError(f"expected a point of {self.k} dimensions, got {len(point)}")
        return point

    def insert(self, point: Sequence) -> None:
        """Insert a point, even if an equal one is already stored."""
        point = self._check(point)
        node = _Node(point)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current, depth = self._root, 0
        while True:
            axis = depth % self.k
            if point[axis] < current.point[axis]:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            depth += 1

    def add(self, point: Sequence) -> bool:
        """Insert a point unless already present; return whether it was added."""
        if point in self:
            return False
        self.insert(point)
        return True

    def __contains__(self, point: object) -> bool:
        target = self._check(point)
        current, depth = self._root, 0
        while current is not None:
            if current.point == target:
                return True
            axis = depth % self.k
            current = current.left if target[axis] < current.point[axis] else current.right
            depth += 1
        return False

    def __len__(self) -> int:
        return self._size