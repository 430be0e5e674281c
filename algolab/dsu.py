"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations


class DisjointSet:
    """Partition of the elements ``0..size`` into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.max_element = size
        self._parent = list(range(size + 1))
        self._rank = [0] * (size + 1)
        self._size = [1] * (size + 1)

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        a, b = self.find(x), self.find(y)
        if a == b:
            return False
        if self._rank[a] > self._rank[b]:
            self._parent[b] = a
            self._size[a] += self._size[b]
            return True
        self._parent[a] = b
        self._size[b] += self._size[a]
        if self._rank[a] == self._rank[b]:
            self._rank[b] += 1
        return True

    def size_of(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return self._size[self.find(x)]