"""Lowest common ancestors in a rooted tree by binary lifting."""

from __future__ import annotations

from typing import Iterable


class LCA:
    """Ancestor queries on a tree over vertices ``1..size``; 0 means no vertex."""

    def __init__(self, size: int, edges: Iterable[tuple[int, int]], root: int) -> None:
        if not 1 <= root <= size:
            raise ValueError(f"root {root} outside 1..{size}")
        self._size = size
        self._levels = size.bit_length()
        adjacency: list[list[int]] = [[] for _ in range(size + 1)]
        for u, v in edges:
            for vertex in (u, v):
                if not 1 <= vertex <= size:
                    raise ValueError(f"vertex {vertex} outside 1..{size}")
            adjacency[u].append(v)
            adjacency[v].append(u)
        self._up = [[0] * (self._levels + 1) for _ in range(size + 1)]
        self._tin = [0] * (size + 1)
        self._tout = [0] * (size + 1)
        self._walk(adjacency, root)

    def _attach(self, vertex: int, parent: int) -> None:
        row = self._up[vertex]
        row[0] = parent
        for i in range(1, self._levels + 1):
            row[i] = self._up[row[i - 1]][i - 1]

    def _walk(self, adjacency: list[list[int]], root: int) -> None:
        timer = 1
        self._tin[root] = timer
        self._attach(root, 0)
        stack = [(root, 0, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt == parent:
                    continue
                if self._tin[nxt]:
                    raise ValueError("edges do not form a tree")
                timer += 1
                self._tin[nxt] = timer
                self._attach(nxt, node)
                stack.append((nxt, node, iter(adjacency[nxt])))
                break
            else:
                stack.pop()
                timer += 1
                self._tout[node] = timer

    def is_ancestor(self, u: int, v: int) -> bool:
        """Whether ``u`` is a proper ancestor of ``v``."""
        if u == 0 or v == 0:
            return False
        return self._tin[u] < self._tin[v] and self._tout[u] > self._tout[v]

    def _check(self, vertex: int) -> None:
        if not 1 <= vertex <= self._size or not self._tin[vertex]:
            raise ValueError(f"vertex {vertex} is not in the tree")

    def lca(self, u: int, v: int) -> int:
        """The deepest vertex that is an ancestor of, or equal to, both."""
        self._check(u)
        self._check(v)
        if u == v or self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for i in range(self._levels, -1, -1):
            jump = self._up[u][i]
            if jump != 0 and not self.is_ancestor(jump, v):
                u = jump
        return self._up[u][0]