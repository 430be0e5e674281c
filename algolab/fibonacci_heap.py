"""A Fibonacci min-heap with lazy merging and cascading cuts."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any

_by_value = attrgetter("value")


@dataclass(eq=False)
class _Node:
    value: Any
    parent: _Node | None = None
    children: list[_Node] = field(default_factory=list)
    mark: bool = False

    @property
    def degree(self) -> int:
        return len(self.children)


class FibonacciHeap:
    """Min-heap with amortised constant-time insert and decrease-key."""

    def __init__(self) -> None:
        self._roots: list[_Node] = []
        self._min: _Node | None = None
        self._size = 0

    def insert(self, value: Any) -> None:
        """Add a value to the root list."""
        node = _Node(value)
        self._roots.append(node)
        if self._min is None or value < self._min.value:
            self._min = node
        self._size += 1

    def minimum(self) -> Any:
        """Return the smallest value without removing it."""
        if self._min is None:
            raise IndexError("heap is empty")
        return self._min.value

    def extract_min(self) -> Any:
        """Remove and return the smallest value."""
        smallest = self._min
        if smallest is None:
            raise IndexError("heap is empty")
        self._roots = [root for root in self._roots if root is not smallest]
        for child in smallest.children:
            child.parent = None
        self._roots.extend(smallest.children)
        smallest.children = []
        self._size -= 1
        if self._roots:
            self._consolidate()
        else:
            self._min = None
        return smallest.value

    def decrease_key(self, value: Any, new_value: Any) -> None:
        """Lower one occurrence of ``value`` to ``new_value``."""
        if self._min is None:
            raise IndexError("heap is empty")
        node = self._find(value)
        if node is None:
            raise KeyError(value)
        if new_value > node.value:
            raise ValueError("new key is greater than current key")
        node.value = new_value
        parent = node.parent
        if parent is not None and new_value < parent.value:
            self._cut(node, parent)
            self._cascading_cut(parent)
        if new_value < self._min.value:
            self._min = node

    def delete_key(self, value: Any) -> None:
        """Remove one occurrence of ``value``."""
        if self._min is None:
            raise IndexError("heap is empty")
        node = self._find(value)
        if node is None:
            raise KeyError(value)
        parent = node.parent
        if parent is not None:
            self._cut(node, parent)
            self._cascading_cut(parent)
        self._min = node
        self.extract_min()

    def roots(self) -> list[Any]:
        """Root values, starting from the minimum and following the root list."""
        if self._min is None:
            return []
        start = next(i for i, root in enumerate(self._roots) if root is self._min)
        ordered = self._roots[start:] + self._roots[:start]
        return [root.value for root in ordered]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, roots={self.roots()!r})"

    def _consolidate(self) -> None:
        by_degree: dict[int, _Node] = {}
        for tree in list(self._roots):
            root = tree
            while root.degree in by_degree:
                other = by_degree.pop(root.degree)
                if other.value < root.value:
                    root, other = other, root
                other.parent = root
                other.mark = False
                root.children.append(other)
            by_degree[root.degree] = root
        self._roots = [by_degree[degree] for degree in sorted(by_degree)]
        self._min = min(self._roots, key=_by_value)

    def _cut(self, node: _Node, parent: _Node) -> None:
        parent.children.remove(node)
        node.parent = None
        node.mark = False
        self._roots.append(node)

    def _cascading_cut(self, node: _Node) -> None:
        while (parent := node.parent) is not None:
            if not node.mark:
                node.mark = True
                return
            self._cut(node, parent)
            node = parent

    def _find(self, value: Any) -> _Node | None:
        stack = list(self._roots)
        while stack:
            node = stack.pop()
            if node.value == value:
                return node
            if node.value < value:
                stack.extend(node.children)
        return None