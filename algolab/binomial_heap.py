"""A mergeable min-heap built from a forest of binomial trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, Iterable

_by_value = attrgetter("value")


class HeapError(Exception):
    """Raised when a heap operation cannot be carried out."""


@dataclass(eq=False)
class _Node:
    value: Any
    parent: _Node | None = None
    children: list[_Node] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.children)


def _link(first: _Node, second: _Node) -> _Node:
    """Join two trees of equal order; the smaller root keeps its place."""
    if first.value < second.value:
        root, child = first, second
    else:
        root, child = second, first
    child.parent = root
    root.children.append(child)
    return root


def _union(first: Iterable[_Node], second: Iterable[_Node]) -> list[_Node]:
    """Merge two root lists so that at most one tree of each order remains."""
    slots: dict[int, _Node] = {}
    for tree in sorted([*first, *second], key=attrgetter("degree")):
        while tree.degree in slots:
            tree = _link(slots.pop(tree.degree), tree)
        slots[tree.degree] = tree
    return [slots[degree] for degree in sorted(slots)]


class BinomialHeap:
    """Min-heap supporting insert, extract-min, decrease-key and delete."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._roots: list[_Node] = []
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add a value to the heap."""
        self._roots = _union(self._roots, [_Node(value)])
        self._size += 1

    def get_min(self) -> Any:
        """Return the smallest value without removing it."""
        return self._min_root().value

    def extract_min(self) -> Any:
        """Remove and return the smallest value."""
        root = self._min_root()
        self._remove_root(root)
        return root.value

    def decrease_key(self, value: Any, new_value: Any) -> None:
        """Replace one occurrence of ``value`` with the smaller ``new_value``."""
        if not self._roots:
            raise HeapError("Heap is empty")
        if not new_value < value:
            raise HeapError("New key must be less than current key")
        node = self._find(value)
        if node is None:
            raise HeapError(f"Key not found: {value!r}")
        node.value = new_value
        while node.parent is not None and node.value < node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent

    def delete_key(self, value: Any) -> None:
        """Remove one occurrence of ``value`` from the heap."""
        if not self._roots:
            raise HeapError("Heap is empty")
        node = self._find(value)
        if node is None:
            raise HeapError(f"Key not found: {value!r}")
        while node.parent is not None:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        self._remove_root(node)

    def roots(self) -> list[Any]:
        """Values at the roots of the trees, in increasing tree order."""
        return [root.value for root in self._roots]

    def is_empty(self) -> bool:
        return not self._roots

    def clear(self) -> None:
        self._roots = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, roots={self.roots()!r})"

    def _min_root(self) -> _Node:
        if not self._roots:
            raise HeapError("Empty heap")
        return min(self._roots, key=_by_value)

    def _remove_root(self, root: _Node) -> None:
        remaining = [tree for tree in self._roots if tree is not root]
        for child in root.children:
            child.parent = None
        self._roots = _union(remaining, root.children)
        root.children = []
        self._size -= 1

    def _find(self, value: Any) -> _Node | None:
        stack = list(self._roots)
        while stack:
            node = stack.pop()
            if node.value == value:
                return node
            if node.value < value:
                stack.extend(node.children)
        return None