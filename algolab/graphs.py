"""Shortest paths, strong components, topological orders and reachability.

Vertices are numbered from 1 to ``n``.  Weighted edges are ``(u, v, w)``
triples and unweighted edges are ``(u, v)`` pairs, all directed.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable


def _check_vertex(n: int, vertex: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")


def _weighted_adjacency(n: int, edges: Iterable[tuple[int, int, float]]) -> list[list[tuple[int, float]]]:
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        adjacency[u].append((v, w))
    return adjacency


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        adjacency[u].append(v)
    return adjacency


def _shortest_from(adjacency: list[list[tuple[int, float]]], source: int) -> list[float]:
    dist = [math.inf] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adjacency[u]:
            candidate = d + w
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def dijkstra(n: int, edges: Iterable[tuple[int, int, float]], source: int) -> dict[int, float]:
    """Distances from ``source`` to every vertex; ``math.inf`` if unreachable."""
    edges = list(edges)
    _check_vertex(n, source)
    if any(w < 0 for _, _, w in edges):
        raise ValueError("edge weights must be non-negative")
    dist = _shortest_from(_weighted_adjacency(n, edges), source)
    return {v: dist[v] for v in range(1, n + 1)}


def bellman_ford(n: int, edges: Iterable[tuple[int, int, float]]) -> dict[int, float]:
    """Distances from a virtual source joined to every vertex by a zero edge.

    These are the potentials used to reweight a graph for Johnson's
    algorithm.  Raises ValueError if the graph holds a negative cycle.
    """
    edges = list(edges)
    for u, v, _ in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
    h = [0] * (n + 1)
    for _ in range(n):
        changed = False
        for u, v, w in edges:
            if h[u] + w < h[v]:
                h[v] = h[u] + w
                changed = True
        if not changed:
            break
    else:
        if any(h[u] + w < h[v] for u, v, w in edges):
            raise ValueError("graph contains a negative cycle")
    return {v: h[v] for v in range(1, n + 1)}


def johnson(n: int, edges: Iterable[tuple[int, int, float]]) -> list[list[float]]:
    """All-pairs shortest distances; row ``i - 1`` holds distances from ``i``."""
    edges = list(edges)
    h = bellman_ford(n, edges)
    reweighted = _weighted_adjacency(n, ((u, v, w + h[u] - h[v]) for u, v, w in edges))
    matrix = []
    for source in range(1, n + 1):
        dist = _shortest_from(reweighted, source)
        matrix.append(
            [
                dist[v] - h[source] + h[v] if dist[v] != math.inf else math.inf
                for v in range(1, n + 1)
            ]
        )
    return matrix


def _postorder(adjacency: list[list[int]], starts: Iterable[int]) -> list[int]:
    visited = [False] * len(adjacency)
    order: list[int] = []
    for start in starts:
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def strongly_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Strongly connected components, found by Kosaraju's two passes."""
    adjacency = _adjacency(n, edges)
    reverse: list[list[int]] = [[] for _ in range(n + 1)]
    for u in range(1, n + 1):
        for v in adjacency[u]:
            reverse[v].append(u)
    finished = _postorder(adjacency, range(1, n + 1))
    seen = [False] * (n + 1)
    components = []
    for vertex in reversed(finished):
        if seen[vertex]:
            continue
        seen[vertex] = True
        component = []
        stack = [vertex]
        while stack:
            u = stack.pop()
            component.append(u)
            for w in reverse[u]:
                if not seen[w]:
                    seen[w] = True
                    stack.append(w)
        components.append(component)
    return components


def scc_size_balance(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Total size of odd-sized components minus that of even-sized ones."""
    return sum(
        len(c) if len(c) % 2 else -len(c) for c in strongly_connected_components(n, edges)
    )


def kahn_topological_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Topological order by repeatedly removing vertices with no incoming edge.

    Vertices on a cycle, or reachable only through one, are left out.
    """
    adjacency = _adjacency(n, edges)
    indegree = [0] * (n + 1)
    for u in range(1, n + 1):
        for v in adjacency[u]:
            indegree[v] += 1
    queue = deque(v for v in range(1, n + 1) if indegree[v] == 0)
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order


def dfs_topological_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Topological order as the reverse of depth-first finishing times."""
    return list(reversed(_postorder(_adjacency(n, edges), range(1, n + 1))))


def transitive_closure(n: int, edges: Iterable[tuple[int, int]]) -> list[list[bool]]:
    """Reflexive reachability matrix; entry ``[u - 1][v - 1]`` says u reaches v."""
    reach = [[i == j for j in range(n)] for i in range(n)]
    for u, v in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        reach[u - 1][v - 1] = True
    for k in range(n):
        through = reach[k]
        for i, row in enumerate(reach):
            if row[k]:
                reach[i] = [a or b for a, b in zip(row, through)]
    return reach