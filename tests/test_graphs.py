import math

import pytest

from algolab.graphs import (
    bellman_ford,
    dfs_topological_order,
    dijkstra,
    johnson,
    kahn_topological_order,
    scc_size_balance,
    strongly_connected_components,
    transitive_closure,
)

JOHNSON_EDGES = [
    (1, 3, 2),
    (3, 2, 4),
    (1, 3, 8),
    (4, 1, 2),
    (1, 5, -4),
    (5, 4, 6),
    (4, 3, -5),
    (2, 5, 7),
    (2, 4, 1),
]

POSITIVE_EDGES = [(1, 2, 4), (1, 3, 1), (3, 2, 2), (2, 4, 5), (3, 4, 8), (4, 5, 3), (5, 1, 7)]

DAG_EDGES = [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (6, 3)]


def test_johnson_source_example_uses_negative_path():
    assert johnson(5, JOHNSON_EDGES)[0][2] == -3


def test_johnson_diagonal_is_zero():
    matrix = johnson(5, JOHNSON_EDGES)
    assert all(matrix[i][i] == 0 for i in range(5))


def test_johnson_triangle_inequality_and_edges():
    d = johnson(5, JOHNSON_EDGES)
    for i in range(5):
        for j in range(5):
            for k in range(5):
                assert d[i][k] <= d[i][j] + d[j][k]
    for u, v, w in JOHNSON_EDGES:
        assert d[u - 1][v - 1] <= w


def test_johnson_matches_dijkstra_for_positive_weights():
    matrix = johnson(6, POSITIVE_EDGES)
    for source in range(1, 7):
        expected = dijkstra(6, POSITIVE_EDGES, source)
        assert matrix[source - 1] == [expected[v] for v in range(1, 7)]


def test_johnson_unreachable_is_infinite():
    matrix = johnson(3, [(1, 2, -1)])
    assert matrix[1][0] == math.inf
    assert matrix[0][1] == -1


def test_johnson_rejects_negative_cycle():
    with pytest.raises(ValueError):
        johnson(3, [(1, 2, 1), (2, 3, -2), (3, 1, -1)])


def test_dijkstra_invariants():
    dist = dijkstra(6, POSITIVE_EDGES, 1)
    assert dist[1] == 0
    assert dist[6] == math.inf
    for u, v, w in POSITIVE_EDGES:
        if dist[u] != math.inf:
            assert dist[v] <= dist[u] + w
    for v, d in dist.items():
        if v != 1 and d != math.inf:
            assert any(dist[u] + w == d for u, x, w in POSITIVE_EDGES if x == v)


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 2, -1)], 1)


def test_dijkstra_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 3, 1)], 1)


def test_bellman_ford_potentials_are_feasible():
    h = bellman_ford(5, JOHNSON_EDGES)
    assert all(value <= 0 for value in h.values())
    for u, v, w in JOHNSON_EDGES:
        assert h[v] <= h[u] + w


def test_bellman_ford_detects_negative_cycle():
    with pytest.raises(ValueError):
        bellman_ford(2, [(1, 2, -1), (2, 1, -1)])


SCC_EDGES = [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 4)]


def test_strongly_connected_components():
    components = strongly_connected_components(6, SCC_EDGES)
    assert {frozenset(c) for c in components} == {
        frozenset({1, 2, 3}),
        frozenset({4, 5}),
        frozenset({6}),
    }


def test_components_partition_vertices():
    components = strongly_connected_components(6, SCC_EDGES)
    flat = sorted(v for c in components for v in c)
    assert flat == list(range(1, 7))


def test_scc_size_balance():
    assert scc_size_balance(6, SCC_EDGES) == 2


@pytest.mark.parametrize("order_of", [kahn_topological_order, dfs_topological_order])
def test_topological_orders_respect_edges(order_of):
    order = order_of(6, DAG_EDGES)
    assert sorted(order) == list(range(1, 7))
    position = {v: i for i, v in enumerate(order)}
    for u, v in DAG_EDGES:
        assert position[u] < position[v]


def test_kahn_leaves_out_cycle():
    order = kahn_topological_order(3, [(1, 2), (2, 3), (3, 2)])
    assert 1 in order
    assert set(order).isdisjoint({2, 3})


def test_transitive_closure_matches_reachability():
    weighted = [(u, v, 1) for u, v in DAG_EDGES]
    closure = transitive_closure(6, DAG_EDGES)
    for u in range(1, 7):
        dist = dijkstra(6, weighted, u)
        for v in range(1, 7):
            assert closure[u - 1][v - 1] == (dist[v] != math.inf)


def test_transitive_closure_is_reflexive():
    closure = transitive_closure(4, [])
    assert all(closure[i][i] for i in range(4))
    assert sum(map(sum, closure)) == 4