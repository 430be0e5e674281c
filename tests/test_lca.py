import itertools

import pytest

from algolab.lca import LCA

EDGES = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (6, 7)]
CHILDREN = {}
for _parent, _child in EDGES:
    CHILDREN.setdefault(_parent, []).append(_child)


@pytest.fixture
def tree():
    return LCA(7, EDGES, 1)


def test_siblings_meet_at_parent(tree):
    assert tree.lca(4, 5) == 2


def test_lca_is_symmetric(tree):
    for u, v in itertools.product(range(1, 8), repeat=2):
        assert tree.lca(u, v) == tree.lca(v, u)


def test_lca_of_vertex_with_itself(tree):
    assert all(tree.lca(v, v) == v for v in range(1, 8))


def test_parent_child_pairs(tree):
    for parent, child in EDGES:
        assert tree.lca(parent, child) == parent
        assert tree.is_ancestor(parent, child)
        assert not tree.is_ancestor(child, parent)


def test_root_is_ancestor_of_all(tree):
    assert all(tree.lca(1, v) == 1 for v in range(1, 8))


def test_lca_is_deepest_common_ancestor(tree):
    def covers(a, b):
        return a == b or tree.is_ancestor(a, b)

    for u, v in itertools.product(range(1, 8), repeat=2):
        w = tree.lca(u, v)
        assert covers(w, u) and covers(w, v)
        assert not any(covers(c, u) and covers(c, v) for c in CHILDREN.get(w, []))


def test_is_ancestor_is_strict_and_rejects_zero(tree):
    assert not tree.is_ancestor(3, 3)
    assert not tree.is_ancestor(0, 3)
    assert not tree.is_ancestor(3, 0)


def test_vertex_outside_tree_raises():
    forest = LCA(4, [(1, 2)], 1)
    with pytest.raises(ValueError):
        forest.lca(3, 1)


def test_cycle_is_rejected():
    with pytest.raises(ValueError):
        LCA(3, [(1, 2), (2, 3), (3, 1)], 1)


def test_bad_root_is_rejected():
    with pytest.raises(ValueError):
        LCA(3, [(1, 2)], 5)