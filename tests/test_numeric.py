import pytest

from algolab.numeric import (
    MOD,
    extended_gcd,
    fibonacci_mod,
    fibonacci_range_sum,
    lu_solve,
)


def test_extended_gcd_source_example():
    assert extended_gcd(16, 10) == (2, 2, -3)


@pytest.mark.parametrize("a, b", [(240, 46), (17, 5), (99, 78), (7, 0), (0, 9), (1, 1)])
def test_extended_gcd_bezout_identity(a, b):
    g, x, y = extended_gcd(a, b)
    assert a * x + b * y == g
    if g:
        assert a % g == 0 and b % g == 0


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 1), (3, 2)])
def test_fibonacci_base_values(n, expected):
    assert fibonacci_mod(n) == expected


def test_fibonacci_recurrence():
    for n in range(2, 120):
        assert fibonacci_mod(n) == (fibonacci_mod(n - 1) + fibonacci_mod(n - 2)) % MOD


def test_fibonacci_large_index_in_range():
    value = fibonacci_mod(10**18)
    assert 0 <= value < MOD
    assert fibonacci_mod(10**18 + 1) == (value + fibonacci_mod(10**18 - 1)) % MOD


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci_mod(-1)


@pytest.mark.parametrize("a, b", [(0, 0), (1, 5), (3, 30), (10, 200)])
def test_range_sum_matches_termwise_sum(a, b):
    expected = sum(fibonacci_mod(i) for i in range(a, b + 1)) % MOD
    assert fibonacci_range_sum(a, b) == expected


def test_range_sum_single_term():
    assert fibonacci_range_sum(25, 25) == fibonacci_mod(25)


def _residual(matrix, x, rhs):
    return max(abs(sum(c * v for c, v in zip(row, x)) - b) for row, b in zip(matrix, rhs))


def test_lu_solve_residual_small():
    matrix = [[2, 1, -1], [-3, -1, 2], [-2, 1, 2]]
    rhs = [8, -11, -3]
    x = lu_solve(matrix, rhs)
    assert _residual(matrix, x, rhs) < 1e-9


def test_lu_solve_needs_pivoting():
    x = lu_solve([[0, 1], [1, 0]], [3, 4])
    assert x == pytest.approx([4, 3])


def test_lu_solve_identity_returns_rhs():
    identity = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert lu_solve(identity, [5, 6, 7, 8]) == pytest.approx([5, 6, 7, 8])


def test_lu_solve_singular_raises():
    with pytest.raises(ValueError):
        lu_solve([[1, 2], [2, 4]], [1, 2])


def test_lu_solve_shape_errors():
    with pytest.raises(ValueError):
        lu_solve([[1, 2, 3], [4, 5, 6]], [1, 2])
    with pytest.raises(ValueError):
        lu_solve([[1, 0], [0, 1]], [1])