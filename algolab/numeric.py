"""Number-theoretic helpers, Fibonacci numbers modulo a prime, and LU solving."""

from __future__ import annotations

from typing import Sequence

MOD = 1_000_000_007


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def _mat_mul(a, b):
    return (
        ((a[0][0] * b[0][0] + a[0][1] * b[1][0]) % MOD, (a[0][0] * b[0][1] + a[0][1] * b[1][1]) % MOD),
        ((a[1][0] * b[0][0] + a[1][1] * b[1][0]) % MOD, (a[1][0] * b[0][1] + a[1][1] * b[1][1]) % MOD),
    )


def fibonacci_mod(n: int) -> int:
    """The ``n``-th Fibonacci number modulo ``MOD`` (F(0) = 0, F(1) = 1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    result = ((1, 0), (0, 1))
    base = ((1, 1), (1, 0))
    power = n - 1
    while power:
        if power & 1:
            result = _mat_mul(result, base)
        base = _mat_mul(base, base)
        power >>= 1
    return result[0][0]


def fibonacci_range_sum(a: int, b: int) -> int:
    """Sum of F(a) through F(b) inclusive, modulo ``MOD``."""
    return (fibonacci_mod(b + 2) - fibonacci_mod(a + 1)) % MOD


def lu_solve(matrix: Sequence[Sequence[float]], rhs: Sequence[float]) -> list[float]:
    """Solve ``matrix @ x = rhs`` by LU decomposition with partial pivoting."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    if len(rhs) != n:
        raise ValueError("right-hand side has the wrong length")
    a = [[float(v) for v in row] for row in matrix]
    perm = list(range(n))
    for k in range(n):
        pivot = max(range(k, n), key=lambda i: abs(a[i][k]))
        if a[pivot][k] == 0.0:
            raise ValueError("matrix is singular")
        perm[k], perm[pivot] = perm[pivot], perm[k]
        a[k], a[pivot] = a[pivot], a[k]
        pivot_row = a[k]
        for row in a[k + 1:]:
            row[k] /= pivot_row[k]
            factor = row[k]
            for j in range(k + 1, n):
                row[j] -= factor * pivot_row[j]

    y: list[float] = []
    for row, source in zip(a, perm):
        y.append(rhs[source] - sum(c * v for c, v in zip(row, y)))

    x = [0.0] * n
    for i in reversed(range(n)):
        row = a[i]
        x[i] = (y[i] - sum(c * v for c, v in zip(row[i + 1:], x[i + 1:]))) / row[i]
    return x