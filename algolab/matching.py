"""Exact string matching: Knuth-Morris-Pratt, finite automaton, Rabin-Karp."""

from __future__ import annotations

_BASE = 256
_MOD = 1_000_000_007


def prefix_function(pattern: str) -> list[int]:
    """For each prefix, the length of its longest proper border."""
    border = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        while j and pattern[i] != pattern[j]:
            j = border[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
        border[i] = j
    return border


def kmp_contains(text: str, pattern: str) -> bool:
    """Whether ``pattern`` occurs in ``text``."""
    if not pattern:
        return True
    border = prefix_function(pattern)
    j = 0
    for ch in text:
        while j and ch != pattern[j]:
            j = border[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            return True
    return False


def automaton_search(text: str, pattern: str) -> list[int]:
    """Start indices of every occurrence, overlapping ones included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    m = len(pattern)
    alphabet = set(pattern)
    table = [dict.fromkeys(alphabet, 0) for _ in range(m + 1)]
    table[0][pattern[0]] = 1
    fallback = 0
    for state in range(1, m + 1):
        table[state].update(table[fallback])
        if state < m:
            table[state][pattern[state]] = state + 1
            fallback = table[fallback][pattern[state]]
    matches = []
    state = 0
    for i, ch in enumerate(text):
        state = table[state].get(ch, 0)
        if state == m:
            matches.append(i - m + 1)
    return matches


def rabin_karp_find(text: str, pattern: str) -> int | None:
    """Index of the first occurrence of ``pattern``, or None."""
    m, n = len(pattern), len(text)
    if m == 0:
        return 0
    if m > n:
        return None
    high = pow(_BASE, m - 1, _MOD)
    target = window = 0
    for p_ch, t_ch in zip(pattern, text):
        target = (target * _BASE + ord(p_ch)) % _MOD
        window = (window * _BASE + ord(t_ch)) % _MOD
    for start in range(n - m + 1):
        if window == target and text[start:start + m] == pattern:
            return start
        if start + m < n:
            window = ((window - ord(text[start]) * high) * _BASE + ord(text[start + m])) % _MOD
    return None