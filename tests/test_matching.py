import pytest

from algolab.matching import automaton_search, kmp_contains, prefix_function, rabin_karp_find

CASES = [
    ("abracadabra", "abra"),
    ("abracadabra", "cad"),
    ("abracadabra", "dab"),
    ("abracadabra", "xyz"),
    ("aaaaab", "aab"),
    ("mississippi", "issip"),
    ("short", "much longer"),
    ("ababababc", "ababc"),
]


def test_prefix_function_of_repeated_letter():
    assert prefix_function("aaaa") == [0, 1, 2, 3]


@pytest.mark.parametrize("pattern", ["abcabd", "aabaaab", "ababcabab", "x", ""])
def test_prefix_function_gives_borders(pattern):
    border = prefix_function(pattern)
    assert len(border) == len(pattern)
    for i, length in enumerate(border):
        assert length <= i
        assert pattern[:length] == pattern[i + 1 - length:i + 1]


@pytest.mark.parametrize("text, pattern", CASES)
def test_kmp_agrees_with_in(text, pattern):
    assert kmp_contains(text, pattern) == (pattern in text)


def test_kmp_empty_pattern_matches():
    assert kmp_contains("anything", "")


def test_automaton_finds_overlapping_matches():
    assert automaton_search("aaaa", "aa") == [0, 1, 2]


@pytest.mark.parametrize("text, pattern", CASES)
def test_automaton_agrees_with_startswith(text, pattern):
    expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert automaton_search(text, pattern) == expected


def test_automaton_rejects_empty_pattern():
    with pytest.raises(ValueError):
        automaton_search("text", "")


@pytest.mark.parametrize("text, pattern", CASES)
def test_rabin_karp_agrees_with_find(text, pattern):
    index = text.find(pattern)
    assert rabin_karp_find(text, pattern) == (index if index >= 0 else None)


def test_rabin_karp_empty_pattern():
    assert rabin_karp_find("abc", "") == 0