import pytest

from teamnote.kmp import failure_function, find_occurrences


def test_failure_function_example():
    assert failure_function("ababca") == [-1, 0, 0, 1, 2, 0, 1]


def test_find_occurrences_example():
    assert find_occurrences("aabcbabaaa", "aa") == [2, 9, 10]


def test_failure_function_of_empty_pattern():
    assert failure_function("") == [-1]


@pytest.mark.parametrize("pattern", ["ababca", "aaaa", "abacabadabacaba", "xyz"])
def test_failure_function_gives_proper_borders(pattern):
    fail = failure_function(pattern)
    assert len(fail) == len(pattern) + 1
    for i in range(1, len(pattern) + 1):
        k = fail[i]
        assert 0 <= k < i
        prefix = pattern[:i]
        assert prefix[:k] == prefix[i - k:]
        # No longer proper border exists.
        for longer in range(k + 1, i):
            assert prefix[:longer] != prefix[i - longer:]


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("aabcbabaaa", "aa"),
        ("abababab", "aba"),
        ("mississippi", "issi"),
        ("hello", "world"),
    ],
)
def test_every_reported_end_is_a_match(text, pattern):
    ends = find_occurrences(text, pattern)
    assert ends == sorted(ends)
    for end in ends:
        assert text[end - len(pattern):end] == pattern
    unreported = set(range(len(pattern), len(text) + 1)) - set(ends)
    for end in unreported:
        assert text[end - len(pattern):end] != pattern


def test_start_positions_from_ends():
    text, pattern = "aabcbabaaa", "aa"
    starts = [end - len(pattern) + 1 for end in find_occurrences(text, pattern)]
    assert starts == [1, 8, 9]


def test_pattern_longer_than_text():
    assert find_occurrences("ab", "abc") == []


def test_empty_pattern_matches_after_every_character():
    text = "abcd"
    assert find_occurrences(text, "") == list(range(1, len(text) + 1))