import pytest

from teamnote.manacher import manacher


def test_manacher_example():
    assert manacher("abcbab") == [0, 0, 0, 2, 0, 1, 0]


@pytest.mark.parametrize("s", ["abcbab", "aaaa", "abacabadabacaba", "xyz", "a"])
def test_radii_are_maximal_palindromes(s):
    p = manacher(s)
    assert len(p) == len(s) + 1
    for i in range(1, len(s) + 1):
        r = p[i]
        piece = s[i - 1 - r:i + r]
        assert len(piece) == 2 * r + 1
        assert piece == piece[::-1]
        left, right = i - 2 - r, i + r
        if left >= 0 and right < len(s):
            assert s[left] != s[right]


def _interleave(s: str) -> str:
    return "!" + "".join(ch + "!" for ch in s)


def test_interleaved_gives_longest_palindrome():
    s = "abcbab"
    p = manacher(_interleave(s))
    assert max(p[2:2 * len(s) + 1]) == 5


def test_interleaved_even_palindrome():
    s = "abba"
    p = manacher(_interleave(s))
    assert max(p) == len(s)


def test_empty_string():
    assert manacher("") == [0]