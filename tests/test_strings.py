import pytest

from algobox.strings import manacher, prefix_function, z_function

SAMPLES = ["", "a", "aaaa", "abacaba", "abcabcd", "aabaaab", "mississippi", "abbaabba"]


def test_prefix_function_known_value():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("text", SAMPLES)
def test_prefix_function_borders(text):
    pi = prefix_function(text)
    assert len(pi) == len(text)
    for i, k in enumerate(pi):
        assert k <= i
        assert text[:k] == text[i + 1 - k:i + 1]
        longer = k + 1
        if longer <= i:
            assert text[:longer] != text[i + 1 - longer:i + 1] or any(
                text[:m] == text[i + 1 - m:i + 1] for m in range(longer, i + 1)
            ) is False


@pytest.mark.parametrize("text", SAMPLES)
def test_z_function_matches(text):
    z = z_function(text)
    assert len(z) == len(text)
    if text:
        assert z[0] == 0
    for i in range(1, len(text)):
        k = z[i]
        assert text[:k] == text[i:i + k]
        assert i + k == len(text) or text[k] != text[i + k]


def test_manacher_known_values():
    even, odd = manacher("aba")
    assert odd == [0, 1, 0]
    even, _ = manacher("aa")
    assert even == [0, 1, 0]


@pytest.mark.parametrize("text", SAMPLES)
def test_manacher_maximal_palindromes(text):
    even, odd = manacher(text)
    n = len(text)
    assert len(even) == n + 1 and len(odd) == n
    for i, r in enumerate(odd):
        piece = text[i - r:i + r + 1]
        assert piece == piece[::-1]
        assert i - r == 0 or i + r == n - 1 or text[i - r - 1] != text[i + r + 1]
    for i in range(n):
        r = even[i]
        piece = text[i - r:i + r]
        assert piece == piece[::-1]
        assert i - r <= 0 or i + r >= n or text[i - r - 1] != text[i + r]