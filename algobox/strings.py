"""Classic linear-time string algorithms."""

from __future__ import annotations


def prefix_function(text: str) -> list[int]:
    """Knuth-Morris-Pratt prefix function."""
    pi = [0] * len(text)
    matched = 0
    for i in range(1, len(text)):
        while matched and text[i] != text[matched]:
            matched = pi[matched - 1]
        if text[i] == text[matched]:
            matched += 1
        pi[i] = matched
    return pi


def z_function(text: str) -> list[int]:
    """Z-array: z[i] is the longest common prefix of text and text[i:]; z[0] is 0."""
    n = len(text)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and text[z[i]] == text[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def manacher(text: str) -> tuple[list[int], list[int]]:
    """Palindrome radii.

    Returns ``(even, odd)``: ``text[i - even[i]:i + even[i]]`` and
    ``text[i - odd[i]:i + odd[i] + 1]`` are the longest palindromes centred
    between ``i - 1`` and ``i``, and on ``i``.
    """
    n = len(text)
    radii = ([0] * (n + 1), [0] * n)
    for odd, p in enumerate(radii):
        shift = 0 if odd else 1
        left = right = 0
        for i in range(n):
            t = right - i + shift
            if i < right:
                p[i] = min(t, p[left + t])
            lo, hi = i - p[i], i + p[i] - shift
            while lo >= 1 and hi + 1 < n and text[lo - 1] == text[hi + 1]:
                p[i] += 1
                lo -= 1
                hi += 1
            if hi > right:
                left, right = lo, hi
    return radii