"""Suffix array with LCP array."""

from __future__ import annotations

from itertools import pairwise


class SuffixArray:
    """Suffix array of a text plus a sentinel empty suffix.

    ``sa[i]`` is the start of the i-th smallest suffix (``sa[0]`` is the empty
    suffix ``len(text)``); ``lcp[i]`` is the longest common prefix of the
    suffixes at ``sa[i - 1]`` and ``sa[i]``, with ``lcp[0] == 0``.
    """

    def __init__(self, text: str, limit: int = 256) -> None:
        codes = [ord(char) for char in text]
        if any(not 0 < code < limit for code in codes):
            raise ValueError(f"characters must have codes in 1..{limit - 1}")
        self.text = text
        s = codes + [0]
        n = len(s)
        x = s[:]
        y = [0] * n
        counts_size = max(n, limit)
        sa = list(range(n))
        lim = limit
        j = p = 0
        while p < n:
            p = j
            y = list(range(n - j, 2 * n - j))
            for suffix in sa:
                if suffix >= j:
                    y[p] = suffix - j
                    p += 1
            counts = [0] * counts_size
            for value in x:
                counts[value] += 1
            for i in range(1, lim):
                counts[i] += counts[i - 1]
            for suffix in reversed(y):
                counts[x[suffix]] -= 1
                sa[counts[x[suffix]]] = suffix
            x, y = y, x
            p = 1
            x[sa[0]] = 0
            for a, b in pairwise(sa):
                if y[a] == y[b] and y[a + j] == y[b + j]:
                    x[b] = p - 1
                else:
                    x[b] = p
                    p += 1
            j = max(1, j * 2)
            lim = p

        lcp = [0] * n
        k = 0
        for i in range(n - 1):
            if k:
                k -= 1
            other = sa[x[i] - 1]
            while s[i + k] == s[other + k]:
                k += 1
            lcp[x[i]] = k
        self.sa = sa
        self.lcp = lcp

    def smaller_bounds(self) -> tuple[list[int], list[int]]:
        """Nearest smaller LCP values around each position 1..n.

        Returns ``(next_smaller, prev_smaller)``: ``next_smaller[i]`` is the
        first ``j > i`` with ``lcp[j] <= lcp[i]`` (``n + 1`` if none) and
        ``prev_smaller[i]`` is the last ``1 <= j < i`` with ``lcp[j] < lcp[i]``
        (``0`` if none).
        """
        n = len(self.sa) - 1
        lcp = self.lcp
        next_smaller = [n + 1] * (n + 1)
        prev_smaller = [0] * (n + 1)
        stack: list[int] = []
        for i in range(1, n + 1):
            while stack and lcp[stack[-1]] >= lcp[i]:
                next_smaller[stack.pop()] = i
            stack.append(i)
        stack.clear()
        for i in range(n, 0, -1):
            while stack and lcp[stack[-1]] > lcp[i]:
                prev_smaller[stack.pop()] = i
            stack.append(i)
        return next_smaller, prev_smaller