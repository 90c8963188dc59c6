"""Segment tree holding double polynomial hashes with point updates."""

from __future__ import annotations

from dataclasses import dataclass

from algobox.hashing import MOD1, MOD2, random_base


@dataclass(frozen=True, eq=False)
class HashNode:
    """Length and hash pair of a string segment."""

    length: int = 0
    h1: int = 0
    h2: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashNode):
            return NotImplemented
        return (self.h1, self.h2) == (other.h1, other.h2)

    def __hash__(self) -> int:
        return hash((self.h1, self.h2))

    def __str__(self) -> str:
        return f"{self.length} {self.h1} {self.h2}"


_EMPTY = HashNode()


class HashSegmentTree:
    """Hashes of substrings of a mutable string (zero-based positions)."""

    def __init__(self, text: str, base: int | None = None) -> None:
        if not text:
            raise ValueError("text must be non-empty")
        self.base = random_base() if base is None else base
        self._size = len(text)
        self._pw1 = [1]
        self._pw2 = [1]
        for _ in range(self._size):
            self._pw1.append(self._pw1[-1] * self.base % MOD1)
            self._pw2.append(self._pw2[-1] * self.base % MOD2)
        self._tree = [_EMPTY] * (4 * self._size)
        self._build(1, 0, self._size - 1, text)

    def __len__(self) -> int:
        return self._size

    def _combine(self, left: HashNode, right: HashNode) -> HashNode:
        if not left.length:
            return right
        if not right.length:
            return left
        return HashNode(
            left.length + right.length,
            (right.h1 * self._pw1[left.length] + left.h1) % MOD1,
            (right.h2 * self._pw2[left.length] + left.h2) % MOD2,
        )

    @staticmethod
    def _leaf(char: str) -> HashNode:
        return HashNode(1, ord(char), ord(char))

    def _build(self, node: int, lo: int, hi: int, text: str) -> None:
        if lo == hi:
            self._tree[node] = self._leaf(text[lo])
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, text)
        self._build(2 * node + 1, mid + 1, hi, text)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, index: int, char: str) -> None:
        """Replace the character at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        if len(char) != 1:
            raise ValueError("char must be a single character")
        self._update(1, 0, self._size - 1, index, char)

    def _update(self, node: int, lo: int, hi: int, index: int, char: str) -> None:
        if lo == hi:
            self._tree[node] = self._leaf(char)
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node, lo, mid, index, char)
        else:
            self._update(2 * node + 1, mid + 1, hi, index, char)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def query(self, start: int, end: int) -> HashNode:
        """Hash node of text[start:end + 1] (zero-based, inclusive)."""
        if not 0 <= start <= end < self._size:
            raise IndexError(f"range [{start}, {end}] out of bounds")
        return self._query(1, 0, self._size - 1, start, end)

    def _query(self, node: int, lo: int, hi: int, start: int, end: int) -> HashNode:
        if lo > end or hi < start:
            return _EMPTY
        if start <= lo and hi <= end:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._combine(
            self._query(2 * node, lo, mid, start, end),
            self._query(2 * node + 1, mid + 1, hi, start, end),
        )