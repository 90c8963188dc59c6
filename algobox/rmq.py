"""Sparse table for static range-minimum queries."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """Answers minimum queries over half-open ranges in constant time."""

    def __init__(self, values: Iterable[T]) -> None:
        self._levels: list[list[T]] = [list(values)]
        n = len(self._levels[0])
        width = 1
        while width * 2 <= n:
            prev = self._levels[-1]
            self._levels.append([min(x, y) for x, y in zip(prev, prev[width:])])
            width *= 2

    def __len__(self) -> int:
        return len(self._levels[0])

    def query(self, left: int, right: int) -> T:
        """Minimum of values[left:right]; the range must be non-empty."""
        if left >= right:
            raise ValueError("range must be non-empty")
        if left < 0 or right > len(self):
            raise IndexError(f"range [{left}, {right}) outside 0..{len(self)}")
        depth = (right - left).bit_length() - 1
        level = self._levels[depth]
        return min(level[left], level[right - (1 << depth)])