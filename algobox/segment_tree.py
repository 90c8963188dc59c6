"""Segment trees: lazy range-add with a custom merge, and max with descent."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class LazySegmentTree:
    """Range add and range query over positions 1..size.

    A pending addition is applied once to a node's value, so ``merge`` should
    be something like ``max`` or ``min`` that commutes with adding a constant.
    """

    def __init__(self, size: int, merge: Callable[[Any, Any], Any] = max) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._merge = merge
        self._tree: list[Any] = [0] * (4 * size)
        self._lazy: list[Any] = [0] * (4 * size)

    @classmethod
    def from_values(
        cls, values: Iterable[Any], merge: Callable[[Any, Any], Any] = max
    ) -> LazySegmentTree:
        """Tree whose position i holds the i-th value (positions start at 1)."""
        values = list(values)
        tree = cls(len(values), merge)
        tree._build(1, 1, tree._size, values)
        return tree

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, lo: int, hi: int, values: list[Any]) -> None:
        if lo == hi:
            self._tree[node] = values[lo - 1]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._pull(node)

    def _pull(self, node: int) -> None:
        self._tree[node] = self._merge(self._tree[2 * node], self._tree[2 * node + 1])

    def _push(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if not pending:
            return
        self._tree[node] += pending
        if lo != hi:
            self._lazy[2 * node] += pending
            self._lazy[2 * node + 1] += pending
        self._lazy[node] = 0

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._size:
            raise IndexError(f"range [{left}, {right}] outside 1..{self._size}")

    def query(self, left: int, right: int) -> Any:
        """Merged value of positions left..right inclusive."""
        self._check(left, right)
        return self._query(1, 1, self._size, left, right)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> Any:
        self._push(node, lo, hi)
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(2 * node, lo, mid, left, right)
        if mid < left:
            return self._query(2 * node + 1, mid + 1, hi, left, right)
        return self._merge(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid + 1, hi, left, right),
        )

    def update(self, left: int, right: int, value: Any) -> None:
        """Add ``value`` to every position in left..right inclusive."""
        self._check(left, right)
        self._update(1, 1, self._size, left, right, value)

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, value: Any) -> None:
        self._push(node, lo, hi)
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._lazy[node] += value
            self._push(node, lo, hi)
            return
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, value)
        self._pull(node)


class MaxSegmentTree:
    """Point assignment and search for the first value at least a threshold."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        if not values:
            raise ValueError("values must be non-empty")
        self._size = len(values)
        self._tree = [0] * (4 * self._size)
        self._build(1, 0, self._size - 1, values)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, lo: int, hi: int, values: list[int]) -> None:
        if lo == hi:
            self._tree[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, index: int, value: int) -> None:
        """Set the value at zero-based ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        node, lo, hi = 1, 0, self._size - 1
        path = []
        while lo != hi:
            path.append(node)
            mid = (lo + hi) // 2
            if index <= mid:
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        self._tree[node] = value
        for parent in reversed(path):
            self._tree[parent] = max(self._tree[2 * parent], self._tree[2 * parent + 1])

    def first_at_least(self, value: int) -> int | None:
        """Smallest index whose value is >= ``value``, or None if there is none."""
        if self._tree[1] < value:
            return None
        node, lo, hi = 1, 0, self._size - 1
        while lo != hi:
            mid = (lo + hi) // 2
            if self._tree[2 * node] >= value:
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        return lo