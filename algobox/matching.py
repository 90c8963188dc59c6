"""Maximum bipartite matching: augmenting paths and Hopcroft-Karp."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


def maximum_bipartite_matching(
    adjacency: Sequence[Iterable[int]], rows: int, cols: int
) -> tuple[int, list[tuple[int, int]]]:
    """Maximum matching by repeated augmenting-path search (zero-based).

    ``adjacency[r]`` lists the columns row ``r`` may be matched to.  Returns
    the size of the matching and its ``(row, column)`` pairs ordered by column.
    """
    if len(adjacency) != rows:
        raise ValueError(f"expected {rows} adjacency lists, got {len(adjacency)}")
    neighbours = [list(cols_of_row) for cols_of_row in adjacency]
    for row, cols_of_row in enumerate(neighbours):
        for col in cols_of_row:
            if not 0 <= col < cols:
                raise IndexError(f"row {row} has column {col} outside 0..{cols - 1}")

    row_assign = [-1] * rows
    col_assign = [-1] * cols

    def try_row(row: int, visited: set[int]) -> bool:
        if row in visited:
            return False
        visited.add(row)
        for col in neighbours[row]:
            if col_assign[col] == -1:
                col_assign[col] = row
                row_assign[row] = col
                return True
        for col in neighbours[row]:
            if try_row(col_assign[col], visited):
                col_assign[col] = row
                row_assign[row] = col
                return True
        return False

    count = sum(try_row(row, set()) for row in range(rows))
    matches = [(row, col) for col, row in enumerate(col_assign) if row != -1]
    return count, matches


_NIL = 0


class HopcroftKarp:
    """Hopcroft-Karp matching with rows 1..n and columns 1..m.

    After :meth:`maximum_matching`, ``row_assign[r]`` is the column matched to
    row ``r`` and ``col_assign[c]`` the row matched to column ``c`` (0 if none).
    """

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError("sizes must be non-negative")
        self.n = n
        self.m = m
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self.row_assign = [_NIL] * (n + 1)
        self.col_assign = [_NIL] * (m + 1)
        self._dist: list[float] = []

    def add_edge(self, u: int, v: int) -> None:
        """Allow row ``u`` to be matched with column ``v``."""
        if not 1 <= u <= self.n:
            raise IndexError(f"row {u} outside 1..{self.n}")
        if not 1 <= v <= self.m:
            raise IndexError(f"column {v} outside 1..{self.m}")
        self._adj[u].append(v)

    def _bfs(self) -> bool:
        dist: list[float] = [math.inf] * (self.n + 1)
        queue: deque[int] = deque()
        for row in range(1, self.n + 1):
            if self.row_assign[row] == _NIL:
                dist[row] = 0
                queue.append(row)
        while queue:
            cur = queue.popleft()
            if dist[cur] >= dist[_NIL]:
                break
            for col in self._adj[cur]:
                owner = self.col_assign[col]
                if dist[owner] == math.inf:
                    dist[owner] = dist[cur] + 1
                    queue.append(owner)
        self._dist = dist
        return dist[_NIL] != math.inf

    def _dfs(self, row: int) -> bool:
        if row == _NIL:
            return True
        dist = self._dist
        for col in self._adj[row]:
            owner = self.col_assign[col]
            if dist[owner] == dist[row] + 1 and self._dfs(owner):
                self.col_assign[col] = row
                self.row_assign[row] = col
                return True
        dist[row] = math.inf
        return False

    def maximum_matching(self) -> int:
        """Grow the matching to maximum size and return that size."""
        while self._bfs():
            for row in range(1, self.n + 1):
                if self.row_assign[row] == _NIL:
                    self._dfs(row)
        return sum(1 for col in self.row_assign[1:] if col != _NIL)