"""Maximum flow: Edmonds-Karp, Dinic, and min-cost max-flow."""

from __future__ import annotations

import enum
import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


def _check_node(node: int, n: int) -> None:
    if not 0 <= node < n:
        raise IndexError(f"node {node} outside 0..{n - 1}")


def _check_terminals(source: int, sink: int, n: int) -> None:
    _check_node(source, n)
    _check_node(sink, n)
    if source == sink:
        raise ValueError("source and sink must differ")


def _augmenting_path(residual: list[list[int]], source: int, sink: int) -> tuple[int, list[int]]:
    n = len(residual)
    parent = [-1] * n
    parent[source] = source
    queue: deque[tuple[int, float]] = deque([(source, math.inf)])
    while queue:
        cur, flow = queue.popleft()
        for nxt in range(n):
            if parent[nxt] == -1 and residual[cur][nxt] > 0:
                parent[nxt] = cur
                bottleneck = min(flow, residual[cur][nxt])
                if nxt == sink:
                    return int(bottleneck), parent
                queue.append((nxt, bottleneck))
    return 0, parent


def edmonds_karp(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Maximum flow for a capacity matrix; the matrix itself is left unchanged."""
    residual = [list(row) for row in capacity]
    n = len(residual)
    if any(len(row) != n for row in residual):
        raise ValueError("capacity must be a square matrix")
    _check_terminals(source, sink, n)
    total = 0
    while True:
        pushed, parent = _augmenting_path(residual, source, sink)
        if not pushed:
            return total
        total += pushed
        node = sink
        while node != source:
            prev = parent[node]
            residual[prev][node] -= pushed
            residual[node][prev] += pushed
            node = prev


@dataclass
class _FlowEdge:
    target: int
    cap: int
    flow: int = 0

    @property
    def residual(self) -> int:
        return self.cap - self.flow


class Dinic:
    """Dinic's blocking-flow algorithm over nodes 0..n-1."""

    def __init__(self, n: int, source: int, sink: int) -> None:
        _check_terminals(source, sink, n)
        self.n = n
        self.source = source
        self.sink = sink
        self._edges: list[_FlowEdge] = []
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._level: list[int] = [-1] * n
        self._ptr: list[int] = [0] * n

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add a directed edge with the given capacity."""
        _check_node(u, self.n)
        _check_node(v, self.n)
        self._adj[u].append(len(self._edges))
        self._edges.append(_FlowEdge(v, cap))
        self._adj[v].append(len(self._edges))
        self._edges.append(_FlowEdge(u, 0))

    def _bfs(self) -> bool:
        level = [-1] * self.n
        level[self.source] = 0
        queue = deque([self.source])
        while queue:
            cur = queue.popleft()
            for edge_id in self._adj[cur]:
                edge = self._edges[edge_id]
                if edge.residual <= 0 or level[edge.target] != -1:
                    continue
                level[edge.target] = level[cur] + 1
                queue.append(edge.target)
        self._level = level
        return level[self.sink] != -1

    def _dfs(self, node: int, flow: float) -> float:
        if flow == 0 or node == self.sink:
            return flow
        adj = self._adj[node]
        while self._ptr[node] < len(adj):
            edge_id = adj[self._ptr[node]]
            edge = self._edges[edge_id]
            if self._level[node] + 1 == self._level[edge.target] and edge.residual > 0:
                pushed = self._dfs(edge.target, min(flow, edge.residual))
                if pushed:
                    edge.flow += pushed
                    self._edges[edge_id ^ 1].flow -= pushed
                    return pushed
            self._ptr[node] += 1
        return 0

    def max_flow(self) -> int:
        """Push flow until no augmenting path remains; return the amount pushed."""
        total = 0
        while self._bfs():
            self._ptr = [0] * self.n
            while pushed := self._dfs(self.source, math.inf):
                total += pushed
        return int(total)


@dataclass
class _CostEdge:
    target: int
    cost: int
    cap: int
    flow: int
    back: int


class _Visit(enum.Enum):
    FINISHED = enum.auto()
    IN_QUEUE = enum.auto()
    NOT_VISITED = enum.auto()


class MinCostMaxFlow:
    """Successive shortest paths with an SPFA search over nodes 0..n-1."""

    def __init__(self, n: int, source: int, sink: int) -> None:
        _check_terminals(source, sink, n)
        self.n = n
        self.source = source
        self.sink = sink
        self._adj: list[list[_CostEdge]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int, cost: int, cap: int) -> None:
        """Add a directed edge with a per-unit cost and a capacity."""
        _check_node(u, self.n)
        _check_node(v, self.n)
        forward = _CostEdge(v, cost, cap, 0, len(self._adj[v]))
        backward = _CostEdge(u, -cost, 0, 0, len(self._adj[u]))
        self._adj[u].append(forward)
        self._adj[v].append(backward)

    def _shortest_path(self) -> list[tuple[int, int]]:
        dist: list[float] = [math.inf] * self.n
        prev = [-1] * self.n
        via = [0] * self.n
        state = [_Visit.NOT_VISITED] * self.n
        dist[self.source] = 0
        queue = deque([self.source])
        while queue:
            u = queue.popleft()
            state[u] = _Visit.FINISHED
            for i, edge in enumerate(self._adj[u]):
                v = edge.target
                if edge.flow >= edge.cap or dist[v] <= dist[u] + edge.cost:
                    continue
                dist[v] = dist[u] + edge.cost
                prev[v] = u
                via[v] = i
                if state[v] is _Visit.IN_QUEUE:
                    continue
                if state[v] is _Visit.FINISHED or (queue and dist[queue[0]] > dist[v]):
                    queue.appendleft(v)
                else:
                    queue.append(v)
                state[v] = _Visit.IN_QUEUE
        if dist[self.sink] == math.inf:
            return []
        path = []
        cur = self.sink
        while cur != self.source:
            path.append((prev[cur], via[cur]))
            cur = prev[cur]
        path.reverse()
        return path

    def min_cost_max_flow(self) -> tuple[int, int]:
        """Return ``(flow, cost)`` of a cheapest maximum flow."""
        total_flow = total_cost = 0
        while path := self._shortest_path():
            edges = [self._adj[u][i] for u, i in path]
            pushed = min(edge.cap - edge.flow for edge in edges)
            for edge in edges:
                edge.flow += pushed
                total_cost += pushed * edge.cost
                self._adj[edge.target][edge.back].flow -= pushed
            total_flow += pushed
        return total_flow, total_cost