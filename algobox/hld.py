"""Heavy-light decomposition of a tree with subtree add and path maximum."""

from __future__ import annotations

from algobox.segment_tree import LazySegmentTree


class HeavyLightDecomposition:
    """Tree over nodes 1..nodes; call :meth:`build` after adding every edge."""

    def __init__(self, nodes: int) -> None:
        if nodes < 1:
            raise ValueError("a tree needs at least one node")
        self.nodes = nodes
        self._graph: list[list[int]] = [[] for _ in range(nodes + 1)]
        self._built = False

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.nodes:
            raise IndexError(f"node {node} outside 1..{self.nodes}")

    def add_edge(self, u: int, v: int) -> None:
        """Add an undirected edge."""
        self._check(u)
        self._check(v)
        self._graph[u].append(v)
        self._graph[v].append(u)

    def build(self, root: int = 1) -> None:
        """Decompose the tree hanging from ``root`` into heavy chains."""
        self._check(root)
        n = self.nodes
        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        size = [1] * (n + 1)
        visited = [False] * (n + 1)
        visited[root] = True
        order = []
        stack = [root]
        while stack:
            node = stack.pop()
            order.append(node)
            for nxt in self._graph[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    parent[nxt] = node
                    depth[nxt] = depth[node] + 1
                    stack.append(nxt)
        if len(order) != n:
            raise ValueError("the edges do not connect every node")
        for node in reversed(order):
            if parent[node]:
                size[parent[node]] += size[node]

        top = [0] * (n + 1)
        ids = [0] * (n + 1)
        out = [0] * (n + 1)
        timer = 1
        top[root] = root
        stack = [root]
        while stack:
            node = stack.pop()
            ids[node] = timer
            out[node] = timer + size[node] - 1
            timer += 1
            children = [c for c in self._graph[node] if c != parent[node]]
            heavy = max(children, key=size.__getitem__, default=0)
            for child in children:
                if child != heavy:
                    top[child] = child
                    stack.append(child)
            if heavy:
                top[heavy] = top[node]
                stack.append(heavy)

        self._parent, self._depth, self._top = parent, depth, top
        self._ids, self._out = ids, out
        self._tree = LazySegmentTree(n, max)
        self._built = True

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("call build() first")

    def update_subtree(self, node: int, value: int) -> None:
        """Add ``value`` to every node in the subtree of ``node``."""
        self._require_built()
        self._check(node)
        self._tree.update(self._ids[node], self._out[node], value)

    def query_path(self, u: int, v: int) -> int:
        """Maximum node value on the path between ``u`` and ``v``."""
        self._require_built()
        self._check(u)
        self._check(v)
        top, depth, ids = self._top, self._depth, self._ids
        best = None
        while top[u] != top[v]:
            if depth[top[u]] < depth[top[v]]:
                u, v = v, u
            chain = self._tree.query(ids[top[u]], ids[u])
            best = chain if best is None else max(best, chain)
            u = self._parent[top[u]]
        if depth[u] > depth[v]:
            u, v = v, u
        chain = self._tree.query(ids[u], ids[v])
        return chain if best is None else max(best, chain)