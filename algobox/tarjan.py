"""Tarjan's strongly connected components with bridge-like tree edges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class TarjanResult:
    """Components found by :func:`tarjan`.

    ``component[v]`` is the 1-based id of the component holding ``v`` (0 if
    ``v`` was not reached); ids follow completion order, so every edge leads
    to a component with an equal or smaller id.  ``components[k - 1]`` lists
    the members of component ``k``.  ``bridges`` holds ``(child, parent)`` DFS
    tree edges whose child cannot reach back to the parent.
    """

    component: list[int]
    components: list[list[int]] = field(default_factory=list)
    bridges: set[tuple[int, int]] = field(default_factory=set)


def tarjan(adjacency: Sequence[Iterable[int]], start: int | None = None) -> TarjanResult:
    """Strongly connected components of a directed graph over nodes 0..n-1.

    With ``start`` only the nodes reachable from it are explored; otherwise
    every node is used as a root in increasing order.
    """
    graph = [list(neighbours) for neighbours in adjacency]
    n = len(graph)
    for node, neighbours in enumerate(graph):
        for nxt in neighbours:
            if not 0 <= nxt < n:
                raise IndexError(f"node {node} has neighbour {nxt} outside 0..{n - 1}")
    if start is not None and not 0 <= start < n:
        raise IndexError(f"start {start} outside 0..{n - 1}")

    index = [0] * n
    low = [0] * n
    on_stack = [False] * n
    result = TarjanResult(component=[0] * n)
    stack: list[int] = []
    counter = 0

    roots = range(n) if start is None else (start,)
    for root in roots:
        if index[root]:
            continue
        counter += 1
        index[root] = low[root] = counter
        on_stack[root] = True
        stack.append(root)
        calls = [(root, iter(graph[root]))]
        while calls:
            node, neighbours = calls[-1]
            for nxt in neighbours:
                if not index[nxt]:
                    counter += 1
                    index[nxt] = low[nxt] = counter
                    on_stack[nxt] = True
                    stack.append(nxt)
                    calls.append((nxt, iter(graph[nxt])))
                    break
                if on_stack[nxt]:
                    low[node] = min(low[node], index[nxt])
            else:
                calls.pop()
                if low[node] == index[node]:
                    members = []
                    comp_id = len(result.components) + 1
                    while True:
                        member = stack.pop()
                        on_stack[member] = False
                        result.component[member] = comp_id
                        members.append(member)
                        if member == node:
                            break
                    result.components.append(members)
                if calls:
                    parent = calls[-1][0]
                    low[parent] = min(low[parent], low[node])
                    if low[node] > index[parent]:
                        result.bridges.add((node, parent))
    return result