import random
from collections import deque

import pytest

from algobox.tarjan import tarjan


def _random_graph(rng, n, density):
    return [[v for v in range(n) if rng.random() < density] for _ in range(n)]


def _reachable(graph, start):
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in graph[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


@pytest.mark.parametrize("seed", range(20))
def test_components_match_mutual_reachability(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 9)
    graph = _random_graph(rng, n, 0.2)
    result = tarjan(graph)
    reach = [_reachable(graph, v) for v in range(n)]
    for u in range(n):
        for v in range(n):
            mutual = v in reach[u] and u in reach[v]
            assert (result.component[u] == result.component[v]) == mutual


@pytest.mark.parametrize("seed", range(20))
def test_component_ids_follow_reverse_topological_order(seed):
    rng = random.Random(200 + seed)
    n = rng.randint(1, 9)
    graph = _random_graph(rng, n, 0.25)
    result = tarjan(graph)
    for u, neighbours in enumerate(graph):
        for v in neighbours:
            assert result.component[u] >= result.component[v]


@pytest.mark.parametrize("seed", range(10))
def test_every_node_in_exactly_one_component(seed):
    rng = random.Random(400 + seed)
    n = rng.randint(1, 10)
    graph = _random_graph(rng, n, 0.2)
    result = tarjan(graph)
    members = sorted(node for comp in result.components for node in comp)
    assert members == list(range(n))
    for comp_id, comp in enumerate(result.components, 1):
        assert all(result.component[node] == comp_id for node in comp)


@pytest.mark.parametrize("seed", range(10))
def test_bridges_are_edges_between_components(seed):
    rng = random.Random(600 + seed)
    n = rng.randint(2, 9)
    graph = _random_graph(rng, n, 0.25)
    result = tarjan(graph)
    for child, parent in result.bridges:
        assert child in graph[parent]
        assert result.component[child] != result.component[parent]


def test_cycle_is_one_component():
    result = tarjan([[1], [2], [0]])
    assert len(result.components) == 1
    assert sorted(result.components[0]) == [0, 1, 2]
    assert result.bridges == set()


def test_chain_edges_are_bridges():
    result = tarjan([[1], [2], []])
    assert result.bridges == {(1, 0), (2, 1)}
    assert len(set(result.component)) == len(result.components)


def test_start_explores_only_reachable_nodes():
    result = tarjan([[1], [], [0]], 0)
    assert result.component[2] == 0
    assert result.component[0] > 0 and result.component[1] > 0


def test_bad_start_rejected():
    with pytest.raises(IndexError):
        tarjan([[0]], 1)


def test_bad_neighbour_rejected():
    with pytest.raises(IndexError):
        tarjan([[3], []])