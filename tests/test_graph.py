import random

import pytest

from algolib.graph import Dijkstra, Lowlink
from algolib.union_find import UnionFind


def _random_weighted(seed, n=12, m=30):
    rng = random.Random(seed)
    graph = [[] for _ in range(n)]
    for _ in range(m):
        u, v = rng.randrange(n), rng.randrange(n)
        graph[u].append((v, rng.randrange(0, 20)))
    return graph


def test_small_graph_distances():
    graph = [[(1, 4), (2, 1)], [], [(1, 2)]]
    dij = Dijkstra()
    assert dij.solve(graph, 0) == [0, 3, 1]
    assert dij.calc_path(1) == [0, 2, 1]


@pytest.mark.parametrize("seed", range(10))
def test_random_graph_invariants(seed):
    graph = _random_weighted(seed)
    dij = Dijkstra()
    dist = dij.solve(graph, 0)
    assert dist[0] == 0
    for u, adj in enumerate(graph):
        if dist[u] is None:
            continue
        for v, c in adj:
            assert dist[v] is not None
            assert dist[v] <= dist[u] + c
    for t, d in enumerate(dist):
        if d is None:
            with pytest.raises(ValueError):
                dij.calc_path(t)
            continue
        path = dij.calc_path(t)
        assert path[0] == 0 and path[-1] == t
        weight = sum(min(c for w, c in graph[a] if w == b) for a, b in zip(path, path[1:]))
        assert weight == d


def test_unreachable_is_none():
    dij = Dijkstra()
    dist = dij.solve([[(1, 5)], [], []], 0)
    assert dist[2] is None
    with pytest.raises(ValueError):
        dij.calc_path(2)


def test_calc_path_before_solve():
    with pytest.raises(ValueError):
        Dijkstra().calc_path(0)


def _adjacency(n, edges):
    graph = [[] for _ in range(n)]
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)
    return graph


def test_path_graph_all_bridges():
    edges = [(0, 1), (1, 2)]
    ll = Lowlink(_adjacency(3, edges))
    assert sorted(ll.bridges) == edges


def test_cycle_with_tail():
    ll = Lowlink(_adjacency(4, [(0, 1), (1, 2), (2, 0), (2, 3)]))
    assert ll.bridges == [(2, 3)]
    assert sorted(ll.ord) == [0, 1, 2, 3]


def _components(n, edges):
    uf = UnionFind(n)
    for u, v in edges:
        uf.unite(u, v)
    return len({uf.root(i) for i in range(n)})


@pytest.mark.parametrize("seed", range(10))
def test_bridges_disconnect(seed):
    rng = random.Random(seed)
    n = 10
    edges = sorted({tuple(sorted((rng.randrange(n), rng.randrange(n)))) for _ in range(13)})
    edges = [e for e in edges if e[0] != e[1]]
    ll = Lowlink(_adjacency(n, edges))
    base = _components(n, edges)
    for e in edges:
        without = [f for f in edges if f != e]
        assert (e in ll.bridges) == (_components(n, without) > base)
    assert sorted(ll.ord) == list(range(n))
    assert all(lo <= o for lo, o in zip(ll.low, ll.ord))