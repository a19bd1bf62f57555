import math
import random

import pytest

from algolib.tree import CentroidDecomposition, LowestCommonAncestor


def _random_tree(seed, n):
    rng = random.Random(seed)
    parents = [-1] + [rng.randrange(i) for i in range(1, n)]
    graph = [[] for _ in range(n)]
    for i in range(1, n):
        graph[i].append(parents[i])
        graph[parents[i]].append(i)
    return parents, graph


def _ancestors(parents, v):
    result = [v]
    while parents[v] != -1:
        v = parents[v]
        result.append(v)
    return result


def test_small_tree_lca():
    graph = [[1, 2], [0, 3, 4], [0], [1], [1]]
    lca = LowestCommonAncestor(graph)
    assert lca.lca(3, 4) == 1
    assert lca.lca(3, 2) == 0
    assert lca.lca(4, 4) == 4
    assert lca.path_len(3, 4) == 2


def test_weighted_line():
    graph = [[(1, 3)], [(0, 3), (2, 4)], [(1, 4)]]
    lca = LowestCommonAncestor(graph)
    assert lca.dist_between(0, 2) == 7
    assert lca.path_len(0, 2) == 2


@pytest.mark.parametrize("seed", range(8))
def test_random_tree_lca(seed):
    n = 40
    parents, graph = _random_tree(seed, n)
    lca = LowestCommonAncestor(graph)
    rng = random.Random(seed + 100)
    for _ in range(60):
        u, v = rng.randrange(n), rng.randrange(n)
        w = lca.lca(u, v)
        assert w in _ancestors(parents, u)
        assert w in _ancestors(parents, v)
        assert lca.path_len(u, v) == lca.path_len(u, w) + lca.path_len(w, v)
        assert lca.dist_between(u, v) == lca.path_len(u, v)


@pytest.mark.parametrize("seed", range(4))
def test_weighted_distances_add_up(seed):
    n = 30
    rng = random.Random(seed)
    parents, _ = _random_tree(seed, n)
    graph = [[] for _ in range(n)]
    for i in range(1, n):
        w = rng.randrange(1, 50)
        graph[i].append((parents[i], w))
        graph[parents[i]].append((i, w))
    lca = LowestCommonAncestor(graph)
    for u in range(n):
        for v in range(n):
            w = lca.lca(u, v)
            assert lca.dist_between(u, v) == lca.dist_between(u, w) + lca.dist_between(w, v)
            assert lca.dist_between(u, v) >= lca.path_len(u, v)


def test_unreachable_vertex():
    lca = LowestCommonAncestor([[1], [0], []])
    with pytest.raises(ValueError):
        lca.lca(0, 2)


def _check_decomposition(graph, cd):
    n = len(graph)
    assert sorted(cd.order) == list(range(n))
    assert cd.order[0] == cd.root
    assert sum(len(a) for a in cd.tree) == 2 * (n - 1)
    parent = [-1] * n
    level = {cd.root: 0}
    order = [cd.root]
    for v in order:
        for w in cd.tree[v]:
            if w not in level:
                level[w] = level[v] + 1
                parent[w] = v
                order.append(w)
    assert len(order) == n
    assert max(level.values()) <= math.floor(math.log2(n))
    members = {v: {v} for v in range(n)}
    for v in reversed(order):
        if parent[v] != -1:
            members[parent[v]] |= members[v]
    for c in range(n):
        comp = members[c]
        remaining = comp - {c}
        while remaining:
            start = remaining.pop()
            piece, stack = 1, [start]
            while stack:
                x = stack.pop()
                for y in graph[x]:
                    if y in remaining:
                        remaining.remove(y)
                        piece += 1
                        stack.append(y)
            assert piece <= len(comp) // 2


def test_path_centroid_is_middle():
    n = 7
    graph = [[j for j in (i - 1, i + 1) if 0 <= j < n] for i in range(n)]
    cd = CentroidDecomposition(graph)
    assert cd.root == 3
    _check_decomposition(graph, cd)


@pytest.mark.parametrize("seed", range(8))
def test_random_decomposition(seed):
    _, graph = _random_tree(seed, 50)
    _check_decomposition(graph, CentroidDecomposition(graph))


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        CentroidDecomposition([])