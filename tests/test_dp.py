import itertools
import random
from collections import deque

import pytest

from algolib.dp import RerootingDP, longest_increasing_subsequence


def test_lis_example():
    assert longest_increasing_subsequence([5, 1, 3, 2, 4]) == 3


def test_lis_is_strict():
    assert longest_increasing_subsequence([7, 7, 7, 7]) == 1
    assert longest_increasing_subsequence([]) == 0


@pytest.mark.parametrize("seed", range(5))
def test_lis_against_exhaustive(seed):
    rng = random.Random(seed)
    values = [rng.randrange(6) for _ in range(9)]
    best = 0
    for k in range(len(values) + 1):
        for combo in itertools.combinations(values, k):
            if all(a < b for a, b in zip(combo, combo[1:])):
                best = max(best, k)
    assert longest_increasing_subsequence(values) == best


def _random_tree(rng, n):
    return [(rng.randrange(i), i) for i in range(1, n)]


def _eccentricities(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    result = []
    for s in range(n):
        dist = [-1] * n
        dist[s] = 0
        q = deque([s])
        while q:
            v = q.popleft()
            for nv in adj[v]:
                if dist[nv] < 0:
                    dist[nv] = dist[v] + 1
                    q.append(nv)
        result.append(max(dist))
    return result


@pytest.mark.parametrize("seed", range(5))
def test_rerooting_longest_path(seed):
    rng = random.Random(seed)
    n = 15
    edges = _random_tree(rng, n)
    dp = RerootingDP(n, max, lambda: 0, lambda x, v: x + 1)
    for u, v in edges:
        dp.add_edge(u, v)
    assert dp.solve() == [d + 1 for d in _eccentricities(n, edges)]


def test_rerooting_subtree_size_is_n_everywhere():
    rng = random.Random(9)
    n = 12
    dp = RerootingDP(n, lambda a, b: a + b, lambda: 0, lambda x, v: x + 1)
    for u, v in _random_tree(rng, n):
        dp.add_edge(u, v)
    assert dp.solve() == [n] * n


def test_rerooting_empty():
    dp = RerootingDP(0, max, lambda: 0, lambda x, v: x + 1)
    assert dp.solve() == []