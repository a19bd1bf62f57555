import io
import random

import pytest

from algolib.max_flow import Dinic, FordFulkerson


def _random_network(seed, n=8, m=20):
    rng = random.Random(seed)
    edges = []
    for _ in range(m):
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            edges.append((u, v, rng.randrange(10)))
    return n, edges


def test_single_edge():
    for net in (Dinic(2), FordFulkerson(2)):
        net.add_edge(0, 1, 7)
        assert net.max_flow(0, 1) == 7


def test_bottleneck_on_chain():
    for net in (Dinic(3), FordFulkerson(3)):
        net.add_edge(0, 1, 9)
        net.add_edge(1, 2, 4)
        assert net.max_flow(0, 2) == 4


def test_two_parallel_routes():
    for net in (Dinic(4), FordFulkerson(4)):
        for e in [(0, 1, 3), (1, 3, 10), (0, 2, 4), (2, 3, 10)]:
            net.add_edge(*e)
        assert net.max_flow(0, 3) == 7


def test_disconnected_and_repeat_calls():
    for net in (Dinic(3), FordFulkerson(3)):
        net.add_edge(0, 1, 5)
        assert net.max_flow(0, 2) == 0
        net.add_edge(1, 2, 5)
        assert net.max_flow(0, 2) == 5
        assert net.max_flow(0, 2) == 0


@pytest.mark.parametrize("seed", range(10))
def test_flow_is_feasible(seed):
    n, edges = _random_network(seed)
    for net in (Dinic(n), FordFulkerson(n)):
        for e in edges:
            net.add_edge(*e)
        total = net.max_flow(0, n - 1)
        ordered = sorted(edges, key=lambda e: e[0])
        result = net.edges()
        assert len(result) == len(ordered)
        balance = [0] * n
        for (u, v, cap), e in zip(ordered, result):
            assert (e.frm, e.to) == (u, v)
            flow = cap - e.cap
            assert 0 <= flow <= cap
            balance[u] += flow
            balance[v] -= flow
        assert balance[0] == total
        assert balance[n - 1] == -total
        assert all(b == 0 for b in balance[1:n - 1])


@pytest.mark.parametrize("seed", range(15))
def test_solvers_agree(seed):
    n, edges = _random_network(seed, n=10, m=30)
    dinic = Dinic(n)
    ford = FordFulkerson(n)
    for e in edges:
        dinic.add_edge(*e)
        ford.add_edge(*e)
    assert dinic.max_flow(0, n - 1) == ford.max_flow(0, n - 1)


def test_bipartite_matching():
    left, right = 3, 3
    pairs = [(0, 0), (0, 1), (1, 0), (2, 1), (2, 2)]
    src, sink = left + right, left + right + 1
    net = Dinic(left + right + 2)
    for a, b in pairs:
        net.add_edge(a, left + b, 1)
    for i in range(left):
        net.add_edge(src, i, 1)
    for i in range(right):
        net.add_edge(left + i, sink, 1)
    total = net.max_flow(src, sink)
    matched = [(e.frm, e.to - left) for e in net.edges()
               if e.cap == 0 and e.frm != src and e.to != sink]
    assert len(matched) == total == left
    assert set(matched) <= set(pairs)
    assert len({a for a, _ in matched}) == len({b for _, b in matched}) == total


def test_debug_format():
    for net in (Dinic(2), FordFulkerson(2)):
        net.add_edge(0, 1, 7)
        net.max_flow(0, 1)
        buf = io.StringIO()
        net.debug(buf)
        assert buf.getvalue() == "0 -> 1 (flow : 7 / 7)\n"


def test_invalid_arguments():
    for net in (Dinic(2), FordFulkerson(2)):
        with pytest.raises(ValueError):
            net.max_flow(1, 1)
        with pytest.raises(ValueError):
            net.add_edge(0, 1, -1)