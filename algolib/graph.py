"""Shortest paths by Dijkstra and bridge detection by lowlink."""

from __future__ import annotations

from heapq import heappop, heappush


class Dijkstra:
    """Single-source shortest paths over non-negative weights."""

    def __init__(self):
        self.dist = []
        self._pre = []

    def solve(self, graph, s):
        """Return distances from ``s``; ``None`` marks an unreachable vertex.

        ``graph[v]`` lists ``(neighbour, weight)`` pairs.
        """
        n = len(graph)
        dist = [None] * n
        pre = [-1] * n
        dist[s] = 0
        heap = [(0, -s)]
        while heap:
            d, neg_v = heappop(heap)
            v = -neg_v
            if dist[v] < d:
                continue
            for nv, c in graph[v]:
                nd = d + c
                if dist[nv] is not None and dist[nv] <= nd:
                    continue
                dist[nv] = nd
                pre[nv] = v
                heappush(heap, (nd, -nv))
        self.dist = dist
        self._pre = pre
        return list(dist)

    def calc_path(self, t):
        """Return the vertices of a shortest path from the last source to ``t``."""
        if not self._pre or self.dist[t] is None:
            raise ValueError("no path to the target")
        path = []
        while t != -1:
            path.append(t)
            t = self._pre[t]
        path.reverse()
        return path


class Lowlink:
    """DFS order numbers, low links and bridges of an undirected graph."""

    def __init__(self, graph):
        n = len(graph)
        self.ord = [-1] * n
        self.low = [-1] * n
        self.bridges = []
        ord_, low = self.ord, self.low
        cnt = 0
        for start in range(n):
            if ord_[start] != -1:
                continue
            ord_[start] = low[start] = cnt
            cnt += 1
            stack = [(start, -1, iter(graph[start]))]
            while stack:
                v, p, it = stack[-1]
                descended = False
                for nv in it:
                    if nv == p:
                        continue
                    if ord_[nv] == -1:
                        ord_[nv] = low[nv] = cnt
                        cnt += 1
                        stack.append((nv, v, iter(graph[nv])))
                        descended = True
                        break
                    low[v] = min(low[v], ord_[nv])
                if descended:
                    continue
                stack.pop()
                if p != -1:
                    low[p] = min(low[p], low[v])
                    if ord_[p] < low[v]:
                        self.bridges.append((min(p, v), max(p, v)))