"""Minimum cost flow by the primal-dual method with Dijkstra on reduced costs."""

from __future__ import annotations

from heapq import heappop, heappush

_INF = float("inf")


class _Edge:
    __slots__ = ("to", "rev", "cap", "cost")

    def __init__(self, to, rev, cap, cost):
        self.to = to
        self.rev = rev
        self.cap = cap
        self.cost = cost


class PrimalDual:
    """Min-cost flow network over ``n`` vertices with non-negative edge costs."""

    def __init__(self, n):
        self._n = n
        self._graph = [[] for _ in range(n)]

    def __len__(self):
        return self._n

    def add_edge(self, frm, to, cap, cost):
        """Add a directed edge with capacity ``cap`` and unit cost ``cost``."""
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        from_id = len(self._graph[frm])
        to_id = len(self._graph[to])
        if frm == to:
            to_id += 1
        self._graph[frm].append(_Edge(to, to_id, cap, cost))
        self._graph[to].append(_Edge(frm, from_id, 0, -cost))

    def max_flow(self, s, t, flow_limit=None):
        """Return ``(flow, cost)`` for the cheapest flow of maximum size up to ``flow_limit``."""
        return self.slope(s, t, flow_limit)[-1]

    def _refine(self, s, t, dual, pv, pe):
        n, graph = self._n, self._graph
        dist = [_INF] * n
        vis = [False] * n
        dist[s] = 0
        heap = [(0, s)]
        while heap:
            _, v = heappop(heap)
            if vis[v]:
                continue
            vis[v] = True
            if v == t:
                break
            for i, e in enumerate(graph[v]):
                if vis[e.to] or e.cap == 0:
                    continue
                cost = e.cost - dual[e.to] + dual[v]
                if dist[e.to] <= cost + dist[v]:
                    continue
                dist[e.to] = dist[v] + cost
                pv[e.to] = v
                pe[e.to] = i
                heappush(heap, (dist[e.to], e.to))
        if not vis[t]:
            return False
        for v in range(n):
            if vis[v]:
                dual[v] -= dist[t] - dist[v]
        return True

    def slope(self, s, t, flow_limit=None):
        """Send flow from ``s`` to ``t`` and return the breakpoints ``[(flow, cost), ...]``.

        ``flow_limit`` of ``None`` means no limit. Consecutive segments with the
        same unit cost are merged.
        """
        if not (0 <= s < self._n and 0 <= t < self._n):
            raise IndexError("vertex out of range")
        if s == t:
            raise ValueError("source and sink must differ")
        graph = self._graph
        dual = [0] * self._n
        pv = [-1] * self._n
        pe = [-1] * self._n
        flow, cost, prev_unit = 0, 0, -1
        result = [(flow, cost)]
        while flow_limit is None or flow < flow_limit:
            if not self._refine(s, t, dual, pv, pe):
                break
            c = None if flow_limit is None else flow_limit - flow
            v = t
            while v != s:
                cap = graph[pv[v]][pe[v]].cap
                c = cap if c is None else min(c, cap)
                v = pv[v]
            v = t
            while v != s:
                e = graph[pv[v]][pe[v]]
                e.cap -= c
                graph[v][e.rev].cap += c
                v = pv[v]
            unit = -dual[s]
            flow += c
            cost += c * unit
            if prev_unit == unit:
                result.pop()
            result.append((flow, cost))
            prev_unit = unit
        return result