"""Maximum flow by Dinic's algorithm and by Ford-Fulkerson."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, replace


@dataclass
class FlowEdge:
    """Residual edge; ``cap`` is the remaining capacity, ``rev`` the index of its twin."""

    frm: int
    to: int
    rev: int
    cap: int
    is_rev: bool


class _FlowNetwork:
    def __init__(self, n):
        self._graph = [[] for _ in range(n)]

    def __len__(self):
        return len(self._graph)

    def _add_edge(self, frm, to, cap):
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        from_rev = len(self._graph[frm])
        to_rev = len(self._graph[to])
        self._graph[frm].append(FlowEdge(frm, to, to_rev, cap, False))
        self._graph[to].append(FlowEdge(to, frm, from_rev, 0, True))

    def _check_terminals(self, s, t):
        n = len(self._graph)
        if not (0 <= s < n and 0 <= t < n):
            raise IndexError("vertex out of range")
        if s == t:
            raise ValueError("source and sink must differ")

    def _push(self, path, flow):
        for e in path:
            e.cap -= flow
            self._graph[e.to][e.rev].cap += flow

    def _forward_edges(self):
        return [replace(e) for adj in self._graph for e in adj if not e.is_rev]

    def _write_debug(self, file):
        for adj in self._graph:
            for e in adj:
                if e.is_rev:
                    continue
                flow = self._graph[e.to][e.rev].cap
                print(f"{e.frm} -> {e.to} (flow : {flow} / {e.cap + flow})", file=file)


class Dinic(_FlowNetwork):
    """Dinic's blocking-flow algorithm."""

    def add_edge(self, frm, to, cap):
        """Add a directed edge ``frm -> to`` with capacity ``cap``."""
        self._add_edge(frm, to, cap)

    def edges(self):
        """Return copies of the forward edges, grouped by tail vertex in insertion order."""
        return self._forward_edges()

    def debug(self, file=None):
        """Write one line per forward edge showing its flow and capacity (stderr by default)."""
        self._write_debug(sys.stderr if file is None else file)

    def _bfs(self, s):
        dist = [-1] * len(self._graph)
        dist[s] = 0
        queue = deque([s])
        while queue:
            v = queue.popleft()
            for e in self._graph[v]:
                if e.cap == 0 or dist[e.to] >= 0:
                    continue
                dist[e.to] = dist[v] + 1
                queue.append(e.to)
        return dist

    def _augment(self, s, t, dist, it):
        graph = self._graph
        path = []
        v = s
        while True:
            if v == t:
                flow = min(e.cap for e in path)
                self._push(path, flow)
                return flow
            adj = graph[v]
            i = it[v]
            while i < len(adj):
                e = adj[i]
                if e.cap != 0 and dist[v] < dist[e.to]:
                    break
                i += 1
            it[v] = i
            if i < len(adj):
                path.append(adj[i])
                v = adj[i].to
                continue
            if not path:
                return 0
            back = path.pop()
            v = back.frm
            it[v] += 1

    def max_flow(self, s, t):
        """Push as much flow as possible from ``s`` to ``t`` and return its value."""
        self._check_terminals(s, t)
        total = 0
        while True:
            dist = self._bfs(s)
            if dist[t] < 0:
                return total
            it = [0] * len(self._graph)
            while True:
                flow = self._augment(s, t, dist, it)
                if flow == 0:
                    break
                total += flow


class FordFulkerson(_FlowNetwork):
    """Ford-Fulkerson with depth-first augmenting paths."""

    def add_edge(self, frm, to, cap):
        """Add a directed edge ``frm -> to`` with capacity ``cap``."""
        self._add_edge(frm, to, cap)

    def edges(self):
        """Return copies of the forward edges, grouped by tail vertex in insertion order."""
        return self._forward_edges()

    def debug(self, file=None):
        """Write one line per forward edge showing its flow and capacity (stdout by default)."""
        self._write_debug(sys.stdout if file is None else file)

    def _augment(self, s, t):
        graph = self._graph
        used = [False] * len(graph)
        used[s] = True
        stack = [[s, 0]]
        while stack:
            v, i = stack[-1]
            if v == t:
                path = [graph[u][j] for u, j in stack[:-1]]
                flow = min(e.cap for e in path)
                self._push(path, flow)
                return flow
            adj = graph[v]
            while i < len(adj) and (used[adj[i].to] or adj[i].cap == 0):
                i += 1
            if i == len(adj):
                stack.pop()
                if stack:
                    stack[-1][1] += 1
                continue
            stack[-1][1] = i
            w = adj[i].to
            used[w] = True
            stack.append([w, 0])
        return 0

    def max_flow(self, s, t):
        """Push as much flow as possible from ``s`` to ``t`` and return its value."""
        self._check_terminals(s, t)
        total = 0
        while True:
            flow = self._augment(s, t)
            if flow == 0:
                return total
            total += flow