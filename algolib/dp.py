"""Dynamic programming: longest increasing subsequence and rerooting on trees."""

from __future__ import annotations

from bisect import bisect_left


def longest_increasing_subsequence(values):
    """Return the length of the longest strictly increasing subsequence."""
    tails = []
    for v in values:
        i = bisect_left(tails, v)
        if i == len(tails):
            tails.append(v)
        else:
            tails[i] = v
    return len(tails)


class RerootingDP:
    """Tree DP evaluated with every vertex as root.

    ``merge`` combines child results (monoid with identity ``e()``) and
    ``put_v(x, v)`` finishes a merged value at vertex ``v``.
    """

    def __init__(self, n, merge, e, put_v):
        self._n = n
        self._merge = merge
        self._e = e
        self._put_v = put_v
        self._graph = [[] for _ in range(n)]

    def add_edge(self, u, v):
        """Add an undirected edge."""
        self._graph[u].append(v)
        self._graph[v].append(u)

    def solve(self):
        """Return the result for each vertex as root, traversing from vertex 0."""
        n = self._n
        if n == 0:
            return []
        merge, e, put_v, g = self._merge, self._e, self._put_v, self._graph
        parent = [-1] * n
        seen = [False] * n
        order = []
        stack = [0]
        seen[0] = True
        while stack:
            v = stack.pop()
            order.append(v)
            for nv in g[v]:
                if not seen[nv]:
                    seen[nv] = True
                    parent[nv] = v
                    stack.append(nv)

        dp1 = [e() for _ in range(n)]
        for v in reversed(order):
            acc = e()
            for nv in g[v]:
                if nv != parent[v]:
                    acc = merge(acc, dp1[nv])
            dp1[v] = put_v(acc, v)

        dp2 = [e() for _ in range(n)]
        for v in order:
            p = parent[v]
            adj = g[v]
            k = len(adj)
            left, acc = [], e()
            for nv in adj:
                if nv != p:
                    acc = merge(acc, dp1[nv])
                left.append(acc)
            right, acc = [], e()
            for nv in reversed(adj):
                if nv != p:
                    acc = merge(acc, dp1[nv])
                right.append(acc)
            right.reverse()
            for i, nv in enumerate(adj):
                if nv == p:
                    continue
                acc = dp2[v]
                if i > 0:
                    acc = merge(acc, left[i - 1])
                if i + 1 < k:
                    acc = merge(acc, right[i + 1])
                dp2[nv] = put_v(acc, v)

        ans = [e() for _ in range(n)]
        for v in order:
            acc = e()
            for nv in g[v]:
                if nv != parent[v]:
                    acc = merge(acc, dp1[nv])
            acc = merge(acc, dp2[v])
            ans[v] = put_v(acc, v)
        return ans