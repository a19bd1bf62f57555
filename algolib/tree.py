"""Tree algorithms: centroid decomposition and lowest common ancestors."""

from __future__ import annotations


class CentroidDecomposition:
    """Centroid decomposition of a tree given as adjacency lists.

    ``tree`` holds the decomposition tree's adjacency lists, ``root`` its root
    and ``order`` the centroids in the order they were chosen.
    """

    def __init__(self, graph):
        n = len(graph)
        if n == 0:
            raise ValueError("graph must have at least one vertex")
        self.tree = [[] for _ in range(n)]
        self.order = []
        self.root = -1
        self._used = [False] * n
        self._sub = [0] * n
        self._build(graph, 0, -1)

    def _subtree_sizes(self, graph, v):
        used, sub = self._used, self._sub
        order = [v]
        parent = {v: -1}
        for x in order:
            for nv in graph[x]:
                if used[nv] or nv == parent[x]:
                    continue
                parent[nv] = x
                order.append(nv)
        for x in order:
            sub[x] = 1
        for x in reversed(order):
            if parent[x] != -1:
                sub[parent[x]] += sub[x]
        return sub[v]

    def _find_centroid(self, graph, v, mid):
        used, sub = self._used, self._sub
        prev = -1
        while True:
            for nv in graph[v]:
                if used[nv] or nv == prev:
                    continue
                if sub[nv] > mid:
                    prev, v = v, nv
                    break
            else:
                return v

    def _build(self, graph, v, p):
        size = self._subtree_sizes(graph, v)
        centroid = self._find_centroid(graph, v, size // 2)
        self._used[centroid] = True
        self.order.append(centroid)
        if p == -1:
            self.root = centroid
        else:
            self.tree[p].append(centroid)
            self.tree[centroid].append(p)
        for nv in graph[centroid]:
            if not self._used[nv]:
                self._build(graph, nv, centroid)


class LowestCommonAncestor:
    """Binary lifting over a rooted tree.

    ``graph[v]`` lists neighbours, either plain vertices (unit weights) or
    ``(neighbour, weight)`` pairs.
    """

    def __init__(self, graph, root=0):
        n = len(graph)
        self._levels = 1
        while (1 << self._levels) < n:
            self._levels += 1
        parent = [-1] * n
        self.depth = [-1] * n
        self.dist = [-1] * n
        self.depth[root] = 0
        self.dist[root] = 0
        stack = [(root, -1)]
        while stack:
            v, p = stack.pop()
            parent[v] = p
            for item in graph[v]:
                if isinstance(item, (tuple, list)):
                    nv, w = item
                else:
                    nv, w = item, 1
                if nv == p:
                    continue
                self.depth[nv] = self.depth[v] + 1
                self.dist[nv] = self.dist[v] + w
                stack.append((nv, v))
        self._up = [parent]
        for _ in range(1, self._levels):
            prev = self._up[-1]
            self._up.append([-1 if x == -1 else prev[x] for x in prev])

    def lca(self, u, v):
        """Return the lowest common ancestor of ``u`` and ``v``."""
        depth = self.depth
        if depth[u] < 0 or depth[v] < 0:
            raise ValueError("vertex not reachable from the root")
        if depth[u] < depth[v]:
            u, v = v, u
        diff = depth[u] - depth[v]
        for lv in range(self._levels):
            if (diff >> lv) & 1:
                u = self._up[lv][u]
        if u == v:
            return u
        for lv in reversed(range(self._levels)):
            if self._up[lv][u] != self._up[lv][v]:
                u = self._up[lv][u]
                v = self._up[lv][v]
        return self._up[0][u]

    def dist_between(self, u, v):
        """Return the weighted distance between ``u`` and ``v``."""
        return self.dist[u] + self.dist[v] - 2 * self.dist[self.lca(u, v)]

    def path_len(self, u, v):
        """Return the number of edges between ``u`` and ``v``."""
        return self.depth[u] + self.depth[v] - 2 * self.depth[self.lca(u, v)]