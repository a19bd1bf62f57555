"""Disjoint-set union with union by rank and path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over ``0 .. n-1``."""

    def __init__(self, n):
        self._parent = [-1] * n
        self._rank = [0] * n
        self._size = [1] * n

    def __len__(self):
        return len(self._parent)

    def root(self, a):
        """Return the representative of ``a``'s set."""
        r = a
        while self._parent[r] != -1:
            r = self._parent[r]
        while self._parent[a] != -1:
            self._parent[a], a = r, self._parent[a]
        return r

    def same(self, a, b):
        """Return whether ``a`` and ``b`` are in the same set."""
        return self.root(a) == self.root(b)

    def unite(self, a, b):
        """Merge the sets of ``a`` and ``b``; return ``False`` if already merged."""
        ra, rb = self.root(a), self.root(b)
        if ra == rb:
            return False
        if self._rank[ra] < self._rank[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        if self._rank[ra] == self._rank[rb]:
            self._rank[ra] += 1
        self._size[ra] += self._size[rb]
        return True

    def size(self, a):
        """Return the size of ``a``'s set."""
        return self._size[self.root(a)]