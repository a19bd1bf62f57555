"""Fenwick (binary indexed) tree for prefix sums."""

from __future__ import annotations


class FenwickTree:
    """Point-add, range-sum over ``n`` slots initialised to zero."""

    def __init__(self, n):
        self._n = n
        self._data = [0] * n

    def __len__(self):
        return self._n

    def add(self, p, x):
        """Add ``x`` at position ``p``."""
        if not 0 <= p < self._n:
            raise IndexError("position out of range")
        p += 1
        while p <= self._n:
            self._data[p - 1] += x
            p += p & -p

    def prefix_sum(self, r):
        """Sum over ``[0, r)``."""
        if not 0 <= r <= self._n:
            raise IndexError("bound out of range")
        s = 0
        while r > 0:
            s += self._data[r - 1]
            r -= r & -r
        return s

    def sum(self, l, r):
        """Sum over ``[l, r)``."""
        return self.prefix_sum(r) - self.prefix_sum(l)