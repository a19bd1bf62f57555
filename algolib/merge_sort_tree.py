"""Merge sort tree for counting values in a range within bounds."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from heapq import merge


class MergeSortTree:
    """Static tree whose nodes hold the sorted values of their segments."""

    def __init__(self, values):
        values = list(values)
        self._size = len(values)
        n = 1
        while n < self._size:
            n <<= 1
        self._n = n
        self._data = [[] for _ in range(2 * n)]
        for i, v in enumerate(values):
            self._data[n + i] = [v]
        for i in range(n - 1, 0, -1):
            self._data[i] = list(merge(self._data[2 * i], self._data[2 * i + 1]))

    def __len__(self):
        return self._size

    def count_between(self, l, r, lo, up):
        """Count positions in ``[l, r)`` whose value lies in ``[lo, up]``."""
        if not 0 <= l <= r <= self._size:
            raise IndexError("range out of bounds")
        l += self._n
        r += self._n
        total = 0
        while l < r:
            if l & 1:
                node = self._data[l]
                total += bisect_right(node, up) - bisect_left(node, lo)
                l += 1
            if r & 1:
                r -= 1
                node = self._data[r]
                total += bisect_right(node, up) - bisect_left(node, lo)
            l >>= 1
            r >>= 1
        return total