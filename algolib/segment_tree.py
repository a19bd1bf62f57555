"""Segment tree for point updates and range products over a monoid."""

from __future__ import annotations


class SegmentTree:
    """Point-set, range-product tree; ``data`` is a length or an iterable."""

    def __init__(self, op, e, data=0):
        values = [e() for _ in range(data)] if isinstance(data, int) else list(data)
        self._op = op
        self._e = e
        self._size = len(values)
        n = 1
        while n < self._size:
            n *= 2
        self._n = n
        self._data = [e() for _ in range(2 * n)]
        self._data[n:n + self._size] = values
        for i in range(n - 1, 0, -1):
            self._data[i] = op(self._data[2 * i], self._data[2 * i + 1])

    def __len__(self):
        return self._size

    def _check_index(self, i):
        if not 0 <= i < self._size:
            raise IndexError("index out of range")

    def set(self, i, x):
        """Replace element ``i`` with ``x``."""
        self._check_index(i)
        i += self._n
        self._data[i] = x
        while i > 1:
            i >>= 1
            self._data[i] = self._op(self._data[2 * i], self._data[2 * i + 1])

    def prod(self, l, r):
        """Return the product over ``[l, r)``."""
        if not 0 <= l <= r <= self._size:
            raise IndexError("range out of bounds")
        l += self._n
        r += self._n
        vl, vr = self._e(), self._e()
        while l < r:
            if l & 1:
                vl = self._op(vl, self._data[l])
                l += 1
            if r & 1:
                r -= 1
                vr = self._op(self._data[r], vr)
            l >>= 1
            r >>= 1
        return self._op(vl, vr)

    def all_prod(self):
        """Return the product of all elements."""
        return self._data[1]

    def get(self, i):
        """Return element ``i``."""
        self._check_index(i)
        return self._data[i + self._n]