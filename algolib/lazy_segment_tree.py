"""Segment tree with lazy propagation of range maps."""

from __future__ import annotations


class LazySegmentTree:
    """Range-apply, range-product tree over a monoid acted on by maps.

    ``data`` is either a length (filled with ``e()``) or an iterable of values.
    """

    def __init__(self, op, e, mapping, composition, identity, data):
        values = [e() for _ in range(data)] if isinstance(data, int) else list(data)
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._id = identity
        self._size = len(values)
        n, log = 1, 0
        while n < self._size:
            n <<= 1
            log += 1
        self._n = n
        self._log = log
        self._data = [e() for _ in range(2 * n)]
        self._lazy = [identity() for _ in range(2 * n)]
        self._data[n:n + self._size] = values
        for i in range(n - 1, 0, -1):
            self._update(i)

    def __len__(self):
        return self._size

    def _update(self, k):
        self._data[k] = self._op(self._data[2 * k], self._data[2 * k + 1])

    def _all_apply(self, k, f):
        self._data[k] = self._mapping(f, self._data[k])
        if k < self._n:
            self._lazy[k] = self._composition(f, self._lazy[k])

    def _push(self, k):
        self._all_apply(2 * k, self._lazy[k])
        self._all_apply(2 * k + 1, self._lazy[k])
        self._lazy[k] = self._id()

    def _check(self, l, r):
        if not 0 <= l <= r <= self._size:
            raise IndexError("range out of bounds")

    def prod(self, l, r):
        """Return the product over ``[l, r)``."""
        self._check(l, r)
        if l == r:
            return self._e()
        l += self._n
        r += self._n
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push(r >> i)
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

    def apply(self, l, r, f):
        """Apply map ``f`` to every element in ``[l, r)``."""
        self._check(l, r)
        if l == r:
            return
        l += self._n
        r += self._n
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)
        l2, r2 = l, r
        while l2 < r2:
            if l2 & 1:
                self._all_apply(l2, f)
                l2 += 1
            if r2 & 1:
                r2 -= 1
                self._all_apply(r2, f)
            l2 >>= 1
            r2 >>= 1
        for i in range(1, self._log + 1):
            if ((l >> i) << i) != l:
                self._update(l >> i)
            if ((r >> i) << i) != r:
                self._update((r - 1) >> i)