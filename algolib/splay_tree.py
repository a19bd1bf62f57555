"""Splay tree over a sequence with lazy range maps, range products and reversal."""

from __future__ import annotations


class _Node:
    __slots__ = ("l", "r", "p", "val", "prod", "f", "sz", "rev")

    def __init__(self, x, f):
        self.l = None
        self.r = None
        self.p = None
        self.val = x
        self.prod = x
        self.f = f
        self.sz = 1
        self.rev = False


class LazyReversibleSplayTree:
    """Sequence supporting positional insert/erase, range apply, reverse and product.

    ``op``/``e`` form a monoid, ``mapping(f, x)`` applies a map, ``composition(f, g)``
    is ``f`` after ``g`` and ``identity()`` is the identity map.  ``reverse_prod``
    returns the product of a range as seen after reversing it.
    """

    def __init__(self, op, e, mapping, composition, identity, reverse_prod=None):
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._id = identity
        self._reverse_prod = reverse_prod if reverse_prod is not None else (lambda x: x)
        self._root = None

    def __len__(self):
        return self._root.sz if self._root is not None else 0

    def _rotate_right(self, v):
        u = v.l
        v.l = u.r
        if u.r is not None:
            u.r.p = v
        u.p = v.p
        if v.p is None:
            self._root = u
        elif v is v.p.l:
            v.p.l = u
        else:
            v.p.r = u
        u.r = v
        v.p = u

    def _rotate_left(self, v):
        u = v.r
        v.r = u.l
        if u.l is not None:
            u.l.p = v
        u.p = v.p
        if v.p is None:
            self._root = u
        elif v is v.p.l:
            v.p.l = u
        else:
            v.p.r = u
        u.l = v
        v.p = u

    def _propagate(self, v):
        f = v.f
        for c in (v.l, v.r):
            if c is not None:
                c.val = self._mapping(f, c.val)
                c.prod = self._mapping(f, c.prod)
                c.f = self._composition(f, c.f)
        if v.rev:
            v.l, v.r = v.r, v.l
            for c in (v.l, v.r):
                if c is not None:
                    c.rev = not c.rev
                    c.prod = self._reverse_prod(c.prod)
            v.rev = False
        v.f = self._id()

    def _update(self, v):
        v.sz = 1
        prod = self._e()
        if v.l is not None:
            v.sz += v.l.sz
            prod = self._op(prod, v.l.prod)
        prod = self._op(prod, v.val)
        if v.r is not None:
            v.sz += v.r.sz
            prod = self._op(prod, v.r.prod)
        v.prod = prod

    def _splay(self, v):
        self._propagate(v)
        while v.p is not None:
            p = v.p
            g = p.p
            if g is not None:
                self._propagate(g)
            self._propagate(p)
            self._propagate(v)
            if g is None:
                if p.l is v:
                    self._rotate_right(p)
                else:
                    self._rotate_left(p)
            elif p.l is v and g.l is p:
                self._rotate_right(g)
                self._rotate_right(p)
            elif p.r is v and g.r is p:
                self._rotate_left(g)
                self._rotate_left(p)
            elif p.l is v and g.r is p:
                self._rotate_right(p)
                self._rotate_left(g)
            else:
                self._rotate_left(p)
                self._rotate_right(g)
            if g is not None:
                self._update(g)
            self._update(p)
            self._update(v)
        self._update(v)

    def _kth(self, k):
        cur = self._root
        while True:
            self._propagate(cur)
            lsz = cur.l.sz if cur.l is not None else 0
            if k == lsz:
                break
            if k < lsz:
                cur = cur.l
            else:
                k -= lsz + 1
                cur = cur.r
        self._splay(cur)
        return cur

    def _check_range(self, l, r):
        if not 0 <= l <= r <= len(self):
            raise IndexError("range out of bounds")

    def insert_at(self, k, x):
        """Insert ``x`` so that it becomes element ``k``."""
        if not 0 <= k <= len(self):
            raise IndexError("position out of range")
        node = _Node(x, self._id())
        root = self._root
        if k == 0:
            node.r = root
            if root is not None:
                root.p = node
            self._root = node
            self._update(node)
            return
        if k == root.sz:
            node.l = root
            root.p = node
            self._root = node
            self._update(node)
            return
        p = self._kth(k)
        node.l = p.l
        node.r = p
        self._root = node
        if node.l is not None:
            node.l.p = node
        p.p = node
        p.l = None
        self._update(p)
        self._update(node)

    def erase_at(self, k):
        """Remove element ``k``."""
        if not 0 <= k < len(self):
            raise IndexError("position out of range")
        p = self._kth(k)
        if k == 0:
            self._root = p.r
            if self._root is not None:
                self._root.p = None
        elif k == p.sz - 1:
            self._root = p.l
            if self._root is not None:
                self._root.p = None
        else:
            left, right = p.l, p.r
            right.p = None
            self._root = right
            right = self._kth(0)
            right.l = left
            left.p = right
            self._update(right)

    def _between(self, l, r):
        root = self._root
        if l == 0 and r == root.sz:
            return root
        if l == 0:
            return self._kth(r).l
        if r == root.sz:
            return self._kth(l - 1).r
        rp = self._kth(r)
        lp = rp.l
        self._root = lp
        lp.p = None
        lp = self._kth(l - 1)
        self._root = rp
        rp.l = lp
        lp.p = rp
        self._update(rp)
        return lp.r

    def reverse(self, l, r):
        """Reverse the elements in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return
        v = self._between(l, r)
        v.rev = not v.rev
        v.prod = self._reverse_prod(v.prod)
        self._splay(v)

    def apply(self, l, r, f):
        """Apply map ``f`` to every element in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return
        v = self._between(l, r)
        v.val = self._mapping(f, v.val)
        v.prod = self._mapping(f, v.prod)
        v.f = self._composition(f, v.f)
        self._splay(v)

    def prod(self, l, r):
        """Return the product of ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return self._e()
        return self._between(l, r).prod

    def get(self, k):
        """Return element ``k``."""
        if not 0 <= k < len(self):
            raise IndexError("position out of range")
        return self.prod(k, k + 1)