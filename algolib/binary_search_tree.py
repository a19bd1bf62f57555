"""Unbalanced binary search tree usable as a double-ended priority queue."""

from __future__ import annotations


class _Node:
    __slots__ = ("val", "l", "r", "p")

    def __init__(self, val):
        self.val = val
        self.l = None
        self.r = None
        self.p = None


class BinarySearchTree:
    """Multiset of ordered values kept in a plain binary search tree."""

    def __init__(self, values=()):
        self._root = None
        self._len = 0
        for v in values:
            self.insert(v)

    def __len__(self):
        return self._len

    def __iter__(self):
        stack, cur = [], self._root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.l
            cur = stack.pop()
            yield cur.val
            cur = cur.r

    def _find(self, x):
        cur = self._root
        while cur is not None:
            if cur.val == x:
                return cur
            cur = cur.r if cur.val < x else cur.l
        return None

    def __contains__(self, x):
        return self._find(x) is not None

    def insert(self, x):
        """Insert ``x``; duplicates are kept."""
        node = _Node(x)
        cur, pre = self._root, None
        while cur is not None:
            pre = cur
            cur = cur.r if cur.val < x else cur.l
        if pre is None:
            self._root = node
        elif pre.val < x:
            pre.r = node
        else:
            pre.l = node
        node.p = pre
        self._len += 1

    def _transplant(self, u, v):
        if u is self._root:
            self._root = v
        elif u is u.p.l:
            u.p.l = v
        else:
            u.p.r = v
        if v is not None:
            v.p = u.p

    def erase(self, x):
        """Remove one occurrence of ``x``; return whether one was found."""
        node = self._find(x)
        if node is None:
            return False
        if node.l is None:
            self._transplant(node, node.r)
        elif node.r is None:
            self._transplant(node, node.l)
        else:
            nxt = node.r
            while nxt.l is not None:
                nxt = nxt.l
            if nxt is not node.r:
                self._transplant(nxt, nxt.r)
                nxt.r = node.r
                nxt.r.p = nxt
            self._transplant(node, nxt)
            nxt.l = node.l
            nxt.l.p = nxt
        self._len -= 1
        return True

    def minimum(self):
        """Return the smallest value; raise ``ValueError`` when empty."""
        cur = self._root
        if cur is None:
            raise ValueError("tree is empty")
        while cur.l is not None:
            cur = cur.l
        return cur.val

    def maximum(self):
        """Return the largest value; raise ``ValueError`` when empty."""
        cur = self._root
        if cur is None:
            raise ValueError("tree is empty")
        while cur.r is not None:
            cur = cur.r
        return cur.val