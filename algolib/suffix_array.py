"""Suffix array by prefix doubling and LCP array by Kasai's algorithm."""

from __future__ import annotations


def suffix_array(s):
    """Return the starting positions of the suffixes of ``s`` in sorted order."""
    n = len(s)
    sa = list(range(n))
    if n <= 1:
        return sa
    alphabet = {c: i + 1 for i, c in enumerate(sorted(set(s)))}
    rank = [alphabet[c] for c in s]
    k = 1
    while k < n:
        def key(i, rank=rank, k=k):
            return rank[i], rank[i + k] if i + k < n else 0

        sa.sort(key=key)
        new_rank = [0] * n
        new_rank[sa[0]] = 1
        for prev, cur in zip(sa, sa[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
        rank = new_rank
        if rank[sa[-1]] == n:
            break
        k *= 2
    return sa


def lcp_array(s, sa):
    """Return the longest common prefix of each adjacent pair in ``sa``."""
    n = len(s)
    if n == 0:
        return []
    rank = [0] * n
    for i, p in enumerate(sa):
        rank[p] = i
    lcp = [0] * (n - 1)
    h = 0
    for i in range(n):
        if h > 0:
            h -= 1
        if rank[i] == 0:
            continue
        j = sa[rank[i] - 1]
        while i + h < n and j + h < n and s[i + h] == s[j + h]:
            h += 1
        lcp[rank[i] - 1] = h
    return lcp