"""Inversion counting with a Fenwick tree."""

from __future__ import annotations

from bisect import bisect_left

from .fenwick_tree import FenwickTree


def inversion_number(values):
    """Count pairs ``i < j`` with ``values[i] >= values[j]``."""
    ranks = sorted(set(values))
    bit = FenwickTree(len(ranks) + 1)
    total = 0
    for i, v in enumerate(values):
        rank = bisect_left(ranks, v) + 1
        total += i - bit.prefix_sum(rank)
        bit.add(rank, 1)
    return total