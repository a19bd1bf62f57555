import itertools

import pytest
from hypothesis import given, strategies as st

from algolib.fenwick_tree import FenwickTree


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=40))
def test_range_sums(values):
    ft = FenwickTree(len(values))
    for i, v in enumerate(values):
        ft.add(i, v)
    prefix = [0, *itertools.accumulate(values)]
    for l in range(len(values) + 1):
        for r in range(l, len(values) + 1):
            assert ft.sum(l, r) == prefix[r] - prefix[l]


def test_repeated_adds():
    ft = FenwickTree(5)
    ft.add(2, 3)
    ft.add(2, 4)
    ft.add(4, 1)
    assert ft.prefix_sum(5) == 8
    assert ft.sum(2, 3) == 7
    assert ft.sum(0, 2) == 0


def test_out_of_range():
    ft = FenwickTree(3)
    with pytest.raises(IndexError):
        ft.add(3, 1)
    with pytest.raises(IndexError):
        ft.prefix_sum(4)