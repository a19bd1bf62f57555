import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolib.rolling_hash import RollingHash, enumerate_lcp, enumerate_palindromes


def test_explicit_base_values():
    rh = RollingHash([1, 2], base=10)
    assert rh.get_hash(0, 2) == 12
    assert rh.get_hash(1, 2) == 2


def test_equal_slices_share_hash():
    rh = RollingHash("abcabcx")
    assert rh.get_hash(0, 3) == rh.get_hash(3, 6)
    assert rh.get_hash(0, 4) != rh.get_hash(3, 7)
    assert rh.get_hash(2, 2) == 0


def test_instances_share_base():
    assert RollingHash("abc").get_hash(0, 3) == RollingHash("zabc").get_hash(1, 4)


def test_out_of_range():
    with pytest.raises(IndexError):
        RollingHash("ab").get_hash(1, 3)


@given(st.text(alphabet="abc", max_size=40))
def test_enumerate_lcp_is_z_array(s):
    result = enumerate_lcp(s)
    assert len(result) == len(s)
    for i, v in enumerate(result):
        assert v == len(os.path.commonprefix([s, s[i:]]))


def _is_pal(t):
    return t == t[::-1]


@given(st.text(alphabet="ab", max_size=30))
def test_enumerate_palindromes_maximal(s):
    result = enumerate_palindromes(s)
    assert len(result) == max(2 * len(s) - 1, 0)
    for i, k in enumerate(result):
        start = (i + 1 - k) // 2
        end = start + k
        assert start + end == i + 1
        assert 0 <= start and end <= len(s)
        assert _is_pal(s[start:end])
        if start > 0 and end < len(s):
            assert s[start - 1] != s[end]


def test_whole_string_palindrome():
    s = "abacaba"
    assert enumerate_palindromes(s)[len(s) - 1] == len(s)
    assert enumerate_palindromes("") == []