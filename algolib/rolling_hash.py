"""Polynomial rolling hash modulo 2**61 - 1 and string queries built on it."""

from __future__ import annotations

import random

MOD = (1 << 61) - 1


def _draw_base():
    return random.SystemRandom().randrange(1, MOD)


class RollingHash:
    """Prefix hashes of a sequence of characters or integers.

    Instances created without ``base`` share one random base, so their hashes
    can be compared with each other.
    """

    _shared_base = 0

    def __init__(self, values, base=None):
        if base is None:
            if not RollingHash._shared_base:
                RollingHash._shared_base = _draw_base()
            base = RollingHash._shared_base
        self.base = base % MOD
        codes = [ord(v) if isinstance(v, str) else int(v) for v in values]
        self._power = [1] * (len(codes) + 1)
        self._hashed = [0] * (len(codes) + 1)
        for i, c in enumerate(codes):
            self._power[i + 1] = self._power[i] * self.base % MOD
            self._hashed[i + 1] = (self._hashed[i] * self.base + c) % MOD

    def __len__(self):
        return len(self._hashed) - 1

    def get_hash(self, l, r):
        """Return the hash of the slice ``[l, r)``."""
        if not 0 <= l <= r <= len(self):
            raise IndexError("range out of bounds")
        return (self._hashed[r] - self._hashed[l] * self._power[r - l]) % MOD


def _lcp_with_prefix(p, rh):
    lb, ub = 0, len(rh) - p + 1
    while ub - lb > 1:
        mid = (ub + lb) // 2
        if rh.get_hash(p, p + mid) == rh.get_hash(0, mid):
            lb = mid
        else:
            ub = mid
    return lb


def enumerate_lcp(s):
    """Return, for each position, the longest common prefix of ``s`` and its suffix there."""
    rh = RollingHash(s)
    return [_lcp_with_prefix(i, rh) for i in range(len(rh))]


def _palindrome_radius(p, forward, backward):
    n = len(forward)
    q = n - p - 1
    lb, ub = 0, min(n - p, p + 1)
    while ub - lb > 1:
        mid = (ub + lb) // 2
        if forward.get_hash(p - mid, p + mid + 1) == backward.get_hash(q - mid, q + mid + 1):
            lb = mid
        else:
            ub = mid
    return lb


def enumerate_palindromes(s):
    """Return the longest palindrome length centred at each of the ``2n-1`` centres."""
    codes = [0]
    for c in s:
        codes.append((ord(c) if isinstance(c, str) else int(c)) + 1)
        codes.append(0)
    forward = RollingHash(codes)
    backward = RollingHash(codes[::-1])
    return [_palindrome_radius(i, forward, backward) for i in range(1, len(codes) - 1)]