"""Binomial coefficients modulo a prime from precomputed factorials."""

from __future__ import annotations


class BinomialCoefficient:
    """Table of factorials up to ``n`` modulo prime ``p``."""

    def __init__(self, n=100000, p=998244353):
        self.mod = p
        size = max(n + 1, 2)
        self.fact = [1] * size
        self.fact_inv = [1] * size
        self.inv = [0, 1] + [0] * (size - 2)
        for i in range(2, n + 1):
            self.fact[i] = self.fact[i - 1] * i % p
            self.inv[i] = p - self.inv[p % i] * (p // i) % p
            self.fact_inv[i] = self.fact_inv[i - 1] * self.inv[i] % p
        self.n = n

    def __call__(self, n, r):
        """Return C(n, r) mod p; 0 when r is out of range."""
        if n < 0 or n < r or r < 0:
            return 0
        if n > self.n:
            raise ValueError("n exceeds the precomputed table")
        return self.fact[n] * self.fact_inv[n - r] % self.mod * self.fact_inv[r] % self.mod