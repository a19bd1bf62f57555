"""Elementary number theory with C-style truncating division."""

from __future__ import annotations

import math


def _tdiv(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _tmod(a, b):
    return a - b * _tdiv(a, b)


def gcd(a, b):
    """Euclid's algorithm with truncating remainder."""
    while b:
        a, b = b, _tmod(a, b)
    return a


def ext_gcd(a, b):
    """Return ``(d, x, y)`` with ``a*x + b*y == d``."""
    if b == 0:
        return a, 1, 0
    d, y, x = ext_gcd(b, _tmod(a, b))
    y -= _tdiv(a, b) * x
    return d, x, y


def safe_mod(a, m):
    """Return ``a`` reduced into ``[0, m)`` for positive ``m``."""
    return (_tmod(a, m) + m) % m


def crt(remainders, moduli):
    """Solve the system ``x ≡ remainders[i] (mod moduli[i])``.

    Returns ``(r, M)`` with ``M`` the lcm; raises ``ValueError`` when no
    solution exists.
    """
    if len(remainders) != len(moduli):
        raise ValueError("remainders and moduli differ in length")
    r, big_m = 0, 1
    for b, m in zip(remainders, moduli):
        d, p, _ = ext_gcd(big_m, m)
        if _tmod(b - r, d) != 0:
            raise ValueError("system has no solution")
        tmp = _tmod(_tdiv(b - r, d) * p, _tdiv(m, d))
        r += big_m * tmp
        big_m *= _tdiv(m, d)
    return safe_mod(r, big_m), big_m


def int_pow(base, exponent):
    """Return ``base ** exponent`` by binary exponentiation."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def modpow(base, exponent, mod=998244353):
    """Return ``base ** exponent % mod`` (1 for a zero exponent)."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent:
        if exponent & 1:
            result = result * base % mod
        base = base * base % mod
        exponent >>= 1
    return result


def is_prime(p):
    """Trial-division primality test."""
    if p < 2:
        return False
    i = 2
    while i * i <= p:
        if p % i == 0:
            return False
        i += 1
    return True


def factorize(n):
    """Return the prime factorisation as ``[(prime, exponent), ...]``."""
    if n <= 0:
        raise ValueError("n must be positive")
    result = []
    p = 2
    while p * p <= n:
        if n % p == 0:
            e = 0
            while n % p == 0:
                n //= p
                e += 1
            result.append((p, e))
        p += 1
    if n != 1:
        result.append((n, 1))
    return result


def sqrt_floor(n):
    """Return the largest integer whose square is at most ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return math.isqrt(n)