"""Deterministic Miller-Rabin and Pollard-Brent factorisation for 64-bit integers."""

from __future__ import annotations

from math import gcd


def miller_rabin(n, bases):
    """Miller-Rabin test of odd ``n > 2`` against the given bases."""
    s, d = 0, n - 1
    while not d & 1:
        s += 1
        d >>= 1
    for a in bases:
        if n <= a:
            return True
        x = pow(a, d, n)
        if x == 1:
            continue
        for _ in range(s):
            if x == n - 1:
                break
            x = x * x % n
        else:
            return False
    return True


def is_prime(n):
    """Deterministic primality test for ``n < 2**64``."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if not n & 1:
        return False
    if n < 4759123141:
        return miller_rabin(n, (2, 7, 61))
    return miller_rabin(n, (2, 325, 9375, 28178, 450775, 9780504, 1795265022))


def find_prime_factor(n):
    """Return a prime factor of composite ``n`` by Brent's Pollard rho."""
    if not n & 1:
        return 2
    m = int(n ** 0.125) + 1
    for c in range(1, n):
        def f(a, c=c):
            return (a * a + c) % n

        y, g, q, k, r = 0, 1, 1, 0, 1
        x = ys = 0
        while g == 1:
            x = y
            while k < 3 * r // 4:
                y = f(y)
                k += 1
            while k < r and g == 1:
                ys = y
                for _ in range(min(m, r - k)):
                    y = f(y)
                    q = q * abs(x - y) % n
                g = gcd(q, n)
                k += m
            k = r
            r *= 2
        if g == n:
            g = 1
            y = ys
            while g == 1:
                y = f(y)
                g = gcd(abs(x - y), n)
        if g == n:
            continue
        if is_prime(g):
            return g
        if is_prime(n // g):
            return n // g
        return find_prime_factor(g)
    raise ValueError(f"no factor found for {n}")


def factorize(n):
    """Return the sorted prime factorisation ``[(prime, exponent), ...]``."""
    if n < 1:
        raise ValueError("n must be positive")
    result = []
    while not is_prime(n) and n > 1:
        p = find_prime_factor(n)
        e = 0
        while n % p == 0:
            e += 1
            n //= p
        result.append((p, e))
    if n != 1:
        result.append((n, 1))
    result.sort()
    return result