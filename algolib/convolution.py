"""Polynomial convolution by complex FFT and by NTT modulo 998244353."""

from __future__ import annotations

import cmath
import math

NTT_MOD = 998244353
_PRIMITIVE_ROOT = 3


def _ceil_pow2(n):
    size = 1
    while size < n:
        size *= 2
    return size


def bit_reversal(n):
    """Return the bit-reversal permutation of ``range(n)`` for a power of two ``n``."""
    b = [0] * n
    p, d = 1, n // 2
    while p < n:
        for i in range(p):
            b[i | p] = b[i] | d
        p *= 2
        d //= 2
    return b


def _butterflies(t, root, combine):
    n = len(t)
    h = 1
    while h < n:
        twiddles = [root(2 * h, i) for i in range(h)]
        for l in range(0, n, 2 * h):
            for i, w in enumerate(twiddles):
                v0 = t[l + i]
                v1 = t[l + h + i] * w
                t[l + i], t[l + h + i] = combine(v0, v1)
        h *= 2


def fft_transform(values, inverse=False):
    """DFT (or inverse DFT) of ``values`` zero-padded to a power of two."""
    n = _ceil_pow2(len(values))
    t = [0j] * n
    for i, idx in enumerate(bit_reversal(n)):
        if i < len(values):
            t[idx] = complex(values[i])
    _butterflies(
        t,
        lambda m, k: cmath.exp(complex(0, 2 * math.pi * k / m)),
        lambda a, b: (a + b, a - b),
    )
    if not inverse:
        return t
    t[1:] = t[:0:-1]
    return [x / n for x in t]


def fft_convolution(a, b):
    """Convolve two sequences; the result is padded to a power-of-two length."""
    n = _ceil_pow2(len(a) + len(b) - 1)
    fa = fft_transform(list(a) + [0] * (n - len(a)))
    fb = fft_transform(list(b) + [0] * (n - len(b)))
    return fft_transform([x * y for x, y in zip(fa, fb)], inverse=True)


def ntt_transform(values, size, inverse=False):
    """Number-theoretic transform of length ``size`` (a power of two) mod 998244353."""
    if size & (size - 1) or size < 1:
        raise ValueError("size must be a power of two")
    if len(values) > size:
        raise ValueError("too many values for the transform size")
    w = pow(_PRIMITIVE_ROOT, (NTT_MOD - 1) // size, NTT_MOD)
    roots = [1] * size
    for i in range(1, size):
        roots[i] = roots[i - 1] * w % NTT_MOD
    t = [0] * size
    br = bit_reversal(size)
    for i, v in enumerate(values):
        t[br[i]] = v % NTT_MOD
    _butterflies(
        t,
        lambda m, k: roots[size // m * k],
        lambda a, b: ((a + b) % NTT_MOD, (a - b) % NTT_MOD),
    )
    if not inverse:
        return t
    t[1:] = t[:0:-1]
    n_inv = pow(size, NTT_MOD - 2, NTT_MOD)
    return [x * n_inv % NTT_MOD for x in t]


def ntt_convolution(a, b):
    """Convolve integer sequences modulo 998244353; length ``len(a)+len(b)-1``."""
    if not a or not b:
        return []
    length = len(a) + len(b) - 1
    n = _ceil_pow2(length)
    fa = ntt_transform(a, n)
    fb = ntt_transform(b, n)
    c = ntt_transform([x * y % NTT_MOD for x, y in zip(fa, fb)], n, inverse=True)
    return c[:length]