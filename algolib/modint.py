"""Modular integers: a plain residue class type and Montgomery-form variants."""

from __future__ import annotations

from functools import lru_cache


class ModInt:
    """Integer modulo a fixed prime ``MOD``; subclass via :func:`modint_type`."""

    MOD = 998244353
    __slots__ = ("_v",)

    def __init__(self, v=0):
        self._v = int(v) % self.MOD

    def val(self):
        """Return the canonical residue in ``[0, MOD)``."""
        return self._v

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other.MOD != self.MOD:
                raise ValueError("moduli differ")
            return other._v
        if isinstance(other, int):
            return other % self.MOD
        return NotImplemented

    def _make(self, v):
        obj = object.__new__(type(self))
        obj._v = v
        return obj

    def __add__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self._make((self._v + o) % self.MOD)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self._make((self._v - o) % self.MOD)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self._make((o - self._v) % self.MOD)

    def __mul__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self._make(self._v * o % self.MOD)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self * self._make(o).inv()

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self._make(o) * self.inv()

    def __neg__(self):
        return self._make((-self._v) % self.MOD)

    def __pos__(self):
        return self._make(self._v)

    def __eq__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self._v == o

    def __hash__(self):
        return hash((self.MOD, self._v))

    def __int__(self):
        return self._v

    def __repr__(self):
        return f"{type(self).__name__}({self._v})"

    def __str__(self):
        return str(self._v)

    def pow(self, n):
        """Return ``self ** n`` for ``n >= 0``."""
        if n < 0:
            raise ValueError("exponent must be non-negative")
        result, base = 1, self._v
        while n:
            if n & 1:
                result = result * base % self.MOD
            base = base * base % self.MOD
            n >>= 1
        return self._make(result % self.MOD)

    def inv(self):
        """Return the inverse by Fermat's little theorem (``MOD`` must be prime)."""
        return self.pow(self.MOD - 2)


@lru_cache(maxsize=None)
def modint_type(mod):
    """Return a :class:`ModInt` subclass fixed to ``mod``."""
    if mod < 1:
        raise ValueError("modulus must be positive")
    return type(f"ModInt{mod}", (ModInt,), {"MOD": mod, "__slots__": ()})


class _Montgomery:
    _BITS = 32
    _NEWTON_STEPS = 4
    MOD = None
    INV_MOD = 0
    R2 = 0
    __slots__ = ("_v",)

    @classmethod
    def _configure(cls, mod):
        if mod < 1 or mod % 2 == 0:
            raise ValueError("modulus must be a positive odd number")
        if mod >= 1 << (cls._BITS - 1):
            raise ValueError("modulus too large")
        mask = (1 << cls._BITS) - 1
        cls.MOD = mod
        cls.R2 = (1 << (2 * cls._BITS)) % mod
        res = mod
        for _ in range(cls._NEWTON_STEPS):
            res = res * (2 - mod * res) & mask
        cls.INV_MOD = res

    @classmethod
    def _modulus(cls):
        if cls.MOD is None:
            raise RuntimeError("modulus has not been set")
        return cls.MOD

    @classmethod
    def _reduce(cls, v):
        mask = (1 << cls._BITS) - 1
        m = (v & mask) * (-cls.INV_MOD & mask) & mask
        return (v + m * cls.MOD) >> cls._BITS

    def __init__(self, v=0):
        mod = self._modulus()
        self._v = self._reduce((int(v) % mod) * self.R2)

    def _make(self, raw):
        obj = object.__new__(type(self))
        obj._v = raw
        return obj

    def _coerce(self, other):
        if isinstance(other, type(self)):
            return other
        if isinstance(other, int):
            return type(self)(other)
        return NotImplemented

    def _residue(self):
        res = self._reduce(self._v)
        return res - self.MOD if res >= self.MOD else res

    def _power(self, n):
        if n < 0:
            raise ValueError("exponent must be non-negative")
        result, mul = type(self)(1), self
        while n:
            if n & 1:
                result = result * mul
            mul = mul * mul
            n >>= 1
        return result

    def _inverse(self):
        return self._power((self.MOD - 2) & ((1 << self._BITS) - 1))

    def __add__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        s = self._v + o._v
        if s >= 2 * self.MOD:
            s -= 2 * self.MOD
        return self._make(s)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        s = self._v + 2 * self.MOD - o._v
        if s >= 2 * self.MOD:
            s -= 2 * self.MOD
        return self._make(s)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return o - self

    def __mul__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self._make(self._reduce(self._v * o._v))

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self * o._inverse()

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return o * self._inverse()

    def __neg__(self):
        return type(self)() - self

    def __pos__(self):
        return self._make(self._v)

    def _canon(self):
        return self._v - self.MOD if self._v >= self.MOD else self._v

    def __eq__(self, other):
        o = self._coerce(other)
        if o is NotImplemented:
            return o
        return self._canon() == o._canon()

    def __hash__(self):
        return hash(self._residue())

    def __int__(self):
        return self._residue()

    def __repr__(self):
        return f"{type(self).__name__}({self._residue()})"

    def __str__(self):
        return str(self._residue())


class MontgomeryModint32(_Montgomery):
    """Montgomery residue with a 32-bit radix; odd moduli below 2**31."""

    _BITS = 32
    _NEWTON_STEPS = 4
    MOD = None
    __slots__ = ()

    @classmethod
    def set_mod(cls, mod):
        """Set the odd modulus shared by all values of this class."""
        cls._configure(mod)

    def val(self):
        """Return the canonical residue in ``[0, MOD)``."""
        return self._residue()

    def pow(self, n):
        """Return ``self ** n`` for ``n >= 0``."""
        return self._power(n)

    def inv(self):
        """Return the inverse by Fermat's little theorem (``MOD`` must be prime)."""
        return self._inverse()


class MontgomeryModint64(_Montgomery):
    """Montgomery residue with a 64-bit radix; odd moduli below 2**63."""

    _BITS = 64
    _NEWTON_STEPS = 5
    MOD = None
    __slots__ = ()

    @classmethod
    def set_mod(cls, mod):
        """Set the odd modulus shared by all values of this class."""
        cls._configure(mod)

    @classmethod
    def get_mod(cls):
        """Return the current modulus, or None when unset."""
        return cls.MOD

    def val(self):
        """Return the canonical residue in ``[0, MOD)``."""
        return self._residue()

    def pow(self, n):
        """Return ``self ** n`` for ``n >= 0``."""
        return self._power(n)

    def inv(self):
        """Return the inverse by Fermat's little theorem (``MOD`` must be prime)."""
        return self._inverse()