"""Exact rationals over unbounded integers, always in lowest terms."""


import sys

import numpy as np

from ..core import conversion
from ..core.utils import DivisionByZeroError, DomainError, FormatError, NumericOverflowError
from . import evalctx
from .bigint import BigInt, gcd


_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf


def _to_bigint(x, what):
    if isinstance(x, BigInt):
        return x
    elif conversion.is_native_int(x):
        return BigInt(x)
    else:
        raise TypeError('{} must be an integer, got {}'.format(what, repr(type(x))))


class Rational(object):
    """A fraction numerator / denominator of BigInts.

    The denominator is always positive, the fraction is always reduced,
    and zero is always 0/1.
    """

    __array_ufunc__ = None

    _numerator = BigInt.ZERO
    _denominator = BigInt.ONE

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        """Always positive."""
        return self._denominator

    def __init__(self, x=None, denominator=None):
        if denominator is not None:
            n = _to_bigint(x if x is not None else 0, 'numerator')
            d = _to_bigint(denominator, 'denominator')
            if not d:
                raise DivisionByZeroError('zero denominator for numerator {}'.format(str(n)))
            if n:
                g = gcd(n, d)
                n = n // g
                d = d // g
                if d.sign < 0:
                    n = -n
                    d = -d
                self._numerator = n
                self._denominator = d

        elif x is None:
            pass

        elif isinstance(x, Rational):
            self._numerator = x._numerator
            self._denominator = x._denominator

        elif isinstance(x, BigInt) or conversion.is_native_int(x):
            self._numerator = BigInt(x)

        elif conversion.is_native_float(x):
            if not np.isfinite(x):
                raise DomainError('cannot convert {} to an exact rational'.format(repr(x)))
            m, exp = conversion.strip_mantissa(*conversion.float_to_mantissa_exp(x))
            if exp >= 0:
                self._numerator = BigInt(m) << exp
            else:
                self._numerator = BigInt(m)
                self._denominator = BigInt.ONE << -exp

        elif isinstance(x, str):
            parsed = type(self).parse(x)
            self._numerator = parsed._numerator
            self._denominator = parsed._denominator

        else:
            raise TypeError('expected int, float, str, BigInt or Rational, got {}'.format(repr(type(x))))

    @classmethod
    def _make(cls, n, d):
        # n and d must already be reduced, with d > 0
        obj = cls.__new__(cls)
        if n:
            obj._numerator = n
            obj._denominator = d
        return obj

    @classmethod
    def _coerce(cls, x):
        if isinstance(x, Rational):
            return x
        elif isinstance(x, BigInt) or conversion.is_native_int(x):
            return cls._make(BigInt(x), BigInt.ONE)
        elif conversion.is_native_float(x):
            return cls(x)
        else:
            return None

    @classmethod
    def parse(cls, text):
        """Parse "N" or "N/D", where N and D are decimal integers."""
        if not isinstance(text, str):
            raise TypeError('expected str, got {}'.format(repr(type(text))))
        num, slash, den = text.partition('/')
        if slash:
            if not den:
                raise FormatError('missing denominator in {}'.format(repr(text)))
            return cls(BigInt.parse(num), BigInt.parse(den))
        else:
            return cls._make(BigInt.parse(num), BigInt.ONE)

    def __str__(self):
        if self._denominator == 1:
            return str(self._numerator)
        else:
            return '{}/{}'.format(str(self._numerator), str(self._denominator))

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, str(self._numerator), str(self._denominator))

    # arithmetic

    def _add(self, n2, d2):
        n1, d1 = self._numerator, self._denominator
        if not n1:
            return self._make(n2, d2)
        elif not n2:
            return self

        g = gcd(d1, d2)
        if g == 1:
            return self._make(n1 * d2 + n2 * d1, d1 * d2)

        # Knuth 4.5.1: only the common factor of the denominators can cancel
        den = d1 // g
        num = n1 * (d2 // g) + n2 * den
        if not num:
            return self._make(num, BigInt.ONE)
        g2 = gcd(num, g)
        return self._make(num // g2, den * (d2 // g2))

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._add(other._numerator, other._denominator)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._add(-other._numerator, other._denominator)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._add(-self._numerator, self._denominator)

    def _mul(self, n2, d2):
        n1, d1 = self._numerator, self._denominator
        if not n1 or not n2:
            return self._make(BigInt.ZERO, BigInt.ONE)
        g1 = gcd(n1, d2)
        g2 = gcd(n2, d1)
        num = (n1 // g1) * (n2 // g2)
        den = (d1 // g2) * (d2 // g1)
        if den.sign < 0:
            return self._make(-num, -den)
        else:
            return self._make(num, den)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._mul(other._numerator, other._denominator)

    def __rmul__(self, other):
        return self.__mul__(other)

    def _div(self, other):
        if not other._numerator:
            raise DivisionByZeroError('rational division of {} by zero'.format(str(self)))
        return self._mul(other._denominator, other._numerator)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._div(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._div(self)

    def __neg__(self):
        return self._make(-self._numerator, self._denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        if self._numerator.sign < 0:
            return -self
        else:
            return self

    def increment(self):
        """self + 1"""
        return self._make(self._numerator + self._denominator, self._denominator)

    def decrement(self):
        """self - 1"""
        return self._make(self._numerator - self._denominator, self._denominator)

    # comparison

    def _order(self, other):
        if conversion.is_native_float(other):
            if np.isnan(other):
                return None
            elif np.isinf(other):
                return -1 if other > 0 else 1
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        s1 = self._numerator.sign
        s2 = other._numerator.sign
        if s1 != s2:
            return -1 if s1 < s2 else 1
        return (self._numerator * other._denominator).compareto(other._numerator * self._denominator)

    def compareto(self, other):
        """Exact comparison, returning -1, 0 or 1, or None against NaN."""
        order = self._order(other)
        if order is NotImplemented:
            raise TypeError('cannot compare Rational with {}'.format(repr(type(other))))
        return order

    def __lt__(self, other):
        order = self._order(other)
        if order is NotImplemented:
            return NotImplemented
        return order is not None and order < 0

    def __le__(self, other):
        order = self._order(other)
        if order is NotImplemented:
            return NotImplemented
        return order is not None and order <= 0

    def __eq__(self, other):
        order = self._order(other)
        if order is NotImplemented:
            return NotImplemented
        return order == 0

    def __ne__(self, other):
        order = self._order(other)
        if order is NotImplemented:
            return NotImplemented
        return order != 0

    def __ge__(self, other):
        order = self._order(other)
        if order is NotImplemented:
            return NotImplemented
        return order is not None and order >= 0

    def __gt__(self, other):
        order = self._order(other)
        if order is NotImplemented:
            return NotImplemented
        return order is not None and order > 0

    def __hash__(self):
        # the same scheme as fractions.Fraction, so equal ints and floats hash equally
        try:
            dinv = pow(hash(self._denominator), -1, _HASH_MODULUS)
        except ValueError:
            h = _HASH_INF
        else:
            h = hash(hash(abs(self._numerator)) * dinv)
        if self._numerator.sign < 0:
            h = -h
        if h == -1:
            h = -2
        return h

    # conversions

    def __bool__(self):
        return bool(self._numerator)

    def to_double(self):
        """Lossy: numerator and denominator are converted separately."""
        return self._numerator.to_double() / self._denominator.to_double()

    def __float__(self):
        return self.to_double()

    def _to_native(self, ctx):
        i = round(self.to_double())
        if not ctx.contains(i):
            raise NumericOverflowError('{} does not fit in {}'.format(str(self), ctx.name))
        return ctx.dtype(i)

    def to_int32(self):
        return self._to_native(evalctx.INT32)

    def to_int64(self):
        return self._to_native(evalctx.INT64)

    def to_uint32(self):
        return self._to_native(evalctx.UINT32)

    def to_uint64(self):
        return self._to_native(evalctx.UINT64)


Rational.ZERO = Rational()
Rational.ONE = Rational(1)
