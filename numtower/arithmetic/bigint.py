"""Unbounded signed integers, stored as a sign and a vector of 32-bit words."""


import operator
import sys

import numpy as np

from ..core import wordvec
from ..core import conversion
from ..core.utils import DivisionByZeroError, DomainError, FormatError, NumericOverflowError, sign_of
from . import evalctx


_HASH_MODULUS = sys.hash_info.modulus


class BigInt(object):
    """Arbitrary precision signed integer.

    The value is sign * sum(words[i] * 2**(32*i)). Values are immutable and
    always canonical: no high-order zero words, and sign == 0 exactly when
    there are no words.

    Division follows the truncating convention: the quotient rounds toward
    zero and the remainder takes the sign of the dividend, so // and % do
    NOT agree with python ints for operands of mixed sign. There is no true
    division; use Rational for that.
    """

    __array_ufunc__ = None

    _sign = 0
    _words = wordvec.EMPTY

    @property
    def sign(self):
        """-1, 0 or 1."""
        return self._sign

    @property
    def words(self):
        """Magnitude as a tuple of unsigned 32-bit words, least significant first."""
        return self._words

    @property
    def length(self):
        """Number of words in the magnitude."""
        return len(self._words)

    def __init__(self, x=None, sign=None, words=None):
        if sign is not None or words is not None:
            if x is not None:
                raise ValueError('cannot specify both x={} and sign/words'.format(repr(x)))
            if sign is None or words is None:
                raise ValueError('sign and words must be given together, got sign={}, words={}'
                                 .format(repr(sign), repr(words)))
            for w in words:
                if not (0 <= w <= wordvec.WORD_MASK):
                    raise ValueError('word out of range: {}'.format(repr(w)))
            ws = wordvec.normalize(words)
            if ws:
                if sign not in (-1, 1):
                    raise ValueError('sign of a nonzero value must be -1 or 1, got {}'.format(repr(sign)))
                self._sign = sign
                self._words = ws

        elif x is None:
            pass

        elif isinstance(x, BigInt):
            self._sign = x._sign
            self._words = x._words

        elif conversion.is_native_int(x):
            i = int(x)
            self._sign = sign_of(i)
            self._words = wordvec.from_int(abs(i))

        elif conversion.is_native_float(x):
            m, exp = conversion.float_to_mantissa_exp(x)
            mag = wordvec.from_int(abs(m))
            if exp >= 0:
                mag = wordvec.shift_left(mag, exp)
            else:
                mag = wordvec.shift_right(mag, -exp)
            if mag:
                self._sign = sign_of(m)
                self._words = mag

        elif isinstance(x, str):
            parsed = type(self).parse(x)
            self._sign = parsed._sign
            self._words = parsed._words

        else:
            raise TypeError('expected int, float, str or BigInt, got {}'.format(repr(type(x))))

    @classmethod
    def _make(cls, sign, words):
        # words must already be canonical
        if not words:
            return cls.ZERO
        obj = cls.__new__(cls)
        obj._sign = sign
        obj._words = words
        return obj

    @classmethod
    def _coerce(cls, x):
        if isinstance(x, BigInt):
            return x
        elif conversion.is_native_int(x):
            return cls(x)
        else:
            return None

    # parsing and formatting

    @classmethod
    def parse(cls, text, radix=10):
        """Parse an optional '-' followed by one or more digits in the given radix."""
        conversion.check_radix(radix)
        if not isinstance(text, str):
            raise TypeError('expected str, got {}'.format(repr(type(text))))

        if text.startswith('-'):
            negative = True
            digits = text[1:]
        else:
            negative = False
            digits = text

        if not digits:
            raise FormatError('{} does not contain any digits'.format(repr(text)))

        acc = wordvec.EMPTY
        for c in digits:
            v = conversion.digit_value(c, radix)
            if v is None:
                raise FormatError('invalid digit {} for radix {:d} in {}'
                                  .format(repr(c), radix, repr(text)))
            acc = wordvec.add_small(wordvec.mul_small(acc, radix), v)

        return cls._make(-1 if negative else 1, acc)

    def to_string(self, radix=10):
        conversion.check_radix(radix)
        if self._sign == 0:
            return '0'
        digits = []
        a = self._words
        while a:
            a, r = wordvec.divmod_small(a, radix)
            digits.append(conversion.DIGITS[r])
        if self._sign < 0:
            digits.append('-')
        return ''.join(reversed(digits))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, self.to_string())

    # arithmetic

    @classmethod
    def _add_signed(cls, asign, a, bsign, b):
        if asign == 0:
            return cls._make(bsign, b)
        elif bsign == 0:
            return cls._make(asign, a)
        elif asign == bsign:
            return cls._make(asign, wordvec.add(a, b))

        order = wordvec.compare(a, b)
        if order == 0:
            return cls.ZERO
        elif order > 0:
            return cls._make(asign, wordvec.sub(a, b))
        else:
            return cls._make(bsign, wordvec.sub(b, a))

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._add_signed(self._sign, self._words, other._sign, other._words)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._add_signed(self._sign, self._words, -other._sign, other._words)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._add_signed(other._sign, other._words, -self._sign, self._words)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        sign = self._sign * other._sign
        if sign == 0:
            return self.ZERO
        return self._make(sign, wordvec.mul(self._words, other._words))

    def __rmul__(self, other):
        return self.__mul__(other)

    def _divmod(self, other):
        if other._sign == 0:
            raise DivisionByZeroError('integer division of {} by zero'.format(str(self)))
        if self._sign == 0:
            return self.ZERO, self.ZERO
        q, r = wordvec.divmod_words(self._words, other._words)
        return self._make(self._sign * other._sign, q), self._make(self._sign, r)

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)

    def __rdivmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._divmod(self)

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)[0]

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._divmod(self)[0]

    def __mod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)[1]

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._divmod(self)[1]

    def __pow__(self, other, modulo=None):
        if modulo is not None:
            return NotImplemented
        e = self._coerce(other)
        if e is None:
            return NotImplemented
        if e._sign < 0:
            raise DomainError('negative integer exponent {}'.format(str(e)))

        # square and multiply, low bits first
        result = self.ONE
        factor = self
        nbits = wordvec.bit_length(e._words)
        for i in range(nbits):
            w = e._words[i // wordvec.WORD_BITS]
            if (w >> (i % wordvec.WORD_BITS)) & 1:
                result = result * factor
            if i + 1 < nbits:
                factor = factor * factor
        return result

    def __rpow__(self, other):
        base = self._coerce(other)
        if base is None:
            return NotImplemented
        return base.__pow__(self)

    def __neg__(self):
        return self._make(-self._sign, self._words)

    def __pos__(self):
        return self

    def __abs__(self):
        if self._sign < 0:
            return self._make(1, self._words)
        else:
            return self

    # bitwise operations, on the infinite two's complement representation

    def __invert__(self):
        # ~x == -x - 1
        if self._sign >= 0:
            return self._make(-1, wordvec.add_small(self._words, 1))
        else:
            return self._make(1, wordvec.sub(self._words, (1,)))

    def _bitwise(self, other, op):
        size = max(len(self._words), len(other._words)) + 1
        a = wordvec.to_twos(self._sign, self._words, size)
        b = wordvec.to_twos(other._sign, other._words, size)
        sign, words = wordvec.from_twos([op(x, y) for x, y in zip(a, b)])
        return self._make(sign, words)

    def __and__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._bitwise(other, operator.and_)

    def __or__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._bitwise(other, operator.or_)

    def __xor__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._bitwise(other, operator.xor)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __lshift__(self, k):
        k = operator.index(k)
        if k < 0:
            return self >> -k
        return self._make(self._sign, wordvec.shift_left(self._words, k))

    def __rshift__(self, k):
        k = operator.index(k)
        if k < 0:
            return self << -k
        shifted = wordvec.shift_right(self._words, k)
        if self._sign < 0:
            # arithmetic shift rounds toward negative infinity
            if wordvec.has_low_bits(self._words, k):
                shifted = wordvec.add_small(shifted, 1)
            return self._make(-1, shifted)
        else:
            return self._make(1, shifted)

    def __rlshift__(self, other):
        if not conversion.is_native_int(other):
            return NotImplemented
        return BigInt(other) << self

    def __rrshift__(self, other):
        if not conversion.is_native_int(other):
            return NotImplemented
        return BigInt(other) >> self

    # comparison

    def _compare_native(self, i):
        isign = sign_of(i)
        if self._sign != isign:
            return -1 if self._sign < isign else 1
        if isign == 0:
            return 0
        mag = abs(i)
        ilen = (mag.bit_length() + wordvec.WORD_BITS - 1) // wordvec.WORD_BITS
        if len(self._words) != ilen:
            # same sign, so the longer magnitude is further from zero
            if len(self._words) > ilen:
                return self._sign
            else:
                return -self._sign
        return self._sign * wordvec.compare(self._words, wordvec.from_int(mag))

    def _compare_float(self, f):
        f = float(f)
        if f != f:
            return None
        elif f == float('inf'):
            return -1
        elif f == float('-inf'):
            return 1
        truncated = BigInt(f)
        order = self.compareto(truncated)
        if order != 0 or f.is_integer():
            return order
        # self equals trunc(f), so the fractional part of f decides
        return -1 if f > 0 else 1

    def _order(self, other):
        if isinstance(other, BigInt):
            if self._sign != other._sign:
                return -1 if self._sign < other._sign else 1
            return self._sign * wordvec.compare(self._words, other._words)
        elif conversion.is_native_int(other):
            return self._compare_native(int(other))
        elif conversion.is_native_float(other):
            return self._compare_float(other)
        else:
            return NotImplemented

    def compareto(self, other):
        """Compare with another integer or float, returning -1, 0 or 1.
        Returns None if the other value is NaN, as the order is undefined.
        """
        order = self._order(other)
        if order is NotImplemented:
            raise TypeError('cannot compare BigInt with {}'.format(repr(type(other))))
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
        # same as hash(int(self)), computed a word at a time
        h = 0
        for w in reversed(self._words):
            h = ((h << wordvec.WORD_BITS) | w) % _HASH_MODULUS
        if self._sign < 0:
            h = -h
        if h == -1:
            h = -2
        return h

    # conversions

    def __bool__(self):
        return self._sign != 0

    def __int__(self):
        return self._sign * wordvec.to_int(self._words)

    __index__ = __int__

    def __float__(self):
        return self.to_double()

    def _to_native(self, ctx):
        if len(self._words) > ctx.nbits // wordvec.WORD_BITS:
            raise NumericOverflowError('{} does not fit in {}'.format(str(self), ctx.name))
        i = int(self)
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

    def _accumulate_double(self):
        value = 0.0
        for w in reversed(self._words):
            value = value * float(wordvec.WORD_BASE) + w
        if self._sign < 0:
            return -value
        else:
            return value

    def to_double(self):
        """Nearest double, accumulated a word at a time from the top.
        Magnitudes beyond the double range give the largest finite double
        of the same sign rather than an infinity.
        """
        return conversion.clamp_double(self._accumulate_double())

    def to_single(self):
        with np.errstate(over='ignore'):
            f = np.float32(self._accumulate_double())
        if np.isinf(f):
            raise NumericOverflowError('{} does not fit in float32'.format(str(self)))
        return f


BigInt.ZERO = BigInt()
BigInt.ONE = BigInt(1)
BigInt.MINUS_ONE = BigInt(-1)


def gcd(a, b):
    """Greatest common divisor by Euclid's algorithm; always non-negative."""
    a = abs(BigInt(a))
    b = abs(BigInt(b))
    while b:
        a, b = b, a % b
    return a


def lcm(a, b):
    """Least common multiple; zero if either argument is zero."""
    a = abs(BigInt(a))
    b = abs(BigInt(b))
    if not a or not b:
        return BigInt.ZERO
    return a // gcd(a, b) * b
