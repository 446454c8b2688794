"""Complex numbers over a generic scalar field.

Subclasses pick the scalar type by providing the scalar hooks below;
everything that only needs field arithmetic lives here.
"""


import math
import sys

from ..core.utils import DivisionByZeroError, FormatError


_HASH_IMAG = sys.hash_info.imag
_HASH_BITS = sys.hash_info.width


def _wrap_hash(h):
    # the same wraparound as the native hash type
    h = (h + (1 << (_HASH_BITS - 1))) % (1 << _HASH_BITS) - (1 << (_HASH_BITS - 1))
    if h == -1:
        return -2
    return h


class CNum(object):
    """A complex number real + imaginary*i, with scalars of some field type."""

    __array_ufunc__ = None

    # scalar hooks

    _zero = None

    @classmethod
    def _coerce_scalar(cls, x):
        """Convert x to the scalar type, or return None if it isn't a real number."""
        raise NotImplementedError()

    @staticmethod
    def _scalar_to_double(x):
        raise NotImplementedError()

    @staticmethod
    def _format_scalar(x):
        return str(x)

    @staticmethod
    def _parse_scalar(text):
        raise NotImplementedError()

    # data

    _real = None
    _imaginary = None

    @property
    def real(self):
        return self._real

    @property
    def imaginary(self):
        return self._imaginary

    def __init__(self, real=None, imaginary=None):
        if imaginary is None:
            if real is None:
                parts = (self._zero, self._zero)
            else:
                parts = self._split(real)
            if parts is None:
                raise TypeError('cannot convert {} to {}'.format(repr(real), type(self).__name__))
            self._real, self._imaginary = parts
        else:
            re = self._coerce_scalar(real)
            im = self._coerce_scalar(imaginary)
            if re is None or im is None:
                raise TypeError('cannot make {} from parts {}, {}'
                                .format(type(self).__name__, repr(real), repr(imaginary)))
            self._real = re
            self._imaginary = im

    @classmethod
    def _make(cls, re, im):
        obj = cls.__new__(cls)
        obj._real = re
        obj._imaginary = im
        return obj

    @classmethod
    def _split(cls, x):
        """(real, imaginary) scalars for an operand, or None if it can't be used."""
        if isinstance(x, cls):
            return x._real, x._imaginary
        re = cls._coerce_scalar(x)
        if re is None:
            return None
        return re, cls._zero

    @classmethod
    def _coerce(cls, x):
        if isinstance(x, cls):
            return x
        parts = cls._split(x)
        if parts is None:
            return None
        return cls._make(*parts)

    @classmethod
    def parse(cls, text):
        """Parse a real part, optionally followed by a signed imaginary part
        ending in 'i', as printed by str(): "5+3i", "1-5/2i", "7".
        """
        if not isinstance(text, str):
            raise TypeError('expected str, got {}'.format(repr(type(text))))
        if not text.endswith('i'):
            return cls._make(cls._parse_scalar(text), cls._zero)

        body = text[:-1]
        # find the sign that starts the imaginary part, skipping exponent signs
        split = len(body) - 1
        while split > 0:
            if body[split] in '+-' and body[split - 1] not in 'eE':
                break
            split -= 1
        if split <= 0:
            raise FormatError('{} has no real part before the imaginary part'.format(repr(text)))

        re = cls._parse_scalar(body[:split])
        if body[split] == '+':
            im = cls._parse_scalar(body[split + 1:])
        else:
            im = cls._parse_scalar(body[split:])
        return cls._make(re, im)

    def __str__(self):
        re = self._format_scalar(self._real)
        im = self._format_scalar(self._imaginary)
        if im.startswith('-'):
            return re + im + 'i'
        else:
            return re + '+' + im + 'i'

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, repr(self._real), repr(self._imaginary))

    # parts

    def conjugate(self):
        return self._make(self._real, -self._imaginary)

    def inverse(self):
        """Rotate a quarter turn counterclockwise: multiply by i."""
        return self._make(-self._imaginary, self._real)

    def angle(self):
        """Argument, as a double."""
        return math.atan2(self._scalar_to_double(self._imaginary), self._scalar_to_double(self._real))

    def magnitude(self):
        """Modulus, as a double."""
        return math.hypot(self._scalar_to_double(self._real), self._scalar_to_double(self._imaginary))

    def __abs__(self):
        return self.magnitude()

    def __bool__(self):
        return bool(self._real) or bool(self._imaginary)

    # arithmetic

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._make(self._real + other._real, self._imaginary + other._imaginary)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._make(self._real - other._real, self._imaginary - other._imaginary)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__sub__(self)

    def _mul(self, other):
        a, b = self._real, self._imaginary
        c, d = other._real, other._imaginary
        return self._make(a * c - b * d, a * d + b * c)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._mul(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def _divide(self, other):
        """Scaled division: divide through by the larger component of the divisor
        first, so that no intermediate is much larger than the result.
        """
        a, b = self._real, self._imaginary
        c, d = other._real, other._imaginary
        if not c and not d:
            raise DivisionByZeroError('complex division of {} by zero'.format(str(self)))

        if abs(c) >= abs(d):
            ratio = d / c
            denom = c + d * ratio
            return self._make((a + b * ratio) / denom, (b - a * ratio) / denom)
        else:
            ratio = c / d
            denom = c * ratio + d
            return self._make((a * ratio + b) / denom, (b * ratio - a) / denom)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._divide(self)

    def __neg__(self):
        return self._make(-self._real, -self._imaginary)

    def __pos__(self):
        return self

    # comparison: equality only, complex numbers are not ordered

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._real == other._real and self._imaginary == other._imaginary

    def __ne__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return not (self._real == other._real and self._imaginary == other._imaginary)

    def __hash__(self):
        # matches hash(complex) when both parts are doubles
        return _wrap_hash(hash(self._real) + _HASH_IMAG * hash(self._imaginary))
