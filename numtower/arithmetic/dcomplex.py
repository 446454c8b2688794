"""Double precision complex numbers, with transcendental functions."""


import math

import numpy as np

from ..core import conversion
from ..core.utils import DivisionByZeroError, DomainError, FormatError
from .bigint import BigInt
from .rational import Rational
from .cnum import CNum


def _exp(x):
    # overflow goes to infinity, as in IEEE arithmetic
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _pow(x, y):
    # only called with x > 0
    try:
        return x ** y
    except OverflowError:
        return math.inf


def _cos(x):
    if math.isinf(x):
        return math.nan
    return math.cos(x)


def _sin(x):
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def _fdiv(a, b):
    # IEEE division: nonzero by zero is infinite, zero by zero is nan
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(a) / np.float64(b))


def _exact_parts(x):
    """Exact (real, imaginary) for operands that hold more than a double,
    or None for doubles and anything else.
    """
    if isinstance(x, CNum) and not isinstance(x, Complex):
        return x.real, x.imaginary
    elif isinstance(x, (BigInt, Rational)):
        return x, 0
    elif conversion.is_native_int(x):
        return int(x), 0
    else:
        return None


class Complex(CNum):
    """Complex number with IEEE 754 double parts.

    Every function is built from exp, log, sqrt and the real math library
    in a fixed order, so results are reproducible bit for bit.
    """

    _zero = 0.0

    @classmethod
    def _coerce_scalar(cls, x):
        if isinstance(x, (BigInt, Rational)):
            return x.to_double()
        elif conversion.is_native_int(x) or conversion.is_native_float(x):
            return float(x)
        else:
            return None

    @staticmethod
    def _scalar_to_double(x):
        return x

    @staticmethod
    def _format_scalar(x):
        # integral values print without a fractional part
        if x.is_integer() and abs(x) < 2.0 ** 53:
            return '{:d}'.format(int(x))
        else:
            return repr(x)

    @staticmethod
    def _parse_scalar(text):
        # float() also accepts surrounding whitespace and '_', which literals don't
        if not text or text != text.strip() or '_' in text:
            raise FormatError('{} is not a double'.format(repr(text)))
        try:
            return float(text)
        except ValueError:
            raise FormatError('{} is not a double'.format(repr(text))) from None

    @classmethod
    def _split(cls, x):
        if isinstance(x, (complex, np.complexfloating)):
            return float(x.real), float(x.imag)
        elif isinstance(x, CNum) and not isinstance(x, cls):
            return x._scalar_to_double(x.real), x._scalar_to_double(x.imaginary)
        else:
            return super()._split(x)

    def __complex__(self):
        return complex(self._real, self._imaginary)

    def _divide(self, other):
        a, b = self._real, self._imaginary
        c, d = other._real, other._imaginary
        if c == 0.0 and d == 0.0:
            raise DivisionByZeroError('complex division of {} by zero'.format(str(self)))

        if math.fabs(c) >= math.fabs(d):
            ratio = d / c
            denom = c + d * ratio
            return Complex._make((a + b * ratio) / denom, (b - a * ratio) / denom)
        else:
            ratio = c / d
            denom = c * ratio + d
            return Complex._make((a * ratio + b) / denom, (b * ratio - a) / denom)

    def __eq__(self, other):
        # integers and rationals compare exactly, so equal values hash equally
        parts = _exact_parts(other)
        if parts is None:
            return super().__eq__(other)
        return parts[0] == self._real and parts[1] == self._imaginary

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    __hash__ = CNum.__hash__

    def _times_i(self):
        return Complex._make(-self._imaginary, self._real)

    def _half(self):
        return Complex._make(self._real / 2.0, self._imaginary / 2.0)

    # exponential and logarithms

    def exp(self):
        if self._imaginary == 0.0:
            return Complex._make(_exp(self._real), 0.0)
        scale = _exp(self._real)
        return Complex._make(scale * _cos(self._imaginary), scale * _sin(self._imaginary))

    def log(self, base=None):
        """Principal natural logarithm, or the logarithm in the given base."""
        modulus = self.magnitude()
        if modulus == 0.0:
            raise DomainError('logarithm of zero')
        lnr = math.log(modulus)
        if base is not None:
            base = float(base)
            if not base > 0.0 or base == 1.0:
                raise DomainError('logarithm in base {}'.format(repr(base)))
            lnr = lnr / math.log(base)
        return Complex._make(lnr, self.angle())

    def log10(self):
        return self.log(10.0)

    def sqrt(self):
        """Principal square root."""
        re = self._real
        im = self._imaginary
        if im == 0.0:
            # negative reals have no real root
            if re >= 0.0:
                return Complex._make(math.sqrt(re), 0.0)
            else:
                return Complex._make(math.nan, 0.0)

        r = self.magnitude()
        y = math.sqrt((r - re) / 2.0)
        if y == 0.0:
            # im is negligible next to a positive re
            x = math.sqrt((r + re) / 2.0)
            y = im / (2.0 * x)
        else:
            x = im / (2.0 * y)
        if x < 0.0:
            return Complex._make(-x, -y)
        else:
            return Complex._make(x, y)

    def __pow__(self, power, modulo=None):
        if modulo is not None:
            return NotImplemented
        power = self._coerce(power)
        if power is None:
            return NotImplemented

        if power._real == 0.0 and power._imaginary == 0.0:
            return Complex._make(1.0, 0.0)
        if self._real == 0.0 and self._imaginary == 0.0:
            if power._imaginary != 0.0 or power._real < 0.0:
                raise DomainError('zero raised to the power {}'.format(str(power)))
            return Complex._make(0.0, 0.0)

        r = self.magnitude()
        theta = self.angle()
        length = _pow(r, power._real)
        phase = theta * power._real
        if power._imaginary != 0.0:
            length = _fdiv(length, _exp(theta * power._imaginary))
            phase = phase + power._imaginary * math.log(r)
        return Complex._make(length * _cos(phase), length * _sin(phase))

    def __rpow__(self, base):
        base = self._coerce(base)
        if base is None:
            return NotImplemented
        return base.__pow__(self)

    def pow(self, power):
        return self ** power

    # trigonometric functions

    def sin(self):
        iz = self._times_i()
        w = iz.exp() - (-iz).exp()
        return Complex._make(w._imaginary / 2.0, -w._real / 2.0)

    def cos(self):
        iz = self._times_i()
        return (iz.exp() + (-iz).exp())._half()

    def tan(self):
        return self.sin() / self.cos()

    def asin(self):
        # -i log(iz + sqrt(1 - z^2))
        w = (self._times_i() + (1.0 - self * self).sqrt()).log()
        return Complex._make(w._imaginary, -w._real)

    def acos(self):
        return Complex._make(math.pi / 2.0, 0.0) - self.asin()

    def atan(self):
        # (i/2) (log(1 - iz) - log(1 + iz))
        iz = self._times_i()
        w = (1.0 + iz).log() - (1.0 - iz).log()
        return Complex._make(w._imaginary / 2.0, -w._real / 2.0)

    # hyperbolic functions

    def sinh(self):
        return (self.exp() - (-self).exp())._half()

    def cosh(self):
        return (self.exp() + (-self).exp())._half()

    def tanh(self):
        return self.sinh() / self.cosh()


Complex.ZERO = Complex()
Complex.ONE = Complex(1.0)
Complex.I = Complex(0.0, 1.0)
