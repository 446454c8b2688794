"""Exact complex numbers with rational parts."""


import numpy as np

from ..core import conversion
from .bigint import BigInt
from .rational import Rational
from .cnum import CNum


class ComplexRational(CNum):
    """Complex number whose parts are Rationals.

    Only field arithmetic and equality are exact; angle and magnitude are
    computed from the double approximations of the parts.
    """

    _zero = Rational.ZERO

    @classmethod
    def _coerce_scalar(cls, x):
        if isinstance(x, Rational):
            return x
        elif isinstance(x, BigInt) or conversion.is_native_int(x):
            return Rational(x)
        elif conversion.is_native_float(x) and np.isfinite(x):
            return Rational(x)
        else:
            return None

    @staticmethod
    def _scalar_to_double(x):
        return x.to_double()

    @staticmethod
    def _parse_scalar(text):
        return Rational.parse(text)

    def to_complex(self):
        """Approximate as a double Complex."""
        from .dcomplex import Complex
        return Complex(self)


ComplexRational.ZERO = ComplexRational()
ComplexRational.ONE = ComplexRational(1)
