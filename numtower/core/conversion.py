"""Conversions between native numeric types (float, np.floatXX, np.intXX)
and the sign/mantissa/exponent and word forms used by the numeric tower.
"""


import sys

import numpy as np

from .utils import bitmask, DomainError, NumericOverflowError


# Binary conversions are relatively simple for numpy's floating point types.
# float32 : w = 8,  p = 24
# float64 : w = 11, p = 53

DOUBLE_MAX = sys.float_info.max

DIGITS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'
MIN_RADIX = 2
MAX_RADIX = len(DIGITS)


def np_byteorder(ftype):
    """Converts from numpy byteorder conventions for a floating point datatype
    to sys.byteorder 'big' or 'little'.
    """
    bo = np.dtype(ftype).byteorder
    if bo == '=':
        return sys.byteorder
    elif bo == '<':
        return 'little'
    elif bo == '>':
        return 'big'
    else:
        raise ValueError('unknown numpy byteorder {} for dtype {}'.format(repr(bo), repr(ftype)))


def float_to_mantissa_exp(f):
    """Converts a python or numpy float into m, exp representation:
    f = m * 2**exp, exactly. If the float does not represent a real number
    (i.e. it is inf or NaN) this will raise an exception: NumericOverflowError
    for infinities, DomainError for NaN.
    """
    if isinstance(f, np.float16):
        f = float(f)

    if isinstance(f, float):
        f = np.float64(f)
        w = 11
        pbits = 52
    elif isinstance(f, np.float32):
        w = 8
        pbits = 23
    elif isinstance(f, np.float64):
        w = 11
        pbits = 52
    else:
        raise TypeError('expected float or np.float{{32,64}}, got {}'.format(repr(type(f))))

    emax = (1 << (w - 1)) - 1

    bits = int.from_bytes(f.tobytes(), np_byteorder(type(f)))

    S = bits >> (w + pbits) & bitmask(1)
    E = bits >> (pbits) & bitmask(w)
    C = bits & bitmask(pbits)

    e = E - emax

    if E == 0:
        # subnormal
        if S == 0:
            m = C
        else:
            m = -C
        exp = -emax - pbits + 1
    elif e <= emax:
        # normal
        if S == 0:
            m = C | (1 << pbits)
        else:
            m = -(C | (1 << pbits))
        exp = e - pbits
    elif C == 0:
        raise NumericOverflowError('cannot convert infinite value {} to an exact number'.format(repr(f)))
    else:
        raise DomainError('cannot convert NaN to an exact number')

    return m, exp


def strip_mantissa(m, exp):
    """Remove trailing zero bits from m while exp is negative,
    so that m * 2**exp is a fraction in lowest terms.
    """
    if m == 0:
        return 0, 0
    while exp < 0 and m & 1 == 0:
        m >>= 1
        exp += 1
    return m, exp


def clamp_double(d):
    """Pull an infinite double back to the largest finite double of the same sign."""
    if d == np.inf:
        return DOUBLE_MAX
    elif d == -np.inf:
        return -DOUBLE_MAX
    else:
        return d


def digit_value(c, radix):
    """Value of the digit character c in the given radix, or None if it is not a digit."""
    if '0' <= c <= '9':
        v = ord(c) - ord('0')
    elif 'a' <= c <= 'z':
        v = ord(c) - ord('a') + 10
    elif 'A' <= c <= 'Z':
        v = ord(c) - ord('A') + 10
    else:
        return None
    if v < radix:
        return v
    else:
        return None


def check_radix(radix):
    if not (MIN_RADIX <= radix <= MAX_RADIX):
        raise ValueError('radix must be from {:d} to {:d}, got {}'.format(MIN_RADIX, MAX_RADIX, repr(radix)))


def is_native_int(x):
    """Is x a host integer (python int, bool or numpy integer scalar)?"""
    return isinstance(x, (int, np.integer))


def is_native_float(x):
    return isinstance(x, (float, np.floating))
