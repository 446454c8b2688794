"""Evaluation context information for native fixed-width integers."""

import numpy as np


_dtypes = {
    (32, True): np.int32,
    (64, True): np.int64,
    (32, False): np.uint32,
    (64, False): np.uint64,
}


class NativeCtx(object):
    """Context for a native fixed-width integer type."""

    nbits = 64
    signed = True

    dtype = np.int64
    imin = int(np.iinfo(np.int64).min)
    imax = int(np.iinfo(np.int64).max)

    def __init__(self, nbits=None, signed=None):
        if nbits is None:
            nbits = self.nbits
        if signed is None:
            signed = self.signed

        if (nbits, signed) not in _dtypes:
            raise ValueError('unsupported native integer: nbits={}, signed={}'
                             .format(repr(nbits), repr(signed)))

        self.nbits = nbits
        self.signed = signed
        self.dtype = _dtypes[(nbits, signed)]
        info = np.iinfo(self.dtype)
        self.imin = int(info.min)
        self.imax = int(info.max)

    def __repr__(self):
        return '{}(nbits={}, signed={})'.format(type(self).__name__, repr(self.nbits), repr(self.signed))

    def __eq__(self, other):
        if not isinstance(other, NativeCtx):
            return NotImplemented
        return self.nbits == other.nbits and self.signed == other.signed

    def __hash__(self):
        return hash((self.nbits, self.signed))

    @property
    def name(self):
        return '{}int{:d}'.format('' if self.signed else 'u', self.nbits)

    def contains(self, i):
        """Can the integer i be represented in this context?"""
        return self.imin <= i <= self.imax

    def widen(self):
        """The next wider native context, or None if there isn't one."""
        if self.nbits == 32:
            return type(self)(nbits=64, signed=self.signed)
        else:
            return None

    def join(self, other):
        """The narrowest native context that can hold every value of both
        self and other, or None if no native context can. Symmetric.
        """
        if self.signed == other.signed:
            if self.nbits >= other.nbits:
                return self
            else:
                return other
        unsigned, signed = (other, self) if self.signed else (self, other)
        if signed.nbits > unsigned.nbits:
            return signed
        elif unsigned.nbits < 64:
            return type(self)(nbits=unsigned.nbits * 2, signed=True)
        else:
            return None


INT32 = NativeCtx(nbits=32, signed=True)
INT64 = NativeCtx(nbits=64, signed=True)
UINT32 = NativeCtx(nbits=32, signed=False)
UINT64 = NativeCtx(nbits=64, signed=False)

_ctx_by_dtype = {
    np.dtype(np.int32): INT32,
    np.dtype(np.int64): INT64,
    np.dtype(np.uint32): UINT32,
    np.dtype(np.uint64): UINT64,
}


def ctx_of(x):
    """Native context for an operand: numpy integer scalars carry their own,
    python ints get the narrowest signed context that holds them.
    Returns None for values that need an unbounded integer.
    """
    if isinstance(x, np.integer):
        ctx = _ctx_by_dtype.get(np.dtype(type(x)))
        if ctx is None:
            # narrower numpy types behave as their 32 bit counterparts
            return UINT32 if isinstance(x, np.unsignedinteger) else INT32
        return ctx
    elif isinstance(x, int):
        for ctx in (INT32, INT64):
            if ctx.contains(x):
                return ctx
        if UINT64.contains(x):
            return UINT64
        return None
    else:
        return None
