"""Overflow promotion for native fixed-width integer arithmetic.

An operation is first carried out in the joint native context of its
operands. If the exact result doesn't fit, it is retried in the next wider
native context (32 to 64 bits), and after that in BigInt, which always
succeeds. The result is always equal to what BigInt would compute.
"""


import logging

from ..core.ops import OP, OP_FUNCTIONS, OP_SYMBOLS
from ..core.utils import NumericOverflowError
from . import evalctx
from .bigint import BigInt


logger = logging.getLogger(__name__)


def checked(op, a, b, ctx):
    """Perform op on two operands of the native context ctx.

    The result is computed exactly and range checked against the bounds of
    ctx. Returns a scalar of ctx.dtype, or None if promotion is required.
    """
    a = int(a)
    b = int(b)
    if not (ctx.contains(a) and ctx.contains(b)):
        raise NumericOverflowError('operands {:d}, {:d} are not {} values'.format(a, b, ctx.name))
    result = OP_FUNCTIONS[op](a, b)
    if ctx.contains(result):
        return ctx.dtype(result)
    else:
        return None


def context_for(a, b):
    """The joint native context for a pair of operands, or None if either
    operand already needs a BigInt.
    """
    if isinstance(a, BigInt) or isinstance(b, BigInt):
        return None
    actx = evalctx.ctx_of(a)
    bctx = evalctx.ctx_of(b)
    if actx is None or bctx is None:
        return None
    return actx.join(bctx)


def apply(op, a, b):
    """Perform op on a and b, widening and promoting as needed."""
    op = OP(op)
    ctx = context_for(a, b)
    while ctx is not None:
        result = checked(op, a, b, ctx)
        if result is not None:
            return result
        wider = ctx.widen()
        if wider is not None:
            logger.debug('%s %s %s overflows %s, widening to %s',
                         a, OP_SYMBOLS[op], b, ctx.name, wider.name)
        else:
            logger.debug('%s %s %s overflows %s, promoting to BigInt',
                         a, OP_SYMBOLS[op], b, ctx.name)
        ctx = wider
    return OP_FUNCTIONS[op](BigInt(a), BigInt(b))


def add(a, b):
    return apply(OP.add, a, b)

def sub(a, b):
    return apply(OP.sub, a, b)

def mul(a, b):
    return apply(OP.mul, a, b)
