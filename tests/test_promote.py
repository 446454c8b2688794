import logging

import numpy as np
import pytest

from numtower.arithmetic import promote, evalctx
from numtower.arithmetic.bigint import BigInt
from numtower.core.ops import OP
from numtower.core.utils import NumericOverflowError


U32MAX = np.uint32(4294967295)
I32MAX = np.int32(2147483647)
I64MAX = np.int64(9223372036854775807)
I64MIN = np.int64(-9223372036854775808)
U64MAX = np.uint64(18446744073709551615)


def test_checked():
    assert promote.checked(OP.add, 1, 2, evalctx.INT32) == np.int32(3)
    assert isinstance(promote.checked(OP.add, 1, 2, evalctx.INT32), np.int32)
    assert promote.checked(OP.add, I32MAX, 1, evalctx.INT32) is None
    assert promote.checked(OP.sub, 0, 1, evalctx.UINT32) is None
    assert promote.checked(OP.mul, 65536, 65536, evalctx.INT64) == np.int64(1 << 32)
    with pytest.raises(NumericOverflowError):
        promote.checked(OP.add, -1, 1, evalctx.UINT32)


def test_stays_native_when_it_fits():
    result = promote.add(np.int32(2), np.int32(3))
    assert isinstance(result, np.int32)
    assert result == 5
    result = promote.mul(np.uint64(3), np.uint64(7))
    assert isinstance(result, np.uint64)
    assert result == 21


def test_uint32_boundary():
    result = promote.add(U32MAX, np.uint32(1))
    assert isinstance(result, np.uint64)
    assert result == np.uint64(1 << 32)
    assert result == BigInt(int(U32MAX)) + 1


def test_int32_widens_to_int64():
    result = promote.add(I32MAX, np.int32(1))
    assert isinstance(result, np.int64)
    assert result == 2147483648
    result = promote.mul(I32MAX, I32MAX)
    assert isinstance(result, np.int64)
    assert result == 2147483647 ** 2


def test_int64_promotes_to_bigint():
    result = promote.add(I64MAX, np.int64(1))
    assert isinstance(result, BigInt)
    assert result == BigInt(int(I64MAX)) + 1
    result = promote.sub(I64MIN, np.int64(1))
    assert isinstance(result, BigInt)
    assert result == -(1 << 63) - 1
    result = promote.mul(U64MAX, U64MAX)
    assert isinstance(result, BigInt)
    assert result == (2 ** 64 - 1) ** 2


def test_unsigned_subtraction_goes_to_bigint():
    result = promote.sub(np.uint32(3), np.uint32(5))
    assert isinstance(result, BigInt)
    assert result == -2


def test_mixed_signedness():
    # uint32 and int32 meet in int64
    result = promote.add(U32MAX, np.int32(-1))
    assert isinstance(result, np.int64)
    assert result == 4294967294
    # uint64 and a signed type have no common native context
    result = promote.add(U64MAX, np.int32(-1))
    assert isinstance(result, BigInt)
    assert result == 2 ** 64 - 2


def test_python_ints():
    assert promote.add(1, 2) == 3
    assert isinstance(promote.add(1, 2), np.int32)
    assert promote.mul(1 << 40, 1 << 40) == 1 << 80
    assert isinstance(promote.add(1 << 70, 1), BigInt)


def test_bigint_operands():
    result = promote.add(BigInt(5), np.int32(3))
    assert isinstance(result, BigInt)
    assert result == 8


@pytest.mark.parametrize('op', [OP.add, OP.mul])
def test_commutative_order_independent(op):
    pairs = [
        (U32MAX, np.uint32(2)),
        (I64MAX, np.int64(2)),
        (U32MAX, np.int32(-7)),
        (np.int32(-5), np.uint64(5)),
        (1 << 40, np.int32(3)),
    ]
    for a, b in pairs:
        x = promote.apply(op, a, b)
        y = promote.apply(op, b, a)
        assert type(x) == type(y)
        assert x == y


def test_matches_bigint_near_boundaries():
    values = [0, 1, -1, 2 ** 31 - 1, -2 ** 31, 2 ** 32 - 1, 2 ** 63 - 1, -2 ** 63, 2 ** 64 - 1]
    for a in values:
        for b in values:
            for op, f in [(OP.add, promote.add), (OP.sub, promote.sub), (OP.mul, promote.mul)]:
                exact = {OP.add: a + b, OP.sub: a - b, OP.mul: a * b}[op]
                assert int(f(a, b)) == exact


def test_logs_widening(caplog):
    with caplog.at_level(logging.DEBUG, logger='numtower.arithmetic.promote'):
        promote.add(I32MAX, np.int32(1))
        promote.add(I64MAX, np.int64(1))
    messages = [r.getMessage() for r in caplog.records]
    assert any('widening to int64' in m for m in messages)
    assert any('promoting to BigInt' in m for m in messages)
