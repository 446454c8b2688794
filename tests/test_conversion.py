from fractions import Fraction

import numpy as np
import pytest

from numtower.core import conversion
from numtower.core.utils import DomainError, NumericOverflowError


@pytest.mark.parametrize('f', [0.0, 1.0, -2.5, 0.1, 1e300, -5e-324, 2.0 ** -1074, 1.7976931348623157e308])
def test_mantissa_exp_is_exact(f):
    m, exp = conversion.float_to_mantissa_exp(f)
    assert Fraction(m) * Fraction(2) ** exp == Fraction(f)


def test_single_precision():
    assert conversion.float_to_mantissa_exp(np.float32(0.75)) == (12582912, -24)
    assert conversion.float_to_mantissa_exp(np.float16(0.5)) == (1 << 52, -53)


def test_non_finite():
    with pytest.raises(NumericOverflowError):
        conversion.float_to_mantissa_exp(float('-inf'))
    with pytest.raises(DomainError):
        conversion.float_to_mantissa_exp(float('nan'))
    with pytest.raises(TypeError):
        conversion.float_to_mantissa_exp(1)


def test_strip_mantissa():
    assert conversion.strip_mantissa(12582912, -24) == (3, -2)
    assert conversion.strip_mantissa(0, -10) == (0, 0)
    assert conversion.strip_mantissa(8, 3) == (8, 3)


def test_clamp_double():
    assert conversion.clamp_double(float('inf')) == conversion.DOUBLE_MAX
    assert conversion.clamp_double(float('-inf')) == -conversion.DOUBLE_MAX
    assert conversion.clamp_double(1.5) == 1.5


def test_digits():
    assert conversion.digit_value('7', 8) == 7
    assert conversion.digit_value('8', 8) is None
    assert conversion.digit_value('f', 16) == 15
    assert conversion.digit_value('Z', 36) == 35
    assert conversion.digit_value('-', 10) is None
    conversion.check_radix(36)
    with pytest.raises(ValueError):
        conversion.check_radix(1)
