import cmath
import math

import numpy as np
import pytest
from pytest import approx

from numtower.arithmetic.bigint import BigInt
from numtower.arithmetic.rational import Rational
from numtower.arithmetic.dcomplex import Complex
from numtower.arithmetic.qcomplex import ComplexRational
from numtower.core.utils import DivisionByZeroError, DomainError, FormatError


c = Complex(5, 3)


def close(z, expected, rel=1e-12):
    expected = complex(expected)
    return (z.real == approx(expected.real, rel=rel, abs=1e-300)
            and z.imaginary == approx(expected.imag, rel=rel, abs=1e-300))


def test_formatting():
    assert str(Complex(5)) == '5+0i'
    assert str(Complex(-5)) == '-5+0i'
    assert str(Complex(5, 1)) == '5+1i'
    assert str(Complex(5, -1)) == '5-1i'
    assert str(Complex(2.5, -0.0)) == '2.5+0i'
    assert str(Complex(0.5, 1e300)) == '0.5+1e+300i'
    assert repr(Complex(5, 1)) == 'Complex(5.0, 1.0)'


def test_parse():
    assert Complex.parse('5+3i') == c
    assert Complex.parse('-2.5-1.5i') == Complex(-2.5, -1.5)
    assert Complex.parse('7') == Complex(7)
    assert Complex.parse('1e+300+2e-300i') == Complex(1e300, 2e-300)
    for z in [Complex(0.1, -7), Complex(-1e-310, 3.25)]:
        assert Complex.parse(str(z)) == z
    for text in ['', 'i', '3i', '5+i', '5+3j', 'five', ' 5+3i', '1_0']:
        with pytest.raises(FormatError):
            Complex.parse(text)


def test_construction():
    assert Complex() == 0
    assert Complex(np.int32(4)) == 4
    assert Complex(np.float32(0.5), 2) == Complex(0.5, 2.0)
    assert Complex(BigInt(7), Rational(1, 4)) == Complex(7.0, 0.25)
    assert Complex(3 + 4j) == Complex(3, 4)
    assert Complex(np.complex128(1 - 2j)) == Complex(1, -2)
    assert Complex(ComplexRational(Rational(1, 2), 3)) == Complex(0.5, 3)
    assert complex(Complex(1, 2)) == 1 + 2j
    with pytest.raises(TypeError):
        Complex('5')


def test_equality():
    assert Complex(5, 1) == Complex(5, 1)
    assert Complex(5, 1) != Complex(5, -1)
    assert Complex(5, 0) == 5
    assert 5 == Complex(5, 0)
    assert Complex(5, 1) != 5
    assert Complex(1, 2) == 1 + 2j
    assert hash(Complex(1, 2)) == hash(1 + 2j)
    assert hash(Complex(5)) == hash(5)
    assert hash(Complex(-1.5, -7.25)) == hash(complex(-1.5, -7.25))


def test_equality_with_exact_values():
    third = 1.0 / 3.0
    assert Complex(third) != ComplexRational(Rational(1, 3))
    assert ComplexRational(Rational(1, 3)) != Complex(third)
    assert Rational(1, 3) != Complex(third)
    assert Complex(third) == ComplexRational(Rational(third))
    assert hash(Complex(third)) == hash(ComplexRational(Rational(third)))
    assert Complex(2.0 ** 53) != 2 ** 53 + 1
    assert BigInt(2 ** 53 + 1) != Complex(2.0 ** 53)
    assert Complex(2.0 ** 53) == BigInt(2 ** 53)
    assert Complex(0.5, 3) == ComplexRational(Rational(1, 2), 3)
    assert Complex(5, 1) != np.int64(5)


def test_parts():
    assert c.angle() == 0.54041950027058416
    assert c.magnitude() == 5.8309518948453007
    assert abs(c) == c.magnitude()
    assert c.magnitude() == c.conjugate().magnitude()
    assert c.conjugate().angle() == -0.54041950027058416
    assert c.inverse() == c * Complex.I
    assert bool(Complex()) is False
    assert bool(Complex(0, 1)) is True


def test_arithmetic():
    assert c + 1 == Complex(6, 3)
    assert 1 + c == Complex(6, 3)
    assert c - Complex(1, 1) == Complex(4, 2)
    assert 10 - c == Complex(5, -3)
    assert c * Complex(2, -1) == Complex(13, 1)
    assert c * 2.0 == Complex(10, 6)
    assert -c == Complex(-5, -3)
    assert c + BigInt(2) == Complex(7, 3)
    assert c * Rational(1, 2) == Complex(2.5, 1.5)
    assert c + (1 + 1j) == Complex(6, 4)


def test_division():
    assert c / Complex(2, 0) == Complex(2.5, 1.5)
    assert c / 2 == Complex(2.5, 1.5)
    assert close(c / Complex(1, 2), (5 + 3j) / (1 + 2j))
    assert close(c / Complex(3, -4), (5 + 3j) / (3 - 4j))
    assert close(1 / c, 1 / (5 + 3j))
    with pytest.raises(DivisionByZeroError):
        c / Complex(0, 0)
    with pytest.raises(ZeroDivisionError):
        c / 0


def test_scaled_division_avoids_overflow():
    big = Complex(1e300, 1e300)
    assert close(big / big, 1)
    assert close(Complex(1e-300, 2e-300) / Complex(1e-300, 1e-300), 1.5 + 0.5j)


def test_sqrt():
    assert close(c.sqrt(), complex(2.3271175190399491, 0.644574237324647))
    assert Complex(4).sqrt() == Complex(2)
    assert Complex(4, 0).sqrt() == 2
    assert Complex(0).sqrt() == 0
    negative = Complex(-4).sqrt()
    assert math.isnan(negative.real)
    assert negative.imaginary == 0.0
    assert close(Complex(-3, -4).sqrt(), cmath.sqrt(-3 - 4j))
    assert close(Complex(1e10, 1e-10).sqrt(), cmath.sqrt(1e10 + 1e-10j))


def test_exp_log():
    assert Complex(0, 0).exp() == 1
    assert close(Complex(1, 0).exp(), math.e)
    assert Complex(2, 0).exp() == Complex(math.exp(2))
    assert close(Complex(-2, 3).exp(), complex(-0.13398091492954262, 0.019098516261135196))
    assert close(c.log(), complex(1.7631802623080808, 0.54041950027058416))
    assert close(c.log10(), cmath.log10(5 + 3j))
    assert close(c.log(2), complex(math.log(c.magnitude()) / math.log(2), c.angle()))
    with pytest.raises(DomainError):
        Complex(0).log()


@pytest.mark.parametrize('base', [1, 1.0, 0, -2.0, math.nan])
def test_log_base_domain(base):
    with pytest.raises(DomainError):
        c.log(base)


def test_trigonometric():
    assert close(c.sin(), complex(-9.65412547685484, 2.841692295606352))
    assert close(c.cos(), complex(2.855815004227387, 9.606383448432581))
    assert close(c.tan(), complex(-0.0027082358362240898, 1.0041647106948153))
    assert close(c.asin(), complex(1.0238217465117834, 2.4529137425028074))
    assert close(c.acos(), complex(0.54697458028311319, -2.4529137425028074))
    assert close(c.atan(), cmath.atan(5 + 3j))


def test_hyperbolic():
    assert close(c.sinh(), complex(-73.46062169567368, 10.472508533940392))
    assert close(c.cosh(), complex(-73.467292212645262, 10.471557674805574))
    assert close(c.tanh(), cmath.tanh(5 + 3j))


def test_pow():
    assert close(c ** 2, 16 + 30j)
    assert close(c.pow(Complex(-3, -2)), complex(0.0062676425978413705, 0.013479775343161568))
    assert close(c ** 0.5, c.sqrt())
    assert close(2 ** Complex(0, 1), 2 ** 1j)
    for z in [c, Complex(-1, 0), Complex(0, 1e-300)]:
        assert z ** 0 == 1
    assert Complex(0) ** 2 == 0
    assert Complex(0) ** Complex(0.5, 0) == 0


@pytest.mark.parametrize('power', [Complex(-1, 0), Complex(0, 1), Complex(1, -1), -2])
def test_pow_zero_base_domain(power):
    with pytest.raises(DomainError):
        Complex(0) ** power


def test_exp_overflows_to_infinity():
    assert Complex(710, 0).exp() == Complex(math.inf, 0)
    z = Complex(710, 1).exp()
    assert z.real == math.inf
    assert z.imaginary == math.inf
    assert Complex(-800, 0).exp() == 0
    z = Complex(0, math.inf).exp()
    assert math.isnan(z.real) and math.isnan(z.imaginary)


def test_hyperbolic_of_large_arguments():
    z = Complex(800, 0.5).cosh()
    assert z.real == math.inf
    assert z.imaginary == math.inf
    assert Complex(800, 0).sinh() == Complex(math.inf, 0)
    assert Complex(-800, 0).cosh() == Complex(math.inf, 0)


def test_pow_overflows_to_infinity():
    z = Complex(1e200, 1) ** 2
    assert z.real == math.inf
    assert z.imaginary == math.inf
    assert (Complex(-1, 0) ** Complex(0, -1000)).real == math.inf
    assert Complex(1e-200, 0) ** 2 == 0
