from .core import utils, ops, wordvec, conversion, gmpmath
from .arithmetic import evalctx, bigint, rational, dcomplex, qcomplex, promote

BigInt = bigint.BigInt
gcd = bigint.gcd
lcm = bigint.lcm
Rational = rational.Rational
Complex = dcomplex.Complex
ComplexRational = qcomplex.ComplexRational
NativeCtx = evalctx.NativeCtx

TowerError = utils.TowerError
FormatError = utils.FormatError
DivisionByZeroError = utils.DivisionByZeroError
DomainError = utils.DomainError
NumericOverflowError = utils.NumericOverflowError
