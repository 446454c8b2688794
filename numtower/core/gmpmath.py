"""Conversions between numtower values and GMP values, via gmpy2.

These are used for interop, and as an independent reference for checking
word-vector arithmetic.
"""


import gmpy2 as gmp

from . import wordvec


def words_to_mpz(sign, words):
    acc = gmp.mpz(0)
    for w in reversed(words):
        acc = (acc << wordvec.WORD_BITS) | w
    if sign < 0:
        return -acc
    else:
        return acc


def mpz_to_words(z):
    """Split an mpz into (sign, words)."""
    z = gmp.mpz(z)
    sign = gmp.sign(z)
    z = abs(z)
    words = []
    while z:
        words.append(int(z & wordvec.WORD_MASK))
        z >>= wordvec.WORD_BITS
    return sign, tuple(words)


def bigint_to_mpz(x):
    return words_to_mpz(x.sign, x.words)


def mpz_to_bigint(z):
    # imported here, since the arithmetic package depends on core
    from ..arithmetic.bigint import BigInt
    sign, words = mpz_to_words(z)
    return BigInt(sign=sign, words=words)


def rational_to_mpq(x):
    return gmp.mpq(bigint_to_mpz(x.numerator), bigint_to_mpz(x.denominator))


def mpq_to_rational(q):
    from ..arithmetic.bigint import BigInt
    from ..arithmetic.rational import Rational
    q = gmp.mpq(q)
    nsign, nwords = mpz_to_words(q.numerator)
    dsign, dwords = mpz_to_words(q.denominator)
    return Rational(BigInt(sign=nsign, words=nwords), BigInt(sign=dsign, words=dwords))
