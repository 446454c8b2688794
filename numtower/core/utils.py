"""General utilities, such as exception classes."""

# numtower-specific exceptions

class TowerError(Exception):
    """Base numtower error."""

class FormatError(TowerError, ValueError):
    """Malformed numeric literal, such as an empty string or a bad digit."""

class DivisionByZeroError(TowerError, ZeroDivisionError):
    """Division or modulus where the divisor is exactly zero."""

class DomainError(TowerError, ValueError):
    """Argument outside the domain of an operation, such as a negative exponent."""

class NumericOverflowError(TowerError, OverflowError):
    """Value does not fit in the requested native representation."""


# Useful things

def bitmask(n: int) -> int:
    """Produces a bitmask of n 1s if n is positive, or n 0s if n is negative."""
    if n >= 0:
        return (1 << n) - 1
    else:
        return -1 << -n

def sign_of(x) -> int:
    """-1, 0 or 1 according to the sign of a native number."""
    if x > 0:
        return 1
    elif x < 0:
        return -1
    else:
        return 0
