"""
Exact rational arithmetic on ``fractions.Fraction``.
"""

from __future__ import annotations

import math
from fractions import Fraction

from .base import AbstractArithmetic
from .numeric import IntegerArithmetic

_INTEGERS = IntegerArithmetic()


class FractionArithmetic(AbstractArithmetic[Fraction]):
    """
    Rational numbers with exact results.

    Floats are converted through their shortest decimal representation, so
    ``from_float(0.1)`` is ``Fraction(1, 10)`` rather than the binary value.
    """

    name = "fraction"

    def from_int(self, a: int) -> Fraction:
        return Fraction(a)

    def from_float(self, a: float) -> Fraction:
        if not math.isfinite(a):
            raise self._unsupported("from_float", f"{a!r} has no rational value")
        return Fraction(repr(float(a)))

    def signum(self, a: Fraction) -> float:
        return float((a.numerator > 0) - (a.numerator < 0))

    def absolute(self, a: Fraction) -> Fraction:
        return abs(a)

    def negate(self, a: Fraction) -> Fraction:
        return -a

    def compare(self, a: Fraction, b: Fraction) -> int:
        return (a > b) - (a < b)

    def sum(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def difference(self, a: Fraction, b: Fraction) -> Fraction:
        return a - b

    def product(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def quotient(self, a: Fraction, b: Fraction) -> Fraction:
        return a / b

    def power(self, a: Fraction, b: int) -> Fraction:
        return a ** b

    def root(self, a: Fraction, b: int) -> Fraction:
        """
        b-th root of ``a``.

        Exact when numerator and denominator are perfect powers, otherwise
        the float root converted back to a fraction.
        """
        if b <= 0:
            raise self._unsupported("root", "degree must be positive")
        if a < 0:
            if b % 2 == 0:
                raise self._unsupported("root", "even root of a negative number")
            return -self.root(-a, b)
        numerator = _INTEGERS.root(a.numerator, b)
        denominator = _INTEGERS.root(a.denominator, b)
        if numerator ** b == a.numerator and denominator ** b == a.denominator:
            return Fraction(numerator, denominator)
        return self.from_float(math.pow(float(a), 1.0 / b))

    def gcd(self, a: Fraction, b: Fraction) -> Fraction:
        """Largest rational ``g`` such that ``a / g`` and ``b / g`` are integers."""
        numerator = math.gcd(a.numerator, b.numerator)
        if numerator == 0:
            return Fraction(0)
        denominator = a.denominator * b.denominator // math.gcd(a.denominator, b.denominator)
        return Fraction(numerator, denominator)

    def is_finite(self, a: Fraction) -> bool:
        return True

    def is_infinite(self, a: Fraction) -> bool:
        return False

    def is_nan(self, a: Fraction) -> bool:
        return False
