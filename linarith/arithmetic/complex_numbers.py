"""
Arithmetic on Python's builtin ``complex``.

Complex numbers have no total order, so ``absolute`` (in the signum sense
used by this library), ``compare`` and ``gcd`` are unsupported.
"""

from __future__ import annotations

import cmath

from .base import AbstractArithmetic


class ComplexArithmetic(AbstractArithmetic[complex]):
    """Double precision complex numbers."""

    name = "complex"

    def from_int(self, a: int) -> complex:
        return complex(a, 0)

    def from_float(self, a: float) -> complex:
        return complex(a, 0.0)

    def signum(self, a: complex) -> float:
        """Sign of the real part, or of the imaginary part when the real part is zero."""
        part = a.real if a.real != 0 else a.imag
        return float((part > 0) - (part < 0))

    def absolute(self, a: complex) -> complex:
        raise self._unsupported("absolute", "complex numbers have no total order")

    def negate(self, a: complex) -> complex:
        return -a

    def compare(self, a: complex, b: complex) -> int:
        raise self._unsupported("compare", "complex numbers have no total order")

    def is_zero(self, a: complex) -> bool:
        return a == 0

    def sum(self, a: complex, b: complex) -> complex:
        return a + b

    def difference(self, a: complex, b: complex) -> complex:
        return a - b

    def product(self, a: complex, b: complex) -> complex:
        return a * b

    def quotient(self, a: complex, b: complex) -> complex:
        return a / b

    def power(self, a: complex, b: int) -> complex:
        return a ** b

    def root(self, a: complex, b: int) -> complex:
        """Principal b-th root."""
        if b <= 0:
            raise self._unsupported("root", "degree must be positive")
        if a == 0:
            return complex(0, 0)
        return cmath.exp(cmath.log(a) / b)

    def gcd(self, a: complex, b: complex) -> complex:
        raise self._unsupported("gcd", "not defined for complex numbers")

    def to_float(self, a: complex) -> float:
        if a.imag != 0:
            raise self._unsupported("to_float", "value has an imaginary part")
        return a.real

    def is_finite(self, a: complex) -> bool:
        return cmath.isfinite(a)

    def is_infinite(self, a: complex) -> bool:
        return cmath.isinf(a)

    def is_nan(self, a: complex) -> bool:
        return cmath.isnan(a)

    # trigonometry is native for complex numbers

    def sin(self, a: complex) -> complex:
        return cmath.sin(a)

    def cos(self, a: complex) -> complex:
        return cmath.cos(a)

    def tan(self, a: complex) -> complex:
        return cmath.tan(a)

    def asin(self, a: complex) -> complex:
        return cmath.asin(a)

    def acos(self, a: complex) -> complex:
        return cmath.acos(a)

    def atan(self, a: complex) -> complex:
        return cmath.atan(a)

    def sinh(self, a: complex) -> complex:
        return cmath.sinh(a)

    def cosh(self, a: complex) -> complex:
        return cmath.cosh(a)

    def tanh(self, a: complex) -> complex:
        return cmath.tanh(a)
