"""
Exact arithmetic on SymPy numbers.

Values stay symbolic: rationals remain ``Rational`` and irrational roots
remain radicals (``root(2, 2)`` is ``sqrt(2)``), so determinants and Gauss
elimination over this arithmetic are exact even where ``FractionArithmetic``
would have to approximate a root.
"""

from __future__ import annotations

import math
from typing import Any

import sympy

from .base import AbstractArithmetic


class SymPyArithmetic(AbstractArithmetic[Any]):
    """Exact symbolic numbers (Integer, Rational, algebraic radicals)."""

    name = "sympy"

    def from_int(self, a: int) -> sympy.Integer:
        return sympy.Integer(a)

    def from_float(self, a: float) -> Any:
        if math.isnan(a):
            return sympy.nan
        if math.isinf(a):
            return sympy.oo if a > 0 else -sympy.oo
        return sympy.Rational(repr(float(a)))

    def signum(self, a: Any) -> float:
        return float(sympy.sign(a))

    def absolute(self, a: Any) -> Any:
        return sympy.Abs(a)

    def negate(self, a: Any) -> Any:
        return -a

    def compare(self, a: Any, b: Any) -> int:
        return int(bool(a > b)) - int(bool(a < b))

    def is_zero(self, a: Any) -> bool:
        return sympy.sympify(a).is_zero is True

    def sum(self, a: Any, b: Any) -> Any:
        return a + b

    def difference(self, a: Any, b: Any) -> Any:
        return a - b

    def product(self, a: Any, b: Any) -> Any:
        return a * b

    def quotient(self, a: Any, b: Any) -> Any:
        return sympy.sympify(a) / b

    def modulo(self, a: Any, b: Any) -> Any:
        return sympy.Mod(a, b)

    def power(self, a: Any, b: int) -> Any:
        return sympy.sympify(a) ** b

    def root(self, a: Any, b: int) -> Any:
        if b <= 0:
            raise self._unsupported("root", "degree must be positive")
        a = sympy.sympify(a)
        if a.is_negative and b % 2 == 1:
            return sympy.real_root(a, b)
        return sympy.root(a, b)

    def gcd(self, a: Any, b: Any) -> Any:
        return sympy.gcd(a, b)

    def to_float(self, a: Any) -> float:
        return float(a)

    def is_finite(self, a: Any) -> bool:
        return sympy.sympify(a).is_finite is True

    def is_infinite(self, a: Any) -> bool:
        return sympy.sympify(a).is_infinite is True

    def is_nan(self, a: Any) -> bool:
        return sympy.sympify(a) is sympy.nan

    # trigonometry stays symbolic

    def sin(self, a: Any) -> Any:
        return sympy.sin(a)

    def cos(self, a: Any) -> Any:
        return sympy.cos(a)

    def tan(self, a: Any) -> Any:
        return sympy.tan(a)

    def asin(self, a: Any) -> Any:
        return sympy.asin(a)

    def acos(self, a: Any) -> Any:
        return sympy.acos(a)

    def atan(self, a: Any) -> Any:
        return sympy.atan(a)

    def sinh(self, a: Any) -> Any:
        return sympy.sinh(a)

    def cosh(self, a: Any) -> Any:
        return sympy.cosh(a)

    def tanh(self, a: Any) -> Any:
        return sympy.tanh(a)
