"""
Arithmetics for Python's builtin real number types: float, int and Decimal.
"""

from __future__ import annotations

import decimal
import math
from decimal import Context, Decimal, localcontext
from typing import Any

import numpy as np

from ..core.config import get_settings
from .base import AbstractArithmetic

_ONE = Decimal(1)


class FloatArithmetic(AbstractArithmetic[float]):
    """
    IEEE 754 double precision arithmetic.

    Division follows IEEE semantics instead of raising: ``x / 0`` is ``±inf``
    and ``0 / 0`` is ``nan``.
    """

    name = "float"

    def from_int(self, a: int) -> float:
        return float(a)

    def from_float(self, a: float) -> float:
        return float(a)

    def signum(self, a: float) -> float:
        if a == 0 or math.isnan(a):
            # keeps the sign of zero and propagates nan
            return a
        return math.copysign(1.0, a)

    def sum(self, a: float, b: float) -> float:
        return a + b

    def difference(self, a: float, b: float) -> float:
        return a - b

    def product(self, a: float, b: float) -> float:
        return a * b

    def quotient(self, a: float, b: float) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.true_divide(np.float64(a), np.float64(b)))

    def modulo(self, a: float, b: float) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.fmod(np.float64(a), np.float64(b)))

    def power(self, a: float, b: int) -> float:
        with np.errstate(all="ignore"):
            return float(np.power(np.float64(a), float(b)))

    def root(self, a: float, b: int) -> float:
        if b <= 0:
            raise self._unsupported("root", "degree must be positive")
        if b == 1:
            return float(a)
        if a < 0:
            if b % 2 == 0:
                return math.nan
            return -math.pow(-a, 1.0 / b)
        if b == 2:
            return math.sqrt(a)
        if b == 3:
            return float(np.cbrt(a))
        return math.pow(a, 1.0 / b)

    def gcd(self, a: float, b: float) -> float:
        raise self._unsupported("gcd", "not defined for floating point numbers")


class IntegerArithmetic(AbstractArithmetic[int]):
    """
    Arbitrary precision integer arithmetic.

    Quotients truncate toward zero, roots are floored and floats are
    truncated on conversion.
    """

    name = "integer"

    def from_int(self, a: int) -> int:
        return int(a)

    def from_float(self, a: float) -> int:
        return math.trunc(a)

    def signum(self, a: int) -> float:
        return (a > 0) - (a < 0)

    def absolute(self, a: int) -> int:
        return abs(a)

    def negate(self, a: int) -> int:
        return -a

    def compare(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def sum(self, a: int, b: int) -> int:
        return a + b

    def difference(self, a: int, b: int) -> int:
        return a - b

    def product(self, a: int, b: int) -> int:
        return a * b

    def quotient(self, a: int, b: int) -> int:
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        result = abs(a) // abs(b)
        return result if (a < 0) == (b < 0) else -result

    def modulo(self, a: int, b: int) -> int:
        if b == 0:
            raise ZeroDivisionError("integer modulo by zero")
        return a % abs(b)

    def power(self, a: int, b: int) -> int:
        if b < 0:
            raise self._unsupported("power", "negative exponents leave the integers")
        return a ** b

    def root(self, a: int, b: int) -> int:
        if b <= 0:
            raise self._unsupported("root", "degree must be positive")
        if a < 0:
            if b % 2 == 0:
                raise self._unsupported("root", "even root of a negative integer")
            return -self.root(-a, b)
        if b == 1 or a < 2:
            return a
        if b == 2:
            return math.isqrt(a)
        # Newton iteration on integers, starting above the root
        x = 1 << -(-a.bit_length() // b)
        while True:
            y = ((b - 1) * x + a // x ** (b - 1)) // b
            if y >= x:
                return x
            x = y

    def gcd(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def is_finite(self, a: int) -> bool:
        return True

    def is_infinite(self, a: int) -> bool:
        return False

    def is_nan(self, a: int) -> bool:
        return False


class DecimalArithmetic(AbstractArithmetic[Decimal]):
    """
    Decimal arithmetic in a fixed ``decimal.Context``.

    Every result is rounded to the context precision and normalized, so
    ``Decimal("2.50")`` and ``Decimal("2.5")`` come out identical.

    Args:
        context: Precision and rounding to use. Defaults to the configured
            ``DECIMAL_PRECISION`` and ``DECIMAL_ROUNDING``.
    """

    name = "decimal"

    def __init__(self, context: Context | None = None):
        if context is None:
            config = get_settings()
            context = Context(
                prec=config.DECIMAL_PRECISION,
                rounding=getattr(decimal, config.DECIMAL_ROUNDING),
            )
        self._context = context

    @property
    def context(self) -> Context:
        return self._context

    def from_int(self, a: int) -> Decimal:
        return Decimal(a)

    def from_float(self, a: float) -> Decimal:
        # repr gives the shortest decimal that round-trips, 0.1 -> 0.1
        return self._cleanup(Decimal(repr(float(a))))

    def signum(self, a: Decimal) -> float:
        if a.is_nan():
            return math.nan
        if a.is_zero():
            return -0.0 if a.is_signed() else 0.0
        return -1.0 if a.is_signed() else 1.0

    def absolute(self, a: Decimal) -> Decimal:
        return a.copy_abs()

    def negate(self, a: Decimal) -> Decimal:
        return a.copy_negate()

    def compare(self, a: Decimal, b: Decimal) -> int:
        return int(a.compare(b))

    def sum(self, a: Decimal, b: Decimal) -> Decimal:
        return self._cleanup(self._context.add(a, b))

    def difference(self, a: Decimal, b: Decimal) -> Decimal:
        return self._cleanup(self._context.subtract(a, b))

    def product(self, a: Decimal, b: Decimal) -> Decimal:
        return self._cleanup(self._context.multiply(a, b))

    def quotient(self, a: Decimal, b: Decimal) -> Decimal:
        return self._cleanup(self._context.divide(a, b))

    def modulo(self, a: Decimal, b: Decimal) -> Decimal:
        return self._cleanup(self._context.remainder(a, b))

    def power(self, a: Decimal, b: int) -> Decimal:
        return self._cleanup(self._context.power(a, Decimal(b)))

    def root(self, a: Decimal, b: int) -> Decimal:
        if b <= 0:
            raise self._unsupported("root", "degree must be positive")
        if b == 1 or a.is_zero():
            return self._cleanup(a)
        if b == 2:
            return self._cleanup(self._context.sqrt(a))
        if a.is_signed():
            if b % 2 == 0:
                raise self._unsupported("root", "even root of a negative number")
            return self.negate(self.root(a.copy_negate(), b))
        with localcontext(self._context) as ctx:
            ctx.prec += 5
            result = (a.ln() / b).exp()
        return self._cleanup(result)

    def gcd(self, a: Decimal, b: Decimal) -> Decimal:
        raise self._unsupported("gcd", "not defined for decimal numbers")

    def is_finite(self, a: Decimal) -> bool:
        return a.is_finite()

    def is_infinite(self, a: Decimal) -> bool:
        return a.is_infinite()

    def is_nan(self, a: Decimal) -> bool:
        return a.is_nan()

    def _cleanup(self, a: Decimal) -> Decimal:
        a = a.normalize(self._context)
        # normalize turns 100 into 1E+2, bring small integers back to plain form
        if a.is_finite() and a.as_tuple().exponent > 0 and a.adjusted() < self._context.prec:
            a = a.quantize(_ONE, context=self._context)
        return a

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DecimalArithmetic):
            return False
        return (
            self._context.prec == other._context.prec
            and self._context.rounding == other._context.rounding
        )

    def __hash__(self) -> int:
        return hash((type(self), self._context.prec, self._context.rounding))

    def __repr__(self) -> str:
        return f"DecimalArithmetic(prec={self._context.prec}, rounding={self._context.rounding})"
