"""
Base arithmetic strategy.

An arithmetic is an injectable object that defines every numeric operation a
Matrix or solver needs for one numeric type. Higher components never use
Python operators on their values directly; they ask the arithmetic.

Concrete subclasses implement the abstract primitives (construction, signum,
the four basic operations, power, root and gcd) and inherit the derived
operations, which are expressed purely through those primitives.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from ..core.errors import UnsupportedOperationError

if TYPE_CHECKING:
    from .result import AbstractResultArithmetic

T = TypeVar("T")


class AbstractArithmetic(ABC, Generic[T]):
    """
    Numeric operations for values of type ``T``.

    Subclasses must implement:
    - from_int, from_float, signum
    - sum, difference, product, quotient
    - power, root, gcd

    Everything else has a default built from those primitives and may be
    overridden where the numeric type offers something better.
    """

    # Registry key, also used in error messages
    name: ClassVar[str] = "abstract"

    # from_int, from_float and signum

    @abstractmethod
    def from_int(self, a: int) -> T:
        """Convert an int into ``T``."""

    @abstractmethod
    def from_float(self, a: float) -> T:
        """Convert a float into ``T``."""

    @abstractmethod
    def signum(self, a: T) -> float:
        """
        Return the sign of ``a`` as a real number.

        Returns:
            -1.0, 0.0 or 1.0 (a signed zero may be returned for signed zeros)
        """

    # number constants

    def zero(self) -> T:
        """Additive identity, always ``from_int(0)``."""
        return self.from_int(0)

    def one(self) -> T:
        """Multiplicative identity, always ``from_int(1)``."""
        return self.from_int(1)

    # absolute, negate, compare and equality

    def absolute(self, a: T) -> T:
        """
        Absolute value of ``a``.

        Signed zeros count as negative so that ``absolute(-0.0)`` is ``0.0``.
        """
        sign = self.signum(a)
        if sign < 0 or (sign == 0 and math.copysign(1.0, sign) < 0):
            return self.negate(a)
        return a

    def negate(self, a: T) -> T:
        """Additive inverse, ``a * -1``."""
        return self.product(a, self.from_int(-1))

    def compare(self, a: T, b: T) -> int:
        """
        Compare ``a`` and ``b`` through their float projection.

        Returns:
            negative, zero or positive like a classic three-way comparison
        """
        x, y = self.to_float(a), self.to_float(b)
        return (x > y) - (x < y)

    def is_equal(self, a: T, b: T) -> bool:
        """Logical equality of two values."""
        return a == b

    def is_zero(self, a: T) -> bool:
        """True if ``a`` is logically zero."""
        return self.zero() == self.absolute(a)

    # sum, difference, product, quotient and modulo

    @abstractmethod
    def sum(self, a: T, b: T) -> T:
        """a + b"""

    def sum3(self, a: T, b: T, c: T) -> T:
        """a + b + c"""
        return self.sum(self.sum(a, b), c)

    @abstractmethod
    def difference(self, a: T, b: T) -> T:
        """a - b"""

    @abstractmethod
    def product(self, a: T, b: T) -> T:
        """a * b"""

    def product3(self, a: T, b: T, c: T) -> T:
        """a * b * c"""
        return self.product(self.product(a, b), c)

    @abstractmethod
    def quotient(self, a: T, b: T) -> T:
        """a / b"""

    def modulo(self, a: T, b: T) -> T:
        """a - quotient(a, b) * b"""
        return self.difference(a, self.product(self.quotient(a, b), b))

    # power and root

    @abstractmethod
    def power(self, a: T, b: int) -> T:
        """a ** b"""

    @abstractmethod
    def root(self, a: T, b: int) -> T:
        """b-th root of a"""

    def root2(self, a: T) -> T:
        """Square root of a."""
        return self.root(a, 2)

    # is_finite, is_infinite and is_nan

    def to_float(self, a: T) -> float:
        """Float projection of ``a``, used by the approximate defaults."""
        return float(a)  # type: ignore[arg-type]

    def is_finite(self, a: T) -> bool:
        return math.isfinite(self.to_float(a))

    def is_infinite(self, a: T) -> bool:
        return math.isinf(self.to_float(a))

    def is_nan(self, a: T) -> bool:
        return math.isnan(self.to_float(a))

    # gcd and lcm

    @abstractmethod
    def gcd(self, a: T, b: T) -> T:
        """Greatest common divisor."""

    def lcm(self, a: T, b: T) -> T:
        """Least common multiple, ``|a * b| / gcd(a, b)``."""
        return self.quotient(self.absolute(self.product(a, b)), self.gcd(a, b))

    # trigonometry (via the float projection)

    def sin(self, a: T) -> T:
        return self.from_float(math.sin(self.to_float(a)))

    def cos(self, a: T) -> T:
        return self.from_float(math.cos(self.to_float(a)))

    def tan(self, a: T) -> T:
        return self.from_float(math.tan(self.to_float(a)))

    def asin(self, a: T) -> T:
        return self.from_float(math.asin(self.to_float(a)))

    def acos(self, a: T) -> T:
        return self.from_float(math.acos(self.to_float(a)))

    def atan(self, a: T) -> T:
        return self.from_float(math.atan(self.to_float(a)))

    def sinh(self, a: T) -> T:
        return self.from_float(math.sinh(self.to_float(a)))

    def cosh(self, a: T) -> T:
        return self.from_float(math.cosh(self.to_float(a)))

    def tanh(self, a: T) -> T:
        return self.from_float(math.tanh(self.to_float(a)))

    # result arithmetic

    def to_result_arithmetic(self) -> AbstractResultArithmetic[T, T]:
        """Result arithmetic whose input and output type are both ``T``."""
        from .result import AbstractResultArithmetic

        return AbstractResultArithmetic.of(self, self, lambda a: a)

    # helpers

    def _unsupported(self, operation: str, reason: str | None = None) -> UnsupportedOperationError:
        return UnsupportedOperationError(operation, arithmetic=type(self).__name__, reason=reason)

    # override

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
