"""
Result arithmetics.

A result arithmetic takes operands of one type ``T`` and produces results of
another type ``R``, e.g. integer operands with a decimal quotient. Operands
are converted with ``from_t`` and the operation is delegated to the
arithmetic of ``R``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import Any, Callable, Generic, TypeVar

from .base import AbstractArithmetic
from .numeric import DecimalArithmetic, FloatArithmetic, IntegerArithmetic

T = TypeVar("T")
R = TypeVar("R")
NT = TypeVar("NT")
NR = TypeVar("NR")


class AbstractResultArithmetic(ABC, Generic[T, R]):
    """Arithmetic over operands ``T`` yielding results ``R``."""

    def __init__(self, t_arithmetic: AbstractArithmetic[T], r_arithmetic: AbstractArithmetic[R]):
        self._t_arithmetic = t_arithmetic
        self._r_arithmetic = r_arithmetic

    @property
    def t_arithmetic(self) -> AbstractArithmetic[T]:
        """Arithmetic of the operand type."""
        return self._t_arithmetic

    @property
    def r_arithmetic(self) -> AbstractArithmetic[R]:
        """Arithmetic of the result type."""
        return self._r_arithmetic

    @abstractmethod
    def from_t(self, a: T) -> R:
        """Convert an operand into the result type."""

    # sum, difference, product, quotient and modulo

    def sum(self, a: T, b: T) -> R:
        return self.r_arithmetic.sum(self.from_t(a), self.from_t(b))

    def sum3(self, a: T, b: T, c: T) -> R:
        return self.r_arithmetic.sum3(self.from_t(a), self.from_t(b), self.from_t(c))

    def difference(self, a: T, b: T) -> R:
        return self.r_arithmetic.difference(self.from_t(a), self.from_t(b))

    def product(self, a: T, b: T) -> R:
        return self.r_arithmetic.product(self.from_t(a), self.from_t(b))

    def product3(self, a: T, b: T, c: T) -> R:
        return self.r_arithmetic.product3(self.from_t(a), self.from_t(b), self.from_t(c))

    def quotient(self, a: T, b: T) -> R:
        return self.r_arithmetic.quotient(self.from_t(a), self.from_t(b))

    def modulo(self, a: T, b: T) -> R:
        return self.r_arithmetic.modulo(self.from_t(a), self.from_t(b))

    # map

    def map(
        self, arithmetic: AbstractArithmetic[NT], converter: Callable[[NT], R]
    ) -> AbstractResultArithmetic[NT, R]:
        """New result arithmetic with another operand type and the same result type."""
        return AbstractResultArithmetic.of(arithmetic, self.r_arithmetic, converter)

    def map_result(
        self, arithmetic: AbstractArithmetic[NR], converter: Callable[[T], NR]
    ) -> AbstractResultArithmetic[T, NR]:
        """New result arithmetic with the same operand type and another result type."""
        return AbstractResultArithmetic.of(self.t_arithmetic, arithmetic, converter)

    @staticmethod
    def of(
        t_arithmetic: AbstractArithmetic[T],
        r_arithmetic: AbstractArithmetic[R],
        converter: Callable[[T], R],
    ) -> AbstractResultArithmetic[T, R]:
        """Build a result arithmetic from two arithmetics and a converter."""
        return _ConvertingResultArithmetic(t_arithmetic, r_arithmetic, converter)

    # override

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AbstractResultArithmetic):
            return NotImplemented
        return (
            self.t_arithmetic == other.t_arithmetic
            and self.r_arithmetic == other.r_arithmetic
        )

    def __hash__(self) -> int:
        return hash((self.t_arithmetic, self.r_arithmetic))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(t_arithmetic={self.t_arithmetic!r}, "
            f"r_arithmetic={self.r_arithmetic!r})"
        )


class _ConvertingResultArithmetic(AbstractResultArithmetic[T, R]):
    def __init__(
        self,
        t_arithmetic: AbstractArithmetic[T],
        r_arithmetic: AbstractArithmetic[R],
        converter: Callable[[T], R],
    ):
        super().__init__(t_arithmetic, r_arithmetic)
        self._converter = converter

    def from_t(self, a: T) -> R:
        return self._converter(a)


class IntegerDecimalResultArithmetic(AbstractResultArithmetic[int, Decimal]):
    """Integer operands with Decimal results."""

    def __init__(self, context: Context | None = None):
        super().__init__(IntegerArithmetic(), DecimalArithmetic(context))

    def from_t(self, a: int) -> Decimal:
        return Decimal(a)


class IntegerFloatResultArithmetic(AbstractResultArithmetic[int, float]):
    """Integer operands with float results."""

    def __init__(self):
        super().__init__(IntegerArithmetic(), FloatArithmetic())

    def from_t(self, a: int) -> float:
        return float(a)
