"""
Arithmetic strategies.

Every numeric operation used by the algebra package goes through one of
these objects, which makes Matrix and GaussSolver work for any numeric type.
"""

from .base import AbstractArithmetic
from .complex_numbers import ComplexArithmetic
from .numeric import DecimalArithmetic, FloatArithmetic, IntegerArithmetic
from .rational import FractionArithmetic
from .registry import available_arithmetics, clear_arithmetic_cache, get_arithmetic, register_arithmetic
from .result import AbstractResultArithmetic, IntegerDecimalResultArithmetic, IntegerFloatResultArithmetic
from .symbolic import SymPyArithmetic

__all__ = [
    "AbstractArithmetic",
    "AbstractResultArithmetic",
    "FloatArithmetic",
    "IntegerArithmetic",
    "DecimalArithmetic",
    "FractionArithmetic",
    "ComplexArithmetic",
    "SymPyArithmetic",
    "IntegerDecimalResultArithmetic",
    "IntegerFloatResultArithmetic",
    "get_arithmetic",
    "register_arithmetic",
    "available_arithmetics",
    "clear_arithmetic_cache",
]
