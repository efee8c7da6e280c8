"""
linarith - exact and approximate linear algebra over pluggable arithmetics.

Example:
    >>> from fractions import Fraction
    >>> from linarith import FractionArithmetic, LinearEquationSystem, Matrix
    >>> a = FractionArithmetic()
    >>> m = Matrix.of_values_by_rows(a, 2, *map(Fraction, [3, 4, -1, 2, 5, -3]))
    >>> LinearEquationSystem(m).solve_with_gauss().values
    (Fraction(1, 1), Fraction(-1, 1))
"""

__version__ = "0.1.0"

from .algebra import Cell, ColumnSwap, GaussSolver, LinearEquationSystem, Matrix, Solution, SolutionState
from .arithmetic import (
    AbstractArithmetic,
    AbstractResultArithmetic,
    ComplexArithmetic,
    DecimalArithmetic,
    FloatArithmetic,
    FractionArithmetic,
    IntegerArithmetic,
    IntegerDecimalResultArithmetic,
    IntegerFloatResultArithmetic,
    SymPyArithmetic,
    available_arithmetics,
    get_arithmetic,
    register_arithmetic,
)
from .core import (
    LinarithError,
    OutOfRangeError,
    ShapeMismatchError,
    UnsupportedOperationError,
    get_logger,
    get_settings,
    setup_logging,
)

__all__ = [
    "__version__",
    # arithmetic
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
    # algebra
    "Cell",
    "Matrix",
    "LinearEquationSystem",
    "Solution",
    "SolutionState",
    "GaussSolver",
    "ColumnSwap",
    # core
    "LinarithError",
    "ShapeMismatchError",
    "OutOfRangeError",
    "UnsupportedOperationError",
    "get_settings",
    "setup_logging",
    "get_logger",
]
