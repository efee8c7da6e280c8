"""
Linear algebra over arithmetic strategies: sparse matrices, linear equation
systems and the Gauss solver.
"""

from .equation import LinearEquationSystem, Solution, SolutionState
from .gauss import ColumnSwap, GaussSolver
from .matrix import Cell, Matrix

__all__ = [
    "Cell",
    "Matrix",
    "LinearEquationSystem",
    "Solution",
    "SolutionState",
    "GaussSolver",
    "ColumnSwap",
]
