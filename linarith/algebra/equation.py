"""
Linear equation systems ``A x = b`` and their solutions.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..arithmetic.base import AbstractArithmetic
from ..core.errors import ShapeMismatchError
from .matrix import Matrix

if TYPE_CHECKING:
    from .gauss import GaussSolver

T = TypeVar("T")


class LinearEquationSystem(Generic[T]):
    """
    Linear equation system stored as one augmented matrix.

    The last column holds the right hand side ``b``, all other columns are
    the coefficients of the unknowns. The system keeps its own copy of the
    matrix and is immutable.

    Args:
        matrix: Augmented matrix ``[A | b]`` with at least one column

    Raises:
        ShapeMismatchError: If the matrix has no column for ``b``
    """

    def __init__(self, matrix: Matrix[T]):
        if matrix.cols < 1:
            raise ShapeMismatchError(
                "augmented matrix needs a solution column", shape=matrix.shape
            )
        self._matrix = matrix.copy()

    @classmethod
    def of_matrix_with_solution_column(cls, matrix: Matrix[T]) -> LinearEquationSystem[T]:
        """Wrap an already augmented matrix."""
        return cls(matrix)

    @classmethod
    def of_matrix_with_solution_row(cls, matrix: Matrix[T]) -> LinearEquationSystem[T]:
        """Wrap a matrix whose equations are columns and whose last row holds ``b``."""
        return cls(matrix.transpose())

    @classmethod
    def of(cls, coefficients: Matrix[T], solution: Matrix[T] | Sequence[T]) -> LinearEquationSystem[T]:
        """
        Build the augmented matrix from coefficients and a solution column.

        Args:
            coefficients: Matrix ``A``
            solution: Column matrix ``b`` (``rows x 1``) or a plain sequence

        Raises:
            ShapeMismatchError: If ``b`` is not a column or its length differs
                from the number of rows of ``A``
        """
        if not isinstance(solution, Matrix):
            values = list(solution)
            column = Matrix(coefficients.arithmetic, len(values), 1, coefficients.default_value)
            for row, value in enumerate(values):
                column.set_value(row, 0, value)
            solution = column
        if solution.cols != 1 or solution.rows != coefficients.rows:
            raise ShapeMismatchError(
                "solution column has to match the coefficient rows",
                coefficients.shape,
                solution.shape,
            )

        augmented = Matrix(
            coefficients.arithmetic,
            coefficients.rows,
            coefficients.cols + 1,
            coefficients.default_value,
        )
        for cell in coefficients:
            augmented.set_value(cell.row, cell.col, cell.value)
        for row in range(solution.rows):
            augmented.set_value(row, coefficients.cols, solution.get_value(row, 0))
        return cls(augmented)

    @property
    def matrix(self) -> Matrix[T]:
        """Copy of the augmented matrix."""
        return self._matrix.copy()

    @property
    def arithmetic(self) -> AbstractArithmetic[T]:
        return self._matrix.arithmetic

    @property
    def equations(self) -> int:
        return self._matrix.rows

    @property
    def unknowns(self) -> int:
        return self._matrix.cols - 1

    @property
    def coefficients(self) -> Matrix[T]:
        """Copy of the coefficient matrix ``A``."""
        result = Matrix(self.arithmetic, self.equations, self.unknowns, self._matrix.default_value)
        for index, value in self._matrix.sparse_entries().items():
            row, col = divmod(index, self._matrix.cols)
            if col < self.unknowns:
                result.set_value(row, col, value)
        return result

    @property
    def solution_column(self) -> Matrix[T]:
        """Copy of the right hand side ``b`` as a column matrix."""
        result = Matrix(self.arithmetic, self.equations, 1, self._matrix.default_value)
        for row in range(self.equations):
            result.set_value(row, 0, self._matrix.get_value(row, self.unknowns))
        return result

    def solve_with_gauss(self) -> Solution:
        """Solve the system with a fresh GaussSolver."""
        from .gauss import GaussSolver

        solver: GaussSolver[T] = GaussSolver(self)
        return solver.solve()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinearEquationSystem):
            return NotImplemented
        return self._matrix == other._matrix

    def __hash__(self) -> int:
        # logical values, the sparse storage depends on the default value
        return hash((self._matrix.shape, tuple(tuple(row) for row in self._matrix.to_python())))

    def __repr__(self) -> str:
        return f"LinearEquationSystem({self._matrix.to_string()})"


class SolutionState(str, Enum):
    """Outcome of solving a linear equation system."""

    SINGLE = "single"
    INFINITE = "infinite"
    UNSOLVABLE = "unsolvable"


class Solution(BaseModel):
    """
    Result of solving a LinearEquationSystem.

    ``values`` holds one value per unknown for a single solution and is empty
    otherwise. Degenerate systems are regular results, not errors.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: SolutionState = Field(description="Solution kind")
    values: tuple[Any, ...] = Field(default=(), description="Solution vector for single solutions")
    equation_system: LinearEquationSystem = Field(description="System the solution belongs to")

    @classmethod
    def single(cls, equation_system: LinearEquationSystem, values: Sequence[Any]) -> Solution:
        return cls(state=SolutionState.SINGLE, values=tuple(values), equation_system=equation_system)

    @classmethod
    def infinite(cls, equation_system: LinearEquationSystem) -> Solution:
        return cls(state=SolutionState.INFINITE, equation_system=equation_system)

    @classmethod
    def unsolvable(cls, equation_system: LinearEquationSystem) -> Solution:
        return cls(state=SolutionState.UNSOLVABLE, equation_system=equation_system)

    @property
    def is_single(self) -> bool:
        return self.state is SolutionState.SINGLE

    @property
    def is_infinite(self) -> bool:
        return self.state is SolutionState.INFINITE

    @property
    def is_unsolvable(self) -> bool:
        return self.state is SolutionState.UNSOLVABLE

    def __str__(self) -> str:
        if self.is_single:
            return f"{self.state.value}: [{', '.join(str(value) for value in self.values)}]"
        return self.state.value
