"""
Gauss-Jordan elimination for linear equation systems.

The solver reduces a private copy of the augmented matrix in four phases:

1. prepare: forward elimination with a normalized pivot per row, column
   swaps recorded on a stack, zero rows moved to the bottom and rows sorted
   by their leading column
2. classify unsolvable systems
3. bottom-up elimination to reduced row echelon form
4. undo the column swaps so the solution is in the original variable order,
   then classify under-determined systems

Singular and inconsistent systems are reported through the Solution state;
the solver itself only raises for errors of the arithmetic.
"""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.logging import get_context_logger
from .equation import LinearEquationSystem, Solution
from .matrix import Matrix

T = TypeVar("T")


class ColumnSwap(BaseModel):
    """Pair of swapped columns, recorded so the swap can be undone."""

    model_config = ConfigDict(frozen=True)

    col1: int = Field(ge=0, description="First swapped column")
    col2: int = Field(ge=0, description="Second swapped column")

    def __str__(self) -> str:
        return f"{self.col1} <> {self.col2}"


class GaussSolver(Generic[T]):
    """
    Solve a LinearEquationSystem with Gauss-Jordan elimination.

    A solver may be reused for several ``solve()`` calls but not from several
    threads at once, because the working matrix lives on the instance.

    Examples:
        >>> system = LinearEquationSystem(matrix)
        >>> GaussSolver(system).solve().state
        <SolutionState.SINGLE: 'single'>
    """

    def __init__(self, equation_system: LinearEquationSystem[T]):
        self._equation_system = equation_system
        self._working: Matrix[T] = equation_system.matrix
        self._swapped_columns: deque[ColumnSwap] = deque()
        self._logger = get_context_logger(
            __name__,
            equations=equation_system.equations,
            unknowns=equation_system.unknowns,
        )

    @property
    def equation_system(self) -> LinearEquationSystem[T]:
        return self._equation_system

    def solve(self) -> Solution:
        """
        Solve the system.

        Returns:
            Solution in state SINGLE (with one value per unknown), INFINITE
            or UNSOLVABLE
        """
        self._reset()
        system = self._equation_system

        self._prepare()
        self._logger.debug(
            "Prepared working matrix", extra_data={"swaps": len(self._swapped_columns)}
        )

        if self._has_no_solutions():
            return self._classified(Solution.unsolvable(system))

        self._solve_bottom_up()
        self._restore_columns()

        # column swaps only happen for a rank deficient coefficient block
        if self._count_pivot_rows() < system.unknowns or self._has_infinite_solutions():
            return self._classified(Solution.infinite(system))

        # pivots are exactly one, the solution column needs no further scaling
        unknowns = system.unknowns
        values = [self._working.get_value(row, unknowns) for row in range(unknowns)]
        return self._classified(Solution.single(system, values))

    # state

    def _reset(self) -> None:
        self._working = self._equation_system.matrix
        self._swapped_columns.clear()

    def _classified(self, solution: Solution) -> Solution:
        self._logger.debug("Classified system as %s", solution.state.value)
        return solution

    # phase 1: prepare

    def _prepare(self) -> None:
        """Forward elimination into row echelon form with unit pivots."""
        working = self._working
        for pivot in range(min(working.rows, working.cols - 1)):
            if not self._move_coefficient_row_up(pivot):
                break
            self._swap_to_nonzero(pivot)
            self._normalize_pivot(pivot)
            self._eliminate_below(pivot)
        self._swap_zero_rows_to_bottom()
        self._sort_rows()

    def _move_coefficient_row_up(self, pivot: int) -> bool:
        """
        Make sure row ``pivot`` has a non-zero coefficient.

        Returns:
            False if no row from ``pivot`` downwards has one
        """
        for row in range(pivot, self._working.rows):
            if not self._is_zero_coefficient_row(row):
                if row != pivot:
                    self._working = self._working._swap_rows(pivot, row)
                return True
        return False

    def _swap_to_nonzero(self, pivot: int) -> None:
        """Bring a non-zero value to (pivot, pivot), by row swap if possible, else by column swap."""
        a = self._working.arithmetic
        if not a.is_zero(self._working.get_value(pivot, pivot)):
            return
        for row in range(pivot + 1, self._working.rows):
            if not a.is_zero(self._working.get_value(row, pivot)):
                self._working = self._working._swap_rows(pivot, row)
                return
        for col in range(pivot + 1, self._working.cols - 1):
            if not a.is_zero(self._working.get_value(pivot, col)):
                self._working = self._working._swap_cols(pivot, col)
                self._swapped_columns.append(ColumnSwap(col1=pivot, col2=col))
                return

    def _normalize_pivot(self, pivot: int) -> None:
        a = self._working.arithmetic
        value = self._working.get_value(pivot, pivot)
        if a.is_zero(value) or a.is_equal(a.one(), value):
            return
        self._working = self._working._multiply_row(pivot, a.quotient(a.one(), value))
        # x * (1 / x) may round next to one
        self._working.set_value(pivot, pivot, a.one())

    def _eliminate_below(self, pivot: int) -> None:
        self._eliminate(pivot, range(pivot + 1, self._working.rows))

    def _eliminate(self, pivot: int, rows: Iterable[int]) -> None:
        """Clear column ``pivot`` in ``rows`` using the unit pivot row."""
        a = self._working.arithmetic
        for row in rows:
            value = self._working.get_value(row, pivot)
            if a.is_zero(value):
                continue
            self._working = self._working._add_row_multiple_times(row, pivot, a.negate(value))
            # v + 1 * -v may not cancel exactly in floating point
            self._working.set_value(row, pivot, a.zero())

    def _swap_zero_rows_to_bottom(self) -> None:
        self._reorder_rows(
            sorted(range(self._working.rows), key=lambda row: self._is_zero_row(row))
        )

    # phase 2: sort

    def _sort_rows(self) -> None:
        """Stable sort of the rows by the column of their first non-zero value."""
        self._reorder_rows(sorted(range(self._working.rows), key=self._leading_col))

    def _reorder_rows(self, order: list[int]) -> None:
        """Permute rows with elementary swaps so that row ``i`` becomes ``order[i]``."""
        current = list(range(self._working.rows))
        for target, wanted in enumerate(order):
            position = current.index(wanted)
            if position != target:
                self._working = self._working._swap_rows(target, position)
                current[target], current[position] = current[position], current[target]

    def _leading_col(self, row: int) -> int:
        a = self._working.arithmetic
        for cell in self._working.get_row_cells(row):
            if not a.is_zero(cell.value):
                return cell.col
        return self._working.cols

    # phase 3: solve bottom up

    def _solve_bottom_up(self) -> None:
        """Clear every pivot column above its pivot, last pivot first."""
        for pivot in reversed(range(self._count_pivot_rows())):
            self._eliminate(pivot, range(pivot))

    # phase 4: restore columns

    def _restore_columns(self) -> None:
        """Undo the recorded column swaps in reverse order and re-sort the rows."""
        while self._swapped_columns:
            swap = self._swapped_columns.pop()
            self._working = self._working._swap_cols(swap.col1, swap.col2)
        self._sort_rows()

    # classification

    def _is_zero_coefficient_row(self, row: int) -> bool:
        a = self._working.arithmetic
        return all(
            a.is_zero(self._working.get_value(row, col)) for col in range(self._working.cols - 1)
        )

    def _is_zero_row(self, row: int) -> bool:
        a = self._working.arithmetic
        return all(a.is_zero(value) for value in self._working.get_row(row))

    def _count_pivot_rows(self) -> int:
        return sum(
            1 for row in range(self._working.rows) if not self._is_zero_coefficient_row(row)
        )

    def _has_no_solutions(self) -> bool:
        """True if some row reads ``0 = b`` with ``b`` non-zero."""
        a = self._working.arithmetic
        last = self._working.cols - 1
        return any(
            self._is_zero_coefficient_row(row) and not a.is_zero(self._working.get_value(row, last))
            for row in range(self._working.rows)
        )

    def _has_infinite_solutions(self) -> bool:
        """True if some row still couples more than one unknown."""
        a = self._working.arithmetic
        for row in range(self._working.rows):
            coefficients = self._working.get_row(row)[:-1]
            if sum(1 for value in coefficients if not a.is_zero(value)) > 1:
                return True
        return False
