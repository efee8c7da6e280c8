"""Tests for the Gauss solver."""

import logging
from collections import deque
from fractions import Fraction
from decimal import Decimal

import pytest

from linarith.algebra import ColumnSwap, GaussSolver, LinearEquationSystem, Matrix, Solution, SolutionState


SINGLE_SOLUTIONS = [
    ([[1, 2, 3, 2], [1, 1, 1, 2], [3, 3, 1, 0]], [5, -6, 3]),
    ([[1, -1, 2, 0], [-2, 1, -6, 0], [1, 0, -2, 3]], [2, 1, Fraction(-1, 2)]),
    ([[3, 4, -1], [2, 5, -3]], [1, -1]),
    ([[3, -4, -26], [2, 3, 28]], [2, 8]),
    ([[1, -2, 0, 4], [0, -1, -1, -1], [-1, 1, 3, -1]], [4, 0, 1]),
    ([[1, 2, -1, 2], [1, 1, 2, 9], [2, 3, -3, -1]], [1, 2, 3]),
    ([[2, 3, -1, 3], [1, 0, 2, 9], [1, -1, 0, 2]], [Fraction(27, 11), Fraction(5, 11), Fraction(36, 11)]),
    ([[6, -1, 2, 1], [5, -3, 3, 4], [3, -2, 1, 14]], [Fraction(11, 4), -9, Fraction(-49, 4)]),
    ([[4, 3, 1, 13], [2, -5, 3, 1], [7, -1, -2, -1]], [1, 2, 3]),
    (
        [[2, 9, -14, 39], [3, 6, 2, 36], [Fraction(1, 2), Fraction(1, 3), 7, 2]],
        [Fraction(465, 52), Fraction(87, 52), Fraction(-45, 104)],
    ),
]

UNSOLVABLE_SYSTEMS = [
    [[3, 2, -1], [4, 1, -2], [6, 4, 3]],
    [[1, -3, 4], [2, 1, 1], [4, 5, 9]],
    [[1, 1, -1, 4], [4, -2, -2, 3], [-5, 4, 2, 0]],
    [[0, 0, 5], [1, 0, 1]],
]

INFINITE_SYSTEMS = [
    [[1, -2, 3, 0], [-2, 4, -6, 0], [-1, 2, -3, 0]],
    [[1, 0, 0, 2], [0, 0, 1, 0], [0, 0, 1, 0]],
    [[1, 0, 0, 1]],
    [[1, 1, 2], [2, 2, 4]],
]


def as_fractions(values):
    """Normalize Fraction and SymPy results for comparison."""
    return [Fraction(str(value)) for value in values]


class TestSingleSolutions:
    """Test systems with exactly one solution."""

    @pytest.mark.parametrize("rows, expected", SINGLE_SOLUTIONS)
    def test_exact_solution(self, exact_arithmetic, system_of, rows, expected):
        """Test the solution vector with exact arithmetics."""
        solution = GaussSolver(system_of(exact_arithmetic, rows)).solve()
        assert solution.state is SolutionState.SINGLE
        assert as_fractions(solution.values) == expected

    @pytest.mark.parametrize("rows, expected", SINGLE_SOLUTIONS)
    def test_float_solution(self, float_arithmetic, system_of, rows, expected):
        """Test the solution vector with floats."""
        float_rows = [[float(value) for value in row] for row in rows]
        solution = GaussSolver(system_of(float_arithmetic, float_rows)).solve()
        assert solution.is_single
        assert list(solution.values) == pytest.approx([float(value) for value in expected])

    def test_decimal_solution(self, decimal_arithmetic, system_of):
        """Test a system with repeating decimals."""
        rows, expected = SINGLE_SOLUTIONS[6]
        solution = GaussSolver(system_of(decimal_arithmetic, rows)).solve()
        assert solution.is_single
        assert all(isinstance(value, Decimal) for value in solution.values)
        assert [float(value) for value in solution.values] == pytest.approx([float(v) for v in expected])

    def test_complex_solution(self, complex_arithmetic, system_of):
        """Test x + iy = 1 + i, ix + y = 2i."""
        rows = [[1 + 0j, 1j, 1 + 1j], [1j, 1 + 0j, 2j]]
        solution = GaussSolver(system_of(complex_arithmetic, rows)).solve()
        assert solution.is_single
        x, y = solution.values
        assert abs(x - (1.5 + 0.5j)) < 1e-12
        assert abs(y - (0.5 + 0.5j)) < 1e-12

    def test_row_swap_for_zero_pivot(self, fraction_arithmetic, system_of):
        """Test a zero in the first pivot position."""
        solution = GaussSolver(system_of(fraction_arithmetic, [[0, 1, 2], [1, 0, 3]])).solve()
        assert solution.values == (3, 2)

    def test_leading_zero_row(self, fraction_arithmetic, system_of):
        """Test an all-zero equation in front of the real ones."""
        rows = [[0, 0, 0], [1, 1, 2], [1, -1, 0]]
        solution = GaussSolver(system_of(fraction_arithmetic, rows)).solve()
        assert solution.values == (1, 1)

    def test_over_determined_consistent_system(self, fraction_arithmetic, system_of):
        """Test more equations than unknowns with one value per unknown."""
        rows = [[1, 0, 1], [0, 1, 2], [1, 1, 3]]
        solution = GaussSolver(system_of(fraction_arithmetic, rows)).solve()
        assert solution.is_single
        assert solution.values == (1, 2)

    def test_solution_references_system(self, fraction_arithmetic, system_of):
        """Test the solution carries the original system."""
        system = system_of(fraction_arithmetic, SINGLE_SOLUTIONS[0][0])
        solution = GaussSolver(system).solve()
        assert solution.equation_system == system
        assert solution == Solution.single(system, [5, -6, 3])

    def test_solve_with_gauss(self, fraction_arithmetic, system_of):
        """Test the convenience method on the system."""
        system = system_of(fraction_arithmetic, SINGLE_SOLUTIONS[2][0])
        assert system.solve_with_gauss().values == (1, -1)


class TestDegenerateSystems:
    """Test unsolvable and infinite systems."""

    @pytest.mark.parametrize("rows", UNSOLVABLE_SYSTEMS)
    def test_unsolvable(self, exact_arithmetic, system_of, rows):
        """Test inconsistent systems."""
        solution = GaussSolver(system_of(exact_arithmetic, rows)).solve()
        assert solution.state is SolutionState.UNSOLVABLE
        assert solution.values == ()

    @pytest.mark.parametrize("rows", INFINITE_SYSTEMS)
    def test_infinite(self, exact_arithmetic, system_of, rows):
        """Test under-determined and dependent systems."""
        solution = GaussSolver(system_of(exact_arithmetic, rows)).solve()
        assert solution.state is SolutionState.INFINITE

    def test_float_dependent_rows(self, float_arithmetic, system_of):
        """Test a dependent system with floats."""
        rows = [[1.0, -2.0, 3.0, 0.0], [-2.0, 4.0, -6.0, 0.0], [-1.0, 2.0, -3.0, 0.0]]
        assert GaussSolver(system_of(float_arithmetic, rows)).solve().is_infinite

    def test_no_equations(self, fraction_arithmetic):
        """Test a system without rows has infinitely many solutions."""
        system = LinearEquationSystem(Matrix(fraction_arithmetic, 0, 3))
        assert GaussSolver(system).solve().is_infinite


class TestSolverState:
    """Test the solver's working state and repeatability."""

    def test_solve_is_repeatable(self, fraction_arithmetic, system_of):
        """Test repeated and fresh solves give equal solutions."""
        system = system_of(fraction_arithmetic, SINGLE_SOLUTIONS[6][0])
        solver = GaussSolver(system)
        first = solver.solve()
        assert solver.solve() == first
        assert GaussSolver(system).solve() == first

    def test_solve_does_not_touch_system(self, fraction_arithmetic, system_of):
        """Test the input system is unchanged after solving."""
        rows = SINGLE_SOLUTIONS[0][0]
        system = system_of(fraction_arithmetic, rows)
        GaussSolver(system).solve()
        assert system.matrix.to_python() == rows

    def test_column_swap_is_recorded(self, fraction_arithmetic, system_of):
        """Test a pivot found only to the right swaps columns."""
        solver = GaussSolver(system_of(fraction_arithmetic, INFINITE_SYSTEMS[1]))
        solver._reset()
        solver._prepare()
        assert solver._swapped_columns == deque([ColumnSwap(col1=1, col2=2)])
        assert solver._working.to_python() == [[1, 0, 0, 2], [0, 1, 0, 0], [0, 0, 0, 0]]

        solver._restore_columns()
        assert not solver._swapped_columns
        assert solver._working.to_python() == [[1, 0, 0, 2], [0, 0, 1, 0], [0, 0, 0, 0]]

    def test_solve_restores_swapped_columns(self, fraction_arithmetic, system_of):
        """Test solve() undoes its column swaps before classifying."""
        solver = GaussSolver(system_of(fraction_arithmetic, INFINITE_SYSTEMS[1]))
        assert solver.solve().is_infinite
        assert not solver._swapped_columns
        assert solver._working.to_python() == [[1, 0, 0, 2], [0, 0, 1, 0], [0, 0, 0, 0]]

    def test_swaps_are_logged(self, fraction_arithmetic, system_of, caplog):
        """Test the number of column swaps is part of the log context."""
        caplog.set_level(logging.DEBUG, logger="linarith")
        GaussSolver(system_of(fraction_arithmetic, INFINITE_SYSTEMS[1])).solve()
        prepared = [record for record in caplog.records if record.getMessage() == "Prepared working matrix"]
        assert prepared[-1].extra_data["swaps"] == 1

    def test_restore_columns_undoes_swaps_in_reverse(self, fraction_arithmetic, system_of):
        """Test variables come back in their original order after two swaps."""
        # columns hold the variables (b, c, a) after swapping 0 <> 1 and then 1 <> 2
        solver = GaussSolver(system_of(fraction_arithmetic, [[1, 0, 0, 2], [0, 1, 0, 3], [0, 0, 1, 1]]))
        solver._swapped_columns.extend([ColumnSwap(col1=0, col2=1), ColumnSwap(col1=1, col2=2)])
        solver._restore_columns()
        assert solver._working.get_col(3) == [1, 2, 3]
        assert not solver._has_infinite_solutions()

    def test_reset_clears_swaps(self, fraction_arithmetic, system_of):
        """Test a new solve starts without recorded swaps."""
        solver = GaussSolver(system_of(fraction_arithmetic, INFINITE_SYSTEMS[1]))
        solver.solve()
        solver._reset()
        assert not solver._swapped_columns
        assert solver._working == solver.equation_system.matrix

    def test_classification_is_logged(self, fraction_arithmetic, system_of, caplog):
        """Test the outcome is logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="linarith")
        GaussSolver(system_of(fraction_arithmetic, UNSOLVABLE_SYSTEMS[0])).solve()
        assert "Classified system as unsolvable" in caplog.text


class TestColumnSwap:
    """Test the ColumnSwap model."""

    def test_str(self):
        """Test the 'col1 <> col2' rendering."""
        assert str(ColumnSwap(col1=1, col2=3)) == "1 <> 3"

    def test_negative_columns_rejected(self, assert_validation_error):
        """Test columns must not be negative."""
        assert_validation_error(ColumnSwap, {"col1": -1, "col2": 0}, "col1")

    def test_frozen_and_hashable(self):
        """Test swaps are immutable values."""
        swap = ColumnSwap(col1=0, col2=1)
        assert swap == ColumnSwap(col1=0, col2=1)
        assert hash(swap) == hash(ColumnSwap(col1=0, col2=1))
