"""
Shared pytest fixtures for the linarith tests.

This module provides:
- One fixture per arithmetic
- Factories that build matrices and equation systems from nested lists
- Helpers for the pydantic models (Solution, ColumnSwap)
"""

import pytest
from decimal import Context
from fractions import Fraction
from typing import Any, Sequence, Type
from pydantic import BaseModel, ValidationError

from linarith.algebra import LinearEquationSystem, Matrix
from linarith.arithmetic import (
    AbstractArithmetic,
    ComplexArithmetic,
    DecimalArithmetic,
    FloatArithmetic,
    FractionArithmetic,
    IntegerArithmetic,
    SymPyArithmetic,
)


def coerce(arithmetic: AbstractArithmetic, value: Any) -> Any:
    """Convert plain ints and floats into the arithmetic's type, keep anything else."""
    if isinstance(value, bool):
        return arithmetic.from_int(int(value))
    if isinstance(value, int):
        return arithmetic.from_int(value)
    if isinstance(value, float):
        return arithmetic.from_float(value)
    if isinstance(value, Fraction) and isinstance(arithmetic, SymPyArithmetic):
        return arithmetic.quotient(
            arithmetic.from_int(value.numerator), arithmetic.from_int(value.denominator)
        )
    return value


@pytest.fixture
def float_arithmetic() -> FloatArithmetic:
    return FloatArithmetic()


@pytest.fixture
def integer_arithmetic() -> IntegerArithmetic:
    return IntegerArithmetic()


@pytest.fixture
def decimal_arithmetic() -> DecimalArithmetic:
    return DecimalArithmetic(Context(prec=28))


@pytest.fixture
def fraction_arithmetic() -> FractionArithmetic:
    return FractionArithmetic()


@pytest.fixture
def complex_arithmetic() -> ComplexArithmetic:
    return ComplexArithmetic()


@pytest.fixture
def sympy_arithmetic() -> SymPyArithmetic:
    return SymPyArithmetic()


@pytest.fixture(params=["fraction", "sympy"])
def exact_arithmetic(request) -> AbstractArithmetic:
    """Every exact field arithmetic, for tests that compare results with ``==``."""
    return {"fraction": FractionArithmetic, "sympy": SymPyArithmetic}[request.param]()


@pytest.fixture
def matrix_of():
    """Factory building a Matrix from nested row lists."""
    def _factory(arithmetic: AbstractArithmetic, rows: Sequence[Sequence[Any]]) -> Matrix:
        return Matrix.of_rows(arithmetic, [[coerce(arithmetic, v) for v in row] for row in rows])
    return _factory


@pytest.fixture
def system_of(matrix_of):
    """Factory building a LinearEquationSystem from augmented rows ``[a1, ..., an, b]``."""
    def _factory(arithmetic: AbstractArithmetic, rows: Sequence[Sequence[Any]]) -> LinearEquationSystem:
        return LinearEquationSystem(matrix_of(arithmetic, rows))
    return _factory


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_matrix_close():
    """Helper comparing a float Matrix with expected nested values."""
    def _assert_close(matrix: Matrix, expected: Sequence[Sequence[float]], abs_tol: float = 1e-9) -> None:
        assert matrix.shape == (len(expected), len(expected[0]) if expected else 0)
        for actual_row, expected_row in zip(matrix.to_python(), expected):
            assert actual_row == pytest.approx(list(expected_row), abs=abs_tol)
    return _assert_close
