"""
Sparse matrix over an injectable arithmetic.

Values are stored in a dict keyed by the row-major linear index
``row * cols + col``. Cells that are not in the dict hold the matrix's
default value, and writing the default value removes the entry, so the dict
only ever contains the non-default cells. Determinant evaluation relies on
this to find zero rows and columns cheaply.

All numeric work goes through ``matrix.arithmetic``; the matrix never applies
Python operators to its values.
"""

from __future__ import annotations

import sys
from collections import defaultdict
from typing import Any, Callable, Generic, Iterable, Iterator, NamedTuple, Sequence, TypeVar

import numpy as np

from ..arithmetic.base import AbstractArithmetic
from ..core.errors import OutOfRangeError, ShapeMismatchError, UnsupportedOperationError
from ..core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
NT = TypeVar("NT")


class Cell(NamedTuple):
    """One matrix cell: linear index, coordinates and logical value."""

    index: int
    row: int
    col: int
    value: Any


class Matrix(Generic[T]):
    """
    Sparse ``rows x cols`` matrix of values handled by an arithmetic.

    Structural operations (add, multiply, transpose, inverse, ...) always
    return a new Matrix. Only ``set_value``/``remove_value``/``compute*``
    mutate in place.

    Args:
        arithmetic: Arithmetic used for every numeric operation
        rows: Number of rows (>= 0)
        cols: Number of columns (>= 0, defaults to ``rows``)
        default_value: Value of unset cells (defaults to ``arithmetic.zero()``)

    Examples:
        >>> m = Matrix.of_values_by_rows(FloatArithmetic(), 2, 1, 2, 3, 4)
        >>> m.determinant()
        -2.0
    """

    def __init__(
        self,
        arithmetic: AbstractArithmetic[T],
        rows: int,
        cols: int | None = None,
        default_value: T | None = None,
    ) -> None:
        if cols is None:
            cols = rows
        if not isinstance(rows, int) or not isinstance(cols, int) or isinstance(rows, bool) or isinstance(cols, bool):
            raise TypeError("Matrix rows and cols must be integers")
        if rows < 0 or cols < 0:
            raise ShapeMismatchError("rows and cols must not be negative", shape=(rows, cols))
        if rows * cols > sys.maxsize:
            raise ShapeMismatchError("rows * cols exceeds the addressable size", shape=(rows, cols))

        self._arithmetic = arithmetic
        self._rows = rows
        self._cols = cols
        self._default_value = arithmetic.zero() if default_value is None else default_value
        self._values: dict[int, T] = {}

    # properties

    @property
    def arithmetic(self) -> AbstractArithmetic[T]:
        return self._arithmetic

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def default_value(self) -> T:
        return self._default_value

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Number of cells, ``rows * cols``."""
        return self._rows * self._cols

    def sparse_entries(self) -> dict[int, T]:
        """Copy of the stored (non-default) cells keyed by linear index."""
        return dict(self._values)

    # index helpers

    def _is_valid_row(self, row: int) -> bool:
        return 0 <= row < self._rows

    def _is_valid_col(self, col: int) -> bool:
        return 0 <= col < self._cols

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.size

    def _check_row(self, row: int) -> None:
        if not self._is_valid_row(row):
            raise OutOfRangeError("row", row, self._rows)

    def _check_col(self, col: int) -> None:
        if not self._is_valid_col(col):
            raise OutOfRangeError("col", col, self._cols)

    def _check_index(self, index: int) -> None:
        if not self._is_valid_index(index):
            raise OutOfRangeError("index", index, self.size)

    def index_of(self, row: int, col: int) -> int:
        """Linear (row-major) index of a cell."""
        self._check_row(row)
        self._check_col(col)
        return row * self._cols + col

    def _is_default_value(self, value: T) -> bool:
        return self._arithmetic.is_equal(self._default_value, value)

    # value access

    def get_value(self, row: int, col: int) -> T:
        """
        Value at (row, col).

        Raises:
            OutOfRangeError: If the coordinate lies outside the matrix
        """
        return self.get_value_at(self.index_of(row, col))

    def get_value_at(self, index: int) -> T:
        """Value at a linear index."""
        self._check_index(index)
        return self._values.get(index, self._default_value)

    def set_value(self, row: int, col: int, value: T) -> T:
        """
        Set the value at (row, col).

        Setting the default value removes the stored entry.

        Returns:
            The previous logical value of the cell
        """
        return self.set_value_at(self.index_of(row, col), value)

    def set_value_at(self, index: int, value: T) -> T:
        """Set the value at a linear index, returning the previous value."""
        self._check_index(index)
        if self._is_default_value(value):
            return self.remove_value_at(index)
        previous = self._values.get(index, self._default_value)
        self._values[index] = value
        return previous

    def remove_value(self, row: int, col: int) -> T:
        """Reset (row, col) to the default value, returning the previous value."""
        return self.remove_value_at(self.index_of(row, col))

    def remove_value_at(self, index: int) -> T:
        """Reset a linear index to the default value, returning the previous value."""
        self._check_index(index)
        return self._values.pop(index, self._default_value)

    def __getitem__(self, key: tuple[int, int] | int) -> T:
        """Get element by (row, col) or by linear index."""
        if isinstance(key, tuple):
            row, col = key
            return self.get_value(row, col)
        return self.get_value_at(key)

    def __setitem__(self, key: tuple[int, int] | int, value: T) -> None:
        if isinstance(key, tuple):
            row, col = key
            self.set_value(row, col, value)
        else:
            self.set_value_at(key, value)

    # rows and cols

    def get_row_cells(self, row: int) -> list[Cell]:
        self._check_row(row)
        start = row * self._cols
        return [
            Cell(start + col, row, col, self._values.get(start + col, self._default_value))
            for col in range(self._cols)
        ]

    def get_row(self, row: int) -> list[T]:
        """Values of one row, left to right."""
        return [cell.value for cell in self.get_row_cells(row)]

    def get_col_cells(self, col: int) -> list[Cell]:
        self._check_col(col)
        return [
            Cell(row * self._cols + col, row, col,
                 self._values.get(row * self._cols + col, self._default_value))
            for row in range(self._rows)
        ]

    def get_col(self, col: int) -> list[T]:
        """Values of one column, top to bottom."""
        return [cell.value for cell in self.get_col_cells(col)]

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over every cell (stored or default) in row-major order."""
        for index in range(self.size):
            row, col = divmod(index, self._cols)
            yield Cell(index, row, col, self._values.get(index, self._default_value))

    # compute

    def compute(self, row: int, col: int, operator: Callable[[T], T]) -> T:
        """Replace (row, col) by ``operator(value)``, returning the previous value."""
        return self.compute_at(self.index_of(row, col), operator)

    def compute_at(self, index: int, operator: Callable[[T], T]) -> T:
        return self.set_value_at(index, operator(self.get_value_at(index)))

    def compute_all(self, operator: Callable[[Cell], T]) -> None:
        """Replace every cell by ``operator(cell)``."""
        for cell in list(self):
            self.set_value_at(cell.index, operator(cell))

    # predicates

    def is_square(self) -> bool:
        return self._rows == self._cols

    def is_diagonal(self) -> bool:
        """True if square and every off-diagonal cell is zero."""
        if not self.is_square():
            return False
        return all(
            cell.row == cell.col or self._arithmetic.is_zero(cell.value)
            for cell in self
        )

    def is_invertible(self) -> bool:
        return self.is_square() and not self._arithmetic.is_zero(self.determinant())

    # add and multiply

    def add(self, other: Matrix[T]) -> Matrix[T]:
        """
        Cell-wise sum.

        Raises:
            ShapeMismatchError: If the shapes differ
        """
        if self.shape != other.shape:
            raise ShapeMismatchError("Matrices must have same dimensions", self.shape, other.shape)
        result = self.copy()
        result.compute_all(
            lambda cell: self._arithmetic.sum(cell.value, other.get_value_at(cell.index))
        )
        return result

    def subtract(self, other: Matrix[T]) -> Matrix[T]:
        """Cell-wise difference."""
        if self.shape != other.shape:
            raise ShapeMismatchError("Matrices must have same dimensions", self.shape, other.shape)
        result = self.copy()
        result.compute_all(
            lambda cell: self._arithmetic.difference(cell.value, other.get_value_at(cell.index))
        )
        return result

    def negate(self) -> Matrix[T]:
        result = self.copy()
        result.compute_all(lambda cell: self._arithmetic.negate(cell.value))
        return result

    def multiply(self, other: Matrix[T] | T) -> Matrix[T]:
        """
        Matrix product with another matrix, or cell-wise product with a scalar.

        Raises:
            ShapeMismatchError: If ``self.cols != other.rows`` for a matrix operand
        """
        if isinstance(other, Matrix):
            return self._multiply_matrix(other)
        result = self.copy()
        result.compute_all(lambda cell: self._arithmetic.product(cell.value, other))
        return result

    def _multiply_matrix(self, other: Matrix[T]) -> Matrix[T]:
        if self._cols != other.rows:
            raise ShapeMismatchError(
                "cols have to be equal to the rows of the other matrix", self.shape, other.shape
            )
        arithmetic = self._arithmetic
        result = Matrix(arithmetic, self._rows, other.cols, self._default_value)
        for row in range(self._rows):
            left = self.get_row(row)
            for col in range(other.cols):
                value = arithmetic.zero()
                for k in range(self._cols):
                    value = arithmetic.sum(value, arithmetic.product(left[k], other.get_value(k, col)))
                result.set_value(row, col, value)
        return result

    def multiply_tolerant(self, other: Matrix[T]) -> Matrix[T]:
        """
        Multiply in whichever order the shapes allow.

        Tries ``self @ other`` first, then ``other @ self``.

        Raises:
            ShapeMismatchError: If neither order is defined
        """
        if self._cols == other.rows:
            return self.multiply(other)
        if self._rows == other.cols:
            return other.multiply_tolerant(self)
        raise ShapeMismatchError(
            "any cols have to be equal to the other matrix rows", self.shape, other.shape
        )

    # transpose, determinant and inverse

    def transpose(self) -> Matrix[T]:
        """New matrix with rows and cols swapped."""
        result = Matrix(self._arithmetic, self._cols, self._rows, self._default_value)
        for index, value in self._values.items():
            row, col = divmod(index, self._cols)
            result._values[col * self._rows + row] = value
        return result

    def determinant(self) -> T:
        """
        Determinant of a square matrix.

        Sizes 1 to 3 use closed formulas, larger matrices use cofactor
        expansion along the row or column with the most zeros.

        Returns:
            The determinant (the default value for an empty matrix)

        Raises:
            ShapeMismatchError: If the matrix is not square
        """
        if not self.is_square():
            raise ShapeMismatchError("matrix has to be a square matrix", self.shape)
        a = self._arithmetic
        v = self.get_value
        if self._rows == 0:
            return self._default_value
        if self._rows == 1:
            return v(0, 0)
        if self._rows == 2:
            return a.difference(a.product(v(0, 0), v(1, 1)), a.product(v(0, 1), v(1, 0)))
        if self._rows == 3:
            return a.difference(
                a.sum3(
                    a.product3(v(0, 0), v(1, 1), v(2, 2)),
                    a.product3(v(0, 1), v(1, 2), v(2, 0)),
                    a.product3(v(0, 2), v(1, 0), v(2, 1)),
                ),
                a.sum3(
                    a.product3(v(2, 0), v(1, 1), v(0, 2)),
                    a.product3(v(2, 1), v(1, 2), v(0, 0)),
                    a.product3(v(2, 2), v(1, 0), v(0, 1)),
                ),
            )
        return self._determinant_recursive()

    def _determinant_recursive(self) -> T:
        """
        Laplace expansion along the row or column holding the most zeros.

        Only the non-zero cells of that line are expanded. A line that is
        entirely zero ends the recursion with a zero determinant.
        """
        a = self._arithmetic
        zeros = [cell for cell in self if a.is_zero(cell.value)]

        by_row = True
        line = 0
        if zeros:
            best_row, row_zeros = self._most_zeros(zeros, by_row=True)
            best_col, col_zeros = self._most_zeros(zeros, by_row=False)
            if row_zeros < col_zeros:
                if col_zeros == self._rows:
                    return a.zero()
                by_row = False
                line = best_col
            else:
                if row_zeros == self._cols:
                    return a.zero()
                line = best_row

        cells = self.get_row_cells(line) if by_row else self.get_col_cells(line)
        result = a.zero()
        for cell in cells:
            if a.is_zero(cell.value):
                continue
            result = a.sum(result, a.product(cell.value, self._cofactor(cell.row, cell.col)))
        return result

    @staticmethod
    def _most_zeros(zeros: Iterable[Cell], by_row: bool) -> tuple[int, int]:
        """(line, count) of the row or column with the most zero cells, lowest line on ties."""
        groups: dict[int, int] = defaultdict(int)
        for cell in zeros:
            groups[cell.row if by_row else cell.col] += 1
        best = max(sorted(groups), key=lambda key: groups[key])
        return best, groups[best]

    def inverse(self) -> Matrix[T] | None:
        """
        Inverse through the adjugate: ``adj(A) / det(A)``.

        Returns:
            The inverse, or None if the determinant is zero

        Raises:
            ShapeMismatchError: If the matrix is not square
        """
        if not self.is_square():
            raise ShapeMismatchError("matrix has to be a square matrix", self.shape)
        determinant = self.determinant()
        if self._arithmetic.is_zero(determinant):
            logger.debug("No inverse for %dx%d matrix, determinant is zero", self._rows, self._cols)
            return None
        factor = self._arithmetic.quotient(self._arithmetic.one(), determinant)
        return self._adjugate().multiply(factor)

    # sub matrix, cofactor and adjugate

    def _sub_matrix(self, row: int, col: int) -> Matrix[T]:
        """Copy without the given row and column."""
        self._check_row(row)
        self._check_col(col)
        result = Matrix(self._arithmetic, self._rows - 1, self._cols - 1, self._default_value)
        for index, value in self._values.items():
            r, c = divmod(index, self._cols)
            if r == row or c == col:
                continue
            r = r if r < row else r - 1
            c = c if c < col else c - 1
            result._values[r * result.cols + c] = value
        return result

    @staticmethod
    def _signum_factor(row: int, col: int) -> int:
        return 1 if (row + col) % 2 == 0 else -1

    def _cofactor(self, row: int, col: int) -> T:
        """Signed minor ``(-1)^(row+col) * det(sub_matrix(row, col))``."""
        if not self.is_square():
            raise ShapeMismatchError("matrix has to be a square matrix", self.shape)
        a = self._arithmetic
        if self._rows == 1:
            self._check_row(row)
            self._check_col(col)
            minor = a.one()
        else:
            minor = self._sub_matrix(row, col).determinant()
        return a.product(a.from_int(self._signum_factor(row, col)), minor)

    def _cofactor_matrix(self) -> Matrix[T]:
        result = Matrix(self._arithmetic, self._rows, self._cols, self._default_value)
        for cell in self:
            result.set_value_at(cell.index, self._cofactor(cell.row, cell.col))
        return result

    def _adjugate(self) -> Matrix[T]:
        return self._cofactor_matrix().transpose()

    # elementary row and column operations (copy-on-write)

    def _swap_rows(self, row1: int, row2: int) -> Matrix[T]:
        self._check_row(row1)
        self._check_row(row2)
        result = self.copy()
        if row1 == row2:
            return result
        for col in range(self._cols):
            result.set_value(row1, col, self.get_value(row2, col))
            result.set_value(row2, col, self.get_value(row1, col))
        return result

    def _swap_cols(self, col1: int, col2: int) -> Matrix[T]:
        self._check_col(col1)
        self._check_col(col2)
        result = self.copy()
        if col1 == col2:
            return result
        for row in range(self._rows):
            result.set_value(row, col1, self.get_value(row, col2))
            result.set_value(row, col2, self.get_value(row, col1))
        return result

    def _multiply_row(self, row: int, factor: T) -> Matrix[T]:
        self._check_row(row)
        a = self._arithmetic
        result = self.copy()
        if a.is_zero(factor):
            for col in range(self._cols):
                result.set_value(row, col, a.zero())
            return result
        if a.is_equal(a.one(), factor):
            return result
        for col in range(self._cols):
            result.compute(row, col, lambda value: a.product(value, factor))
        return result

    def _multiply_col(self, col: int, factor: T) -> Matrix[T]:
        self._check_col(col)
        a = self._arithmetic
        result = self.copy()
        if a.is_zero(factor):
            for row in range(self._rows):
                result.set_value(row, col, a.zero())
            return result
        if a.is_equal(a.one(), factor):
            return result
        for row in range(self._rows):
            result.compute(row, col, lambda value: a.product(value, factor))
        return result

    def _add_row_multiple_times(self, target: int, source: int, factor: T) -> Matrix[T]:
        """Copy with ``row[target] += row[source] * factor``."""
        self._check_row(target)
        self._check_row(source)
        a = self._arithmetic
        if a.is_zero(factor):
            return self.copy()
        if target == source:
            return self._multiply_row(target, a.sum(a.one(), factor))
        result = self.copy()
        for col in range(self._cols):
            addend = a.product(self.get_value(source, col), factor)
            result.compute(target, col, lambda value: a.sum(value, addend))
        return result

    def _add_col_multiple_times(self, target: int, source: int, factor: T) -> Matrix[T]:
        """Copy with ``col[target] += col[source] * factor``."""
        self._check_col(target)
        self._check_col(source)
        a = self._arithmetic
        if a.is_zero(factor):
            return self.copy()
        if target == source:
            return self._multiply_col(target, a.sum(a.one(), factor))
        result = self.copy()
        for row in range(self._rows):
            addend = a.product(self.get_value(row, source), factor)
            result.compute(row, target, lambda value: a.sum(value, addend))
        return result

    # conversion

    def to_param(self) -> T:
        """The single value of a 1x1 matrix."""
        if self.shape != (1, 1):
            raise UnsupportedOperationError("to_param", reason="matrix has to contain only one value")
        return self.get_value(0, 0)

    def map(self, arithmetic: AbstractArithmetic[NT], converter: Callable[[T], NT]) -> Matrix[NT]:
        """Convert every value (and the default value) into another arithmetic."""
        result: Matrix[NT] = Matrix(arithmetic, self._rows, self._cols, converter(self._default_value))
        for index, value in self._values.items():
            result.set_value_at(index, converter(value))
        return result

    def map_default_value(self, default_value: T) -> Matrix[T]:
        """Same logical values stored against another default value."""
        if self._is_default_value(default_value):
            return self.copy()
        result = Matrix(self._arithmetic, self._rows, self._cols, default_value)
        for cell in self:
            result.set_value_at(cell.index, cell.value)
        return result

    def copy(self) -> Matrix[T]:
        """Independent copy (values are immutable numbers and are shared)."""
        result = Matrix(self._arithmetic, self._rows, self._cols, self._default_value)
        result._values = dict(self._values)
        return result

    __copy__ = copy

    def to_python(self) -> list[list[T]]:
        """Nested Python lists, one per row."""
        return [self.get_row(row) for row in range(self._rows)]

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """NumPy array of the values (object dtype for non-native numbers)."""
        return np.array(self.to_python(), dtype=dtype).reshape(self._rows, self._cols)

    def to_string(self) -> str:
        rows_str = ", ".join(
            "[" + ", ".join(str(value) for value in row) + "]" for row in self.to_python()
        )
        return f"[{rows_str}]"

    def to_tex(self) -> str:
        """LaTeX pmatrix."""
        rows_tex = " \\\\ ".join(
            " & ".join(str(value) for value in row) for row in self.to_python()
        )
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    # factories

    @classmethod
    def identity(
        cls, arithmetic: AbstractArithmetic[T], size: int, default_value: T | None = None
    ) -> Matrix[T]:
        """``size x size`` identity matrix."""
        matrix = cls(arithmetic, size, size, default_value)
        for i in range(size):
            matrix.set_value(i, i, arithmetic.one())
        return matrix

    @classmethod
    def diagonal(
        cls, arithmetic: AbstractArithmetic[T], *values: T, default_value: T | None = None
    ) -> Matrix[T]:
        """Square matrix with ``values`` on the diagonal."""
        matrix = cls(arithmetic, len(values), len(values), default_value)
        for i, value in enumerate(values):
            matrix.set_value(i, i, value)
        return matrix

    @classmethod
    def of_values_by_rows(
        cls, arithmetic: AbstractArithmetic[T], rows: int, *values: T, default_value: T | None = None
    ) -> Matrix[T]:
        """
        Matrix filled row by row.

        Raises:
            ShapeMismatchError: If ``len(values)`` is not a multiple of ``rows``
        """
        if rows <= 0 or len(values) % rows != 0:
            raise ShapeMismatchError(
                f"{len(values)} values cannot be split into {rows} rows", shape=(rows, len(values))
            )
        matrix = cls(arithmetic, rows, len(values) // rows, default_value)
        for index, value in enumerate(values):
            matrix.set_value_at(index, value)
        return matrix

    @classmethod
    def of_values_by_cols(
        cls, arithmetic: AbstractArithmetic[T], cols: int, *values: T, default_value: T | None = None
    ) -> Matrix[T]:
        """
        Matrix filled column by column.

        Raises:
            ShapeMismatchError: If ``len(values)`` is not a multiple of ``cols``
        """
        if cols <= 0 or len(values) % cols != 0:
            raise ShapeMismatchError(
                f"{len(values)} values cannot be split into {cols} cols", shape=(len(values), cols)
            )
        return cls.of_values_by_rows(
            arithmetic, cols, *values, default_value=default_value
        ).transpose()

    @classmethod
    def of_rows(
        cls,
        arithmetic: AbstractArithmetic[T],
        rows: Iterable[Sequence[T]],
        default_value: T | None = None,
    ) -> Matrix[T]:
        """Matrix from nested row sequences; all rows must have the same length."""
        row_list = [list(row) for row in rows]
        cols = len(row_list[0]) if row_list else 0
        if any(len(row) != cols for row in row_list):
            raise ShapeMismatchError("Matrix rows must all have same length")
        matrix = cls(arithmetic, len(row_list), cols, default_value)
        for r, row in enumerate(row_list):
            for c, value in enumerate(row):
                matrix.set_value(r, c, value)
        return matrix

    @classmethod
    def from_numpy(cls, arithmetic: AbstractArithmetic[T], array: np.ndarray) -> Matrix[T]:
        """
        Matrix from a 2D NumPy array.

        Native ints and floats are converted with ``from_int``/``from_float``,
        anything else (complex, object dtype) is taken as is.
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ShapeMismatchError(f"expected a 2D array, got {array.ndim} dimensions")

        def convert(value: Any) -> T:
            if isinstance(value, bool):
                return arithmetic.from_int(int(value))
            if isinstance(value, int):
                return arithmetic.from_int(value)
            if isinstance(value, float):
                return arithmetic.from_float(value)
            return value

        return cls.of_rows(arithmetic, [[convert(value) for value in row] for row in array.tolist()])

    # override

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            self._arithmetic.is_equal(cell.value, other.get_value_at(cell.index))
            for cell in self
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, {self.to_string()})"

    # operators

    def __add__(self, other: Any) -> Matrix[T]:
        if isinstance(other, Matrix):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix[T]:
        if isinstance(other, Matrix):
            return self.subtract(other)
        return NotImplemented

    def __neg__(self) -> Matrix[T]:
        return self.negate()

    def __mul__(self, other: Any) -> Matrix[T]:
        """Matrix multiplication or scalar multiplication."""
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Matrix[T]:
        """Right multiplication (scalar only)."""
        if isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __matmul__(self, other: Any) -> Matrix[T]:
        if isinstance(other, Matrix):
            return self._multiply_matrix(other)
        return NotImplemented
