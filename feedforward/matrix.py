"""A dense 2-dimensional matrix over numeric cells, stored row-major in numpy."""

import logging
import operator

import numpy as np

from . import config
from .errors import CellOutOfBounds, DimensionMismatch, DimensionsTooLarge

logger = logging.getLogger(__name__)


def _check_dimension(value, name):
    value = operator.index(value)
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


def _length(rows, columns):
    length = rows * columns
    if length > config.MAX_LENGTH:
        raise DimensionsTooLarge(rows, columns, config.MAX_LENGTH)
    return length


def _is_python_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _to_array(values):
    # Python ints are stored as objects so arithmetic never wraps around.
    if len(values) and all(_is_python_int(value) for value in values):
        return np.array(values, dtype=object)
    return np.array(values)


def _fits(data, scalar):
    if not _is_python_int(scalar) or data.dtype.kind not in "iu":
        return True
    info = np.iinfo(data.dtype)
    return info.min <= scalar <= info.max


def _binary(op):
    def method(self, other):
        result = self._apply(other, op)
        if result is NotImplemented:
            return result
        return self._wrap(result)

    return method


def _reflected(op):
    def method(self, other):
        if np.ndim(other) != 0:
            return NotImplemented
        return self._wrap(op(other, self._promoted(other)))

    return method


def _inplace(op):
    def method(self, other):
        result = self._apply(other, op)
        if result is NotImplemented:
            return result
        self._data = result
        return self

    return method


class Matrix:
    """
    A matrix with `rows` x `columns` cells.

    The cell type is whatever numpy infers from the given values (bool, int,
    float, complex or arbitrary Python numbers as `object`). Operators work
    cell by cell and are only available if the cell type supports them.

    Fallible operations raise a subclass of `NetworkError`.
    """

    # Let numpy scalars on the left hand side defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int, fill_value):
        rows = _check_dimension(rows, "rows")
        columns = _check_dimension(columns, "columns")
        _length(rows, columns)
        dtype = object if _is_python_int(fill_value) else None
        self._data = np.full((rows, columns), fill_value, dtype=dtype)

    @classmethod
    def _wrap(cls, data):
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    @classmethod
    def from_slice(cls, rows: int, columns: int, values) -> "Matrix":
        """
        Create a matrix from a flat sequence of values in row-major order.

        Raises DimensionMismatch if `len(values) != rows * columns`.
        """
        rows = _check_dimension(rows, "rows")
        columns = _check_dimension(columns, "columns")
        length = _length(rows, columns)
        if len(values) != length:
            raise DimensionMismatch(
                length,
                len(values),
                f"A {rows}x{columns} matrix needs {length} values, got {len(values)}.",
            )

        data = _to_array(values)
        if data.shape != (length,):
            raise DimensionMismatch((length,), data.shape)
        return cls._wrap(data.reshape(rows, columns))

    @classmethod
    def from_random(cls, rows: int, columns: int, rng=None) -> "Matrix":
        """
        Create a matrix with random cells.

        `rng` is either a `numpy.random.Generator`, drawing floats from
        [RANDOM_LOW, RANDOM_HIGH], or a callable returning one cell value per
        call. Without `rng` a generator seeded with RANDOM_SEED is used.
        """
        rows = _check_dimension(rows, "rows")
        columns = _check_dimension(columns, "columns")
        length = _length(rows, columns)

        if rng is None:
            rng = np.random.default_rng(config.RANDOM_SEED)

        if isinstance(rng, np.random.Generator):
            # uniform() excludes its upper bound, so step just past it
            high = np.nextafter(config.RANDOM_HIGH, np.inf)
            data = rng.uniform(config.RANDOM_LOW, high, size=(rows, columns))
        else:
            data = _to_array([rng() for _ in range(length)]).reshape(rows, columns)

        return cls._wrap(data)

    # Getters

    def get_number_of_rows(self) -> int:
        return self._data.shape[0]

    def get_number_of_columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    def get(self, row: int, column: int):
        row = operator.index(row)
        column = operator.index(column)
        rows, columns = self._data.shape
        if not (0 <= row < rows and 0 <= column < columns):
            raise CellOutOfBounds(row, column, rows, columns)
        return self.get_unchecked(row, column)

    def get_unchecked(self, row: int, column: int):
        """
        Get a cell without validating `row` and `column`.

        The caller must guarantee that both are within the matrix. Out of
        range indices may raise IndexError or silently address another cell.
        """
        return self._data.item(row, column)

    def __getitem__(self, key):
        row, column = key
        return self.get(row, column)

    def as_slice(self):
        """Read-only row-major view of all cells."""
        view = self._data.ravel()
        view.flags.writeable = False
        return view

    def to_numpy(self):
        return self._data.copy()

    def copy(self) -> "Matrix":
        return self._wrap(self._data.copy())

    # Element operations

    def _mapped(self, transform):
        dtype = self._data.dtype
        values = [transform(value) for value in self._data.ravel().tolist()]
        if dtype == object:
            data = np.array(values, dtype=object)
        else:
            # Cast back so the cell type survives, wrapping like the operators do.
            data = np.array(values).astype(dtype)
        return data.reshape(self._data.shape)

    def map(self, transform) -> "Matrix":
        """Return a new matrix with `transform` applied to every cell."""
        return self._wrap(self._mapped(transform))

    def map_ref_mut(self, transform) -> None:
        """Apply `transform` to every cell of this matrix in place."""
        self._data = self._mapped(transform)

    def transpose(self) -> "Matrix":
        return self._wrap(self._data.T.copy())

    def matrix_mul(self, other: "Matrix") -> "Matrix":
        """
        Compute the matrix product `self x other`.

        Raises DimensionMismatch unless self has as many columns as other has
        rows. The result has the dimensions `self.rows x other.columns`.
        """
        if self.get_number_of_columns() != other.get_number_of_rows():
            raise DimensionMismatch(
                self.get_number_of_columns(),
                other.get_number_of_rows(),
                f"Cannot multiply a {self.shape[0]}x{self.shape[1]} matrix "
                f"by a {other.shape[0]}x{other.shape[1]} matrix.",
            )
        _length(self.get_number_of_rows(), other.get_number_of_columns())

        left = self._data
        right = other._data

        # Sum the outer products over the shared index in ascending order.
        # There is no generic zero, so start from the first product.
        result = left[:, 0:1] * right[0:1, :]
        for index in range(1, left.shape[1]):
            result = result + left[:, index : index + 1] * right[index : index + 1, :]

        logger.debug(
            "Multiplied %sx%s by %sx%s", *self.shape, *other.shape
        )
        return self._wrap(result)

    # Operators

    def _apply(self, other, op):
        if isinstance(other, Matrix):
            if self.shape != other.shape:
                raise DimensionMismatch(
                    self.shape,
                    other.shape,
                    f"Element-wise operation on a {self.shape[0]}x{self.shape[1]} "
                    f"and a {other.shape[0]}x{other.shape[1]} matrix.",
                )
            return op(self._data, other._data)
        if np.ndim(other) != 0:
            return NotImplemented
        return op(self._promoted(other), other)

    def _promoted(self, scalar):
        # Switch to Python ints when the scalar does not fit the cell type.
        if _fits(self._data, scalar):
            return self._data
        return self._data.astype(object)

    __add__ = _binary(operator.add)
    __sub__ = _binary(operator.sub)
    __mul__ = _binary(operator.mul)
    __truediv__ = _binary(operator.truediv)
    __floordiv__ = _binary(operator.floordiv)
    __mod__ = _binary(operator.mod)
    __and__ = _binary(operator.and_)
    __or__ = _binary(operator.or_)
    __xor__ = _binary(operator.xor)
    __lshift__ = _binary(operator.lshift)
    __rshift__ = _binary(operator.rshift)

    __radd__ = _reflected(operator.add)
    __rsub__ = _reflected(operator.sub)
    __rmul__ = _reflected(operator.mul)
    __rtruediv__ = _reflected(operator.truediv)
    __rfloordiv__ = _reflected(operator.floordiv)
    __rmod__ = _reflected(operator.mod)
    __rand__ = _reflected(operator.and_)
    __ror__ = _reflected(operator.or_)
    __rxor__ = _reflected(operator.xor)
    __rlshift__ = _reflected(operator.lshift)
    __rrshift__ = _reflected(operator.rshift)

    # In-place operators validate before touching self.
    __iadd__ = _inplace(operator.add)
    __isub__ = _inplace(operator.sub)
    __imul__ = _inplace(operator.mul)
    __itruediv__ = _inplace(operator.truediv)
    __ifloordiv__ = _inplace(operator.floordiv)
    __imod__ = _inplace(operator.mod)
    __iand__ = _inplace(operator.and_)
    __ior__ = _inplace(operator.or_)
    __ixor__ = _inplace(operator.xor)
    __ilshift__ = _inplace(operator.lshift)
    __irshift__ = _inplace(operator.rshift)

    def __neg__(self):
        return self._wrap(-self._data)

    def __invert__(self):
        return self._wrap(~self._data)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None

    def __str__(self):
        cells = [[str(value) for value in row] for row in self._data.tolist()]
        widths = [max(len(row[column]) for row in cells) for column in range(len(cells[0]))]
        lines = []
        for row in cells:
            values = [value.ljust(width) for value, width in zip(row, widths)]
            lines.append("[" + "   ".join(values) + "]")
        return "\n".join(lines)

    def __repr__(self):
        rows, columns = self.shape
        return f"Matrix(rows={rows}, columns={columns}, data={self._data.ravel().tolist()})"
