"""A small dense matrix type with the activations used by the network."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from numbers import Real

import numpy as np


class Activation(enum.Enum):
    """Activation applied to the output of a network layer."""

    SIGMOID = "sigmoid"
    SOFTMAX = "softmax"


class Matrix:
    """A two-dimensional matrix of floats backed by a numpy array."""

    __hash__ = None  # mutable, compared by value

    def __init__(self, rows: int = 0, cols: int = 0, init: float = 0.0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.data = np.full((rows, cols), init, dtype=np.float64)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> Matrix:
        matrix = cls.__new__(cls)
        matrix.data = np.asarray(array, dtype=np.float64).reshape(array.shape)
        return matrix

    @classmethod
    def from_vector(cls, vec: Iterable[float]) -> Matrix:
        """Build a column vector from a sequence of numbers."""
        values = np.asarray(list(vec), dtype=np.float64)
        return cls._wrap(values.reshape(-1, 1))

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def cols(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.data.shape

    def _require_column(self) -> None:
        if self.cols != 1:
            raise ValueError(f"expected a column vector, got shape {self.shape}")

    def to_vector(self) -> list[float]:
        """Return the entries of a column vector as a list."""
        self._require_column()
        return [float(value) for value in self.data[:, 0]]

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError(f"cannot add shapes {self.shape} and {other.shape}")
        return Matrix._wrap(self.data + other.data)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply shapes {self.shape} and {other.shape}")
        return Matrix._wrap(self.data @ other.data)

    def __mul__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Matrix._wrap(self.data * float(scalar))

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    def sigmoid(self) -> Matrix:
        """Apply the logistic function to every entry."""
        return Matrix._wrap(1.0 / (1.0 + np.exp(-self.data)))

    def sigmoid_derivative(self) -> Matrix:
        """Derivative of the logistic function evaluated at every entry."""
        s = 1.0 / (1.0 + np.exp(-self.data))
        return Matrix._wrap(s * (1.0 - s))

    def softmax(self) -> Matrix:
        """Softmax of a column vector."""
        self._require_column()
        if self.rows == 0:
            raise ValueError("softmax of an empty vector")
        column = self.data[:, 0]
        exps = np.exp(column - column.max())
        return Matrix._wrap((exps / exps.sum()).reshape(-1, 1))

    def softmax_derivative(self, true_index: int) -> Matrix:
        """Softmax Jacobian row for ``true_index``, taking self as softmax output."""
        self._require_column()
        if not 0 <= true_index < self.rows:
            raise IndexError(f"index {true_index} out of range for {self.rows} rows")
        column = self.data[:, 0]
        true_value = column[true_index]
        result = -column * true_value
        result[true_index] = true_value * (1.0 - true_value)
        return Matrix._wrap(result.reshape(-1, 1))

    def transpose(self) -> Matrix:
        return Matrix._wrap(self.data.T.copy())

    def hadamard(self, other: Matrix) -> Matrix:
        """Element-wise product."""
        if self.shape != other.shape:
            raise ValueError(f"cannot multiply shapes {self.shape} and {other.shape} element-wise")
        return Matrix._wrap(self.data * other.data)

    def copy(self) -> Matrix:
        return Matrix._wrap(self.data.copy())

    def __str__(self) -> str:
        return "".join(
            "".join(f"{float(value):g} " for value in row) + "\n" for row in self.data
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"