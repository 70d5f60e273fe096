################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense row-major matrix value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from matrix_calc.math_utils.validation import as_flat_buffer
from matrix_calc.math_utils.validation import require_length
from matrix_calc.math_utils.validation import require_shape
from matrix_calc.matrix_types.errors import DimensionMismatchError


@dataclass(frozen=True, eq=False)
class Matrix:
    """Immutable dense matrix stored as a flat row-major buffer.

    Attributes:
        rows: Number of rows, positive
        cols: Number of columns, positive
        data: Read-only float64 buffer of rows * cols elements

    The buffer is always a private copy of the caller's values, so the
    engine can never write to memory the caller owns.
    """

    rows: int
    cols: int
    data: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate the shape and take a read-only copy of the buffer."""
        rows, cols = require_shape(self.rows, self.cols, type(self).__name__)
        buffer: NDArray[np.float64] = as_flat_buffer(self.data, "data")
        require_length(buffer, rows, cols, "data")
        buffer.flags.writeable = False
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "cols", cols)
        object.__setattr__(self, "data", buffer)

    @classmethod
    def from_array(cls, values: Any) -> Matrix:
        """Build a matrix from a 2D array-like."""
        array: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
        if array.ndim != 2:
            raise DimensionMismatchError("values must be two-dimensional")
        return cls(array.shape[0], array.shape[1], array.reshape(-1))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a list of equal-length rows."""
        if not rows:
            raise DimensionMismatchError("Matrix cannot be empty")
        cols: int = len(rows[0])
        if any(len(row) != cols for row in rows):
            raise DimensionMismatchError(
                "All rows must have the same number of columns"
            )
        return cls(len(rows), cols, [value for row in rows for value in row])

    @classmethod
    def identity(cls, order: int) -> Matrix:
        """Return the identity matrix of the given order."""
        return cls(order, order, np.eye(order, dtype=np.float64).reshape(-1))

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def is_square(self) -> bool:
        return self.rows == self.cols

    def values(self) -> NDArray[np.float64]:
        """Return a read-only 2D view of the buffer."""
        return self.data.reshape(self.rows, self.cols)

    def tolist(self) -> list[float]:
        """Return the row-major elements as plain floats."""
        return [float(value) for value in self.data]


@dataclass(frozen=True, eq=False)
class MatrixResult(Matrix):
    """Result triple produced by one dispatched operation."""

    def to_matrix(self) -> Matrix:
        """Return the result as an operand for a further operation."""
        return Matrix(self.rows, self.cols, self.data)
