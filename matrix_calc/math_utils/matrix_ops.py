################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Elementwise, product and inverse engines for dense matrices."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from matrix_calc.config.engine_params import SINGULAR_TOLERANCE
from matrix_calc.matrix_types.errors import DimensionMismatchError
from matrix_calc.matrix_types.errors import NonSquareOperandError
from matrix_calc.matrix_types.errors import SingularMatrixError
from matrix_calc.matrix_types.matrix import Matrix

from .cofactor import Cofactor


class MatrixOps:
    """Stateless matrix arithmetic on immutable Matrix operands."""

    @staticmethod
    def add(a: Matrix, b: Matrix) -> Matrix:
        """Return a + b elementwise."""
        MatrixOps._require_same_shape(a, b, "Add")
        return Matrix(a.rows, a.cols, a.data + b.data)

    @staticmethod
    def subtract(a: Matrix, b: Matrix) -> Matrix:
        """Return a - b elementwise."""
        MatrixOps._require_same_shape(a, b, "Subtract")
        return Matrix(a.rows, a.cols, a.data - b.data)

    @staticmethod
    def multiply(a: Matrix, b: Matrix) -> Matrix:
        """Return the matrix product a * b."""
        if a.cols != b.rows:
            raise DimensionMismatchError(
                f"Multiply requires A.cols == B.rows, got {a.shape} and {b.shape}"
            )
        return Matrix(a.rows, b.cols, MatrixOps._product(a.values(), b.values()))

    @staticmethod
    def transpose(m: Matrix) -> Matrix:
        return Matrix(m.cols, m.rows, m.values().T.reshape(-1))

    @staticmethod
    def inverse(b: Matrix, tolerance: float = SINGULAR_TOLERANCE) -> Matrix:
        """Return the inverse of a square matrix as adj(b) / det(b)."""
        if not b.is_square():
            raise NonSquareOperandError(
                f"Divide requires B to be square, got {b.shape}"
            )
        values: NDArray[np.float64] = b.values()
        det: float = Cofactor.determinant(values)
        if abs(det) < tolerance:
            raise SingularMatrixError("Divide error: B is singular")
        adj: NDArray[np.float64] = Cofactor.adjugate(values)
        return Matrix(b.rows, b.cols, adj.reshape(-1) / det)

    @staticmethod
    def divide(a: Matrix, b: Matrix, tolerance: float = SINGULAR_TOLERANCE) -> Matrix:
        """Return a * inverse(b).

        The divisor is checked for squareness and singularity before the
        operand shapes are compared, so a singular B is reported even when
        A would not have fit.
        """
        inv_b: Matrix = MatrixOps.inverse(b, tolerance)
        if a.cols != b.rows:
            raise DimensionMismatchError(
                f"Divide requires A.cols == B.rows, got {a.shape} and {b.shape}"
            )
        return Matrix(a.rows, b.cols, MatrixOps._product(a.values(), inv_b.values()))

    @staticmethod
    def _require_same_shape(a: Matrix, b: Matrix, name: str) -> None:
        if a.shape != b.shape:
            raise DimensionMismatchError(
                f"{name} requires matrices of the same dimensions, "
                f"got {a.shape} and {b.shape}"
            )

    @staticmethod
    def _product(
        a: NDArray[np.float64],
        b: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        rows: int = a.shape[0]
        inner: int = a.shape[1]
        cols: int = b.shape[1]
        result: NDArray[np.float64] = np.zeros((rows, cols), dtype=np.float64)
        for i in range(rows):
            for j in range(cols):
                acc: float = 0.0
                for k in range(inner):
                    acc += float(a[i, k]) * float(b[k, j])
                result[i, j] = acc
        return result.reshape(-1)
