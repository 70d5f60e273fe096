################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Determinants and adjugates by cofactor expansion."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .validation import require_square


class Cofactor:
    """Cofactor-expansion helpers for small square matrices.

    Responsibility:
        Compute minors, cofactors, determinants and adjugates of square
        matrices by recursive expansion.

    Inputs/outputs:
        - Inputs are square 2D arrays of shape (n, n), n >= 1.
        - Every minor is a freshly allocated (n - 1, n - 1) array.
        - Inputs are never written to.

    Equations:
        Cofactor:
            C(r, c) = (-1)^(r + c) * det(M without row r and column c)

        Determinant, first-row expansion:
            det(M) = sum_c M[0][c] * C(0, c)

        Adjugate:
            adj(M)[c][r] = C(r, c)

    Numerical notes:
        - Cost grows factorially with n; intended for small matrices only.
        - IEEE overflow and NaN propagate without special handling.
        - The determinant of the empty minor is 1, so the adjugate of an
          order-1 matrix is [[1]].
    """

    @staticmethod
    def minor(matrix: NDArray[np.float64], row: int, col: int) -> NDArray[np.float64]:
        """Return a new array with one row and one column removed."""
        mat: NDArray[np.float64] = np.asarray(matrix, dtype=np.float64)
        order: int = require_square(mat, "minor")
        if not 0 <= row < order or not 0 <= col < order:
            raise IndexError(f"minor index ({row}, {col}) outside order {order}")
        result: NDArray[np.float64] = np.empty((order - 1, order - 1), dtype=np.float64)
        mi: int = 0
        for i in range(order):
            if i == row:
                continue
            mj: int = 0
            for j in range(order):
                if j == col:
                    continue
                result[mi, mj] = mat[i, j]
                mj += 1
            mi += 1
        return result

    @staticmethod
    def determinant(matrix: NDArray[np.float64]) -> float:
        """Return the determinant by expansion along the first row."""
        mat: NDArray[np.float64] = np.asarray(matrix, dtype=np.float64)
        order: int = require_square(mat, "determinant")
        return Cofactor._expand(mat, order)

    @staticmethod
    def cofactor(matrix: NDArray[np.float64], row: int, col: int) -> float:
        """Return the signed determinant of the (row, col) minor."""
        mat: NDArray[np.float64] = np.asarray(matrix, dtype=np.float64)
        sub: NDArray[np.float64] = Cofactor.minor(mat, row, col)
        sign: float = 1.0 if (row + col) % 2 == 0 else -1.0
        return sign * Cofactor._expand(sub, sub.shape[0])

    @staticmethod
    def adjugate(matrix: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return the transpose of the cofactor matrix."""
        mat: NDArray[np.float64] = np.asarray(matrix, dtype=np.float64)
        order: int = require_square(mat, "adjugate")
        adj: NDArray[np.float64] = np.empty((order, order), dtype=np.float64)
        for r in range(order):
            for c in range(order):
                # Transposed placement: cofactor (r, c) lands at (c, r)
                adj[c, r] = Cofactor.cofactor(mat, r, c)
        return adj

    @staticmethod
    def _expand(mat: NDArray[np.float64], order: int) -> float:
        if order == 0:
            return 1.0
        if order == 1:
            return float(mat[0, 0])
        if order == 2:
            return float(mat[0, 0] * mat[1, 1] - mat[0, 1] * mat[1, 0])
        total: float = 0.0
        for col in range(order):
            sub: NDArray[np.float64] = Cofactor.minor(mat, 0, col)
            sign: float = 1.0 if col % 2 == 0 else -1.0
            total += float(mat[0, col]) * (sign * Cofactor._expand(sub, order - 1))
        return total
