################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for cofactor expansion, determinants and adjugates."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from matrix_calc.math_utils.cofactor import Cofactor
from matrix_calc.matrix_types.errors import DimensionMismatchError
from matrix_calc.matrix_types.errors import NonSquareOperandError


def _invertible(rng: np.random.Generator, order: int) -> NDArray[np.float64]:
    """Return a well-conditioned random square matrix."""
    return rng.normal(size=(order, order)) + order * np.eye(order)


def test_determinant_base_cases() -> None:
    """Order 1 returns the element and order 2 uses ad - bc."""
    assert Cofactor.determinant(np.array([[-3.5]])) == -3.5
    assert Cofactor.determinant(np.array([[1.0, 2.0], [3.0, 4.0]])) == -2.0


def test_determinant_known_3x3() -> None:
    """Checks first-row expansion on a known 3x3 determinant."""
    mat: NDArray[np.float64] = np.array(
        [[6.0, 1.0, 1.0], [4.0, -2.0, 5.0], [2.0, 8.0, 7.0]], dtype=float
    )
    assert Cofactor.determinant(mat) == pytest.approx(-306.0)


def test_determinant_matches_numpy() -> None:
    """Checks the expansion against numpy for a 5x5 matrix."""
    rng: np.random.Generator = np.random.default_rng(7)
    mat: NDArray[np.float64] = rng.normal(size=(5, 5))
    assert np.isclose(Cofactor.determinant(mat), np.linalg.det(mat))


@pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
def test_determinant_transpose_invariant(order: int) -> None:
    """det(A) equals det(A^T)."""
    rng: np.random.Generator = np.random.default_rng(order)
    mat: NDArray[np.float64] = rng.uniform(-5.0, 5.0, size=(order, order))
    assert np.isclose(Cofactor.determinant(mat), Cofactor.determinant(mat.T))


def test_minor_removes_row_and_column() -> None:
    """Checks the minor drops the requested row and column."""
    mat: NDArray[np.float64] = np.arange(9.0).reshape(3, 3)
    sub: NDArray[np.float64] = Cofactor.minor(mat, 1, 2)
    assert np.array_equal(sub, np.array([[0.0, 1.0], [6.0, 7.0]]))
    assert not np.shares_memory(sub, mat)


def test_minor_index_out_of_range() -> None:
    """Checks minor rejects indices outside the matrix."""
    with pytest.raises(IndexError):
        Cofactor.minor(np.eye(2), 2, 0)


def test_cofactor_sign() -> None:
    """Cofactor sign alternates with row + col."""
    mat: NDArray[np.float64] = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=float)
    assert Cofactor.cofactor(mat, 0, 0) == 4.0
    assert Cofactor.cofactor(mat, 0, 1) == -3.0
    assert Cofactor.cofactor(mat, 1, 0) == -2.0
    assert Cofactor.cofactor(mat, 1, 1) == 1.0


def test_adjugate_2x2_is_transposed() -> None:
    """The adjugate of [[a, b], [c, d]] is [[d, -b], [-c, a]]."""
    mat: NDArray[np.float64] = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=float)
    adj: NDArray[np.float64] = Cofactor.adjugate(mat)
    assert np.array_equal(adj, np.array([[4.0, -2.0], [-3.0, 1.0]]))


def test_adjugate_order_one() -> None:
    """The adjugate of a 1x1 matrix is [[1]]."""
    assert np.array_equal(Cofactor.adjugate(np.array([[4.0]])), np.array([[1.0]]))


@pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
def test_adjugate_over_determinant_is_inverse(order: int) -> None:
    """A * adj(A) / det(A) is the identity."""
    rng: np.random.Generator = np.random.default_rng(100 + order)
    mat: NDArray[np.float64] = _invertible(rng, order)
    det: float = Cofactor.determinant(mat)
    product: NDArray[np.float64] = mat @ Cofactor.adjugate(mat) / det
    assert np.allclose(product, np.eye(order), atol=1e-9)


def test_input_is_not_modified() -> None:
    """Determinant and adjugate leave their input untouched."""
    rng: np.random.Generator = np.random.default_rng(3)
    mat: NDArray[np.float64] = rng.normal(size=(4, 4))
    original: NDArray[np.float64] = mat.copy()
    Cofactor.determinant(mat)
    Cofactor.adjugate(mat)
    assert np.array_equal(mat, original)


def test_non_square_rejected() -> None:
    """Non-square input raises a dimension error."""
    mat: NDArray[np.float64] = np.ones((2, 3), dtype=float)
    with pytest.raises(NonSquareOperandError):
        Cofactor.determinant(mat)
    with pytest.raises(DimensionMismatchError):
        Cofactor.adjugate(mat)


def test_nan_propagates() -> None:
    """NaN entries propagate into the determinant."""
    mat: NDArray[np.float64] = np.array([[np.nan, 1.0], [2.0, 3.0]], dtype=float)
    assert np.isnan(Cofactor.determinant(mat))
