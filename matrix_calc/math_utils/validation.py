################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for matrix buffers and shapes."""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray

from matrix_calc.matrix_types.errors import DimensionMismatchError
from matrix_calc.matrix_types.errors import MatrixArgumentError
from matrix_calc.matrix_types.errors import NonSquareOperandError


def require_shape(rows: Any, cols: Any, name: str) -> tuple[int, int]:
    """Return the shape as ints, rejecting non-positive or non-integer sizes."""
    for value, label in ((rows, "rows"), (cols, "cols")):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise DimensionMismatchError(f"{name} {label} must be an int")
        if value <= 0:
            raise DimensionMismatchError(f"{name} {label} must be positive")
    return int(rows), int(cols)


def as_flat_buffer(values: Any, name: str) -> NDArray[np.float64]:
    """Return a new one-dimensional float64 copy of the values."""
    if values is None:
        raise MatrixArgumentError(f"{name} must be a sequence of real numbers")

    try:
        raw: np.ndarray = np.asarray(values)
    except (OverflowError, TypeError, ValueError) as exc:
        raise MatrixArgumentError(f"{name} must contain real numbers") from exc

    if raw.ndim == 0:
        raise MatrixArgumentError(f"{name} must be a sequence of real numbers")
    if not np.issubdtype(raw.dtype, np.number) or np.issubdtype(
        raw.dtype, np.complexfloating
    ):
        raise MatrixArgumentError(f"{name} must contain real numbers")

    try:
        array: NDArray[np.float64] = np.array(raw, dtype=np.float64, copy=True)
    except (OverflowError, TypeError, ValueError) as exc:
        raise MatrixArgumentError(f"{name} must contain real numbers") from exc

    return array.reshape(-1)


def require_length(
    buffer: NDArray[np.float64],
    rows: int,
    cols: int,
    name: str,
) -> None:
    """Require a flat buffer to hold exactly rows * cols elements."""
    expected: int = rows * cols
    if buffer.size != expected:
        raise DimensionMismatchError(
            f"{name} has {buffer.size} elements but {rows}x{cols} "
            f"requires {expected}"
        )


def require_square(matrix: NDArray[np.float64], name: str) -> int:
    """Return the order of a square 2D array."""
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise NonSquareOperandError(f"{name} requires a square matrix")
    if matrix.shape[0] == 0:
        raise NonSquareOperandError(f"{name} requires a non-empty matrix")
    return int(matrix.shape[0])
