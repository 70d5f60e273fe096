################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Single-call entry point for flat-buffer matrix operations
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional
from typing import Sequence

from matrix_calc.config.engine_config import EngineConfig
from matrix_calc.engine.dispatcher import MatrixDispatcher
from matrix_calc.matrix_types.errors import MatrixArgumentError
from matrix_calc.matrix_types.errors import MatrixInternalError
from matrix_calc.matrix_types.matrix import Matrix
from matrix_calc.matrix_types.matrix import MatrixResult
from matrix_calc.matrix_types.operation import Operation


_LOG: logging.Logger = logging.getLogger(__name__)


def compute(
    op_code: Any,
    rows_a: int,
    cols_a: int,
    rows_b: int,
    cols_b: int,
    data_a: Sequence[float],
    data_b: Sequence[float],
    config: Optional[EngineConfig] = None,
) -> MatrixResult:
    """
    Run one operation on two row-major buffers and return the shaped result

    Operation codes are 0 = Add, 1 = Subtract, 2 = Multiply, 3 = Divide.

    Raises:
        MatrixArgumentError: The request was rejected. The subclass names
            the reason (dimension mismatch, non-square or singular divisor,
            unknown operation).
        MatrixInternalError: The engine failed unexpectedly.
    """
    try:
        # The operation code is checked before anything about the operands
        operation: Operation = Operation.from_code(op_code)
        a: Matrix = Matrix(rows_a, cols_a, data_a)
        b: Matrix = Matrix(rows_b, cols_b, data_b)
        return MatrixDispatcher(config).dispatch(operation, a, b)
    except MatrixArgumentError:
        raise
    except Exception as exc:
        _LOG.exception("Matrix operation %r failed unexpectedly", op_code)
        raise MatrixInternalError("Internal matrix engine error") from exc


def process_matrices(
    op_code: Any,
    rows_a: int,
    cols_a: int,
    rows_b: int,
    cols_b: int,
    data_a: Sequence[float],
    data_b: Sequence[float],
    config: Optional[EngineConfig] = None,
) -> list[float]:
    """Run one operation and return the row-major result values."""
    result: MatrixResult = compute(
        op_code, rows_a, cols_a, rows_b, cols_b, data_a, data_b, config
    )
    return result.tolist()
