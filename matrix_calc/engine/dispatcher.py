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
Operation dispatcher for the matrix engine
"""

from __future__ import annotations

import logging
from typing import Callable
from typing import Optional

from matrix_calc.config.engine_config import EngineConfig
from matrix_calc.math_utils.matrix_ops import MatrixOps
from matrix_calc.matrix_types.matrix import Matrix
from matrix_calc.matrix_types.matrix import MatrixResult
from matrix_calc.matrix_types.operation import Operation


_LOG: logging.Logger = logging.getLogger(__name__)


class MatrixDispatcher:
    """
    Routes one operation request to the engine that computes it

    The dispatcher holds only configuration. Every call validates its
    operands, computes into fresh buffers and either returns a complete
    result or raises before any result exists.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self._config: EngineConfig = config if config is not None else EngineConfig()
        self._routes: dict[Operation, Callable[[Matrix, Matrix], Matrix]] = {
            Operation.ADD: MatrixOps.add,
            Operation.SUBTRACT: MatrixOps.subtract,
            Operation.MULTIPLY: MatrixOps.multiply,
            Operation.DIVIDE: self._divide,
        }

    @property
    def config(self) -> EngineConfig:
        return self._config

    def dispatch(self, operation: Operation, a: Matrix, b: Matrix) -> MatrixResult:
        operation = Operation.from_code(operation)
        route: Callable[[Matrix, Matrix], Matrix] = self._routes[operation]

        _LOG.debug(
            "%s: A=%dx%d B=%dx%d",
            operation.label,
            a.rows,
            a.cols,
            b.rows,
            b.cols,
        )

        result: Matrix = route(a, b)
        return MatrixResult(result.rows, result.cols, result.data)

    def _divide(self, a: Matrix, b: Matrix) -> Matrix:
        if b.is_square() and b.rows > self._config.cofactor_warning_order():
            _LOG.warning(
                "Inverting a %dx%d matrix by cofactor expansion, this may be slow",
                b.rows,
                b.cols,
            )
        return MatrixOps.divide(a, b, self._config.singular_tolerance())
