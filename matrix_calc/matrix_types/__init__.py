################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error and operation types for the matrix engine."""

from __future__ import annotations

from matrix_calc.matrix_types.errors import DimensionMismatchError
from matrix_calc.matrix_types.errors import MatrixArgumentError
from matrix_calc.matrix_types.errors import MatrixError
from matrix_calc.matrix_types.errors import MatrixInternalError
from matrix_calc.matrix_types.errors import MatrixParseError
from matrix_calc.matrix_types.errors import NonSquareOperandError
from matrix_calc.matrix_types.errors import SingularMatrixError
from matrix_calc.matrix_types.errors import UnknownOperationError
from matrix_calc.matrix_types.operation import Operation


__all__ = [
    "DimensionMismatchError",
    "MatrixArgumentError",
    "MatrixError",
    "MatrixInternalError",
    "MatrixParseError",
    "NonSquareOperandError",
    "Operation",
    "SingularMatrixError",
    "UnknownOperationError",
]
