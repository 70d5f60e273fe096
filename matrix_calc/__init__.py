################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense matrix arithmetic by cofactor expansion."""

from __future__ import annotations

from matrix_calc.engine.boundary import compute
from matrix_calc.engine.boundary import process_matrices
from matrix_calc.matrix_types.errors import MatrixArgumentError
from matrix_calc.matrix_types.errors import MatrixError
from matrix_calc.matrix_types.errors import MatrixInternalError
from matrix_calc.matrix_types.matrix import Matrix
from matrix_calc.matrix_types.matrix import MatrixResult
from matrix_calc.matrix_types.operation import Operation


__all__ = [
    "Matrix",
    "MatrixArgumentError",
    "MatrixError",
    "MatrixInternalError",
    "MatrixResult",
    "Operation",
    "compute",
    "process_matrices",
]
