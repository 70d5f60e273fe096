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
Dispatch and boundary modules for the matrix engine
"""

from __future__ import annotations

from matrix_calc.engine.boundary import compute
from matrix_calc.engine.boundary import process_matrices
from matrix_calc.engine.dispatcher import MatrixDispatcher


__all__ = ["MatrixDispatcher", "compute", "process_matrices"]
