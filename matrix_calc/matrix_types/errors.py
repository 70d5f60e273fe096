################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exception types raised by the matrix engine.

Callers see two tiers:

    MatrixArgumentError: the request was rejected (bad shapes, singular
        divisor, unknown operation, unreadable text)
    MatrixInternalError: something failed that validation did not predict
"""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for all matrix engine errors."""


class MatrixArgumentError(MatrixError):
    """Raised when a request is rejected during validation."""


class DimensionMismatchError(MatrixArgumentError):
    """Raised when operand shapes are incompatible for an operation."""


class NonSquareOperandError(DimensionMismatchError):
    """Raised when a square operand is required but not provided."""


class SingularMatrixError(MatrixArgumentError):
    """Raised when a divisor matrix is not invertible within tolerance."""


class UnknownOperationError(MatrixArgumentError):
    """Raised when an operation selector is not recognized."""


class MatrixParseError(MatrixArgumentError):
    """Raised when text input cannot be read as a matrix."""


class MatrixInternalError(MatrixError):
    """Raised when the engine fails for an unexpected reason."""
