################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for plain-text matrix parsing and formatting."""

from __future__ import annotations

import pytest

from matrix_calc.io.text_format import format_matrix
from matrix_calc.io.text_format import parse_matrix
from matrix_calc.matrix_types.errors import MatrixArgumentError
from matrix_calc.matrix_types.errors import MatrixParseError
from matrix_calc.matrix_types.matrix import Matrix


@pytest.mark.parametrize(
    "text",
    [
        "1 2; 3 4",
        "1,2\n3,4",
        "  1 ,  2 ;\n\n 3\t4  ",
        "1, 2;;3, 4;",
    ],
)
def test_parse_separators(text: str) -> None:
    """Rows split on newlines or semicolons, entries on commas or spaces."""
    m: Matrix = parse_matrix(text)
    assert m.shape == (2, 2)
    assert m.tolist() == [1.0, 2.0, 3.0, 4.0]


def test_parse_numbers() -> None:
    """Signed, decimal and exponent notation are accepted."""
    m: Matrix = parse_matrix("-1.5 2e3 +0.25")
    assert m.shape == (1, 3)
    assert m.tolist() == [-1.5, 2000.0, 0.25]


def test_parse_empty() -> None:
    """Blank input is rejected."""
    with pytest.raises(MatrixParseError, match="cannot be empty"):
        parse_matrix(" ;\n ")


def test_parse_bad_token() -> None:
    """Non-numeric entries name the offending token."""
    with pytest.raises(MatrixParseError, match="'x' is not a number"):
        parse_matrix("1 x; 3 4")


def test_parse_ragged_rows() -> None:
    """Every row needs the same number of entries."""
    with pytest.raises(MatrixParseError, match="same number of columns"):
        parse_matrix("1 2; 3")


def test_parse_errors_are_argument_errors() -> None:
    """Parse failures belong to the argument error tier."""
    with pytest.raises(MatrixArgumentError):
        parse_matrix("")


def test_format_default_precision() -> None:
    """Values use two decimals, tabs between entries, one line per row."""
    m: Matrix = Matrix.from_rows([[19.0, 22.0], [43.0, 50.0]])
    assert format_matrix(m) == "19.00\t22.00\n43.00\t50.00\n"


def test_format_precision() -> None:
    """Precision controls the decimal places."""
    m: Matrix = Matrix(1, 2, [0.5, -1.0 / 3.0])
    assert format_matrix(m, precision=0) == "0\t-0\n"
    assert format_matrix(m, precision=3) == "0.500\t-0.333\n"
    with pytest.raises(ValueError):
        format_matrix(m, precision=-1)
