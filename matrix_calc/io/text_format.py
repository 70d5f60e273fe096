################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Plain-text matrix parsing and formatting.

Input text lists rows separated by newlines or semicolons, with entries
separated by commas and/or whitespace:

    1 2; 3 4
    1, 2
    3, 4

Output text renders each value with a fixed number of decimals, tabs
between entries and a newline after each row.
"""

from __future__ import annotations

import re

from matrix_calc.matrix_types.errors import MatrixParseError
from matrix_calc.matrix_types.matrix import Matrix


_ROW_SEPARATOR: re.Pattern[str] = re.compile(r"[;\n]")
_ENTRY_SEPARATOR: re.Pattern[str] = re.compile(r"[,\s]+")


def parse_matrix(text: str) -> Matrix:
    """Return the matrix described by text."""
    rows: list[list[float]] = []
    for line in _ROW_SEPARATOR.split(text.strip()):
        line = line.strip()
        if not line:
            continue
        rows.append(
            [_parse_entry(token) for token in _ENTRY_SEPARATOR.split(line) if token]
        )

    if not rows:
        raise MatrixParseError("Matrix cannot be empty")

    cols: int = len(rows[0])
    if any(len(row) != cols for row in rows):
        raise MatrixParseError("All rows must have the same number of columns")

    return Matrix(len(rows), cols, [value for row in rows for value in row])


def format_matrix(matrix: Matrix, precision: int = 2) -> str:
    """Return matrix values as tab-separated rows, one line per row."""
    if precision < 0:
        raise ValueError("precision must be non-negative")

    lines: list[str] = []
    for row in matrix.values():
        lines.append("\t".join(f"{float(value):.{precision}f}" for value in row))
    return "\n".join(lines) + "\n"


def _parse_entry(token: str) -> float:
    try:
        value: float = float(token)
    except ValueError as exc:
        raise MatrixParseError(f"'{token}' is not a number") from exc

    return value
