################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Operation selector for the matrix engine."""

from __future__ import annotations

import enum
import numbers
from typing import Any

from .errors import UnknownOperationError


class Operation(enum.IntEnum):
    """
    Enumerates the four elementary matrix operations

    The integer values are the operation codes accepted at the boundary.
    """

    ADD = 0
    SUBTRACT = 1
    MULTIPLY = 2
    DIVIDE = 3

    @property
    def label(self) -> str:
        """Return the display name of the operation."""
        return self.name.capitalize()

    @classmethod
    def from_code(cls, code: Any) -> Operation:
        """Return the operation for an integer code."""
        if isinstance(code, bool) or not isinstance(code, numbers.Integral):
            raise UnknownOperationError(f"Unknown operation: {code!r}")
        try:
            return cls(int(code))
        except ValueError as exc:
            raise UnknownOperationError(f"Unknown operation: {code}") from exc

    @classmethod
    def from_name(cls, name: str) -> Operation:
        """Return the operation for a case-insensitive name or numeric code."""
        key: str = name.strip()
        if key.lstrip("-").isdigit():
            try:
                code: int = int(key)
            except ValueError as exc:
                raise UnknownOperationError(f"Unknown operation: {name}") from exc
            return cls.from_code(code)
        try:
            return cls[key.upper()]
        except KeyError as exc:
            raise UnknownOperationError(f"Unknown operation: {name}") from exc
