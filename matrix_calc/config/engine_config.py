################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for the matrix engine."""

from __future__ import annotations

from dataclasses import dataclass

from .engine_params import EngineParams
from .engine_params import EngineParamsError


class EngineConfigError(Exception):
    """Raised when engine configuration validation fails."""


@dataclass(frozen=True)
class EngineConfig:
    """Convenience wrapper around engine parameters."""

    params: EngineParams

    def __init__(self, params: EngineParams | None = None) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(
            self, "params", params if params is not None else EngineParams.defaults()
        )
        self.validate()

    def validate(self) -> None:
        try:
            self.params.validate()
        except EngineParamsError as exc:
            raise EngineConfigError(str(exc)) from exc

    def singular_tolerance(self) -> float:
        """Return the absolute singularity tolerance."""
        return self.params.singular_tolerance

    def cofactor_warning_order(self) -> int:
        """Return the divisor order that triggers a slow-path warning."""
        return self.params.cofactor_warning_order

    def output_precision(self) -> int:
        """Return the number of decimals used for text output."""
        return self.params.output_precision
