################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Parameter schema for the matrix engine."""

from __future__ import annotations

import math
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from pathlib import Path
from typing import Any
from typing import Mapping

import yaml


# Absolute determinant magnitude below which a divisor is singular
SINGULAR_TOLERANCE: float = 1e-12
# Divisor order above which cofactor expansion is logged as slow
COFACTOR_WARNING_ORDER: int = 8
# Decimal places used when formatting results as text
OUTPUT_PRECISION: int = 2


class EngineParamsError(Exception):
    """Raised when engine parameter validation fails."""


def _require_positive_finite(value: Any, name: str) -> None:
    """Require a positive, finite real value."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EngineParamsError(f"{name} must be a number")
    if not math.isfinite(value) or value <= 0.0:
        raise EngineParamsError(f"{name} must be positive and finite")


def _require_int(value: Any, name: str, minimum: int) -> None:
    """Require an int no smaller than minimum."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise EngineParamsError(f"{name} must be an int")
    if value < minimum:
        raise EngineParamsError(f"{name} must be >= {minimum}")


@dataclass(frozen=True)
class EngineParams:
    """Tunable values of the matrix engine."""

    # Absolute singularity tolerance on |det(B)|
    singular_tolerance: float = SINGULAR_TOLERANCE
    # Divisor order above which a slow-path warning is logged
    cofactor_warning_order: int = COFACTOR_WARNING_ORDER
    # Decimal places for text output
    output_precision: int = OUTPUT_PRECISION

    @classmethod
    def defaults(cls) -> EngineParams:
        """Return the default engine parameters."""
        return cls()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> EngineParams:
        """Build parameters from a mapping, rejecting unknown keys."""
        known: set[str] = {field.name for field in fields(cls)}
        unknown: list[str] = sorted(str(key) for key in set(values) - known)
        if unknown:
            raise EngineParamsError(f"Unknown engine parameters: {', '.join(unknown)}")
        params: EngineParams = cls(**dict(values))
        params.validate()
        return params

    @classmethod
    def from_yaml(cls, path: str | Path) -> EngineParams:
        """Load parameters from a YAML mapping file."""
        with open(path, "r") as file:
            try:
                loaded: Any = yaml.safe_load(file)
            except yaml.YAMLError as exc:
                raise EngineParamsError(f"Invalid YAML in {path}: {exc}") from exc

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise EngineParamsError(f"{path} must contain a YAML mapping")

        return cls.from_dict(loaded)

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_positive_finite(self.singular_tolerance, "singular_tolerance")
        _require_int(self.cofactor_warning_order, "cofactor_warning_order", 1)
        _require_int(self.output_precision, "output_precision", 0)

    def replace(self, **overrides: Any) -> EngineParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
