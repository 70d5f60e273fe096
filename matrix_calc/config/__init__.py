################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for the matrix engine."""

from __future__ import annotations

from matrix_calc.config.engine_config import EngineConfig
from matrix_calc.config.engine_config import EngineConfigError
from matrix_calc.config.engine_params import EngineParams
from matrix_calc.config.engine_params import EngineParamsError


__all__ = [
    "EngineConfig",
    "EngineConfigError",
    "EngineParams",
    "EngineParamsError",
]
