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
Command line entry point for one matrix operation
"""

import argparse
import logging
import sys
from typing import Optional

from matrix_calc.config.engine_config import EngineConfig
from matrix_calc.config.engine_config import EngineConfigError
from matrix_calc.config.engine_params import EngineParams
from matrix_calc.config.engine_params import EngineParamsError
from matrix_calc.engine.boundary import compute
from matrix_calc.io.text_format import format_matrix
from matrix_calc.io.text_format import parse_matrix
from matrix_calc.matrix_types.errors import MatrixArgumentError
from matrix_calc.matrix_types.errors import MatrixInternalError
from matrix_calc.matrix_types.matrix import Matrix
from matrix_calc.matrix_types.matrix import MatrixResult
from matrix_calc.matrix_types.operation import Operation


# Exit status for a rejected request
EXIT_ARGUMENT_ERROR: int = 1
# Exit status for an unexpected engine failure
EXIT_INTERNAL_ERROR: int = 2


################################################################################
# Command line entry point
################################################################################


def _parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Add, subtract, multiply or divide (A * B^-1) two matrices"
    )
    parser.add_argument(
        "operation",
        help="add, subtract, multiply, divide or an operation code 0-3",
    )
    parser.add_argument(
        "matrix_a",
        help="Matrix A, rows separated by ';' and entries by spaces or commas",
    )
    parser.add_argument(
        "matrix_b",
        help="Matrix B, same format as matrix A",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places in the printed result",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with engine parameters",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(args=args)


def _load_config(path: Optional[str], precision: Optional[int]) -> EngineConfig:
    params: EngineParams = (
        EngineParams.from_yaml(path) if path is not None else EngineParams.defaults()
    )
    if precision is not None:
        params = params.replace(output_precision=precision)
    return EngineConfig(params)


def main(args: Optional[list[str]] = None) -> int:
    options = _parse_args(args=args)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config: EngineConfig = _load_config(options.config, options.precision)
    except (OSError, EngineParamsError, EngineConfigError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ARGUMENT_ERROR

    try:
        operation: Operation = Operation.from_name(options.operation)
        a: Matrix = parse_matrix(options.matrix_a)
        b: Matrix = parse_matrix(options.matrix_b)
        result: MatrixResult = compute(
            operation, a.rows, a.cols, b.rows, b.cols, a.data, b.data, config
        )
    except MatrixArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ARGUMENT_ERROR
    except MatrixInternalError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    sys.stdout.write(format_matrix(result, config.output_precision()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
