# SymDiff - Demonstration
# Copyright (c) 2026 SymDiff Contributors. All rights reserved.

"""
Demonstration driver for SymDiff.

Builds (x + 1) * (x + 1), differentiates it with respect to x, binds x = 2,
and prints the expression and its derivative in symbolic and evaluated form:

    $ python -m symdiff
    f(x): ((x + 1) * (x + 1))
    f(2): 9
    f'(x): (((x + 1) * (1 + 0)) + ((1 + 0) * (x + 1)))
    f'(2): 6
"""

from __future__ import annotations
import copy
import logging
import sys
from typing import Optional

from .config import Config
from .exceptions import SymDiffError
from .expr import Add, Const, Expr, Mul, diff, evaluate, var
from .result import Report

logger = logging.getLogger(__name__)


def build_example(variable: str = 'x') -> Expr:
    """Build ((v + 1) * (v + 1)) from two independent copies of (v + 1)."""
    x = var(variable)
    xp1 = Add(x, Const(1))
    return Mul(copy.deepcopy(xp1), xp1)


def run(config: Optional[Config] = None, expr: Optional[Expr] = None) -> Report:
    """
    Differentiate and evaluate an expression at the configured point.

    Args:
        config: Demonstration settings (defaults to Config()).
        expr: Expression to report on (defaults to build_example()).

    Returns:
        A Report with both trees and their values.

    Raises:
        UnboundVariableError: If expr uses a variable other than the
                              configured one.
    """
    config = config or Config()
    if expr is None:
        expr = build_example(config.variable)

    derivative = diff(expr, config.target)
    env = config.to_bindings()
    value = evaluate(expr, env)
    slope = evaluate(derivative, env)
    logger.debug("f = %s, f' = %s at %r", value, slope, env)

    return Report(
        expr=expr,
        derivative=derivative,
        variable=config.variable,
        point=config.point,
        value=value,
        slope=slope,
    )


def main(config: Optional[Config] = None) -> int:
    """Run the demonstration and print its report. Returns an exit status."""
    config = config or Config()
    logging.basicConfig(
        level=config.log_level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        report = run(config)
    except SymDiffError as e:
        logger.error("Evaluation failed: %s", e)
        return 1

    print(report)
    return 0
