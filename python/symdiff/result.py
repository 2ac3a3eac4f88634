# SymDiff - Result Types
# Copyright (c) 2026 SymDiff Contributors. All rights reserved.

"""
Result types for SymDiff.

A Report collects what the demonstration shows: an expression, its
derivative, and both evaluated at one point.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from .expr import Expr
from .numeric import format_number


@dataclass(frozen=True)
class Report:
    """
    Result of differentiating and evaluating one expression.

    Access Patterns:
        result.expr        # the original expression
        result.derivative  # its derivative with respect to result.variable
        result.value       # expr evaluated at result.point
        result.slope       # derivative evaluated at result.point

        print(result)      # the four-line textual report
    """
    expr: Expr
    derivative: Expr
    variable: str
    point: float
    value: float
    slope: float

    def lines(self) -> list[str]:
        """
        Render the report as four lines.

        Example output for (x + 1) * (x + 1) at x = 2:
            f(x): ((x + 1) * (x + 1))
            f(2): 9
            f'(x): (((x + 1) * (1 + 0)) + ((1 + 0) * (x + 1)))
            f'(2): 6
        """
        v = self.variable
        p = format_number(self.point)
        return [
            f"f({v}): {self.expr}",
            f"f({p}): {format_number(self.value)}",
            f"f'({v}): {self.derivative}",
            f"f'({p}): {format_number(self.slope)}",
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            'expr': str(self.expr),
            'derivative': str(self.derivative),
            'variable': self.variable,
            'point': self.point,
            'value': self.value,
            'slope': self.slope,
        }

    def __str__(self) -> str:
        return '\n'.join(self.lines())
