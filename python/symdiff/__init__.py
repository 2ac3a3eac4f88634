# SymDiff
# Copyright (c) 2026 SymDiff Contributors. All rights reserved.

"""
SymDiff - Symbolic Differentiation of Arithmetic Expressions.

This package represents expressions over named variables and constants,
evaluates them against a binding environment, and differentiates them
symbolically using the sum and product rules.

Example:
    >>> import symdiff as sd
    >>> x = sd.var('x')
    >>> f = (x + 1) * (x + 1)
    >>> df = sd.diff(f, x)
    >>> print(df)
    (((x + 1) * (1 + 0)) + ((1 + 0) * (x + 1)))
    >>> sd.evaluate(df, {x: 2})
    6.0

Key Features:
    - Immutable expression trees (Variable, Const, Add, Mul)
    - Named variables with name-based equality
    - Derivatives that never share nodes with their source tree
    - Fully parenthesized rendering
"""

__version__ = "0.1.0"

# Core expression types and constructors
from .expr import (
    Expr,
    Variable,
    Const,
    Add,
    Mul,
    var,
    const,
    evaluate,
    diff,
)

# Binding environment
from .env import (
    Bindings,
    as_bindings,
)

# Number formatting
from .numeric import format_number

# Configuration
from .config import Config

# Result types
from .result import Report

# Demonstration
from .demo import build_example, run

# Exceptions
from .exceptions import (
    SymDiffError,
    UnboundVariableError,
)

__all__ = [
    # Version
    "__version__",
    # Expression types
    "Expr",
    "Variable",
    "Const",
    "Add",
    "Mul",
    # Expression constructors
    "var",
    "const",
    # Tree operations
    "evaluate",
    "diff",
    # Binding environment
    "Bindings",
    "as_bindings",
    # Number formatting
    "format_number",
    # Configuration
    "Config",
    # Result types
    "Report",
    # Demonstration
    "build_example",
    "run",
    # Exceptions
    "SymDiffError",
    "UnboundVariableError",
]
