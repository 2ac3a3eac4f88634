# SymDiff - Exceptions
# Copyright (c) 2026 SymDiff Contributors. All rights reserved.

"""Exception hierarchy for SymDiff."""

from __future__ import annotations


class SymDiffError(Exception):
    """Base class for all SymDiff exceptions."""
    pass


class UnboundVariableError(SymDiffError):
    """
    Raised when evaluation reaches a variable with no value in the environment.

    This is the only failure an expression tree can produce at runtime.
    Construction, differentiation and rendering never raise it.
    """

    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' is not bound in the environment")
        self.name = name
