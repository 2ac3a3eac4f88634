# SymDiff - Configuration
# Copyright (c) 2026 SymDiff Contributors. All rights reserved.

"""Configuration settings for the SymDiff demonstration."""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .env import Bindings
from .expr import Variable, var
from .numeric import format_number, to_float


@dataclass
class Config:
    """
    Configuration for a demonstration run.

    Attributes:
        variable: Name of the variable the example is built over and
                  differentiated with respect to.
        point: Value bound to the variable for evaluation.
        log_level: Name of the logging level used by main().
    """
    variable: str = 'x'
    point: float = 2.0
    log_level: str = 'WARNING'

    def __post_init__(self):
        # Validates the name
        var(self.variable)
        # Convert point to float if given as int
        self.point = to_float(self.point)
        if not isinstance(self.log_level, str):
            raise TypeError(f"Log level must be a name, got {type(self.log_level).__name__}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def target(self) -> Variable:
        """The demonstration variable as an expression."""
        return var(self.variable)

    def to_bindings(self) -> Bindings:
        """Bind the demonstration variable to the configured point."""
        return Bindings({self.variable: self.point})

    def __repr__(self) -> str:
        return (
            f"Config(variable='{self.variable}', "
            f"point={format_number(self.point)}, "
            f"log_level='{self.log_level}')"
        )
