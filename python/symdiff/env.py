# SymDiff - Binding Environment
# Copyright (c) 2026 SymDiff Contributors. All rights reserved.

"""
Binding environments for SymDiff.

A Bindings object maps variables to the float values used during evaluation.
It is built once and cannot be changed afterwards. Lookups accept either a
Variable or its name.

Example:
    >>> from symdiff.expr import var
    >>> from symdiff.env import Bindings
    >>> x = var('x')
    >>> env = Bindings({x: 2, 'y': 0.5})
    >>> env[x], env['y']
    (2.0, 0.5)
    >>> env.names()
    ['x', 'y']
"""

from __future__ import annotations
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Optional, Union

from .exceptions import UnboundVariableError
from .expr import Expr, Variable, var
from .numeric import Numeric, to_float


# Type for a binding key: a Variable or its name
VarKey = Union[Variable, str]


def _key_name(key: VarKey) -> str:
    if isinstance(key, Variable):
        return key.name
    elif isinstance(key, str):
        return key
    else:
        raise TypeError(f"Binding key must be a Variable or a name, got {type(key).__name__}")


class Bindings(Mapping):
    """
    An immutable mapping from Variable to float.

    Insertion order is preserved. Values are coerced to float on
    construction.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Optional[Mapping[VarKey, Numeric]] = None):
        """
        Create bindings from a dictionary.

        Args:
            values: Dict mapping Variables (or variable names) to numbers.

        Raises:
            ValueError: If the same variable is bound twice, e.g. once by
                        Variable and once by name.
            TypeError: If a key or value has the wrong type.
        """
        normalized = {}
        for key, value in (values or {}).items():
            name = var(_key_name(key)).name
            if name in normalized:
                raise ValueError(f"Variable '{name}' is bound more than once")
            normalized[name] = to_float(value)
        object.__setattr__(self, '_values', MappingProxyType(normalized))

    def __setattr__(self, name, value):
        raise AttributeError("Bindings are immutable")

    def __getitem__(self, key: VarKey) -> float:
        """Get the value bound to a variable."""
        return self._values[_key_name(key)]

    def __contains__(self, key: object) -> bool:
        """Check if a variable is bound."""
        if not isinstance(key, (Variable, str)):
            return False
        return _key_name(key) in self._values

    def __len__(self) -> int:
        """Number of bound variables."""
        return len(self._values)

    def __iter__(self) -> Iterator[Variable]:
        """Iterate over bound variables."""
        return (Variable(name) for name in self._values)

    def names(self) -> list[str]:
        """Return bound variable names in insertion order."""
        return list(self._values)

    def validate_expr(self, expr: Expr) -> None:
        """
        Check that every variable of an expression has a binding.

        Args:
            expr: Expression to validate.

        Raises:
            UnboundVariableError: For the alphabetically first unbound
                                  variable.
        """
        undefined = expr.free_vars() - set(self._values)
        if undefined:
            raise UnboundVariableError(min(undefined))

    def __repr__(self) -> str:
        parts = [f"'{k}': {v}" for k, v in self._values.items()]
        return f"Bindings({{{', '.join(parts)}}})"


def as_bindings(env: Union[Bindings, Mapping[VarKey, Numeric]]) -> Bindings:
    """
    Normalize an evaluation environment to Bindings.

    Args:
        env: Can be:
            - Bindings: returned as-is
            - dict keyed by Variable or by name: converted to Bindings

    Returns:
        A Bindings instance.
    """
    if isinstance(env, Bindings):
        return env
    elif isinstance(env, Mapping):
        return Bindings(env)
    else:
        raise TypeError(f"Cannot use {type(env).__name__} as a binding environment")
