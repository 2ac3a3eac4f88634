# SymDiff - Symbolic Expressions
# Copyright (c) 2026 SymDiff Contributors. All rights reserved.

"""
Symbolic expression AST for SymDiff.

This module provides a small symbolic expression system over named variables
and floating-point constants, closed under addition and multiplication.
Expressions are immutable and support natural Python math syntax.

Every node can be evaluated against a binding environment, differentiated
with respect to a variable (sum and product rules), and rendered as fully
parenthesized text.

Example:
    >>> x = var('x')
    >>> f = (x + 1) * (x + 1)
    >>> str(f)
    '((x + 1) * (x + 1))'
    >>> str(f.diff(x))
    '(((x + 1) * (1 + 0)) + ((1 + 0) * (x + 1)))'
    >>> f.evaluate({'x': 2})
    9.0
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import copy
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, FrozenSet, Mapping, Union

from .exceptions import UnboundVariableError
from .numeric import Numeric, format_number, to_float

if TYPE_CHECKING:
    from .env import Bindings

logger = logging.getLogger(__name__)


# Type for evaluation environment
EvalEnv = Union['Bindings', Mapping[Union[str, 'Variable'], Numeric]]

# Type alias for things that can be converted to expressions
ExprLike = Union['Expr', int, float]

# Type alias for a differentiation target
VarLike = Union['Variable', str]


class Expr(ABC):
    """
    Base class for symbolic expressions.

    Expressions are immutable and can be composed with `+` and `*`.
    Subclasses are the closed set Variable, Const, Add and Mul.
    """

    @abstractmethod
    def free_vars(self) -> FrozenSet[str]:
        """Return all variable names used in this expression."""
        ...

    @abstractmethod
    def evaluate(self, env: EvalEnv) -> float:
        """
        Evaluate the expression using float arithmetic.

        Operands are evaluated left to right, so when several variables are
        unbound the leftmost one is reported.

        Args:
            env: Binding environment, or any mapping from Variables (or
                 variable names) to numbers.

        Returns:
            The value of the expression.

        Raises:
            UnboundVariableError: If a required variable is not in env.
        """
        ...

    @abstractmethod
    def diff(self, wrt: VarLike) -> Expr:
        """
        Differentiate symbolically with respect to a variable.

        The result is a new tree sharing no nodes with this one. No
        simplification is applied, so the derivative of `x + 1` is `(1 + 0)`.

        Args:
            wrt: The variable, or its name.

        Returns:
            The derivative expression.
        """
        ...

    @abstractmethod
    def render(self) -> str:
        """Return the fully parenthesized textual form."""
        ...

    def __str__(self) -> str:
        return self.render()

    # Operator overloading for natural math syntax
    def __add__(self, other: ExprLike) -> Expr:
        return Add(self, _to_expr(other))

    def __radd__(self, other: ExprLike) -> Expr:
        return Add(_to_expr(other), self)

    def __mul__(self, other: ExprLike) -> Expr:
        return Mul(self, _to_expr(other))

    def __rmul__(self, other: ExprLike) -> Expr:
        return Mul(_to_expr(other), self)


def _to_expr(x: ExprLike) -> Expr:
    """Convert a value to an Expr."""
    if isinstance(x, Expr):
        return x
    elif isinstance(x, (int, float)) and not isinstance(x, bool):
        return Const(x)
    else:
        raise TypeError(f"Cannot convert {type(x).__name__} to Expr")


def _target_name(wrt: VarLike) -> str:
    if isinstance(wrt, Variable):
        return wrt.name
    elif isinstance(wrt, str):
        return wrt
    else:
        raise TypeError(f"Cannot differentiate with respect to {type(wrt).__name__}")


@dataclass(frozen=True)
class Variable(Expr):
    """A symbolic variable with a name."""
    name: str

    def free_vars(self) -> FrozenSet[str]:
        return frozenset({self.name})

    def evaluate(self, env: EvalEnv) -> float:
        # Plain dicts may be keyed by name or by Variable
        if self.name in env:
            value = env[self.name]
        elif self in env:
            value = env[self]
        else:
            raise UnboundVariableError(self.name)
        return to_float(value)

    def diff(self, wrt: VarLike) -> Const:
        return Const(1.0 if self.name == _target_name(wrt) else 0.0)

    def render(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"var('{self.name}')"


@dataclass(frozen=True)
class Const(Expr):
    """A constant floating-point value."""
    value: float

    def __post_init__(self):
        # Store ints as floats; frozen, so bypass __setattr__
        object.__setattr__(self, 'value', to_float(self.value))

    def free_vars(self) -> FrozenSet[str]:
        return frozenset()

    def evaluate(self, env: EvalEnv) -> float:
        return self.value

    def diff(self, wrt: VarLike) -> Const:
        return Const(0.0)

    def render(self) -> str:
        return format_number(self.value)

    def __repr__(self) -> str:
        return f"const({format_number(self.value)})"


# Binary operations

@dataclass(frozen=True)
class Add(Expr):
    """Addition: e1 + e2."""
    e1: Expr
    e2: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.e1.free_vars() | self.e2.free_vars()

    def evaluate(self, env: EvalEnv) -> float:
        return self.e1.evaluate(env) + self.e2.evaluate(env)

    def diff(self, wrt: VarLike) -> Add:
        # Sum rule: (f + g)' = f' + g'
        return Add(self.e1.diff(wrt), self.e2.diff(wrt))

    def render(self) -> str:
        return f"({self.e1.render()} + {self.e2.render()})"

    def __repr__(self) -> str:
        return f"Add({self.e1!r}, {self.e2!r})"


@dataclass(frozen=True)
class Mul(Expr):
    """Multiplication: e1 * e2."""
    e1: Expr
    e2: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.e1.free_vars() | self.e2.free_vars()

    def evaluate(self, env: EvalEnv) -> float:
        return self.e1.evaluate(env) * self.e2.evaluate(env)

    def diff(self, wrt: VarLike) -> Add:
        # Product rule: (f * g)' = f * g' + f' * g
        d1 = self.e1.diff(wrt)
        d2 = self.e2.diff(wrt)
        return Add(
            Mul(copy.deepcopy(self.e1), d2),
            Mul(d1, copy.deepcopy(self.e2)),
        )

    def render(self) -> str:
        return f"({self.e1.render()} * {self.e2.render()})"

    def __repr__(self) -> str:
        return f"Mul({self.e1!r}, {self.e2!r})"


# Public constructors

def var(name: str) -> Variable:
    """Create a symbolic variable with the given name."""
    if not isinstance(name, str):
        raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    if not name:
        raise ValueError("Variable name cannot be empty")
    return Variable(name)


def const(value: Numeric) -> Const:
    """Create a constant expression."""
    return Const(value)


# Operations on whole trees

def evaluate(expr: Expr, env: EvalEnv) -> float:
    """
    Evaluate an expression against a binding environment.

    Args:
        expr: Expression to evaluate.
        env: A Bindings instance, or a dict keyed by Variable or by name.

    Returns:
        The value of the expression.

    Raises:
        UnboundVariableError: If a variable of expr has no binding.
    """
    from .env import as_bindings

    bindings = as_bindings(env)
    logger.debug("Evaluating %s with %r", expr, bindings)
    return expr.evaluate(bindings)


def diff(expr: Expr, wrt: VarLike) -> Expr:
    """Differentiate an expression with respect to a variable (or its name)."""
    name = _target_name(wrt)
    logger.debug("Differentiating %s with respect to %s", expr, name)
    return expr.diff(name)
