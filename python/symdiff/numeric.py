# SymDiff - Numeric Utilities
# Copyright (c) 2026 SymDiff Contributors. All rights reserved.

"""
Numeric coercion and decimal rendering for SymDiff.

Constants and bound values are stored as floats. When shown to a user they are
printed in plain positional notation, dropping a fractional part of zero:

    >>> from symdiff.numeric import format_number
    >>> format_number(9.0)
    '9'
    >>> format_number(0.5)
    '0.5'
    >>> format_number(1e-7)
    '0.0000001'
"""

from __future__ import annotations
import math
from typing import Union

import numpy as np


# Type for things that can be converted to a float value
Numeric = Union[int, float]


def to_float(x: Numeric) -> float:
    """
    Convert a numeric value to float.

    Args:
        x: An int or float (numpy scalars are accepted too).

    Returns:
        The value as a Python float.

    Raises:
        TypeError: If x is a bool or not a real number.
    """
    if isinstance(x, bool) or not isinstance(x, (int, float, np.integer, np.floating)):
        raise TypeError(f"Expected a real number, got {type(x).__name__}")
    return float(x)


def format_number(x: float) -> str:
    """
    Render a float in default decimal form.

    Integral values print without a fractional part, other finite values in
    the shortest positional form that round-trips. Non-finite values print as
    'inf', '-inf' and 'NaN'.
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'inf' if x > 0 else '-inf'
    return np.format_float_positional(x, trim='-')
