# Tests for numeric.py - number coercion and formatting

import pytest

import numpy as np

from symdiff.numeric import format_number, to_float


class TestToFloat:
    """Tests for to_float()."""

    def test_int(self):
        assert to_float(3) == 3.0
        assert isinstance(to_float(3), float)

    def test_float_passthrough(self):
        assert to_float(0.1) == 0.1

    def test_numpy_scalars(self):
        assert to_float(np.float32(0.5)) == 0.5
        assert isinstance(to_float(np.int64(4)), float)

    @pytest.mark.parametrize("bad", [True, '1', None, [1.0]])
    def test_rejects_non_numbers(self, bad):
        with pytest.raises(TypeError):
            to_float(bad)


class TestFormatNumber:
    """Tests for format_number()."""

    @pytest.mark.parametrize("value,expected", [
        (0.0, '0'),
        (1.0, '1'),
        (9.0, '9'),
        (-6.0, '-6'),
        (0.5, '0.5'),
        (2.25, '2.25'),
        (0.1, '0.1'),
        (1e-7, '0.0000001'),
        (1e20, '100000000000000000000'),
    ])
    def test_decimal_form(self, value, expected):
        assert format_number(value) == expected

    def test_non_finite(self):
        assert format_number(float('inf')) == 'inf'
        assert format_number(float('-inf')) == '-inf'
        assert format_number(float('nan')) == 'NaN'
