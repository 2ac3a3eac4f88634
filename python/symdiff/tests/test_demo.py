# Tests for the demonstration driver and Report

import logging

import pytest

import symdiff as sd


class TestBuildExample:
    """Tests for the example expression."""

    def test_renders(self):
        f = sd.build_example()
        assert str(f) == '((x + 1) * (x + 1))'

    def test_operands_are_independent(self):
        f = sd.build_example()
        assert f.e1 == f.e2
        assert f.e1 is not f.e2

    def test_custom_variable(self):
        assert str(sd.build_example('t')) == '((t + 1) * (t + 1))'


class TestRun:
    """Tests for run()."""

    def test_concrete_scenario(self):
        report = sd.run()
        assert str(report.expr) == '((x + 1) * (x + 1))'
        assert str(report.derivative) == '(((x + 1) * (1 + 0)) + ((1 + 0) * (x + 1)))'
        assert report.value == 9.0
        assert report.slope == 6.0

    def test_other_point(self):
        report = sd.run(sd.Config(point=-0.5))
        assert report.value == 0.25
        assert report.slope == 1.0

    def test_custom_expression(self):
        x = sd.var('x')
        report = sd.run(sd.Config(point=3), x * x * x)
        assert report.value == 27.0
        assert report.slope == 27.0

    def test_unbound_variable_propagates(self):
        x = sd.var('x')
        with pytest.raises(sd.UnboundVariableError) as excinfo:
            sd.run(sd.Config(), x * sd.var('z'))
        assert excinfo.value.name == 'z'


class TestReport:
    """Tests for Report rendering."""

    def test_lines(self):
        assert sd.run().lines() == [
            "f(x): ((x + 1) * (x + 1))",
            "f(2): 9",
            "f'(x): (((x + 1) * (1 + 0)) + ((1 + 0) * (x + 1)))",
            "f'(2): 6",
        ]

    def test_fractional_point(self):
        lines = sd.run(sd.Config(point=0.5)).lines()
        assert lines[1] == "f(0.5): 2.25"
        assert lines[3] == "f'(0.5): 3"

    def test_to_dict(self):
        d = sd.run().to_dict()
        assert d == {
            'expr': '((x + 1) * (x + 1))',
            'derivative': '(((x + 1) * (1 + 0)) + ((1 + 0) * (x + 1)))',
            'variable': 'x',
            'point': 2.0,
            'value': 9.0,
            'slope': 6.0,
        }


class TestMain:
    """Tests for main() output and exit status."""

    def test_prints_four_lines(self, capsys):
        from symdiff.demo import main
        assert main() == 0
        out = capsys.readouterr().out
        assert out == (
            "f(x): ((x + 1) * (x + 1))\n"
            "f(2): 9\n"
            "f'(x): (((x + 1) * (1 + 0)) + ((1 + 0) * (x + 1)))\n"
            "f'(2): 6\n"
        )

    def test_unbound_variable_exits_nonzero(self, monkeypatch, capsys, caplog):
        from symdiff import demo

        def failing_example(variable='x'):
            return sd.var(variable) + sd.var('z')

        monkeypatch.setattr(demo, 'build_example', failing_example)
        with caplog.at_level(logging.ERROR, logger='symdiff.demo'):
            assert demo.main() == 1
        assert capsys.readouterr().out == ''
        assert "'z'" in caplog.text
