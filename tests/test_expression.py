import math

import pytest

from pyovoid.expression import compile_expression


def test_compile_and_call():
    f = compile_expression("2 * sin(t) + pi")
    assert f(0.0) == pytest.approx(math.pi)
    assert f(math.pi / 2) == pytest.approx(2.0 + math.pi)
    assert f.evaluate([0.0, math.pi / 2]) == [pytest.approx(math.pi), pytest.approx(2.0 + math.pi)]


def test_custom_parameter_name():
    f = compile_expression("u ** 2", parameter="u")
    assert f(3) == 9.0
    assert isinstance(f(3), float)


@pytest.mark.parametrize("text, message", [
    ("__import__('os')", "Function not allowed"),
    ("t.real", "Disallowed syntax"),
    ("x + 1", "Name not allowed"),
    ("'abc'", "Only numeric constants"),
    ("sin(t, **{})", "Keyword arguments"),
    ("[t for t in (1, 2)]", "Disallowed syntax"),
    ("sin(t", "Invalid expression"),
])
def test_rejected_expressions(text, message):
    with pytest.raises(ValueError, match=message):
        compile_expression(text)


@pytest.mark.parametrize("name", ["pi", "sin", "1t"])
def test_rejected_parameter_names(name):
    with pytest.raises(ValueError, match="Invalid parameter name"):
        compile_expression("1", parameter=name)


def test_complex_result_is_rejected():
    f = compile_expression("(t - 3) ** 0.5")
    assert f(4.0) == pytest.approx(1.0)
    with pytest.raises(ValueError, match="not real"):
        f(1.0)
