import logging
import math

import pytest
import sympy as sp

from symcalc import (
    NumericLiteral, Variable, Sum, Product, Power, AmbiguousVariableError, SymCalcConfig,
    derivative, evaluate, simplify, to_sympy, exp, sin, cos, ln, log, var
)


def _sympy_derivative_at(expr, name, point, order=1):
    symbol = sp.Symbol(name, real=True)
    sympy_expr = to_sympy(expr).subs(sp.Symbol(name), symbol)
    return float(sp.diff(sympy_expr, symbol, order).subs(symbol, point))


def test_derivative_of_square(x):
    assert evaluate(derivative(x ** 2), {'x': 3}) == pytest.approx(6.0)


def test_derivative_of_sine(x):
    assert evaluate(derivative(sin(x)), {'x': 0}) == pytest.approx(1.0)


def test_derivative_of_cosine(x):
    assert evaluate(derivative(cos(x)), {'x': math.pi / 2}) == pytest.approx(-1.0)


def test_polynomial_minus_nested_trig():
    """d/dx (5x^2 - 4 sin(e^x)) at 0 is -4 cos(1)"""
    x = var('x')
    f = 5 * x ** 2 - 4 * sin(exp(x))
    df = derivative(f)

    assert evaluate(df, {'x': 0}) == pytest.approx(-4 * math.cos(1.0))
    assert evaluate(df, {'x': 0.7}) == pytest.approx(_sympy_derivative_at(f, 'x', 0.7))


def test_higher_order_derivatives(x):
    assert evaluate(derivative(x ** 3, order=2), {'x': 2}) == pytest.approx(12.0)
    assert evaluate(derivative(x ** 3, order=3), {'x': 5}) == pytest.approx(6.0)
    assert derivative(x ** 3, order=4) == 0


def test_higher_order_product_rule(x):
    f = x * sin(x) * exp(x)
    for point in (0.3, 1.1):
        assert evaluate(derivative(f, order=3), {'x': point}) == pytest.approx(
            _sympy_derivative_at(f, 'x', point, order=3))


def test_second_derivative_is_simplified_between_steps(x):
    """x^2 -> 2x -> 2"""
    second = derivative(x ** 2, order=2)
    assert isinstance(second, NumericLiteral)
    assert second == 2


def test_order_zero_returns_the_expression(x):
    f = sin(x)
    assert evaluate(derivative(f, order=0), {'x': 1.0}) == pytest.approx(math.sin(1.0))


def test_invalid_order_is_rejected(x):
    with pytest.raises(ValueError):
        derivative(x, order=-1)
    with pytest.raises(ValueError):
        derivative(x, order=1.5)


def test_ambiguous_variable(x, y):
    with pytest.raises(AmbiguousVariableError) as excinfo:
        derivative(x * y)
    assert excinfo.value.count == 2
    assert '2' in str(excinfo.value)


def test_partial_derivatives(x, y):
    f = x ** 2 * y
    point = {'x': 2, 'y': 5}
    assert evaluate(derivative(f, variable=x), point) == pytest.approx(20.0)
    assert evaluate(derivative(f, variable='y'), point) == pytest.approx(4.0)


def test_variables_are_matched_by_name(x):
    """A separately created Variable('x') differentiates the same unknown"""
    other_x = Variable('x')
    f = x * other_x
    assert evaluate(derivative(f), {'x': 3}) == pytest.approx(6.0)
    assert evaluate(derivative(f, variable=Variable('x')), {'x': 3}) == pytest.approx(6.0)


def test_constant_function_has_zero_derivative():
    assert derivative(NumericLiteral(5)) == 0
    assert evaluate(derivative(Product(2, 3)), {}) == 0.0


def test_derivative_by_absent_variable_is_zero(x):
    assert derivative(sin(x), variable='y') == 0


def test_quotient_rule(x):
    f = x / (x + 1)
    assert evaluate(derivative(f), {'x': 1}) == pytest.approx(0.25)


def test_exponential_chain_rule(x):
    assert evaluate(derivative(exp(x ** 2)), {'x': 1}) == pytest.approx(2 * math.e)


def test_logarithms(x):
    assert evaluate(derivative(ln(x)), {'x': 2}) == pytest.approx(0.5)
    assert evaluate(derivative(log(10, x)), {'x': 2}) == pytest.approx(1 / (2 * math.log(10)))


def test_absolute_value(x):
    df = derivative(abs(x))
    assert evaluate(df, {'x': -3}) == pytest.approx(-1.0)
    assert evaluate(df, {'x': 2}) == pytest.approx(1.0)


def test_variable_exponent_uses_logarithmic_rule(x):
    assert evaluate(derivative(x ** x), {'x': 2}) == pytest.approx(4 * (math.log(2) + 1))
    assert evaluate(derivative(2 ** x), {'x': 1}) == pytest.approx(2 * math.log(2))


def test_constant_exponent_is_finite_at_zero(x):
    assert evaluate(derivative(x ** 3), {'x': 0}) == 0.0


def test_power_of_power_derivative(x):
    f = Power(Power(x, 2), 3)
    assert evaluate(derivative(f), {'x': 1.5}) == pytest.approx(6 * 1.5 ** 5)


@pytest.mark.parametrize("point", [0.4, 1.3, 2.2])
def test_matches_sympy_on_mixed_expression(point):
    x = var('x')
    f = sin(x) * exp(x) / (x ** 2 + 1) + ln(x) * cos(x) - abs(x - 2)
    assert evaluate(derivative(f), {'x': point}) == pytest.approx(
        _sympy_derivative_at(f, 'x', point))


def test_derivative_without_auto_simplify(x):
    raw = SymCalcConfig(auto_simplify=False)
    df_raw = derivative(x ** 2, config=raw)
    df = derivative(x ** 2)

    assert df_raw.size() > df.size()
    assert evaluate(df_raw, {'x': 3}) == pytest.approx(6.0)
    assert evaluate(simplify(df_raw), {'x': 3}) == pytest.approx(6.0)


def test_variable_log_base_is_differentiated_as_constant(x, caplog):
    with caplog.at_level(logging.WARNING, logger='symcalc'):
        df = derivative(log(x, 3), variable=x)
    assert df == 0
    assert "depends on 'x'" in caplog.text


def test_input_is_not_presimplified_without_auto_simplify(x):
    raw = SymCalcConfig(auto_simplify=False)
    f = Sum(x, 0)

    assert derivative(f, order=0, config=raw) is f
    assert derivative(f, order=0) is x

    df = derivative(f, config=raw)
    assert isinstance(df, Sum)
    assert evaluate(df, {'x': 2}) == 1.0
