import math

import pytest

from symcalc import (
    NumericLiteral, Sum, Negate, Product, Quotient, Power, Exponential, Sine,
    NaturalLog, Logarithm, AbsoluteValue, E, SymCalcConfig, config_context,
    evaluate, simplify, exp, sin, cos, ln, var
)


def test_zero_is_dropped_from_sums(x):
    assert simplify(Sum(x, NumericLiteral(0))) is x
    assert simplify(Sum(NumericLiteral(0), x, 0)) is x


def test_sum_of_zeros_is_zero():
    result = simplify(Sum(0, 0))
    assert isinstance(result, NumericLiteral)
    assert result == 0


def test_sums_keep_other_literals(x):
    """Only zero is removed; literals are not added together"""
    result = simplify(Sum(x, 1, 2))
    assert isinstance(result, Sum)
    assert len(result.elements) == 3


def test_one_is_dropped_from_products(x):
    assert simplify(Product(x, NumericLiteral(1))) is x


def test_zero_annihilates_products(x, y):
    result = simplify(Product(x, NumericLiteral(0)))
    assert isinstance(result, NumericLiteral)
    assert result == NumericLiteral(0)
    assert simplify(Product(x, Sum(y, 0), Product(0, y))) == 0


def test_product_coefficients_are_collected_in_front(x, y):
    result = simplify(Product(x, 2, y, 3))
    assert isinstance(result, Product)
    assert result.elements[0] == 6
    assert result.elements[1] is x
    assert result.elements[2] is y


def test_product_of_literals_collapses():
    assert simplify(Product(1, 1)) == 1
    assert simplify(Product(2, 4)) == 8


def test_power_collapse(x):
    result = simplify(Power(Power(x, 2), 3))
    assert isinstance(result, Power)
    assert result.base is x
    assert result.exponent == 6
    assert evaluate(result, {'x': 1.5}) == pytest.approx(1.5 ** 6)


def test_power_trivial_exponents(x):
    assert simplify(Power(x, 0)) == 1
    assert simplify(Power(x, 1)) is x
    assert simplify(Power(x, Sum(1, 0))) is x


def test_short_numeric_powers_are_folded():
    assert simplify(Power(2, 3)) == 8
    assert simplify(Power(2, -1)) == 0.5
    assert simplify(Power(4, 0.5)) == 2.0


def test_long_numeric_powers_stay_symbolic():
    root_two = simplify(Power(2, 0.5))
    assert isinstance(root_two, Power)

    million = simplify(Power(10, 6))
    assert isinstance(million, Power)
    assert evaluate(million) == 1e6


def test_literal_threshold_is_configurable():
    wide = SymCalcConfig(max_literal_chars=10)
    assert simplify(Power(10, 6), config=wide) == 1000000

    with config_context(max_literal_chars=1):
        assert isinstance(simplify(Power(2, 4)), Power)
        assert simplify(Power(2, 3)) == 8


def test_undefined_numeric_powers_stay_symbolic():
    assert isinstance(simplify(Power(0, -1)), Power)
    assert isinstance(simplify(Power(-8, 1 / 3)), Power)
    assert isinstance(simplify(Power(10, 1000)), Power)


def test_quotient_with_zero_numerator(x):
    assert simplify(Quotient(Product(0, x), x)) == 0


def test_quotient_simplification_does_not_mutate(x, y):
    numerator = Sum(x, 0)
    q = Quotient(numerator, Sum(y, 0))
    result = simplify(q)

    assert isinstance(result, Quotient)
    assert result is not q
    assert result.numerator is x
    assert result.denominator is y
    assert q.numerator is numerator


def test_exponential_of_logarithm(x):
    assert simplify(Exponential(NaturalLog(x))) is x
    assert simplify(Exponential(Logarithm(E, x))) is x
    assert simplify(Exponential(Logarithm(math.e, x))) is x
    assert isinstance(simplify(Exponential(Logarithm(10, x))), Exponential)
    assert isinstance(simplify(exp(x)), Exponential)


def test_absolute_value_of_even_power(x):
    assert isinstance(simplify(AbsoluteValue(Power(x, 2))), Power)
    assert isinstance(simplify(AbsoluteValue(Power(x, 4.0))), Power)
    assert isinstance(simplify(AbsoluteValue(Power(x, 3))), AbsoluteValue)
    assert isinstance(simplify(AbsoluteValue(x)), AbsoluteValue)


def test_function_nodes_simplify_their_operands(x):
    result = simplify(Sine(Sum(x, 0)))
    assert isinstance(result, Sine)
    assert result.operand is x

    negated = simplify(Negate(Product(x, 1)))
    assert isinstance(negated, Negate)
    assert negated.operand is x

    logarithm = simplify(Logarithm(Sum(10, 0), Product(x, 1)))
    assert logarithm.base == 10
    assert logarithm.operand is x


def test_leaves_are_returned_unchanged(x):
    literal = NumericLiteral(3)
    assert simplify(x) is x
    assert simplify(literal) is literal
    assert simplify(E) is E


def test_simplify_twice_keeps_the_value():
    x = var('x')
    samples = [
        Sum(Product(x, 1, 2), Power(Power(x, 2), Sum(1, 0)), 0),
        Quotient(Sum(sin(x), 0), Product(cos(x), 1, Sum(x, 3))),
        Exponential(NaturalLog(Product(x, Power(x, 0), 4))),
        AbsoluteValue(Power(Negate(x), Product(2, 1))),
        Product(Power(2, 0.5), Logarithm(E, Sum(x, 2)), ln(x)),
    ]
    for expr in samples:
        once = simplify(expr)
        twice = simplify(once)
        for point in (0.5, 1.5, 3.0):
            assert evaluate(twice, {'x': point}) == pytest.approx(evaluate(once, {'x': point}))
            assert evaluate(once, {'x': point}) == pytest.approx(evaluate(expr, {'x': point}))


def test_huge_integer_exponents_are_checked_exactly(x):
    assert isinstance(simplify(AbsoluteValue(Power(x, 10 ** 400))), Power)
    assert isinstance(simplify(AbsoluteValue(Power(x, 10 ** 400 + 1))), AbsoluteValue)


def test_coefficients_past_float_range(x):
    exact = simplify(Product(10 ** 200, 10 ** 200, x))
    assert exact.elements[0] == 10 ** 400

    mixed = simplify(Product(10 ** 400, 0.5, x))
    assert mixed.elements[0] == math.inf
    assert simplify(Product(-10 ** 400, 0.5, x)).elements[0] == -math.inf
