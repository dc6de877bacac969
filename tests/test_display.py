import pytest

from symcalc import (
    NumericLiteral, Sum, Negate, Product, Quotient, Power, Exponential, Sine, Cosine,
    NaturalLog, Logarithm, AbsoluteValue, PI, E, const, display, var
)


@pytest.mark.parametrize("build, expected", [
    (lambda x, y: Sum(x, Product(2, y)), "(x) + ((2) * (y))"),
    (lambda x, y: Negate(x), "-(x)"),
    (lambda x, y: Quotient(x, 2), "(x) / (2)"),
    (lambda x, y: Power(x, 2), "(x)^(2)"),
    (lambda x, y: Exponential(x), "exp(x)"),
    (lambda x, y: Sine(Cosine(x)), "sin(cos(x))"),
    (lambda x, y: NaturalLog(y), "ln(y)"),
    (lambda x, y: Logarithm(10, x), "log_(10)(x)"),
    (lambda x, y: AbsoluteValue(x), "|x|"),
    (lambda x, y: Sum(x, y, 1), "(x) + (y) + (1)"),
])
def test_fully_parenthesized_forms(x, y, build, expected):
    assert display(build(x, y)) == expected


def test_leaves():
    assert display(PI) == "pi"
    assert display(E) == "e"
    assert display(const('g', 9.81)) == "g"
    assert display(NumericLiteral(2.5)) == "2.5"
    assert display(3) == "3"
    assert display(var('theta')) == "theta"


def test_str_matches_display(x):
    expr = Quotient(Sum(x, 1), Power(x, 2))
    assert str(expr) == display(expr) == "((x) + (1)) / ((x)^(2))"
