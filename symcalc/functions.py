"""
Construction API

Factories for every node type. Unlike operator sugar these build exactly the
node asked for and never simplify it. `sum` and `abs` shadow the builtins
inside this module; import the module qualified
(`from symcalc import functions as sc`) when the builtins are also needed.
"""

import math

from .expression_tree.core.node import (
    Expression, NumericLiteral, NamedConstant, Variable, Sum, Negate, Product,
    Quotient, Power, Exponential, Sine, Cosine, NaturalLog, Logarithm, AbsoluteValue,
    to_expression
)

PI = NamedConstant('pi', math.pi)
E = NamedConstant('e', math.e)


def var(name: str) -> Variable:
    """A symbolic unknown, bound by name at evaluation time"""
    return Variable(name)


def const(name: str, value) -> NamedConstant:
    """A constant that displays as `name` and evaluates as `value`"""
    return NamedConstant(name, value)


def num(value) -> NumericLiteral:
    return NumericLiteral(value)


def sum(*elements) -> Sum:
    return Sum(*elements)


def negate(operand) -> Negate:
    return Negate(operand)


def product(*elements) -> Product:
    return Product(*elements)


def quotient(numerator, denominator) -> Quotient:
    return Quotient(numerator, denominator)


def power(base, exponent) -> Power:
    return Power(base, exponent)


def exp(exponent) -> Exponential:
    """e raised to `exponent`"""
    return Exponential(exponent)


def sin(operand) -> Sine:
    return Sine(operand)


def cos(operand) -> Cosine:
    return Cosine(operand)


def ln(operand) -> NaturalLog:
    """Natural logarithm"""
    return NaturalLog(operand)


def log(base, operand) -> Logarithm:
    """Logarithm of `operand` in `base`, e.g. log(10, x)"""
    return Logarithm(base, operand)


def abs(operand) -> AbsoluteValue:
    return AbsoluteValue(operand)


__all__ = [
    'Expression', 'to_expression', 'PI', 'E',
    'var', 'const', 'num', 'sum', 'negate', 'product', 'quotient', 'power',
    'exp', 'sin', 'cos', 'ln', 'log', 'abs'
]
