import math
import numbers
from typing import List, Optional
from ..core.node import (
  Expression, NumericLiteral, NamedConstant, Variable, Sum, Negate, Product,
  Quotient, Power, Exponential, Sine, Cosine, NaturalLog, Logarithm, AbsoluteValue
)
from ...config import SymCalcConfig, resolve_config
from ...logging_system import log_debug


class ExpressionSimplifier:
  """One bottom-up rewrite pass: children first, then the node's own rule.

  The pass is not iterated to a fixed point. The only rule that re-simplifies
  its own result is the collapse of a power of a power.
  """

  @staticmethod
  def simplify_expression(node: Expression, config: Optional[SymCalcConfig] = None) -> Expression:
    return ExpressionSimplifier._apply_simplification_rules(node, resolve_config(config))

  @staticmethod
  def _apply_simplification_rules(node: Expression, config: SymCalcConfig) -> Expression:
    def simplify(child: Expression) -> Expression:
      return ExpressionSimplifier._apply_simplification_rules(child, config)

    if isinstance(node, (NumericLiteral, NamedConstant, Variable)):
      return node

    elif isinstance(node, Sum):
      elements = [simplify(element) for element in node.elements]
      elements = [e for e in elements if not _is_literal(e, 0)]
      if not elements:
        return NumericLiteral(0)
      if len(elements) == 1:
        return elements[0]
      return Sum(*elements)

    elif isinstance(node, Product):
      return ExpressionSimplifier._simplify_product(node, simplify)

    elif isinstance(node, Quotient):
      numerator = simplify(node.numerator)
      denominator = simplify(node.denominator)
      if _is_literal(numerator, 0):
        return NumericLiteral(0)
      return Quotient(numerator, denominator)

    elif isinstance(node, Power):
      return ExpressionSimplifier._simplify_power(node, simplify, config)

    elif isinstance(node, Exponential):
      exponent = simplify(node.operand)
      if isinstance(exponent, NaturalLog):
        return exponent.operand  # exp(ln(x)) = x
      if isinstance(exponent, Logarithm) and exponent.base == _euler():
        return exponent.operand  # exp(log_e(x)) = x
      return Exponential(exponent)

    elif isinstance(node, AbsoluteValue):
      operand = simplify(node.operand)
      if isinstance(operand, Power) and _is_even_integer_literal(operand.exponent):
        return operand  # |x^(2k)| = x^(2k)
      return AbsoluteValue(operand)

    elif isinstance(node, Logarithm):
      return Logarithm(simplify(node.base), simplify(node.operand))

    elif isinstance(node, (Negate, Sine, Cosine, NaturalLog)):
      return type(node)(simplify(node.operand))

    raise TypeError(f"Cannot simplify node of type {type(node).__name__}")

  @staticmethod
  def _simplify_product(node: Product, simplify) -> Expression:
    numbers_seen: List = []
    kept: List[Expression] = []

    for element in node.elements:
      s_element = simplify(element)
      if isinstance(s_element, NumericLiteral):
        if s_element.value == 0:
          return NumericLiteral(0)  # x * 0 = 0
        if s_element.value == 1:
          continue  # x * 1 = x
        numbers_seen.append(s_element.value)
      else:
        kept.append(s_element)

    coefficient = 1
    for value in numbers_seen:
      try:
        coefficient *= value
      except OverflowError:
        # huge int times a float
        coefficient = math.inf if (coefficient > 0) == (value > 0) else -math.inf

    if coefficient != 1:
      kept.insert(0, NumericLiteral(coefficient))

    if not kept:
      return NumericLiteral(1)
    if len(kept) == 1:
      return kept[0]
    return Product(*kept)

  @staticmethod
  def _simplify_power(node: Power, simplify, config: SymCalcConfig) -> Expression:
    base = simplify(node.base)
    exponent = simplify(node.exponent)

    if exponent == 0:
      return NumericLiteral(1)  # x^0 = 1
    if exponent == 1:
      return base  # x^1 = x

    if isinstance(base, NumericLiteral) and isinstance(exponent, NumericLiteral):
      computed = _numeric_power(base.value, exponent.value)
      if computed is not None and len(str(computed)) <= config.max_literal_chars:
        return NumericLiteral(computed)
      log_debug(f"kept ({base})^({exponent}) symbolic: literal {computed} is not short")
      return Power(base, exponent)

    if isinstance(base, Power):
      # (b^p)^q = b^(p*q)
      return simplify(Power(base.base, Product(base.exponent, exponent)))

    return Power(base, exponent)


def _is_literal(node: Expression, value) -> bool:
  return isinstance(node, NumericLiteral) and node.value == value


def _is_even_integer_literal(node: Expression) -> bool:
  if not isinstance(node, NumericLiteral) or not isinstance(node.value, numbers.Real):
    return False
  if isinstance(node.value, numbers.Integral):
    return node.value % 2 == 0
  value = float(node.value)
  return value.is_integer() and int(value) % 2 == 0


def _numeric_power(base, exponent):
  """base ** exponent as a real number, None when it is undefined or complex"""
  if (isinstance(base, numbers.Integral) and isinstance(exponent, numbers.Integral)
      and abs(base) > 1 and exponent > 64):
    return None  # far too long for a literal
  try:
    computed = base ** exponent
  except (ZeroDivisionError, OverflowError):
    return None
  if isinstance(computed, complex):
    return None
  if isinstance(computed, numbers.Integral):
    return computed
  if not math.isfinite(computed):
    return None
  return computed


def _euler() -> NamedConstant:
  from ...functions import E
  return E
