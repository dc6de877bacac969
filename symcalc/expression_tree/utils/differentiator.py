from typing import Optional
from ..core.node import (
  Expression, NumericLiteral, NamedConstant, Variable, Sum, Negate, Product,
  Quotient, Power, Exponential, Sine, Cosine, NaturalLog, Logarithm, AbsoluteValue
)
from .tree_utils import get_variable_names
from ...logging_system import log_warning


class ExpressionDifferentiator:
  """First derivative of a tree with respect to one variable name.

  Produces an unsimplified tree; callers decide whether to simplify it.
  A variable of None means no variable occurs, so every leaf is constant.
  """

  @staticmethod
  def differentiate(node: Expression, variable: Optional[str]) -> Expression:
    def d(child: Expression) -> Expression:
      return ExpressionDifferentiator.differentiate(child, variable)

    if isinstance(node, (NumericLiteral, NamedConstant)):
      return NumericLiteral(0)

    elif isinstance(node, Variable):
      return NumericLiteral(1 if node.name == variable else 0)

    elif isinstance(node, Sum):
      return Sum(*[d(element) for element in node.elements])

    elif isinstance(node, Negate):
      return Negate(d(node.operand))

    elif isinstance(node, Product):
      # (f1*f2*...*fn)' = sum_i fi' * prod_{j != i} fj
      terms = []
      for i, factor in enumerate(node.elements):
        others = node.elements[:i] + node.elements[i + 1:]
        terms.append(Product(d(factor), *others))
      return Sum(*terms)

    elif isinstance(node, Quotient):
      u, v = node.numerator, node.denominator
      return Quotient(Sum(Product(d(u), v), Negate(Product(u, d(v)))),
                      Power(v, NumericLiteral(2)))

    elif isinstance(node, Power):
      base, exponent = node.base, node.exponent
      if variable not in get_variable_names(exponent):
        # d(b^p) = p * b^(p-1) * b' for p free of the variable
        return Product(exponent, Power(base, _decrement(exponent)), d(base))
      # d(b^p) = b^p * (p' ln b + b' p / b)
      return Product(Power(base, exponent),
                     Sum(Product(d(exponent), NaturalLog(base)),
                         Quotient(Product(d(base), exponent), base)))

    elif isinstance(node, Exponential):
      return Product(Exponential(node.operand), d(node.operand))

    elif isinstance(node, Sine):
      return Product(Cosine(node.operand), d(node.operand))

    elif isinstance(node, Cosine):
      return Product(NumericLiteral(-1), Sine(node.operand), d(node.operand))

    elif isinstance(node, NaturalLog):
      return Quotient(d(node.operand), node.operand)

    elif isinstance(node, Logarithm):
      if variable is not None and variable in get_variable_names(node.base):
        log_warning(f"log base {node.base} depends on '{variable}'; differentiating it as a constant")
      return Quotient(d(node.operand), Product(NaturalLog(node.base), node.operand))

    elif isinstance(node, AbsoluteValue):
      return Product(Quotient(node.operand, AbsoluteValue(node.operand)), d(node.operand))

    raise TypeError(f"Cannot differentiate node of type {type(node).__name__}")


def _decrement(exponent: Expression) -> Expression:
  if isinstance(exponent, NumericLiteral):
    return NumericLiteral(exponent.value - 1)
  return Sum(exponent, NumericLiteral(-1))
