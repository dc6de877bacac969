import sympy as sp
from typing import Dict, Optional
from ..core.node import (
  Expression, NumericLiteral, Variable, Sum, Product, Power, Exponential,
  Sine, Cosine, NaturalLog, AbsoluteValue
)


def to_sympy(node: Expression) -> sp.Expr:
  """Convert an expression tree to the equivalent SymPy expression"""
  return node.to_sympy()


def from_sympy(sympy_expr, symbols: Optional[Dict[str, Variable]] = None) -> Expression:
  """Convert a SymPy expression into an expression tree.

  `symbols` maps names to existing Variable objects; it is filled in as new
  symbols are met, so every occurrence of a symbol becomes the same Variable.
  """
  from ...functions import PI, E

  if symbols is None:
    symbols = {}

  if isinstance(sympy_expr, sp.Symbol):
    name = sympy_expr.name
    if name not in symbols:
      symbols[name] = Variable(name)
    return symbols[name]

  if sympy_expr is sp.pi:
    return PI
  if sympy_expr is sp.E:
    return E

  if isinstance(sympy_expr, sp.Integer):
    return NumericLiteral(int(sympy_expr))
  if isinstance(sympy_expr, sp.Number) and sympy_expr.is_real:
    return NumericLiteral(float(sympy_expr))

  def convert(arg) -> Expression:
    return from_sympy(arg, symbols)

  if isinstance(sympy_expr, sp.Add):
    return Sum(*[convert(arg) for arg in sympy_expr.args])
  if isinstance(sympy_expr, sp.Mul):
    return Product(*[convert(arg) for arg in sympy_expr.args])
  if isinstance(sympy_expr, sp.Pow):
    return Power(convert(sympy_expr.base), convert(sympy_expr.exp))
  if isinstance(sympy_expr, sp.exp):
    return Exponential(convert(sympy_expr.args[0]))
  if isinstance(sympy_expr, sp.log):
    return NaturalLog(convert(sympy_expr.args[0]))
  if isinstance(sympy_expr, sp.sin):
    return Sine(convert(sympy_expr.args[0]))
  if isinstance(sympy_expr, sp.cos):
    return Cosine(convert(sympy_expr.args[0]))
  if isinstance(sympy_expr, sp.Abs):
    return AbsoluteValue(convert(sympy_expr.args[0]))

  raise TypeError(f"Cannot convert SymPy object of type {type(sympy_expr).__name__}")
