"""SymCalc

Symbolic expression trees with numeric evaluation, differentiation,
simplification and substitution.
"""

from .expression_tree import (
  Expression, NumericLiteral, NamedConstant, Variable, Sum, Negate, Product,
  Quotient, Power, Exponential, Sine, Cosine, NaturalLog, Logarithm, AbsoluteValue,
  to_expression, to_sympy, from_sympy
)
from .functions import (
  PI, E, var, const, num, negate, product, quotient, power, exp, sin, cos, ln, log
)
from . import functions
from .api import evaluate, derivative, simplify, substitute, display, all_variables
from .config import SymCalcConfig, get_config, configure, set_auto_simplify, config_context
from .errors import SymCalcError, UnboundVariableError, AmbiguousVariableError
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "NumericLiteral", "NamedConstant", "Variable", "Sum", "Negate", "Product",
  "Quotient", "Power", "Exponential", "Sine", "Cosine", "NaturalLog", "Logarithm",
  "AbsoluteValue", "to_expression", "to_sympy", "from_sympy",
  "PI", "E", "var", "const", "num", "negate", "product", "quotient", "power",
  "exp", "sin", "cos", "ln", "log", "functions",
  "evaluate", "derivative", "simplify", "substitute", "display", "all_variables",
  "SymCalcConfig", "get_config", "configure", "set_auto_simplify", "config_context",
  "SymCalcError", "UnboundVariableError", "AmbiguousVariableError",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
