"""Expression Tree Module

Node types of the symbolic expression tree and the algorithms over them.
"""

from .core.node import (
    Expression, NumericLiteral, NamedConstant, Variable, Sum, Negate, Product,
    Quotient, Power, Exponential, Sine, Cosine, NaturalLog, Logarithm, AbsoluteValue,
    to_expression
)
from .core.operators import NodeType
from .utils import (
    ExpressionSimplifier, ExpressionDifferentiator, to_sympy, from_sympy,
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_variables, get_variable_names, replace_node_in_tree
)

__all__ = [
    "Expression", "NumericLiteral", "NamedConstant", "Variable", "Sum", "Negate", "Product",
    "Quotient", "Power", "Exponential", "Sine", "Cosine", "NaturalLog", "Logarithm",
    "AbsoluteValue", "to_expression", "NodeType",
    "ExpressionSimplifier", "ExpressionDifferentiator", "to_sympy", "from_sympy",
    "get_all_nodes", "calculate_tree_depth", "find_nodes_by_type",
    "get_variables", "get_variable_names", "replace_node_in_tree"
]
