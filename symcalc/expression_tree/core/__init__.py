"""Core expression tree components."""

from .node import (
    Expression, NumericLiteral, NamedConstant, Variable, Sum, Negate, Product,
    Quotient, Power, Exponential, Sine, Cosine, NaturalLog, Logarithm, AbsoluteValue,
    UnaryOpNode, BinaryOpNode, to_expression
)
from .operators import (
    NodeType,
    evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_unary_op
)

__all__ = [
    'Expression', 'NumericLiteral', 'NamedConstant', 'Variable', 'Sum', 'Negate', 'Product',
    'Quotient', 'Power', 'Exponential', 'Sine', 'Cosine', 'NaturalLog', 'Logarithm',
    'AbsoluteValue', 'UnaryOpNode', 'BinaryOpNode', 'to_expression',
    'NodeType',
    'evaluate_variable', 'evaluate_constant', 'evaluate_binary_op', 'evaluate_unary_op'
]
