"""Algorithms over expression trees."""

from .simplifier import ExpressionSimplifier
from .differentiator import ExpressionDifferentiator
from .sympy_utils import to_sympy, from_sympy
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_variables, get_variable_names, replace_node_in_tree
)

__all__ = [
    'ExpressionSimplifier', 'ExpressionDifferentiator',
    'to_sympy', 'from_sympy',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'get_variables', 'get_variable_names', 'replace_node_in_tree'
]
