"""
Query API

evaluate, derivative, simplify, substitute and display over expression trees.
All of them accept raw numbers wherever an expression is expected.
"""

import numbers
from typing import List, Mapping, Optional, Union

import numpy as np

from .config import SymCalcConfig, resolve_config
from .errors import AmbiguousVariableError
from .expression_tree.core.node import Expression, Variable, to_expression
from .expression_tree.utils.differentiator import ExpressionDifferentiator
from .expression_tree.utils.simplifier import ExpressionSimplifier
from .expression_tree.utils.tree_utils import get_variables, get_variable_names, replace_node_in_tree
from .logging_system import LogLevel, log_info


def evaluate(expr, bindings: Optional[Mapping] = None) -> Union[float, List[float]]:
    """
    Evaluate an expression at a point or at a series of points.

    Args:
        expr: Expression (or number) to evaluate
        bindings: Mapping from variable (name or Variable) to a number, or to a
            sequence of numbers. When the first value is a sequence every value
            must be a sequence of that same length; this is not checked.

    Returns:
        A float for scalar bindings, a list of floats (one per position) for
        sequence bindings

    Raises:
        UnboundVariableError: a variable of `expr` has no binding
    """
    expr = to_expression(expr)
    values = {_binding_name(key): value for key, value in (bindings or {}).items()}

    first = next(iter(values.values()), None)
    if first is not None and np.ndim(first) > 0:
        n_samples = len(first)
        log_info(f"vectorized evaluation over {n_samples} samples", LogLevel.DETAILED)
        arrays = {name: _as_samples(value, n_samples) for name, value in values.items()}
        with np.errstate(all='ignore'):
            return expr.evaluate(arrays, n_samples).tolist()

    arrays = {name: _as_samples(value, 1) for name, value in values.items()}
    with np.errstate(all='ignore'):
        return float(expr.evaluate(arrays, 1)[0])


def _binding_name(key) -> str:
    if isinstance(key, Variable):
        return key.name
    return str(key)


def _as_samples(value, n_samples: int) -> np.ndarray:
    array = np.asarray(value, dtype=np.float64)
    if array.ndim == 0:
        return np.full(n_samples, float(array))
    return np.ascontiguousarray(array)


def derivative(expr, order: int = 1, variable=None,
               config: Optional[SymCalcConfig] = None) -> Expression:
    """
    Differentiate `order` times with respect to `variable`.

    Args:
        expr: Expression to differentiate
        order: Number of successive derivatives (0 returns the input)
        variable: Variable or variable name; may be omitted when `expr` has at
            most one distinct variable
        config: Overrides the active configuration

    Raises:
        AmbiguousVariableError: no variable given and `expr` has several
    """
    config = resolve_config(config)
    if not isinstance(order, numbers.Integral) or order < 0:
        raise ValueError(f"Derivative order must be a non-negative integer, got {order!r}")

    fx = to_expression(expr)
    if variable is None:
        names = get_variable_names(fx)
        if len(names) > 1:
            raise AmbiguousVariableError(len(names))
        name = names[0] if names else None
    elif isinstance(variable, Variable):
        name = variable.name
    elif isinstance(variable, str):
        name = variable
    else:
        raise TypeError(f"Cannot differentiate with respect to {type(variable).__name__}")

    if config.auto_simplify:
        fx = ExpressionSimplifier.simplify_expression(fx, config)

    for step in range(order):
        fx = ExpressionDifferentiator.differentiate(fx, name)
        if config.auto_simplify:
            fx = ExpressionSimplifier.simplify_expression(fx, config)
        log_info(f"derivative {step + 1}/{order} by {name}: {fx.size()} nodes", LogLevel.DETAILED)

    return fx


def simplify(expr, config: Optional[SymCalcConfig] = None) -> Expression:
    """Apply one simplification pass"""
    return ExpressionSimplifier.simplify_expression(to_expression(expr), config)


def substitute(expr, target, replacement, config: Optional[SymCalcConfig] = None) -> Expression:
    """
    Replace every subtree equal to `target` with `replacement`.

    Only node types with structural equality (numeric literals, named constants,
    quotients, powers, exponentials) match copies of `target`; every other node
    type matches only the very same object.
    """
    config = resolve_config(config)
    result = replace_node_in_tree(to_expression(expr), to_expression(target), to_expression(replacement))
    if config.auto_simplify:
        result = ExpressionSimplifier.simplify_expression(result, config)
    return result


def display(expr) -> str:
    """Fully parenthesized text form"""
    return to_expression(expr).to_string()


def all_variables(expr) -> List[Variable]:
    """Distinct variables (by name) in order of first appearance"""
    return get_variables(to_expression(expr))


__all__ = ['evaluate', 'derivative', 'simplify', 'substitute', 'display', 'all_variables']
