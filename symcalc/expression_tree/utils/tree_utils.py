"""
Tree Utility Functions

Traversal and rebuilding helpers for expression trees. Every node exposes its
children through `children()` and rebuilds itself through `with_children()`,
so none of these functions need to know the individual variants.
"""

from collections import deque
from typing import List, cast

from ..core.node import Expression, Variable


def get_all_nodes(node: Expression, traversal_order: str = 'breadth_first') -> List[Expression]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Expression) -> List[Expression]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Expression) -> List[Expression]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Expression) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Expression, node_type: type) -> List[Expression]:
    """
    Find all nodes of a specific type in the tree, in depth-first order.

    Args:
        node: Root node of the tree
        node_type: Type of nodes to find (e.g., Variable, Power)

    Returns:
        List of nodes matching the specified type
    """
    return [n for n in _depth_first_traversal(node) if isinstance(n, node_type)]


def get_variables(node: Expression) -> List[Variable]:
    """Distinct variables by name, in order of first appearance"""
    seen = {}
    for var_node in cast(List[Variable], find_nodes_by_type(node, Variable)):
        seen.setdefault(var_node.name, var_node)
    return list(seen.values())


def get_variable_names(node: Expression) -> List[str]:
    """Names of the distinct variables, in order of first appearance"""
    return [var_node.name for var_node in get_variables(node)]


def replace_node_in_tree(root: Expression, target: Expression, replacement: Expression) -> Expression:
    """
    Replace every subtree equal to `target` with `replacement`.

    The search is top-down: a matching node is replaced as a whole and its
    children are not searched. Matching uses node equality, so variants that
    compare by identity only match the very same object.

    Args:
        root: Root node of the tree
        target: Subtree to look for
        replacement: Subtree to put in its place

    Returns:
        A new tree; `root` is left untouched
    """
    if root == target:
        return replacement

    children = root.children()
    if not children:
        return root

    return root.with_children([replace_node_in_tree(child, target, replacement) for child in children])
