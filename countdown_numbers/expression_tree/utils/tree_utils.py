"""
Tree Utility Functions

Traversal, shape enumeration and slot assignment helpers for expression
trees. Shapes are full binary trees whose leaves are unfilled ``NumberNode``
slots and whose internal nodes carry no operator yet.
"""

from typing import List, Sequence

from ..core.node import Node, NumberNode, OperatorNode
from ..core.operators import Operator


def _pre_order(node: Node) -> List[Node]:
    nodes = [node]

    if isinstance(node, OperatorNode):
        nodes.extend(_pre_order(node.left))
        nodes.extend(_pre_order(node.right))

    return nodes


def get_leaves(node: Node) -> List[NumberNode]:
    """Leaves in left-to-right (in-order) order"""
    return [n for n in _pre_order(node) if isinstance(n, NumberNode)]


def get_operator_nodes(node: Node) -> List[OperatorNode]:
    """Internal nodes in root-first (pre-order) order"""
    return [n for n in _pre_order(node) if isinstance(n, OperatorNode)]


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, OperatorNode):
        return 1 + max(calculate_tree_depth(node.left), calculate_tree_depth(node.right))
    return 1


def enumerate_shapes(n_operators: int) -> List[Node]:
    """
    Build every distinct full binary tree with ``n_operators`` internal nodes.

    Internal nodes are left unassigned and the ``n_operators + 1`` leaves are
    empty slots. The number of shapes is the Catalan number of
    ``n_operators`` (1, 1, 2, 5, 14, 42 for 0..5).

    Args:
        n_operators: Number of internal (operator) nodes

    Returns:
        List of freshly built shapes, in split order (left subtree size
        ascending, then left shapes, then right shapes)
    """
    if n_operators < 0:
        raise ValueError(f"Shape size must be non-negative, got {n_operators}")

    if n_operators == 0:
        return [NumberNode()]

    shapes = []
    for left_size in range(n_operators):
        right_size = n_operators - 1 - left_size
        for left in enumerate_shapes(left_size):
            for right in enumerate_shapes(right_size):
                shapes.append(OperatorNode(None, left, right))
    return shapes


def fill_numbers(shape: Node, numbers: Sequence[int]) -> Node:
    """
    Place numbers into the leaf slots from left to right.

    Only the first ``leaf_count`` values are consumed; any surplus is ignored.
    """
    leaves = get_leaves(shape)
    if len(numbers) < len(leaves):
        raise ValueError(f"Shape has {len(leaves)} leaves but only {len(numbers)} numbers were given")

    for leaf, number in zip(leaves, numbers):
        leaf.value = number
    return shape


def fill_operators(shape: Node, operators: Sequence[Operator]) -> Node:
    """Place operators into the internal nodes in root-first order."""
    internal_nodes = get_operator_nodes(shape)
    if len(operators) < len(internal_nodes):
        raise ValueError(f"Shape has {len(internal_nodes)} operator slots "
                         f"but only {len(operators)} operators were given")

    for internal_node, operator in zip(internal_nodes, operators):
        internal_node.operator = Operator(operator)
    return shape


def reset_tree(shape: Node) -> Node:
    """Clear every number and operator, restoring the unassigned shape."""
    for node in _pre_order(shape):
        if isinstance(node, OperatorNode):
            node.operator = None
        else:
            node.value = None
    return shape


def is_unassigned(shape: Node) -> bool:
    """True when no leaf holds a number and no internal node an operator"""
    for node in _pre_order(shape):
        if isinstance(node, OperatorNode):
            if node.operator is not None:
                return False
        elif node.value is not None:
            return False
    return True


def same_shape(first: Node, second: Node) -> bool:
    """Topology comparison that ignores numbers and operators"""
    if isinstance(first, OperatorNode) and isinstance(second, OperatorNode):
        return same_shape(first.left, second.left) and same_shape(first.right, second.right)
    return isinstance(first, NumberNode) and isinstance(second, NumberNode)


def validate_tree_structure(node: Node) -> bool:
    """
    Check that every internal node owns two distinct children and that no
    node is reachable twice.
    """
    seen = set()
    nodes_to_visit = [node]
    while nodes_to_visit:
        current_node = nodes_to_visit.pop()
        if id(current_node) in seen:
            return False
        seen.add(id(current_node))
        if isinstance(current_node, OperatorNode):
            if current_node.left is None or current_node.right is None:
                return False
            nodes_to_visit.append(current_node.left)
            nodes_to_visit.append(current_node.right)
        elif not isinstance(current_node, NumberNode):
            return False
    return True
