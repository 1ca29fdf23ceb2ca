"""Utilities for expression trees."""

from .sympy_utils import SymPyVerifier
from .equivalence import (
    LeafRole, structurally_equivalent, leaf_roles,
    algebraically_equivalent, is_equivalent
)
from .tree_utils import (
    get_leaves, get_operator_nodes, calculate_tree_depth,
    enumerate_shapes, fill_numbers, fill_operators, reset_tree,
    is_unassigned, same_shape, validate_tree_structure
)

__all__ = [
    'SymPyVerifier',
    'LeafRole', 'structurally_equivalent', 'leaf_roles',
    'algebraically_equivalent', 'is_equivalent',
    'get_leaves', 'get_operator_nodes', 'calculate_tree_depth',
    'enumerate_shapes', 'fill_numbers', 'fill_operators', 'reset_tree',
    'is_unassigned', 'same_shape', 'validate_tree_structure'
]
