"""Expression Tree Module

Arithmetic expression trees for the Countdown numbers solver.
"""

from .core.node import Node, NumberNode, OperatorNode
from .core.operators import (
    Operator,
    OPERATOR_SYMBOLS,
    INTUITION_WEIGHTS,
    LEAF_INTUITION_WEIGHT,
    INVALID_DIVISION,
    apply_operator,
    evaluate_program,
    find_target_attempts
)
from .optimization import ShapeCache, compile_shape, get_global_shape_cache, clear_global_shape_cache
from .utils import (
    SymPyVerifier,
    LeafRole, structurally_equivalent, algebraically_equivalent, is_equivalent, leaf_roles,
    enumerate_shapes, fill_numbers, fill_operators, reset_tree
)

__all__ = [
    "Node", "NumberNode", "OperatorNode",
    "Operator", "OPERATOR_SYMBOLS", "INTUITION_WEIGHTS", "LEAF_INTUITION_WEIGHT", "INVALID_DIVISION",
    "apply_operator", "evaluate_program", "find_target_attempts",
    "ShapeCache", "compile_shape", "get_global_shape_cache", "clear_global_shape_cache",
    "SymPyVerifier",
    "LeafRole", "structurally_equivalent", "algebraically_equivalent", "is_equivalent", "leaf_roles",
    "enumerate_shapes", "fill_numbers", "fill_operators", "reset_tree"
]
