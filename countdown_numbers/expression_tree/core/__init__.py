"""Core expression tree components."""

from .node import Node, NumberNode, OperatorNode
from .operators import (
    Operator, OPERATOR_SYMBOLS, INTUITION_WEIGHTS, LEAF_INTUITION_WEIGHT,
    COMMUTATIVE_OPERATORS, INVALID_DIVISION,
    apply_operator, apply_operator_fast, evaluate_program, find_target_attempts
)

__all__ = [
    'Node', 'NumberNode', 'OperatorNode',
    'Operator', 'OPERATOR_SYMBOLS', 'INTUITION_WEIGHTS', 'LEAF_INTUITION_WEIGHT',
    'COMMUTATIVE_OPERATORS', 'INVALID_DIVISION',
    'apply_operator', 'apply_operator_fast', 'evaluate_program', 'find_target_attempts'
]
