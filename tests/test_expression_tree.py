import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from countdown_numbers.expression_tree import (
    NumberNode, OperatorNode, Operator, INVALID_DIVISION, apply_operator, SymPyVerifier
)


def op(operator, left, right):
    return OperatorNode(operator, left, right)


def leaf(value):
    return NumberNode(value)


def test_leaf_evaluates_to_its_value():
    for value in (0, 1, 7, 100, -3):
        assert leaf(value).evaluate() == value


def test_operator_arithmetic():
    assert op(Operator.MULTIPLY, leaf(6), leaf(7)).evaluate() == 42
    assert op(Operator.ADD, leaf(6), leaf(7)).evaluate() == 13
    assert op(Operator.SUBTRACT, leaf(6), leaf(7)).evaluate() == -1
    assert op(Operator.DIVIDE, leaf(42), leaf(7)).evaluate() == 6


def test_negative_intermediate_results_propagate():
    # (1 - 50) × (6 + 7) = -637
    tree = op(Operator.MULTIPLY,
              op(Operator.SUBTRACT, leaf(1), leaf(50)),
              op(Operator.ADD, leaf(6), leaf(7)))
    assert tree.evaluate() == -637
    assert op(Operator.DIVIDE, leaf(-12), leaf(4)).evaluate() == -3
    assert op(Operator.DIVIDE, leaf(12), leaf(-4)).evaluate() == -3


def test_invalid_division_returns_zero_sentinel():
    """Inexact division and division by zero both evaluate to 0"""
    assert op(Operator.DIVIDE, leaf(7), leaf(2)).evaluate() == INVALID_DIVISION
    assert op(Operator.DIVIDE, leaf(7), leaf(0)).evaluate() == INVALID_DIVISION
    zero_divisor = op(Operator.SUBTRACT, leaf(3), leaf(3))
    assert op(Operator.DIVIDE, leaf(9), zero_divisor).evaluate() == 0
    assert apply_operator(-7, 2, Operator.DIVIDE) == 0


def test_sentinel_propagates_into_parent():
    # (7 ÷ 2) + 5 reads as 0 + 5
    tree = op(Operator.ADD, op(Operator.DIVIDE, leaf(7), leaf(2)), leaf(5))
    assert tree.evaluate() == 5


def test_rendering_is_fully_parenthesized():
    tree = op(Operator.MULTIPLY, leaf(10),
              op(Operator.MULTIPLY, leaf(5),
                 op(Operator.MULTIPLY, op(Operator.ADD, leaf(1), leaf(4)), leaf(2))))
    assert tree.to_string() == "(10 × (5 × ((1 + 4) × 2)))"
    assert tree.evaluate() == 500
    assert str(op(Operator.SUBTRACT, leaf(9), op(Operator.DIVIDE, leaf(8), leaf(4)))) == "(9 - (8 ÷ 4))"


def test_intuition_scores():
    assert leaf(1).intuition_score() == 10
    assert op(Operator.ADD, leaf(1), leaf(2)).intuition_score() == 40
    assert op(Operator.MULTIPLY, op(Operator.ADD, leaf(1), leaf(2)), leaf(3)).intuition_score() == 80
    assert op(Operator.DIVIDE, leaf(4), leaf(2)).intuition_score() == 70
    assert op(Operator.SUBTRACT, leaf(4), leaf(2)).intuition_score() == 50


def test_intuition_score_of_known_solution():
    # (((100 + 3) × 7) - 2)
    tree = op(Operator.SUBTRACT,
              op(Operator.MULTIPLY, op(Operator.ADD, leaf(100), leaf(3)), leaf(7)),
              leaf(2))
    assert tree.evaluate() == 719
    assert tree.intuition_score() == 120


def test_operator_table():
    assert list(Operator) == [Operator.MULTIPLY, Operator.DIVIDE, Operator.ADD, Operator.SUBTRACT]
    assert [o.symbol for o in Operator] == ['×', '÷', '+', '-']
    assert [o.weight for o in Operator] == [30, 50, 20, 30]
    assert Operator.ADD.is_commutative and Operator.MULTIPLY.is_commutative
    assert not Operator.SUBTRACT.is_commutative and not Operator.DIVIDE.is_commutative


def test_copy_is_deep():
    original = op(Operator.ADD, leaf(1), op(Operator.MULTIPLY, leaf(2), leaf(3)))
    clone = original.copy()
    assert clone.to_string() == original.to_string()

    clone.right.left.value = 9
    clone.operator = Operator.SUBTRACT
    assert original.to_string() == "(1 + (2 × 3))"
    assert clone.to_string() == "(1 - (9 × 3))"


def test_size_and_counts():
    tree = op(Operator.ADD, leaf(1), op(Operator.MULTIPLY, leaf(2), leaf(3)))
    assert tree.size() == 5
    assert tree.leaf_count() == 3
    assert tree.operator_count() == 2
    assert leaf(4).operator_count() == 0


def test_operator_node_requires_two_children():
    with pytest.raises(ValueError):
        OperatorNode(Operator.ADD, leaf(1), None)


def test_unassigned_slots_cannot_be_evaluated():
    with pytest.raises(ValueError):
        NumberNode().evaluate()
    with pytest.raises(ValueError):
        OperatorNode(None, leaf(1), leaf(2)).evaluate()
    assert OperatorNode(None, NumberNode(), NumberNode()).to_string() == "(_ ? _)"


def test_sympy_verifier_separates_sentinel_from_true_zero():
    verifier = SymPyVerifier()
    true_zero = op(Operator.SUBTRACT, leaf(4), leaf(4))
    inexact = op(Operator.DIVIDE, leaf(3), leaf(2))
    by_zero = op(Operator.DIVIDE, leaf(3), op(Operator.SUBTRACT, leaf(2), leaf(2)))

    assert true_zero.evaluate() == inexact.evaluate() == by_zero.evaluate() == 0
    assert verifier.verify(true_zero, 0)
    assert not verifier.verify(inexact, 0)
    assert not verifier.verify(by_zero, 0)


def test_sympy_verifier_accepts_exact_solution():
    verifier = SymPyVerifier()
    # ((((25 × (50 + 7)) - 1) × 3) ÷ 6)
    tree = op(Operator.DIVIDE,
              op(Operator.MULTIPLY,
                 op(Operator.SUBTRACT,
                    op(Operator.MULTIPLY, leaf(25), op(Operator.ADD, leaf(50), leaf(7))),
                    leaf(1)),
                 leaf(3)),
              leaf(6))
    assert tree.evaluate() == 712
    assert verifier.verify(tree, 712)
    description = verifier.describe(tree)
    assert description['exact_value'] == '712'
    assert description['is_integer'] is True
