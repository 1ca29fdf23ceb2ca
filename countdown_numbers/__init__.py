# Python

"""Countdown Numbers Package

An exhaustive solver for the Countdown numbers game over every arithmetic
expression tree shape.
"""

from .expression_tree import (
  Node, NumberNode, OperatorNode, Operator,
  enumerate_shapes, fill_numbers, fill_operators, reset_tree,
  structurally_equivalent, algebraically_equivalent, is_equivalent
)
from .permutations import permutations_without_repetition, permutations_with_repetition
from .results import Solution, SolveResult
from .solver import NumbersSolver, SolveMode
from .reporting import format_report, get_detailed_solutions
from .validation import (
  InvalidInputError, validate_target, validate_numbers,
  NUM_CHOSEN_NUMBERS, SMALL_NUMBERS, LARGE_NUMBERS
)
from .logging_system import LogLevel, configure_logging, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Node", "NumberNode", "OperatorNode", "Operator",
  "enumerate_shapes", "fill_numbers", "fill_operators", "reset_tree",
  "structurally_equivalent", "algebraically_equivalent", "is_equivalent",
  "permutations_without_repetition", "permutations_with_repetition",
  "Solution", "SolveResult", "NumbersSolver", "SolveMode",
  "format_report", "get_detailed_solutions",
  "InvalidInputError", "validate_target", "validate_numbers",
  "NUM_CHOSEN_NUMBERS", "SMALL_NUMBERS", "LARGE_NUMBERS",
  "LogLevel", "configure_logging", "set_log_level"
]
