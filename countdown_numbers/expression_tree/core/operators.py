import numpy as np
import numba
from enum import IntEnum


class Operator(IntEnum):
  # Declaration order is the operator permutation order
  MULTIPLY = 0
  DIVIDE = 1
  ADD = 2
  SUBTRACT = 3

  @property
  def symbol(self) -> str:
    return OPERATOR_SYMBOLS[self]

  @property
  def weight(self) -> int:
    return INTUITION_WEIGHTS[self]

  @property
  def is_commutative(self) -> bool:
    return self in COMMUTATIVE_OPERATORS


OPERATOR_SYMBOLS = {
  Operator.MULTIPLY: '×',
  Operator.DIVIDE: '÷',
  Operator.ADD: '+',
  Operator.SUBTRACT: '-',
}

# Lower totals read as more intuitive expressions
INTUITION_WEIGHTS = {
  Operator.MULTIPLY: 30,
  Operator.DIVIDE: 50,
  Operator.ADD: 20,
  Operator.SUBTRACT: 30,
}
LEAF_INTUITION_WEIGHT = 10

COMMUTATIVE_OPERATORS = frozenset({Operator.ADD, Operator.MULTIPLY})

# Result of a division that is by zero or not exact. Shares its value with a
# genuine zero result, so a target of 0 cannot tell the two apart.
INVALID_DIVISION = 0


def apply_operator(left: int, right: int, operator: Operator) -> int:
  if operator == Operator.MULTIPLY:
    return left * right
  elif operator == Operator.DIVIDE:
    if right == 0 or left % right != 0:
      return INVALID_DIVISION
    return left // right
  elif operator == Operator.ADD:
    return left + right
  elif operator == Operator.SUBTRACT:
    return left - right
  raise ValueError(f"Unknown operator: {operator!r}")


@numba.njit(cache=True, inline='always')
def apply_operator_fast(left, right, op_type):
  if op_type == Operator.MULTIPLY:
    return left * right
  elif op_type == Operator.DIVIDE:
    if right == 0 or left % right != 0:
      return 0
    return left // right
  elif op_type == Operator.ADD:
    return left + right
  return left - right


@numba.njit(cache=True)
def evaluate_program(program, numbers, operators, stack):
  """Run a postfix program for one number/operator assignment.

  Tokens ``t >= 0`` push ``numbers[t]``; tokens ``t < 0`` pop two values and
  apply ``operators[-t - 1]``.
  """
  top = 0
  for token in program:
    if token >= 0:
      stack[top] = numbers[token]
      top += 1
    else:
      top -= 1
      right = stack[top]
      left = stack[top - 1]
      stack[top - 1] = apply_operator_fast(left, right, operators[-token - 1])
  return stack[0]


@numba.njit(cache=True)
def find_target_attempts(programs, number_perms, operator_perms, target, stop_at_first):
  """Attempt indices whose value equals ``target``.

  Attempts run number row, then operator row, then program, and are
  numbered from 0 in that order. All programs must share one length.
  """
  n_programs = programs.shape[0]
  n_numbers = number_perms.shape[0]
  n_operators = operator_perms.shape[0]
  stack = np.empty(programs.shape[1], dtype=np.int64)
  matches = np.empty(16, dtype=np.int64)
  count = 0
  attempt = 0
  for i in range(n_numbers):
    for j in range(n_operators):
      for k in range(n_programs):
        if evaluate_program(programs[k], number_perms[i], operator_perms[j], stack) == target:
          if count == matches.shape[0]:
            grown = np.empty(matches.shape[0] * 2, dtype=np.int64)
            grown[:count] = matches
            matches = grown
          matches[count] = attempt
          count += 1
          if stop_at_first:
            return matches[:count]
        attempt += 1
  return matches[:count]
