import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional
from .operators import Operator, LEAF_INTUITION_WEIGHT, apply_operator


class Node(ABC):
  """Base node of an arithmetic expression tree.

  A tree is either a single ``NumberNode`` leaf or an ``OperatorNode`` that
  owns exactly two children. Shape templates use the same classes with the
  values left unassigned.
  """

  __slots__ = ()

  @property
  @abstractmethod
  def is_leaf(self) -> bool:
    pass

  @abstractmethod
  def evaluate(self) -> int:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def size(self) -> int:
    """Total node count"""
    pass

  @abstractmethod
  def intuition_score(self) -> int:
    """Heuristic cost, lower reads more naturally to a person"""
    pass

  @abstractmethod
  def leaf_count(self) -> int:
    pass

  def operator_count(self) -> int:
    return self.leaf_count() - 1

  def is_equivalent_to(self, other: 'Node') -> bool:
    # Import here to avoid circular imports
    from ..utils.equivalence import is_equivalent
    return is_equivalent(self, other)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class NumberNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: Optional[int] = None):
    self.value = value

  @property
  def is_leaf(self) -> bool:
    return True

  def evaluate(self) -> int:
    if self.value is None:
      raise ValueError("Cannot evaluate an unfilled leaf slot")
    return self.value

  def to_string(self) -> str:
    return "_" if self.value is None else str(self.value)

  def copy(self) -> 'NumberNode':
    return NumberNode(self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.Integer(self.evaluate())

  def size(self) -> int:
    return 1

  def intuition_score(self) -> int:
    return LEAF_INTUITION_WEIGHT

  def leaf_count(self) -> int:
    return 1


class OperatorNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: Optional[Operator], left: Node, right: Node):
    if left is None or right is None:
      raise ValueError("An operator node needs exactly two children")
    self.operator = operator
    self.left = left
    self.right = right

  @property
  def is_leaf(self) -> bool:
    return False

  def evaluate(self) -> int:
    if self.operator is None:
      raise ValueError("Cannot evaluate an unassigned operator slot")
    return apply_operator(self.left.evaluate(), self.right.evaluate(), self.operator)

  def to_string(self) -> str:
    symbol = "?" if self.operator is None else self.operator.symbol
    return f"({self.left.to_string()} {symbol} {self.right.to_string()})"

  def copy(self) -> 'OperatorNode':
    return OperatorNode(self.operator, self.left.copy(), self.right.copy())

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == Operator.ADD:
      return sp.Add(left, right, evaluate=False)
    elif self.operator == Operator.SUBTRACT:
      return sp.Add(left, sp.Mul(-1, right, evaluate=False), evaluate=False)
    elif self.operator == Operator.MULTIPLY:
      return sp.Mul(left, right, evaluate=False)
    elif self.operator == Operator.DIVIDE:
      return sp.Mul(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
    raise ValueError("Cannot convert an unassigned operator slot to sympy")

  def size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def intuition_score(self) -> int:
    if self.operator is None:
      raise ValueError("Cannot score an unassigned operator slot")
    return self.operator.weight + self.left.intuition_score() + self.right.intuition_score()

  def leaf_count(self) -> int:
    return self.left.leaf_count() + self.right.leaf_count()
