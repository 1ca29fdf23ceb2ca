from collections import Counter
from typing import List, NamedTuple

from ..core.node import Node, NumberNode, OperatorNode
from ..core.operators import Operator


class LeafRole(NamedTuple):
  """A leaf value with its sign and reciprocal role seen from the root"""
  value: int
  is_subtrahend: bool
  is_divisor: bool


def structurally_equivalent(first: Node, second: Node) -> bool:
  """Same tree up to swapping the children of + and ×"""
  if first.is_leaf != second.is_leaf:
    return False

  if first.is_leaf:
    return first.value == second.value

  if first.operator != second.operator:
    return False

  in_order = (structurally_equivalent(first.left, second.left) and
              structurally_equivalent(first.right, second.right))
  if in_order or not first.operator.is_commutative:
    return in_order

  return (structurally_equivalent(first.left, second.right) and
          structurally_equivalent(first.right, second.left))


def leaf_roles(node: Node) -> List[LeafRole]:
  """
  Tag every leaf with the parity of subtractions and divisions above it.

  Descending into the right child of a subtraction toggles the subtrahend
  flag, into the right child of a division the divisor flag. Every other
  descent keeps both flags.
  """
  roles = []
  _collect_leaf_roles(node, False, False, roles)
  return roles


def _collect_leaf_roles(node: Node, is_subtrahend: bool, is_divisor: bool, roles: List[LeafRole]):
  if isinstance(node, NumberNode):
    roles.append(LeafRole(node.value, is_subtrahend, is_divisor))
    return

  _collect_leaf_roles(node.left, is_subtrahend, is_divisor, roles)
  _collect_leaf_roles(
    node.right,
    is_subtrahend != (node.operator == Operator.SUBTRACT),
    is_divisor != (node.operator == Operator.DIVIDE),
    roles
  )


def algebraically_equivalent(first: Node, second: Node) -> bool:
  """Same multiset of leaf roles, duplicates matched one-to-one.

  Catches regroupings such as ``((x - 1) × 3) ÷ 6`` versus
  ``(x - 1) ÷ (6 ÷ 3)``. Not a full algebraic identity test: any two trees
  over the same numbers built only from + and × compare equal.
  """
  return Counter(leaf_roles(first)) == Counter(leaf_roles(second))


def is_equivalent(first: Node, second: Node) -> bool:
  return structurally_equivalent(first, second) or algebraically_equivalent(first, second)
