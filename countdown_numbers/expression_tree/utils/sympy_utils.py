import sympy as sp
from typing import Dict, Any
from ..core.node import Node


class SymPyVerifier:
  """Exact rational cross-check of integer expression trees"""

  def exact_value(self, node: Node) -> sp.Expr:
    """Evaluate with rationals, so an inexact division stays fractional
    and a division by zero becomes ``zoo`` instead of the integer sentinel."""
    return node.to_sympy().doit()

  def verify(self, node: Node, target: int) -> bool:
    value = self.exact_value(node)
    return bool(value.is_Integer) and int(value) == target

  def describe(self, node: Node) -> Dict[str, Any]:
    expr = node.to_sympy()
    value = expr.doit()
    return {
      'sympy': str(expr),
      'latex': sp.latex(expr),
      'exact_value': str(value),
      'is_integer': bool(value.is_Integer),
    }
