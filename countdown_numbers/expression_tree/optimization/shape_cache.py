import numpy as np
from typing import Dict, List, Optional, Tuple

from ..core.node import Node, OperatorNode
from ..utils.tree_utils import enumerate_shapes


def compile_shape(shape: Node) -> np.ndarray:
  """
  Flatten a shape into a postfix program for the compiled evaluator.

  Leaves become their left-to-right slot index (``>= 0``); internal nodes
  become ``-(k + 1)`` where ``k`` is their root-first slot index, matching
  the order ``fill_numbers`` and ``fill_operators`` use.
  """
  program: List[int] = []
  next_leaf = 0
  next_operator = 0

  def _emit(node: Node):
    nonlocal next_leaf, next_operator
    if not isinstance(node, OperatorNode):
      program.append(next_leaf)
      next_leaf += 1
      return
    slot = next_operator
    next_operator += 1
    _emit(node.left)
    _emit(node.right)
    program.append(-slot - 1)

  _emit(shape)
  return np.array(program, dtype=np.int64)


class ShapeCache:
  """Shape templates and compiled programs, built once per operator count"""

  def __init__(self):
    self._templates: Dict[int, Tuple[Node, ...]] = {}
    self._programs: Dict[int, np.ndarray] = {}

  def get_templates(self, size: int) -> Tuple[Node, ...]:
    """Shared templates, never to be mutated; copy before assigning"""
    if size not in self._templates:
      self._templates[size] = tuple(enumerate_shapes(size))
    return self._templates[size]

  def get_working_copies(self, size: int) -> List[Node]:
    return [template.copy() for template in self.get_templates(size)]

  def get_programs(self, size: int) -> np.ndarray:
    """Compiled templates stacked row by row, in template order"""
    if size not in self._programs:
      self._programs[size] = np.stack([compile_shape(t) for t in self.get_templates(size)])
    return self._programs[size]

  def get_stats(self) -> dict:
    """Get cache statistics"""
    return {
      'template_sizes': sorted(self._templates),
      'template_count': sum(len(t) for t in self._templates.values()),
      'program_count': sum(p.shape[0] for p in self._programs.values()),
    }

  def clear(self):
    self._templates.clear()
    self._programs.clear()


_GLOBAL_CACHE: Optional[ShapeCache] = None


def get_global_shape_cache() -> ShapeCache:
  """Get the process-wide shape cache, creating it on first use"""
  global _GLOBAL_CACHE
  if _GLOBAL_CACHE is None:
    _GLOBAL_CACHE = ShapeCache()
  return _GLOBAL_CACHE


def clear_global_shape_cache():
  global _GLOBAL_CACHE
  if _GLOBAL_CACHE is not None:
    _GLOBAL_CACHE.clear()
  _GLOBAL_CACHE = None
