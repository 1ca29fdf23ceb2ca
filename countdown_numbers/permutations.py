import itertools
import numpy as np
from typing import Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar('T')


def permutations_without_repetition(items: Sequence[T]) -> Iterator[Tuple[T, ...]]:
  """Every ordering of ``items`` by position, lexicographic by index.

  Equal values at different positions are distinct items, so ``[1, 1]``
  yields two orderings.
  """
  return itertools.permutations(items)


def permutations_with_repetition(items: Sequence[T], length: int) -> Iterator[Tuple[T, ...]]:
  """Every ``length``-long sequence drawn from ``items``, lexicographic by index"""
  if length < 0:
    raise ValueError(f"Permutation length must be non-negative, got {length}")
  return itertools.product(items, repeat=length)


def permutation_matrix(permutations: List[Tuple[int, ...]], width: int) -> np.ndarray:
  """Stack permutations into an ``int64`` array, one row each"""
  if not permutations:
    return np.empty((0, width), dtype=np.int64)
  return np.array(permutations, dtype=np.int64).reshape(len(permutations), width)
