import time
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .expression_tree import (
  Node, Operator, ShapeCache, get_global_shape_cache,
  find_target_attempts, fill_numbers, fill_operators, reset_tree
)
from .permutations import (
  permutations_without_repetition, permutations_with_repetition, permutation_matrix
)
from .results import Solution, SolveResult
from .logging_system import (
  get_logger, log_solution, log_milestone, log_progress, log_search_step, log_debug, log_warning
)

BACKENDS = ('compiled', 'tree')


class SolveMode(Enum):
  """When to stop searching and what to report"""
  FIRST = 'f'            # stop at the first exact match
  ALL = 'a'              # every distinct solution
  MOST_INTUITIVE = 'i'   # every distinct solution, report the lowest score

  @property
  def response_code(self) -> str:
    return self.value

  @classmethod
  def from_response_code(cls, response_code: str) -> Optional['SolveMode']:
    for mode in cls:
      if mode.value == response_code:
        return mode
    return None


class NumbersSolver:
  """Exhaustive Countdown numbers solver.

  Tries every expression tree shape with 1 up to ``len(numbers) - 1``
  operators, every ordering of the numbers and every operator assignment,
  in a fixed order so that attempt counts and results are reproducible.
  """

  def __init__(self,
               mode: SolveMode = SolveMode.FIRST,
               backend: str = 'compiled',
               max_operators: Optional[int] = None,
               console_log: bool = True,
               on_solution: Optional[Callable[[Solution, SolveMode], None]] = None,
               shape_cache: Optional[ShapeCache] = None):
    if not isinstance(mode, SolveMode):
      raise TypeError(f"mode must be a SolveMode, got {type(mode).__name__}")
    if backend not in BACKENDS:
      raise ValueError(f"Unknown backend '{backend}', expected one of {BACKENDS}")
    if max_operators is not None and max_operators < 1:
      raise ValueError(f"max_operators must be at least 1, got {max_operators}")

    self.mode = mode
    self.backend = backend
    self.max_operators = max_operators
    self.console_log = console_log
    self.on_solution = on_solution
    self.shape_cache = shape_cache if shape_cache is not None else get_global_shape_cache()

    self.attempts = 0
    self.solutions: List[Solution] = []
    self._target = 0

  def solve(self, target: int, numbers: Sequence[int]) -> SolveResult:
    """Search for expressions over ``numbers`` that evaluate to ``target``"""
    numbers = self._check_numbers(numbers)
    target = int(target)

    self._target = target
    self.attempts = 0
    self.solutions = []

    max_size = len(numbers) - 1
    if self.max_operators is not None:
      if self.max_operators > max_size:
        raise ValueError(f"max_operators={self.max_operators} needs at least "
                         f"{self.max_operators + 1} numbers, got {len(numbers)}")
      max_size = self.max_operators

    if self.console_log:
      get_logger().start_time = time.time()
      log_milestone(f"Searching for {target} using {', '.join(map(str, numbers))} "
                    f"(mode: {self.mode.name.lower()}, backend: {self.backend})")

    number_perms = list(permutations_without_repetition(numbers))
    search_size = self._search_size_compiled if self.backend == 'compiled' else self._search_size_tree

    for size in range(1, max_size + 1):
      operator_perms = list(permutations_with_repetition(list(Operator), size))
      if search_size(size, number_perms, operator_perms):
        return self._finish(numbers)
      if self.console_log:
        log_progress(f"Finished size {size}: {self.attempts:,} attempts, "
                     f"{len(self.solutions)} solutions", force=True)

    return self._finish(numbers)

  def _search_size_tree(self, size: int, number_perms: List[Tuple[int, ...]],
                        operator_perms: List[Tuple[Operator, ...]]) -> bool:
    """Fill, evaluate and reset a working tree once per attempt"""
    working_trees = self.shape_cache.get_working_copies(size)
    for number_index, numbers_perm in enumerate(number_perms):
      for operators_perm in operator_perms:
        for tree in working_trees:
          fill_numbers(tree, numbers_perm)
          fill_operators(tree, operators_perm)
          if tree.evaluate() == self._target and self._handle_match(tree):
            return True
          self.attempts += 1
          reset_tree(tree)

      if self.console_log:
        log_search_step(size, number_index, len(number_perms), self.attempts, len(self.solutions))
    return False

  def _search_size_compiled(self, size: int, number_perms: List[Tuple[int, ...]],
                            operator_perms: List[Tuple[Operator, ...]]) -> bool:
    """Scan every attempt of this size in the compiled kernel, then replay
    only the matching attempts on working trees in enumeration order"""
    templates = self.shape_cache.get_templates(size)
    programs = self.shape_cache.get_programs(size)
    number_matrix = permutation_matrix(number_perms, len(number_perms[0]))
    operator_matrix = permutation_matrix(operator_perms, size)

    n_shapes = len(templates)
    attempts_per_numbers = len(operator_perms) * n_shapes
    total_attempts = len(number_perms) * attempts_per_numbers
    base_attempts = self.attempts

    matches = find_target_attempts(programs, number_matrix, operator_matrix,
                                   self._target, self.mode is SolveMode.FIRST)
    working_trees = [template.copy() for template in templates]
    for index in matches:
      index = int(index)
      number_index, remainder = divmod(index, attempts_per_numbers)
      operator_index, shape_index = divmod(remainder, n_shapes)

      tree = working_trees[shape_index]
      fill_numbers(tree, number_perms[number_index])
      fill_operators(tree, operator_perms[operator_index])
      self.attempts = base_attempts + index
      if self._handle_match(tree):
        return True
      reset_tree(tree)

    self.attempts = base_attempts + total_attempts
    if self.console_log:
      log_search_step(size, len(number_perms) - 1, len(number_perms), self.attempts, len(self.solutions))
    return False

  def _handle_match(self, tree: Node) -> bool:
    """Record a matching tree; True when the search should stop"""
    if self.mode is SolveMode.FIRST:
      self._accept(tree)
      return True

    for solution in self.solutions:
      if solution.expression.is_equivalent_to(tree):
        if self.console_log:
          log_debug(f"Skipping {tree.to_string()}, equivalent to {solution.to_string()}")
        return False

    self._accept(tree)
    return False

  def _accept(self, tree: Node):
    expression = tree.copy()
    solution = Solution(expression=expression,
                        intuition_score=expression.intuition_score(),
                        attempt=self.attempts)
    self.solutions.append(solution)

    if self.console_log and self.mode is not SolveMode.FIRST:
      score_text = (f" [intuition score: {solution.intuition_score}]"
                    if self.mode is SolveMode.MOST_INTUITIVE else "")
      log_solution(f"Found solution: {solution.to_string()}{score_text}")

    if self.on_solution is not None:
      self.on_solution(solution, self.mode)

  def _finish(self, numbers: Tuple[int, ...]) -> SolveResult:
    result = SolveResult(target=self._target, numbers=numbers, mode=self.mode,
                         attempts=self.attempts, solutions=list(self.solutions))
    if self.mode is SolveMode.FIRST and result.solved:
      result.best = result.solutions[0]
    elif self.mode is SolveMode.MOST_INTUITIVE and result.solved:
      result.best = result.ranked()[0]

    if self.console_log:
      if not result.solved:
        log_warning(f"No solution for {result.target} after {result.attempts:,} attempts")
      summary = {
        'target': result.target,
        'numbers': ', '.join(map(str, result.numbers)),
        'mode': self.mode.name.lower(),
        'attempts': result.attempts,
        'solutions': result.solution_count,
      }
      if result.best is not None:
        summary['best'] = result.best.to_string()
        summary['intuition score'] = result.best.intuition_score
      get_logger().result_summary(summary)
    return result

  @staticmethod
  def _check_numbers(numbers: Sequence[int]) -> Tuple[int, ...]:
    numbers = tuple(int(n) for n in numbers)
    if not numbers:
      raise ValueError("At least one number is required")
    return numbers
