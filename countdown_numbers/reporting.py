from typing import List, Dict, Any
from .expression_tree import SymPyVerifier
from .expression_tree.utils.tree_utils import calculate_tree_depth
from .results import SolveResult
from .solver import SolveMode


def format_report(result: SolveResult) -> List[str]:
  """Render the lines announcing a search outcome"""
  lines = []

  if result.mode is SolveMode.FIRST:
    if result.solved:
      lines.append(f"Solved after {result.attempts:,} attempts.")
      lines.append(result.solutions[0].to_string())
    else:
      lines.append(f"No solution after {result.attempts:,} attempts")
    return lines

  for solution in result.solutions:
    score_text = (f" [intuition score: {solution.intuition_score}]"
                  if result.mode is SolveMode.MOST_INTUITIVE else "")
    lines.append(f"Found solution: {solution.to_string()}{score_text}")

  if not result.solved:
    lines.append(f"No solution after {result.attempts:,} attempts")
  elif result.mode is SolveMode.MOST_INTUITIVE:
    lines.append(f"Most intuitive solution: {result.best.to_string()}")
  else:
    plural = "" if result.solution_count == 1 else "s"
    lines.append(f"Found {result.solution_count:,} solution{plural} in {result.attempts:,} attempts")
  return lines


def get_detailed_solutions(result: SolveResult, sympy_verify: bool = False) -> List[Dict]:
  """Get detailed information about each solution"""
  if not result.solutions:
    return []

  verifier = SymPyVerifier() if sympy_verify else None
  detailed = []
  for i, solution in enumerate(result.solutions):
    info: Dict[str, Any] = {
      'expression': solution.to_string(),
      'value': solution.expression.evaluate(),
      'intuition_score': solution.intuition_score,
      'size': solution.expression.size(),
      'depth': calculate_tree_depth(solution.expression),
      'attempt': solution.attempt,
      'discovery_index': i,
      'verified': None
    }

    if verifier is not None:
      info['verified'] = verifier.verify(solution.expression, result.target)
      info.update(verifier.describe(solution.expression))

    detailed.append(info)

  return detailed
