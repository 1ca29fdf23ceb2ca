import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from countdown_numbers import (
  NumbersSolver, SolveMode, LogLevel, configure_logging,
  format_report, get_detailed_solutions,
  InvalidInputError, validate_target, validate_numbers
)

PUZZLES = [
  (500, [10, 5, 1, 2, 3, 4], SolveMode.FIRST),
  (712, [25, 50, 3, 1, 6, 7], SolveMode.ALL),
  (719, [50, 100, 2, 7, 4, 3], SolveMode.MOST_INTUITIVE),
  (824, [3, 7, 6, 2, 1, 7], SolveMode.FIRST),
]


def solve_puzzle(target, numbers, mode):
  """Solve one round and print its report"""
  target = validate_target(target)
  numbers = validate_numbers(numbers)

  solver = NumbersSolver(mode=mode, console_log=False)
  result = solver.solve(target, numbers)

  for line in format_report(result):
    print(line)

  if mode is not SolveMode.FIRST and result.solved:
    print("\nSolution details:")
    for info in get_detailed_solutions(result, sympy_verify=True):
      print(f"  #{info['discovery_index'] + 1} {info['expression']} "
            f"score={info['intuition_score']} depth={info['depth']} "
            f"attempt={info['attempt']:,} verified={info['verified']}")
  return result


def interactive_round():
  """Ask for a round on stdin, the way the show's contestants pick it"""
  try:
    target = validate_target(input("Target (0-999): "))
    numbers = validate_numbers(input("Six numbers, space separated: ").split())
  except InvalidInputError as e:
    print(f"Invalid round: {e}")
    return None

  mode = SolveMode.from_response_code(
    input("First solution (f), all solutions (a) or most intuitive (i)? ").strip().lower())
  if mode is None:
    print("Unknown response, expected f, a or i")
    return None
  return solve_puzzle(target, numbers, mode)


def main():
  configure_logging(LogLevel.SILENT)

  if "--interactive" in sys.argv:
    interactive_round()
    return

  for target, numbers, mode in PUZZLES:
    print(f"\n{'='*60}")
    print(f"Target {target} from {', '.join(map(str, numbers))} ({mode.name.lower()})")
    print(f"{'='*60}")
    solve_puzzle(target, numbers, mode)


if __name__ == "__main__":
  main()
