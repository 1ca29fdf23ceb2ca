#!/usr/bin/env python3
"""
Backend comparison: compiled kernel vs per-attempt tree evaluation

Solves one puzzle with each backend and checks that both report the same
attempt count and the same solutions.
"""
import time
import argparse
from countdown_numbers import NumbersSolver, SolveMode, LogLevel, configure_logging
from countdown_numbers.expression_tree import get_global_shape_cache


def run_backend(backend: str, target: int, numbers, mode: SolveMode, max_operators=None) -> dict:
    solver = NumbersSolver(mode=mode, backend=backend, max_operators=max_operators, console_log=False)
    start = time.time()
    result = solver.solve(target, numbers)
    elapsed = time.time() - start
    return dict(backend=backend, attempts=result.attempts, time=elapsed,
                expressions=result.expressions(),
                best=result.best.to_string() if result.best is not None else None)


def main():
    parser = argparse.ArgumentParser(description="Compiled vs tree backend benchmark")
    parser.add_argument("--target", type=int, default=500, help="Target number")
    parser.add_argument("--numbers", type=int, nargs="+", default=[10, 5, 1, 2, 3, 4],
                        help="Numbers to combine")
    parser.add_argument("--mode", choices=["f", "a", "i"], default="f",
                        help="f: first solution, a: all solutions, i: most intuitive")
    parser.add_argument("--max-operators", type=int, default=None,
                        help="Largest tree size to search (defaults to len(numbers) - 1)")
    parser.add_argument("--backends", nargs="+", default=["compiled", "tree"],
                        choices=["compiled", "tree"])
    parser.add_argument("--verbose", action="store_true", help="Log search progress")
    args = parser.parse_args()

    configure_logging(LogLevel.MODERATE if args.verbose else LogLevel.SILENT)
    mode = SolveMode.from_response_code(args.mode)

    # Warm up the numba kernel so compile time stays out of the timings
    if "compiled" in args.backends:
        NumbersSolver(mode=SolveMode.FIRST, console_log=False).solve(3, [1, 2])

    print(f"Target {args.target} from {args.numbers} (mode: {mode.name.lower()})")

    results = []
    for backend in args.backends:
        print(f"\n=== Backend: {backend} ===")
        res = run_backend(backend, args.target, args.numbers, mode, args.max_operators)
        print(f"attempts: {res['attempts']:,}, solutions: {len(res['expressions'])}, time: {res['time']:.2f}s")
        if res['best']:
            print("Best:", res['best'])
        results.append(res)

    print("\nSummary:")
    for r in results:
        rate = r['attempts'] / r['time'] if r['time'] > 0 else float('inf')
        print(f"  {r['backend']:<9} attempts={r['attempts']:,}  time={r['time']:.2f}s  "
              f"rate={rate:,.0f}/s")

    if len(results) > 1:
        agree = all(r['attempts'] == results[0]['attempts'] and
                    r['expressions'] == results[0]['expressions'] for r in results)
        print(f"  backends agree: {agree}")

    print(f"  shape cache: {get_global_shape_cache().get_stats()}")


if __name__ == "__main__":
    main()
