"""Command-line entry point for the lights flip solver.

Reads a start row and a target row (one per line) from stdin and prints the
number of flips needed, or solves every case of a JSON file in batch mode.
The step limit defaults to ``LIGHTS_STEP_LIMIT`` (1000 when unset).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from lights_solver.config import build_limits, parse_step_limit
from lights_solver.errors import LightsError
from lights_solver.explain import explain_result
from lights_solver.io_utils import load_cases, read_pair, save_results
from lights_solver.lights import Lights
from lights_solver.solver import solve
from lights_solver.types import NO_SOLUTION

NO_SOLUTION_MESSAGE = "Did not find a solution..."


def _resolve_limit(args: argparse.Namespace) -> Optional[int]:
    if args.no_limit:
        return None
    if args.limit is not None:
        return build_limits({"STEP_LIMIT": args.limit}).step_limit
    return build_limits().step_limit


def solve_case(case: Dict[str, Any], default_limit: Optional[int]) -> Dict[str, Any]:
    """Solve one batch case and return its JSON-serialisable outcome."""
    for key in ("start", "target"):
        if not isinstance(case[key], str):
            return {"error": f"{key} must be a string of 0/1 characters"}
    try:
        limit = parse_step_limit(case["limit"]) if "limit" in case else default_limit
        start = Lights.from_string(case["start"])
        target = Lights.from_string(case["target"])
    except (LightsError, ValueError) as exc:
        return {"error": str(exc)}
    result = solve(start, target, limit)
    return {"steps": result.steps, "status": result.status}


def run_batch(path: str, out_path: str, limit: Optional[int]) -> int:
    cases = load_cases(path)
    results: Dict[str, Dict[str, Any]] = {}
    for case_id, case in cases.items():
        outcome = solve_case(case, limit)
        results[case_id] = outcome
        print(f"[case {case_id}] {outcome}", file=sys.stderr)
    saved = save_results(results, out_path)
    print(f"Saved {saved} with {len(results)} cases.")
    return 0


def run_single(limit: Optional[int], explain: bool) -> int:
    start_text, target_text = read_pair(sys.stdin)
    try:
        start = Lights.from_string(start_text)
        target = Lights.from_string(target_text)
    except LightsError as exc:
        print(f"Error: cannot parse input due to {exc}")
        return 1
    result = solve(start, target, limit)
    if result.status == NO_SOLUTION:
        print(NO_SOLUTION_MESSAGE)
    else:
        print(result.steps)
    if explain:
        print(explain_result(result), file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Count the flips turning one row of lights into another")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--limit", type=int, default=None, help="Maximum number of flips")
    group.add_argument("--no-limit", action="store_true", help="Run until solved")
    parser.add_argument("--explain", action="store_true", help="Print a run summary to stderr")
    parser.add_argument("--cases", default=None, help="JSON file of cases to solve in batch")
    parser.add_argument("--out", default="results.json", help="Batch results path")
    parser.add_argument("--verbose", action="store_true", help="Log every flip")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    try:
        limit = _resolve_limit(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.cases:
        return run_batch(args.cases, args.out, limit)
    return run_single(limit, args.explain)


if __name__ == "__main__":
    sys.exit(main())
