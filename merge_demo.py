"""
Ordered Merge Demo
==================
Merge two sorted, comma-separated number lists from the command line.

Run:  python merge_demo.py 2,4,6,6,7 1,2,9,11,11,13
      python merge_demo.py --scenarios
      python merge_demo.py 1,5,3 2,4 --strict
"""

import sys
import os
import argparse
from collections import deque
from typing import List

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import seqmerge.ordered_merge as merge_mod
from seqmerge.ordered_merge import merge
from seqmerge.merge_errors import UnsortedInputError
from seqmerge.validators import require_non_decreasing, check_merge_result
from seqmerge.generators.sorted_runs import get_reference_scenarios


def parse_numbers(text: str) -> List[float]:
    """Parse "1,2,3" into numbers; ints stay ints."""
    values = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            values.append(int(part))
        except ValueError:
            values.append(float(part))
    return values


def run_scenarios() -> int:
    """Run every reference scenario; returns the number of failures."""
    failed = 0
    for sc in get_reference_scenarios():
        a_copy, b_copy = list(sc.first), list(sc.second)
        result = merge(sc.first, sc.second, key=sc.key)
        ok, reason = check_merge_result(a_copy, b_copy, result, key=sc.key)
        ok = ok and result == sc.expected
        if not ok and reason == "OK":
            reason = f"expected {sc.expected}"
        if not ok:
            failed += 1
        status = "PASS" if ok else "FAIL"
        print(f"  {sc.name:<24} {a_copy} + {b_copy} -> {result}  {status}"
              + ("" if ok else f" ({reason})"))
    return failed


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Merge two sorted sequences")
    parser.add_argument("first", nargs="?", help="Comma-separated sorted numbers")
    parser.add_argument("second", nargs="?", help="Comma-separated sorted numbers")
    parser.add_argument("--scenarios", action="store_true", help="Run the reference scenarios")
    parser.add_argument("--strict", action="store_true", help="Reject unsorted inputs")
    parser.add_argument("--container", choices=["list", "deque"], default="list",
                        help="Container used for the inputs")
    parser.add_argument("--debug", action="store_true", help="Print a per-step merge trace")

    args = parser.parse_args(argv)

    previous_debug = merge_mod.DEBUG_MODE
    if args.debug:
        merge_mod.DEBUG_MODE = True
    try:
        return _run(parser, args)
    finally:
        merge_mod.DEBUG_MODE = previous_debug


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.scenarios:
        print("Reference scenarios:")
        failed = run_scenarios()
        print(f"\n{failed} failed")
        return 1 if failed else 0

    if args.first is None or args.second is None:
        parser.error("two sequences are required unless --scenarios is given")

    try:
        a = parse_numbers(args.first)
        b = parse_numbers(args.second)
    except ValueError as e:
        print(f"Error: could not parse input: {e}")
        return 2

    try:
        if args.strict:
            require_non_decreasing(a, "first")
            require_non_decreasing(b, "second")
    except UnsortedInputError as e:
        print(f"Error: {e}")
        return 2

    if args.container == "deque":
        a, b = deque(a), deque(b)

    result = merge(a, b)
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
