import sys
import os
import time
import csv
import heapq
import argparse
from typing import Dict, Any, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from seqmerge.ordered_merge import merge
from seqmerge.validators import check_merge_result
from seqmerge.generators.sorted_runs import random_run_pair

METHODS = ["merge", "heapq", "sorted"]


def _run_method(method: str, a: List[int], b: List[int]) -> List[int]:
    if method == "merge":
        return merge(a, b)
    if method == "heapq":
        return list(heapq.merge(a, b))
    if method == "sorted":
        return sorted(a + b)
    raise ValueError(f"Unknown method: {method}")


def run_single_trial(size: int, seed: int) -> Dict[str, Any]:
    """
    Times every method on the same random pair of sorted runs of *size*
    elements each, and verifies each result.
    """
    base_a, base_b = random_run_pair(size, size, seed=seed)

    result = {"size": size, "seed": seed}

    for method in METHODS:
        # merge() drains its inputs, so every method gets fresh copies
        a, b = list(base_a), list(base_b)
        start_time = time.perf_counter()
        ok = False
        try:
            merged = _run_method(method, a, b)
            elapsed = time.perf_counter() - start_time
            ok, reason = check_merge_result(base_a, base_b, merged)
            if not ok:
                print(f"Invalid result from {method} at size {size}: {reason}")
        except Exception as e:
            elapsed = time.perf_counter() - start_time
            print(f"Error in trial size={size} seed={seed} with {method}: {e}")

        result[f"{method}_ok"] = ok
        result[f"{method}_time"] = elapsed

    return result


def run_benchmark(sizes: List[int], repeats: int, seed: int) -> List[Dict[str, Any]]:
    results = []
    total = len(sizes) * repeats
    done = 0
    for size in sizes:
        for r in range(repeats):
            done += 1
            print(f"  [{done}/{total}] size {size} run {r+1}/{repeats} ...", end="\r")
            results.append(run_single_trial(size, seed + r))
    print()
    return results


def print_summary(results: List[Dict[str, Any]]) -> None:
    print("\nSummary Statistics:")
    print(f"{'Method':<8} | {'Size':>8} | {'Valid':<7} | {'Avg Time (ms)':<13}")
    print("-" * 46)

    sizes = sorted({r["size"] for r in results})
    for method in METHODS:
        for size in sizes:
            rows = [r for r in results if r["size"] == size]
            valid = sum(1 for r in rows if r[f"{method}_ok"])
            avg_ms = 1000 * sum(r[f"{method}_time"] for r in rows) / len(rows)
            print(f"{method:<8} | {size:>8} | {valid}/{len(rows):<5} | {avg_ms:<13.3f}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark ordered merge")
    parser.add_argument("--sizes", type=str, default="100,1000,10000,100000",
                        help="Comma-separated run lengths")
    parser.add_argument("--repeats", type=int, default=5, help="Runs per size")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--output", type=str, default="merge_benchmark.csv", help="Output CSV file")

    args = parser.parse_args(argv)
    sizes = [int(s) for s in args.sizes.split(",") if s.strip()]

    print(f"Starting Benchmark: sizes {sizes}, {args.repeats} repeats, seed {args.seed}")
    results = run_benchmark(sizes, args.repeats, args.seed)
    print("Benchmark Complete!")

    if not results:
        print("No results.")
        return results

    keys = results[0].keys()
    with open(args.output, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)

    print(f"Results saved to {args.output}")
    print_summary(results)
    return results


if __name__ == "__main__":
    main()
