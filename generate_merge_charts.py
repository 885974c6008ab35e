"""
Merge Chart Generator
=====================
Generates charts comparing the two-pointer merge against heapq.merge and
sorted(a + b) across input sizes.
Run:  python generate_merge_charts.py --repeats 5
Output: merge_charts/ folder with PNG files.
"""

import sys
import os
import argparse
import numpy as np
from typing import Dict, Any, List

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_merge import run_benchmark, METHODS

# ---------------------------------------------------------------------------
# Color Palette & Styling
# ---------------------------------------------------------------------------
COLORS = {
    "merge":  "#339AF0",   # Sky Blue
    "heapq":  "#51CF66",   # Emerald Green
    "sorted": "#FF6B6B",   # Coral Red
}
METHOD_LABELS = {"merge": "Two-pointer merge", "heapq": "heapq.merge", "sorted": "sorted(a + b)"}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "axes.titlesize": 16,
        "axes.labelsize": 13,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 11,
        "figure.dpi": 180,
        "savefig.dpi": 180,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def summarize(results: List[Dict[str, Any]]) -> Dict[str, Dict[str, np.ndarray]]:
    """
    Per method: sizes, mean time (s) and std dev, as numpy arrays ordered by size.
    """
    sizes = np.array(sorted({r["size"] for r in results}))
    summary = {}
    for method in METHODS:
        means, stds = [], []
        for size in sizes:
            times = np.array([r[f"{method}_time"] for r in results if r["size"] == size])
            means.append(times.mean())
            stds.append(times.std())
        summary[method] = {"sizes": sizes, "mean": np.array(means), "std": np.array(stds)}
    return summary


# ---------------------------------------------------------------------------
# Chart Generators
# ---------------------------------------------------------------------------
def chart_1_timing(summary, out_dir):
    """Log-log line chart: mean time vs input size."""
    fig, ax = plt.subplots(figsize=(10, 6))
    for method in METHODS:
        s = summary[method]
        ax.errorbar(s["sizes"] * 2, s["mean"] * 1000, yerr=s["std"] * 1000,
                    label=METHOD_LABELS[method], color=COLORS[method],
                    marker="o", linewidth=2, capsize=4, zorder=3)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Total elements (|a| + |b|)")
    ax.set_ylabel("Mean Time (ms)")
    ax.set_title("Merge Time vs Input Size", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    ax.grid(True, which="both", zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    path = os.path.join(out_dir, "1_timing.png")
    fig.savefig(path)
    plt.close(fig)
    print("  Chart 1: Timing vs Size")
    return path


def chart_2_per_element(summary, out_dir):
    """Grouped bars: nanoseconds per output element, per size."""
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = summary[METHODS[0]]["sizes"]
    x = np.arange(len(sizes))
    width = 0.25

    for i, method in enumerate(METHODS):
        per_elem = summary[method]["mean"] * 1e9 / (sizes * 2)
        ax.bar(x + i * width, per_elem, width, label=METHOD_LABELS[method],
               color=COLORS[method], edgecolor="none", alpha=0.9, zorder=3)

    ax.set_xticks(x + width)
    ax.set_xticklabels([f"{s} + {s}" for s in sizes], fontsize=10)
    ax.set_ylabel("ns per element")
    ax.set_title("Cost per Merged Element", fontsize=18, pad=15)
    ax.legend(loc="upper right")
    ax.grid(axis="y", zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    path = os.path.join(out_dir, "2_per_element.png")
    fig.savefig(path)
    plt.close(fig)
    print("  Chart 2: Cost per Element")
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate merge benchmark charts")
    parser.add_argument("--sizes", type=str, default="100,1000,10000,100000",
                        help="Comma-separated run lengths")
    parser.add_argument("--repeats", type=int, default=5, help="Runs per size")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--out", type=str, default="merge_charts", help="Output folder")
    args = parser.parse_args(argv)

    sizes = [int(s) for s in args.sizes.split(",") if s.strip()]
    os.makedirs(args.out, exist_ok=True)
    setup_style()

    print(f"Benchmarking sizes {sizes} x {args.repeats} ...")
    results = run_benchmark(sizes, args.repeats, args.seed)
    summary = summarize(results)

    print("Generating charts:")
    paths = [
        chart_1_timing(summary, args.out),
        chart_2_per_element(summary, args.out),
    ]
    print(f"Charts saved to {args.out}/")
    return paths


if __name__ == "__main__":
    main()
