"""
Sorted Run Generators
=====================
Reference merge scenarios plus seeded random non-decreasing runs.

The reference scenarios pin down the exact output of ``merge``, including
the tie-break: when both fronts compare equal, the element from the second
sequence is taken first.
"""

import random
from operator import itemgetter
from typing import Any, Callable, List, NamedTuple, Optional, Tuple

from seqmerge.merge_errors import resolve_seed


class MergeScenario(NamedTuple):
    name: str
    first: List[Any]
    second: List[Any]
    expected: List[Any]
    key: Optional[Callable[[Any], Any]] = None


def get_reference_scenarios() -> List[MergeScenario]:
    """Fresh copies every call, since merge() drains its inputs."""
    return [
        MergeScenario(
            "duplicates_both_sides",
            [2, 4, 6, 6, 7],
            [1, 2, 9, 11, 11, 13],
            [1, 2, 2, 4, 6, 6, 7, 9, 11, 11, 13],
        ),
        MergeScenario("interleaved", [1, 3, 5], [2, 4, 6], [1, 2, 3, 4, 5, 6]),
        MergeScenario("empty_first", [], [1, 2, 3], [1, 2, 3]),
        MergeScenario("empty_second", [4, 5, 6], [], [4, 5, 6]),
        MergeScenario("both_empty", [], [], []),
        MergeScenario("first_all_smaller", [1, 2], [3, 4], [1, 2, 3, 4]),
        MergeScenario(
            "tie_takes_second",
            [(5, "a")],
            [(5, "b")],
            [(5, "b"), (5, "a")],
            key=itemgetter(0),
        ),
    ]


def random_sorted_run(length: int, *, low: int = 0, high: int = 1000,
                      seed: Optional[int] = None) -> List[int]:
    """
    Non-decreasing list of *length* ints drawn from [low, high].
    The same seed always gives the same run.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if high < low:
        raise ValueError(f"high ({high}) must be >= low ({low})")

    rng = random.Random(resolve_seed(seed))
    run = [rng.randint(low, high) for _ in range(length)]
    run.sort()
    return run


def random_run_pair(len_a: int, len_b: int, *, low: int = 0, high: int = 1000,
                    seed: Optional[int] = None) -> Tuple[List[int], List[int]]:
    """Two independent sorted runs; the second uses seed + 1."""
    base = resolve_seed(seed)
    return (
        random_sorted_run(len_a, low=low, high=high, seed=base),
        random_sorted_run(len_b, low=low, high=high, seed=base + 1),
    )
