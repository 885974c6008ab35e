"""
Merge Validators
================
Checks for the non-decreasing precondition and for merge results.
"""

from collections import Counter
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

from seqmerge.merge_errors import UnsortedInputError


def first_inversion(seq: Sequence, key: Optional[Callable[[Any], Any]] = None) -> Optional[int]:
    """
    Index i of the first adjacent pair where seq[i + 1] < seq[i].
    Returns None when the sequence is non-decreasing.
    """
    items = list(seq)
    keys = [key(x) for x in items] if key is not None else items
    for i in range(len(keys) - 1):
        if keys[i + 1] < keys[i]:
            return i
    return None


def is_non_decreasing(seq: Sequence, key: Optional[Callable[[Any], Any]] = None) -> bool:
    return first_inversion(seq, key) is None


def require_non_decreasing(seq: Iterable, name: str = "sequence",
                           key: Optional[Callable[[Any], Any]] = None) -> None:
    """Raise UnsortedInputError at the first out-of-order pair in *seq*."""
    items = list(seq)
    idx = first_inversion(items, key)
    if idx is not None:
        raise UnsortedInputError(
            f"{name} is not non-decreasing at index {idx}: "
            f"{items[idx]!r} is followed by {items[idx + 1]!r}",
            index=idx,
            sequence_name=name,
        )


def check_merge_result(a: Sequence, b: Sequence, result: Sequence,
                       key: Optional[Callable[[Any], Any]] = None) -> Tuple[bool, str]:
    """
    Check that *result* is a valid merge of *a* and *b*.
    Pass copies of the inputs: merge() drains the originals.
    Returns: (bool, reason)
    """
    a, b, result = list(a), list(b), list(result)

    if len(result) != len(a) + len(b):
        return False, f"Length mismatch: {len(result)} != {len(a)} + {len(b)}"

    if not _same_multiset(a + b, result):
        return False, "Elements differ from the union of the inputs"

    idx = first_inversion(result, key)
    if idx is not None:
        return False, f"Result out of order at index {idx}"

    return True, "OK"


def _same_multiset(expected: list, actual: list) -> bool:
    try:
        return Counter(expected) == Counter(actual)
    except TypeError:
        # Unhashable elements
        pass
    try:
        return sorted(expected) == sorted(actual)
    except TypeError:
        remaining = list(actual)
        for item in expected:
            if item not in remaining:
                return False
            remaining.remove(item)
        return not remaining
