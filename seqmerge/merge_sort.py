"""
Merge Sort
==========
Stable top-down merge sort whose merge step is ``ordered_merge.merge``.

``merge`` takes from its second argument on ties, so the halves are passed
right-then-left: equal elements from the left half come out first and the
sort stays stable.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, TypeVar

from seqmerge.ordered_merge import merge

T = TypeVar("T")


def merge_sort(
    seq: Iterable[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """
    Return a new list containing items from *seq* in ascending order.

    Parameters
    ----------
    seq : iterable
        Input items (list, tuple, set, dict_keys, …).
    key : callable, optional
        One-argument function used to extract a comparison key from each
        element, identical semantics to ``sorted(…, key=…)``.

    Returns
    -------
    list
        A fresh sorted list.  The original *seq* is never mutated.
    """
    items: List[T] = list(seq)
    n = len(items)
    if n <= 1:
        return items

    mid = n // 2
    left = merge_sort(items[:mid], key=key)
    right = merge_sort(items[mid:], key=key)
    return merge(right, left, key=key)
