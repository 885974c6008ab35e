"""
Ordered Merge
=============
Two-pointer merge of two already-sorted sequences.

Both inputs are consumed from the front: each step compares the two front
elements and moves the smaller one to the result.  On a tie the element
from the *second* sequence goes first.  Once one side runs dry the rest of
the other side is appended as-is.

Inputs that can be cleared (list, deque, dict, set, ...) are left empty
after the call.  Immutable inputs (tuple, str, range) are read but cannot
be drained.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, List, Optional, Tuple, TypeVar

from seqmerge.merge_errors import resolve_debug_mode

T = TypeVar("T")

DEBUG_MODE = resolve_debug_mode()


def merge(
    first: Iterable[T],
    second: Iterable[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """
    Merge two non-decreasing sequences into a new non-decreasing list.

    Parameters
    ----------
    first, second : iterable
        Ordered inputs.  Each must already be non-decreasing; this is not
        checked.  Unsorted inputs still yield every element, just not in
        sorted order.
    key : callable, optional
        Extracts the comparison key, same semantics as ``sorted(..., key=...)``.

    Returns
    -------
    list
        All elements of both inputs, duplicates kept.
    """
    if second is first:
        # One container passed twice: draining it as the first input
        # leaves nothing for the second.
        second = ()
    left, clear_first = _take_front_queue(first)
    right, clear_second = _take_front_queue(second)
    result: List[T] = []
    step = 0

    while left and right:
        lk = key(left[0]) if key is not None else left[0]
        rk = key(right[0]) if key is not None else right[0]
        if lk < rk:
            result.append(left.popleft())
            side = "first"
        else:
            result.append(right.popleft())
            side = "second"

        if DEBUG_MODE:
            print(f"[MERGE DEBUG] step {step}: took {result[-1]!r} from {side}")
        step += 1

    if DEBUG_MODE:
        print(f"[MERGE DEBUG] tail: {len(left)} from first, {len(right)} from second")

    result.extend(left)
    result.extend(right)
    left.clear()
    right.clear()
    # Sources are only emptied once the merge has completed, so a failing
    # comparison leaves the caller's list or dict intact.
    clear_first()
    clear_second()
    return result


def merge_all(
    sequences: Iterable[Iterable[T]],
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """
    Fold ``merge`` over any number of sorted sequences, left to right.

    Equal elements from later sequences end up ahead of those from
    earlier ones.
    """
    result: List[T] = []
    for seq in sequences:
        result = merge(result, seq, key=key)
    return result


def _take_front_queue(seq: Iterable[T]) -> Tuple[Deque[T], Callable[[], None]]:
    """
    Return a deque over *seq* and a callable that empties *seq*.
    The callable is a no-op for deques and for inputs without clear().
    """
    if isinstance(seq, deque):
        # Consumed in place; popleft drains the caller's deque directly.
        return seq, _noop

    queue: Deque[T] = deque(seq)
    clear = getattr(seq, "clear", None)
    if not callable(clear):
        clear = _noop
    return queue, clear


def _noop() -> None:
    pass
