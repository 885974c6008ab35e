"""
Merge errors and settings.
"""

from __future__ import annotations

import os
from typing import Any

DEFAULT_SEED = 42
UNSORTED_INPUT_MESSAGE = "Input sequence is not non-decreasing."

_TRUTHY = {"1", "true", "yes", "on"}


class UnsortedInputError(ValueError):
    """
    Raised in strict mode when an input breaks the non-decreasing precondition.
    """

    def __init__(
        self,
        message: str = UNSORTED_INPUT_MESSAGE,
        *,
        index: int | None = None,
        sequence_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.sequence_name = sequence_name


def resolve_debug_mode(explicit: Any = None) -> bool:
    """
    Resolve the merge debug flag.

    Priority:
    1) explicit argument
    2) env SEQMERGE_DEBUG
    3) off
    """
    raw = explicit
    if raw is None:
        raw = os.getenv("SEQMERGE_DEBUG")
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in _TRUTHY


def resolve_seed(explicit: Any = None) -> int:
    """
    Resolve the generator seed.

    Priority:
    1) explicit argument
    2) env SEQMERGE_SEED
    3) DEFAULT_SEED
    """
    raw = explicit
    if raw is None:
        raw = os.getenv("SEQMERGE_SEED")
    if raw is None:
        return DEFAULT_SEED

    try:
        return int(raw)
    except (TypeError, ValueError):
        pass
    return DEFAULT_SEED
