"""Search primitives for the sequence algorithms.

"No match" is reported as ``None`` rather than a sentinel position.
"""
from __future__ import annotations
from typing import Any, List, Optional

from seqsafe.utils.types import SupportsSequence


def elements(seq: SupportsSequence) -> List[Any]:
    """Copy a sequence into a new list using integer indexing only.

    Bounded containers never raise ``IndexError``, so iterating through the
    legacy ``__getitem__`` protocol could run forever; indexing up to
    ``len(seq)`` is always safe.
    """
    return [seq[i] for i in range(len(seq))]


def is_member(value: Any, values: SupportsSequence) -> bool:
    """Element-wise membership (``==``), also for strings of characters."""
    return any(value == values[i] for i in range(len(values)))


def find_subsequence(seq: SupportsSequence, pattern: SupportsSequence, start: int = 0) -> Optional[int]:
    """Leftmost position ``>= start`` where ``pattern`` occurs contiguously.

    Args:
        seq: Sequence to search
        pattern: Contiguous run of elements to look for
        start: First position considered

    Returns:
        Match start, ``start`` itself for an empty pattern, or None
    """
    size = len(seq)
    width = len(pattern)
    if width == 0:
        return start if start <= size else None

    first = pattern[0]
    for i in range(start, size - width + 1):
        if seq[i] == first and all(seq[i + k] == pattern[k] for k in range(1, width)):
            return i
    return None


def find_first_of(seq: SupportsSequence, values: SupportsSequence, start: int = 0) -> Optional[int]:
    """Leftmost position ``>= start`` holding any element of ``values``."""
    for i in range(start, len(seq)):
        if is_member(seq[i], values):
            return i
    return None
