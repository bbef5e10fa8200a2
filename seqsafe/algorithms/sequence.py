"""
Generic sequence algorithms: combine, filter, repeat and split.

Every function is pure. Inputs are only read, never mutated, and each call
returns a newly built list (or list of lists) that shares no storage with its
arguments. Nothing here raises for empty inputs, empty patterns or negative
repeat counts; those cases have defined results instead.
"""
from __future__ import annotations
from typing import Any, Sequence

import numpy as np

from seqsafe.algorithms.search import elements, find_first_of, find_subsequence, is_member
from seqsafe.utils.types import NestedResult, ResultSequence, SupportsSequence, is_integral, is_real


def subordinate(seq: SupportsSequence, first: int, last: int) -> ResultSequence:
    """Copy of the half-open range ``[first, last)``.

    The range is not clamped. ``0 <= first <= last <= len(seq)`` is the
    caller's responsibility and is only asserted in debug runs.

    Args:
        seq: Source sequence
        first: First index (inclusive)
        last: Last index (exclusive)

    Returns:
        New list of ``last - first`` elements
    """
    assert 0 <= first <= last <= len(seq), (
        f"Invalid range [{first}, {last}) for sequence of size {len(seq)}"
    )
    return [seq[i] for i in range(first, last)]


def combine(a: SupportsSequence, b: SupportsSequence) -> ResultSequence:
    """``a`` followed by ``b``."""
    return elements(a) + elements(b)


def combine_value(seq: SupportsSequence, value: Any) -> ResultSequence:
    """``seq`` followed by a single ``value``."""
    return combine(seq, [value])


def filter_out_seq(seq: SupportsSequence, pattern: SupportsSequence) -> ResultSequence:
    """Remove every non-overlapping occurrence of ``pattern``, left to right.

    Equivalent to splitting on ``pattern`` and joining the pieces back. An
    empty pattern never matches, so the result is a copy of ``seq``.
    """
    if len(pattern) == 0:
        return elements(seq)
    return [element for segment in split_seq(seq, pattern) for element in segment]


def filter_out_occ(seq: SupportsSequence, values: SupportsSequence) -> ResultSequence:
    """Remove every element that is a member of ``values``; order is kept."""
    return [element for element in elements(seq) if not is_member(element, values)]


def filter_out_occ_seq(seq: SupportsSequence, patterns: Sequence[SupportsSequence]) -> ResultSequence:
    """Apply ``filter_out_seq`` once per pattern, in order, feeding each result forward.

    Order matters: removing an earlier pattern can join elements into a new
    occurrence of a later one.
    """
    result = elements(seq)
    for pattern in patterns:
        result = filter_out_seq(result, pattern)
    return result


def filter_out(seq: SupportsSequence, value: Any) -> ResultSequence:
    """Remove every occurrence of a single ``value``."""
    return filter_out_seq(seq, [value])


def _repeat_whole(seq: SupportsSequence, n: int) -> ResultSequence:
    return elements(seq) * n


def _repeat_fraction(seq: SupportsSequence, n: Any) -> ResultSequence:
    # longdouble keeps as many bits as the platform offers before truncating
    count = np.longdouble(n if isinstance(n, np.floating) else float(n))
    if not np.isfinite(count):
        raise ValueError(f"Repeat count ({n}) must be finite")
    if count < 0:
        count = np.longdouble(0)

    f_part, i_part = np.modf(count)
    sub_size = int(np.floor(f_part * len(seq)))
    return _repeat_whole(seq, int(i_part)) + subordinate(seq, 0, sub_size)


def repeat(seq: SupportsSequence, n: Any) -> ResultSequence:
    """Concatenate ``n`` copies of ``seq``.

    Integral counts repeat whole copies; negative counts give an empty list.
    Fractional counts repeat ``floor(n)`` whole copies and then append the
    first ``floor(frac(n) * len(seq))`` elements, so ``[1, 2, 3, 4, 5]``
    repeated ``3.6`` times ends with ``1, 2, 3``. Truncation, not rounding.

    Args:
        seq: Sequence to repeat
        n: Repeat count, any ``numbers.Real`` (int, float, numpy scalar, Fraction)

    Returns:
        New list with the repeated elements

    Raises:
        TypeError: If ``n`` is not a real number
        ValueError: If ``n`` is NaN or infinite
    """
    if is_integral(n):
        return _repeat_whole(seq, max(int(n), 0))
    if is_real(n):
        return _repeat_fraction(seq, n)
    raise TypeError(f"Repeat count must be a real number, got {type(n).__name__}")


def split_seq(seq: SupportsSequence, pattern: SupportsSequence) -> NestedResult:
    """Split on every non-overlapping occurrence of ``pattern``.

    Matching is leftmost-first and a match consumes its length before the
    scan resumes. Segments before a leading match and after a trailing match
    are kept as empty lists. An empty ``seq`` has no segments; an empty
    pattern never matches and yields the whole sequence as one segment.

    Example:
        >>> split_seq([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [5, 6, 7])
        [[1, 2, 3, 4], [8, 9, 10]]
    """
    size = len(seq)
    if size == 0:
        return []
    if len(pattern) == 0:
        return [elements(seq)]

    result = []
    position = 0
    while True:
        found = find_subsequence(seq, pattern, position)
        if found is None:
            result.append(subordinate(seq, position, size))
            return result
        result.append(subordinate(seq, position, found))
        position = found + len(pattern)


def split_occ(seq: SupportsSequence, values: SupportsSequence) -> NestedResult:
    """Split at every element that is a member of ``values``.

    Each delimiter is a single element. Adjacent delimiters produce empty
    segments, a leading delimiter an empty first segment. A delimiter at the
    very end does not produce a trailing empty segment.

    Example:
        >>> split_occ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [4, 8])
        [[1, 2, 3], [5, 6, 7], [9, 10]]
    """
    result = []
    size = len(seq)
    position = 0
    while position != size:
        found = find_first_of(seq, values, position)
        next_position = size if found is None else found
        result.append(subordinate(seq, position, next_position))
        position = next_position
        if position != size:
            position += 1
    return result


def split_occ_seq(seq: SupportsSequence, patterns: Sequence[SupportsSequence]) -> NestedResult:
    """Split at occurrences of any of several patterns.

    At each scan position every pattern is searched and the earliest match
    wins. When two patterns match at the same position the one listed first
    wins. The matched pattern's length is skipped before scanning resumes.
    Empty patterns never match. A match ending exactly at the end of ``seq``
    does not produce a trailing empty segment.

    Example:
        >>> split_occ_seq([1, 2, 3, 3, 4, 5, 6, 7, 8, 8, 9, 10], [[3, 3], [8, 8]])
        [[1, 2], [4, 5, 6, 7], [9, 10]]
    """
    result = []
    size = len(seq)
    position = 0
    while position != size:
        next_position = size
        consumed = 0
        for pattern in patterns:
            if len(pattern) == 0:
                continue
            found = find_subsequence(seq, pattern, position)
            # Strict comparison keeps the first pattern on ties
            if found is not None and found < next_position:
                next_position = found
                consumed = len(pattern)

        result.append(subordinate(seq, position, next_position))
        position = next_position
        if position != size:
            position += consumed
    return result


def split(seq: SupportsSequence, value: Any) -> NestedResult:
    """Split on every occurrence of a single ``value``."""
    return split_seq(seq, [value])
