"""Shared typing helpers."""

from seqsafe.utils.types import (
    NestedResult,
    ResultSequence,
    SupportsSequence,
    is_sequence,
)

__all__ = [
    "NestedResult",
    "ResultSequence",
    "SupportsSequence",
    "is_sequence",
]
