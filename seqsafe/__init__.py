"""Bounds-safe containers and generic sequence algorithms."""

from seqsafe.algorithms import (
    combine,
    combine_value,
    filter_out,
    filter_out_occ,
    filter_out_occ_seq,
    filter_out_seq,
    repeat,
    split,
    split_occ,
    split_occ_seq,
    split_seq,
    subordinate,
)
from seqsafe.containers import (
    BoundedArray,
    BoundedList,
    BoundedStr,
    BoundedStrView,
    BoundedView,
    EnumIndexedArray,
    bounded_access,
)
from seqsafe.operators import Seq, Text

__version__ = "0.1.0"

__all__ = [
    "combine",
    "combine_value",
    "filter_out",
    "filter_out_occ",
    "filter_out_occ_seq",
    "filter_out_seq",
    "repeat",
    "split",
    "split_occ",
    "split_occ_seq",
    "split_seq",
    "subordinate",
    "BoundedArray",
    "BoundedList",
    "BoundedStr",
    "BoundedStrView",
    "BoundedView",
    "EnumIndexedArray",
    "bounded_access",
    "Seq",
    "Text",
]
