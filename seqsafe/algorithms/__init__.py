"""Sequence algorithms over any random-access sequence."""

from seqsafe.algorithms.search import find_first_of, find_subsequence
from seqsafe.algorithms.sequence import (
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

__all__ = [
    "find_first_of",
    "find_subsequence",
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
]
