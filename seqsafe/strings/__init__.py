"""String manipulators built on the sequence algorithms."""

from seqsafe.strings.manipulators import (
    chars_to_string,
    filter_out,
    filter_out_occ,
    filter_out_occ_seq,
    filter_out_seq,
    is_equal_ins,
    repeat,
    split,
    split_occ,
    split_occ_seq,
    split_seq,
    to_lower,
    to_upper,
    trim,
    trim_left,
    trim_right,
    word_wrap,
    wrap_with,
)
from seqsafe.strings.types import DEFAULT_DELIMS, WrapConfig

__all__ = [
    "DEFAULT_DELIMS",
    "WrapConfig",
    "chars_to_string",
    "filter_out",
    "filter_out_occ",
    "filter_out_occ_seq",
    "filter_out_seq",
    "is_equal_ins",
    "repeat",
    "split",
    "split_occ",
    "split_occ_seq",
    "split_seq",
    "to_lower",
    "to_upper",
    "trim",
    "trim_left",
    "trim_right",
    "word_wrap",
    "wrap_with",
]
