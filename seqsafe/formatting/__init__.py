"""Sequence-to-text formatting."""

from seqsafe.formatting.formatter import Formatted, format_sequence, parse_format_spec, to_string
from seqsafe.formatting.types import DEFAULT_SEPARATOR, FormatSpec
from seqsafe.strings.manipulators import chars_to_string

__all__ = [
    "DEFAULT_SEPARATOR",
    "FormatSpec",
    "Formatted",
    "chars_to_string",
    "format_sequence",
    "parse_format_spec",
    "to_string",
]
