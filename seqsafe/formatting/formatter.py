"""
Join sequence elements into text with configurable separator, prefix, suffix
and per-element format.

The format specifier mini-language is a run of single-quoted fields, each
introduced by one key letter::

    e'SEPARATOR'  p'PREFIX'  s'SUFFIX'  f'ELEMENT_FORMAT'

so ``f"{Formatted([1, 2, 3]):e' | 'f'03d'}"`` gives ``"001 | 002 | 003"``.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Any, Callable, Optional, Union

from seqsafe.algorithms.search import elements
from seqsafe.formatting.types import DEFAULT_SEPARATOR, FormatSpec
from seqsafe.utils.types import SupportsSequence

_SPEC_FIELDS = {
    "e": "separator",
    "p": "prefix",
    "s": "suffix",
    "f": "element_format",
}


def _default_quote(items: list) -> str:
    if items and all(isinstance(item, str) for item in items):
        return "'" if all(len(item) == 1 for item in items) else '"'
    return ""


def to_string(
    seq: SupportsSequence,
    converter: Optional[Callable[[Any], str]] = None,
    separator: str = DEFAULT_SEPARATOR,
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
) -> str:
    """Convert a sequence to separated text.

    Without explicit ``prefix``/``suffix``, characters are single-quoted,
    longer strings double-quoted and anything else left bare.

    Args:
        seq: Sequence to convert
        converter: Element-to-text function (``str`` by default)
        separator: Text between elements
        prefix: Text before each element
        suffix: Text after each element

    Returns:
        Joined text, empty for an empty sequence
    """
    items = elements(seq)
    quote = _default_quote(items)
    if prefix is None:
        prefix = quote
    if suffix is None:
        suffix = quote
    if converter is None:
        converter = str

    return separator.join(f"{prefix}{converter(item)}{suffix}" for item in items)


def _parse_quoted(spec: str, pos: int, key: str) -> tuple:
    if pos >= len(spec) or spec[pos] != "'":
        raise ValueError(
            f"Expected string in single quotes after '{key}' in format specifier {spec!r}"
        )
    end = spec.find("'", pos + 1)
    if end < 0:
        raise ValueError(f"Unexpected end of format specifier {spec!r}")
    return spec[pos + 1:end], end + 1


def parse_format_spec(spec: str) -> FormatSpec:
    """Parse the ``e'..'p'..'s'..'f'..'`` mini-language.

    Raises:
        ValueError: On an unknown key letter or a missing/unterminated quote
    """
    result = FormatSpec()
    pos = 0
    while pos < len(spec):
        key = spec[pos]
        if key not in _SPEC_FIELDS:
            raise ValueError(f"Invalid format specifier {key!r} for sequence in {spec!r}")
        value, pos = _parse_quoted(spec, pos + 1, key)
        result = replace(result, **{_SPEC_FIELDS[key]: value})
    return result


def format_sequence(seq: SupportsSequence, spec: Union[str, FormatSpec] = "") -> str:
    """Format every element with the spec's element format and join them."""
    if isinstance(spec, str):
        spec = parse_format_spec(spec)
    element_format = spec.element_format
    return to_string(
        seq,
        lambda item: format(item, element_format),
        spec.separator,
        spec.prefix,
        spec.suffix,
    )


class Formatted:
    """Wrap a sequence so ``format()`` and f-strings accept the sequence spec.

    Attributes:
        seq: Wrapped sequence
    """

    def __init__(self, seq: SupportsSequence):
        self.seq = seq

    def __format__(self, spec: str) -> str:
        return format_sequence(self.seq, spec)

    def __str__(self) -> str:
        return to_string(self.seq)

    def __repr__(self) -> str:
        return f"Formatted({self.seq!r})"
