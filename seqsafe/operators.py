"""
Operator front end for the sequence algorithms.

``Seq`` is a list and ``Text`` a str; both map arithmetic operators onto the
named functions and add nothing of their own:

=========  ==========================================  ==========================
operator   ``Seq``                                     ``Text``
=========  ==========================================  ==========================
``+``      ``combine`` / ``combine_value``             concatenation
``-``      ``filter_out_seq`` / ``filter_out``         ``strings.filter_out_seq``
``*``      ``repeat``                                  ``strings.repeat``
``/``      ``split_seq`` / ``split``                   ``strings.split_seq``
=========  ==========================================  ==========================

For ``Seq`` the right operand is a pattern when it is a sequence and a single
element otherwise; strings always count as single elements there (use
``Text`` for character work). Compound assignments build a new object and
rebind the name, they never mutate the left operand in place.
"""
from __future__ import annotations
from typing import Any, List

from seqsafe import strings
from seqsafe.algorithms import sequence as seq
from seqsafe.formatting.formatter import format_sequence
from seqsafe.utils.types import is_sequence


def _is_pattern(other: Any) -> bool:
    return is_sequence(other) and not isinstance(other, (str, bytes))


class Seq(list):
    """List with ``+ - * /`` mapped onto the sequence algorithms."""

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return Seq(list.__getitem__(self, index))
        return list.__getitem__(self, index)

    def __add__(self, other: Any) -> "Seq":
        if _is_pattern(other):
            return Seq(seq.combine(self, other))
        return Seq(seq.combine_value(self, other))

    def __radd__(self, other: Any) -> "Seq":
        if _is_pattern(other):
            return Seq(seq.combine(other, self))
        return NotImplemented

    def __sub__(self, other: Any) -> "Seq":
        if _is_pattern(other):
            return Seq(seq.filter_out_seq(self, other))
        return Seq(seq.filter_out(self, other))

    def __mul__(self, n: Any) -> "Seq":
        return Seq(seq.repeat(self, n))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> List["Seq"]:
        if _is_pattern(other):
            parts = seq.split_seq(self, other)
        else:
            parts = seq.split(self, other)
        return [Seq(part) for part in parts]

    def __iadd__(self, other: Any) -> "Seq":
        return self + other

    def __isub__(self, other: Any) -> "Seq":
        return self - other

    def __imul__(self, n: Any) -> "Seq":
        return self * n

    def __format__(self, spec: str) -> str:
        return format_sequence(self, spec)

    def __repr__(self) -> str:
        return f"Seq({list.__repr__(self)})"


class Text(str):
    """String with ``- * /`` mapped onto the string manipulators."""

    def __add__(self, other: Any) -> "Text":
        if not isinstance(other, str):
            return NotImplemented
        return Text(str.__add__(self, other))

    def __radd__(self, other: Any) -> "Text":
        if not isinstance(other, str):
            return NotImplemented
        return Text(str.__add__(other, self))

    def __sub__(self, other: Any) -> "Text":
        if not isinstance(other, str):
            return NotImplemented
        return Text(strings.filter_out_seq(self, other))

    def __mul__(self, n: Any) -> "Text":
        return Text(strings.repeat(self, n))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> List["Text"]:
        if not isinstance(other, str):
            return NotImplemented
        return [Text(part) for part in strings.split_seq(self, other)]

    def __isub__(self, other: Any) -> "Text":
        return self - other

    def __imul__(self, n: Any) -> "Text":
        return self * n

    def __repr__(self) -> str:
        return f"Text({str.__repr__(self)})"
