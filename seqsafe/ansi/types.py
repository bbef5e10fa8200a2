"""Type definitions for ANSI escape codes."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Aec:
    """An escape code as a pair of setter and resetter sequences.

    Calling it with text wraps the text in both; calling it without
    arguments, ``str()`` and ``format()`` give the setter alone, and ``~``
    gives the resetter. ``+``, ``*``, ``&`` and ``|`` all combine two codes.

    Attributes:
        setter: Sequence written before the styled text
        resetter: Sequence written after it (empty for one-shot commands)
    """
    setter: str
    resetter: str = ""

    def __call__(self, text: Optional[str] = None) -> str:
        if text is None:
            return self.setter
        return f"{self.setter}{text}{self.resetter}"

    def __invert__(self) -> str:
        return self.resetter

    def __str__(self) -> str:
        return self.setter

    def __format__(self, spec: str) -> str:
        return format(self.setter, spec)

    def combine(self, other: "Aec") -> "Aec":
        """Apply ``self`` and ``other`` together; both resetters run afterwards."""
        if not isinstance(other, Aec):
            raise TypeError(f"Expected Aec, got {type(other).__name__}")
        return Aec(self.setter + other.setter, self.resetter + other.resetter)

    def _combine_operator(self, other: object) -> "Aec":
        if not isinstance(other, Aec):
            return NotImplemented
        return self.combine(other)

    __add__ = _combine_operator
    __mul__ = _combine_operator
    __and__ = _combine_operator
    __or__ = _combine_operator


def combine(a: Aec, b: Aec) -> Aec:
    """Combined escape code of ``a`` followed by ``b``."""
    return a.combine(b)
