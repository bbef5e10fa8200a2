"""
Typed aliases and protocols shared across modules.

Every algorithm in this package works on anything that satisfies
``SupportsSequence``: a finite, random-access container with a known length.
Lists, tuples, strings, ranges, 1-D numpy arrays and the bounded containers
all qualify.
"""
from __future__ import annotations
import numbers
from typing import Any, Callable, List, Optional, Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

ResultSequence = List[T]
"""Owned output of every sequence algorithm."""

NestedResult = List[List[T]]
"""Owned output of every split algorithm."""

DefaultFactory = Optional[Callable[[], Any]]


@runtime_checkable
class SupportsSequence(Protocol[T_co]):
    """Finite, ordered, random-access collection of elements."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> T_co: ...


def is_sequence(obj: Any) -> bool:
    """True if ``obj`` can be used as a sequence argument (pattern or values).

    Strings count as sequences of characters. Zero-dimensional numpy arrays
    do not, since they hold a single value.
    """
    if isinstance(obj, np.ndarray):
        return obj.ndim > 0
    return isinstance(obj, SupportsSequence)


def is_integral(n: Any) -> bool:
    """Integral repeat counts (``int``, ``bool``, numpy integers)."""
    return isinstance(n, numbers.Integral)


def is_real(n: Any) -> bool:
    """Real repeat counts (``float``, ``Fraction``, numpy floats, integers)."""
    return isinstance(n, numbers.Real)


def make_default(default_factory: DefaultFactory) -> Any:
    """Produce a fresh default element from a factory (``None`` if absent)."""
    if default_factory is None:
        return None
    return default_factory()
