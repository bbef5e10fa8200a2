"""Default-on-out-of-range read/write primitive behind every bounded container."""
from __future__ import annotations
import operator
from functools import partial
from typing import Any, Callable, Generic, MutableSequence, Optional, TypeVar

import numpy as np

from seqsafe.utils.types import DefaultFactory, SupportsSequence, make_default

T = TypeVar("T")

# Placeholder until the scratch is first handed out
_UNSET = object()


def in_bounds(index: Any, size: int) -> bool:
    """Check whether an integer index addresses an existing element.

    Negative indices are out of range: they stand for wrapped-around unsigned
    indices, not for positions counted from the end.

    Args:
        index: Integer-like index (``int``, numpy integer, ...)
        size: Container length

    Returns:
        True if ``0 <= index < size``
    """
    return 0 <= operator.index(index) < size


def dtype_zero(dtype: Any) -> Any:
    """Zero element of a numpy dtype, also for structured dtypes."""
    return np.zeros((), dtype=dtype)[()]


def _callable_without_args(factory: Callable[[], Any]) -> bool:
    try:
        factory()
    except (TypeError, ValueError):
        return False
    return True


def infer_default_factory(items: Any) -> DefaultFactory:
    """Guess the zero-argument factory for the element type of ``items``.

    Strings yield ``str``, numpy arrays their dtype's scalar type (or the
    dtype's zero record for structured dtypes), other non-empty sequences the
    type of their first element. Types that cannot be built without
    arguments (enum members, dates, most user classes) and empty sequences
    yield ``None``.
    """
    if isinstance(items, str):
        return str
    if isinstance(items, np.ndarray):
        dtype = items.dtype
        if _callable_without_args(dtype.type):
            return dtype.type
        return partial(dtype_zero, dtype)
    if len(items) > 0:
        element_type = type(items[0])
        if _callable_without_args(element_type):
            return element_type
    return None


def bounded_access(
    container: SupportsSequence[T],
    index: int,
    default_factory: DefaultFactory = None,
) -> Optional[T]:
    """Return the element at ``index``, or a fresh default if the index is invalid.

    Args:
        container: Any sequence
        index: Index of the element
        default_factory: Zero-argument callable producing the default element

    Returns:
        ``container[index]`` when in range, else ``default_factory()``
    """
    if not in_bounds(index, len(container)):
        return make_default(default_factory)
    return container[index]


def bounded_front(container: SupportsSequence[T], default_factory: DefaultFactory = None) -> Optional[T]:
    """First element or default."""
    return bounded_access(container, 0, default_factory)


def bounded_back(container: SupportsSequence[T], default_factory: DefaultFactory = None) -> Optional[T]:
    """Last element or default.

    An empty container has no last index, so it is answered directly instead
    of computing ``len - 1``.
    """
    size = len(container)
    if size == 0:
        return make_default(default_factory)
    return container[size - 1]


class ElementRef(Generic[T]):
    """Mutable handle to one slot of a container."""

    __slots__ = ("_container", "_index")

    def __init__(self, container: MutableSequence[T], index: int):
        self._container = container
        self._index = index

    @property
    def detached(self) -> bool:
        """Whether writes are dropped instead of reaching a container."""
        return False

    def get(self) -> T:
        return self._container[self._index]

    def set(self, value: T) -> None:
        self._container[self._index] = value

    value = property(get, set)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index}, value={self.get()!r})"


class DetachedRef(ElementRef[T]):
    """Scratch handle handed out for invalid indices.

    Each container owns one. The default element is only built when the
    scratch is first used, and it is reset to the default element every time it
    is handed out, so a write through it is never visible afterwards and never
    touches the container's storage.
    """

    __slots__ = ("_default_factory", "_value")

    def __init__(self, default_factory: Callable[[], Any]):
        self._default_factory = default_factory
        self._value = _UNSET

    @property
    def detached(self) -> bool:
        return True

    def reset(self) -> "DetachedRef[T]":
        self._value = make_default(self._default_factory)
        return self

    def get(self) -> T:
        if self._value is _UNSET:
            self.reset()
        return self._value

    def set(self, value: T) -> None:
        self._value = value

    value = property(get, set)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.get()!r})"


def bounded_ref(
    container: MutableSequence[T],
    index: int,
    scratch: DetachedRef[T],
) -> ElementRef[T]:
    """Mutable handle for ``container[index]``, or the freshly reset scratch.

    Args:
        container: Mutable sequence holding the elements
        index: Index of the element
        scratch: Detached handle owned by the calling container

    Returns:
        A live ``ElementRef`` for valid indices, ``scratch.reset()`` otherwise
    """
    if not in_bounds(index, len(container)):
        return scratch.reset()
    return ElementRef(container, operator.index(index))
