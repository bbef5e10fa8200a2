"""
Bounded containers: list, fixed array, view, string and string view variants.

Indexing with an integer, ``at()``, ``front()`` and ``back()`` go through the
bounded access primitive: an invalid index reads as the default element and
a write to an invalid index is a silent no-op. Everything else behaves like
the wrapped container.
"""
from __future__ import annotations
import operator
from collections.abc import MutableSequence, Sequence
from typing import Any, Iterable, Iterator, List, Optional, TypeVar, Union

import numpy as np

from seqsafe.containers.access import (
    DetachedRef,
    ElementRef,
    bounded_access,
    bounded_back,
    bounded_front,
    bounded_ref,
    dtype_zero,
    in_bounds,
    infer_default_factory,
)
from seqsafe.utils.types import DefaultFactory, make_default

T = TypeVar("T")


class BoundedList(MutableSequence):
    """Growable list whose index access never fails.

    Attributes:
        default_factory: Zero-argument callable producing the default element.
            Inferred from the first element when not given.
    """

    def __init__(self, items: Optional[Iterable[T]] = None, *, default_factory: DefaultFactory = None):
        self._items: List[T] = list(items) if items is not None else []
        self._default_factory = default_factory
        self._scratch: DetachedRef[T] = DetachedRef(self.default)

    @property
    def default_factory(self) -> DefaultFactory:
        if self._default_factory is not None:
            return self._default_factory
        return infer_default_factory(self._items)

    def default(self) -> Optional[T]:
        """A fresh default element."""
        return make_default(self.default_factory)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return BoundedList(self._items[index], default_factory=self._default_factory)
        return bounded_access(self._items, index, self.default)

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            self._items[index] = value
        elif in_bounds(index, len(self._items)):
            self._items[index] = value

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self._items[index]

    def insert(self, index: int, value: T) -> None:
        self._items.insert(index, value)

    def append(self, value: T) -> None:
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(values)

    def pop(self, index: int = -1) -> T:
        return self._items.pop(index)

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        # The Sequence mixin probes until IndexError, which bounded access never raises
        if stop is None:
            stop = len(self._items)
        return self._items.index(value, start, stop)

    def at(self, index: int) -> Optional[T]:
        return bounded_access(self._items, index, self.default)

    def front(self) -> Optional[T]:
        return bounded_front(self._items, self.default)

    def back(self) -> Optional[T]:
        return bounded_back(self._items, self.default)

    def ref(self, index: int) -> ElementRef[T]:
        """Mutable handle to ``self[index]``; detached scratch if out of range."""
        return bounded_ref(self._items, index, self._scratch)

    def to_list(self) -> List[T]:
        return list(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"BoundedList({self._items!r})"


class BoundedArray(Sequence):
    """Fixed-size, numpy-backed array whose index access never fails.

    The default element is the zero of the array's dtype.
    """

    def __init__(self, values: Iterable[Any], dtype: Any = None):
        data = np.array(values, dtype=dtype)
        if data.ndim != 1:
            raise ValueError(f"BoundedArray expects one dimension, got {data.ndim}")
        self._data = data
        self._scratch: DetachedRef[Any] = DetachedRef(self.default)

    @classmethod
    def zeros(cls, size: int, dtype: Any = float) -> "BoundedArray":
        """Array of ``size`` default elements."""
        if size < 0:
            raise ValueError(f"size ({size}) must be non-negative")
        return cls(np.zeros(size, dtype=dtype))

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def default(self) -> Any:
        return dtype_zero(self._data.dtype)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return BoundedArray(self._data[index].copy())
        return bounded_access(self._data, index, self.default)

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            self._data[index] = value
        elif in_bounds(index, len(self._data)):
            self._data[index] = value

    def at(self, index: int) -> Any:
        return bounded_access(self._data, index, self.default)

    def front(self) -> Any:
        return bounded_front(self._data, self.default)

    def back(self) -> Any:
        return bounded_back(self._data, self.default)

    def ref(self, index: int) -> ElementRef[Any]:
        """Mutable handle to ``self[index]``; detached scratch if out of range."""
        return bounded_ref(self._data, index, self._scratch)

    def fill(self, value: Any) -> None:
        self._data.fill(value)

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        items = self._data.tolist()
        if stop is None:
            stop = len(items)
        return items.index(value, start, stop)

    def to_numpy(self) -> np.ndarray:
        """Copy of the underlying storage."""
        return self._data.copy()

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        return np.asarray(self._data, dtype=dtype)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedArray):
            return bool(np.array_equal(self._data, other._data))
        if isinstance(other, (list, tuple, np.ndarray)):
            return bool(np.array_equal(self._data, np.asarray(other)))
        return NotImplemented

    def __repr__(self) -> str:
        return f"BoundedArray({self._data.tolist()!r}, dtype={self._data.dtype})"


class BoundedView(Sequence):
    """Non-owning, read-only window ``[start, stop)`` over another sequence.

    Only reads are bounded; the view never writes to its source.
    """

    def __init__(
        self,
        source: Sequence,
        start: int = 0,
        stop: Optional[int] = None,
        *,
        default_factory: DefaultFactory = None,
    ):
        size = len(source)
        if stop is None:
            stop = size
        if not 0 <= start <= stop <= size:
            raise ValueError(
                f"View bounds [{start}, {stop}) must lie within [0, {size}]"
            )
        self._source = source
        self._start = start
        self._stop = stop
        self._default_factory = default_factory

    @property
    def source(self) -> Sequence:
        return self._source

    @property
    def default_factory(self) -> DefaultFactory:
        if self._default_factory is not None:
            return self._default_factory
        if isinstance(self._source, (str, np.ndarray)) or len(self) == 0:
            return infer_default_factory(self._source)
        return infer_default_factory([self._source[self._start]])

    def default(self) -> Any:
        return make_default(self.default_factory)

    def __len__(self) -> int:
        return self._stop - self._start

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._start, self._stop):
            yield self._source[i]

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            span = range(self._start, self._stop)[index]
            if span.step == 1:
                return self._window(span.start, max(span.start, span.stop))
            return BoundedList(
                [self._source[i] for i in span],
                default_factory=self.default_factory,
            )
        if not in_bounds(index, len(self)):
            return self.default()
        return self._source[self._start + operator.index(index)]

    def _window(self, start: int, stop: int) -> "BoundedView":
        return BoundedView(self._source, start, stop, default_factory=self._default_factory)

    def at(self, index: int) -> Any:
        return self[index]

    def front(self) -> Any:
        return self[0]

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        items = list(self)
        if stop is None:
            stop = len(items)
        return items.index(value, start, stop)

    def back(self) -> Any:
        if len(self) == 0:
            return self.default()
        return self[len(self) - 1]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (BoundedView, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class BoundedStr(str):
    """String whose single-character indexing never fails.

    Out-of-range characters read as the empty string, the default ``str``.
    Python strings are immutable, so there is no write path.
    """

    def __getitem__(self, index: Union[int, slice]) -> str:
        if isinstance(index, slice):
            return BoundedStr(str.__getitem__(self, index))
        if not in_bounds(index, len(self)):
            return ""
        return str.__getitem__(self, index)

    def at(self, index: int) -> str:
        return self[index]

    def front(self) -> str:
        return self[0]

    def back(self) -> str:
        if not self:
            return ""
        return self[len(self) - 1]

    def view(self, start: int = 0, stop: Optional[int] = None) -> "BoundedStrView":
        """Non-owning bounded view over this string."""
        return BoundedStrView(self, start, stop)

    def __repr__(self) -> str:
        return f"BoundedStr({str.__repr__(self)})"


class BoundedStrView(BoundedView):
    """Non-owning, read-only bounded window over a string."""

    def __init__(self, source: str, start: int = 0, stop: Optional[int] = None):
        if not isinstance(source, str):
            raise TypeError(f"Expected str, got {type(source).__name__}")
        super().__init__(source, start, stop, default_factory=str)

    def _window(self, start: int, stop: int) -> "BoundedStrView":
        return BoundedStrView(self._source, start, stop)

    def __str__(self) -> str:
        return str.__getitem__(self._source, slice(self._start, self._stop))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        if isinstance(other, BoundedStrView):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"BoundedStrView({str(self)!r})"
