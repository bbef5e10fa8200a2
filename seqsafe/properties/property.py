"""
Properties: values read and written through user-supplied functions.

``ReadonlyProperty`` calls its getter on every read, so operators, comparisons
and conversions always see the current value. ``Property`` adds a setter that
in-place operators go through. ``Observable`` keeps its own value and notifies
an observer on every write.
"""
from __future__ import annotations
import logging
import operator
from typing import Any, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _unwrap(value: Any) -> Any:
    if isinstance(value, ReadonlyProperty):
        return value.get()
    return value


def _forward(op: Callable[[Any, Any], Any]) -> Callable[["ReadonlyProperty", Any], Any]:
    def method(self: "ReadonlyProperty", other: Any) -> Any:
        return op(self.get(), _unwrap(other))
    method.__name__ = f"__{op.__name__.strip('_')}__"
    return method


def _reflected(op: Callable[[Any, Any], Any]) -> Callable[["ReadonlyProperty", Any], Any]:
    def method(self: "ReadonlyProperty", other: Any) -> Any:
        return op(_unwrap(other), self.get())
    method.__name__ = f"__r{op.__name__.strip('_')}__"
    return method


def _unary(op: Callable[[Any], Any]) -> Callable[["ReadonlyProperty"], Any]:
    def method(self: "ReadonlyProperty") -> Any:
        return op(self.get())
    method.__name__ = f"__{op.__name__.strip('_')}__"
    return method


def _in_place(op: Callable[[Any, Any], Any]) -> Callable[["Property", Any], "Property"]:
    def method(self: "Property", other: Any) -> "Property":
        self.set(op(self.get(), _unwrap(other)))
        return self
    method.__name__ = f"__i{op.__name__.strip('_')}__"
    return method


class ReadonlyProperty(Generic[T]):
    """Value produced by ``getter()`` on every read.

    Attributes:
        getter: Zero-argument function returning the current value
    """

    def __init__(self, getter: Callable[[], T]):
        self.getter = getter

    def get(self) -> T:
        return self.getter()

    @property
    def value(self) -> T:
        return self.get()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.get()(*args, **kwargs)

    def __getitem__(self, key: Any) -> Any:
        return self.get()[key]

    def __bool__(self) -> bool:
        return bool(self.get())

    def __int__(self) -> int:
        return int(self.get())

    def __float__(self) -> float:
        return float(self.get())

    def __index__(self) -> int:
        return operator.index(self.get())

    def __str__(self) -> str:
        return str(self.get())

    def __format__(self, spec: str) -> str:
        return format(self.get(), spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get()!r})"

    __add__ = _forward(operator.add)
    __sub__ = _forward(operator.sub)
    __mul__ = _forward(operator.mul)
    __truediv__ = _forward(operator.truediv)
    __floordiv__ = _forward(operator.floordiv)
    __mod__ = _forward(operator.mod)
    __pow__ = _forward(operator.pow)
    __and__ = _forward(operator.and_)
    __or__ = _forward(operator.or_)
    __xor__ = _forward(operator.xor)
    __lshift__ = _forward(operator.lshift)
    __rshift__ = _forward(operator.rshift)

    __radd__ = _reflected(operator.add)
    __rsub__ = _reflected(operator.sub)
    __rmul__ = _reflected(operator.mul)
    __rtruediv__ = _reflected(operator.truediv)
    __rfloordiv__ = _reflected(operator.floordiv)
    __rmod__ = _reflected(operator.mod)
    __rpow__ = _reflected(operator.pow)
    __rand__ = _reflected(operator.and_)
    __ror__ = _reflected(operator.or_)
    __rxor__ = _reflected(operator.xor)
    __rlshift__ = _reflected(operator.lshift)
    __rrshift__ = _reflected(operator.rshift)

    __eq__ = _forward(operator.eq)
    __ne__ = _forward(operator.ne)
    __lt__ = _forward(operator.lt)
    __le__ = _forward(operator.le)
    __gt__ = _forward(operator.gt)
    __ge__ = _forward(operator.ge)
    __hash__ = None

    __neg__ = _unary(operator.neg)
    __pos__ = _unary(operator.pos)
    __invert__ = _unary(operator.invert)
    __abs__ = _unary(operator.abs)


class Property(ReadonlyProperty[T]):
    """Value read through ``getter()`` and written through ``setter(value)``.

    In-place operators compute ``getter() op other`` and hand the result to
    the setter.

    Attributes:
        setter: One-argument function storing a new value
    """

    def __init__(self, getter: Callable[[], T], setter: Callable[[T], None]):
        super().__init__(getter)
        self.setter = setter

    def set(self, value: T) -> None:
        self.setter(_unwrap(value))

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    __iadd__ = _in_place(operator.add)
    __isub__ = _in_place(operator.sub)
    __imul__ = _in_place(operator.mul)
    __itruediv__ = _in_place(operator.truediv)
    __ifloordiv__ = _in_place(operator.floordiv)
    __imod__ = _in_place(operator.mod)
    __ipow__ = _in_place(operator.pow)
    __iand__ = _in_place(operator.and_)
    __ior__ = _in_place(operator.or_)
    __ixor__ = _in_place(operator.xor)
    __ilshift__ = _in_place(operator.lshift)
    __irshift__ = _in_place(operator.rshift)


class Observable(Property[T]):
    """Property that stores its own value and calls ``observer`` after each write.

    Attributes:
        observer: One-argument function receiving every newly stored value
    """

    def __init__(self, value: Optional[T] = None, observer: Optional[Callable[[T], None]] = None):
        self._value = value
        self.observer = observer
        super().__init__(self._get_value, self._set_value)

    def _get_value(self) -> Optional[T]:
        return self._value

    def _set_value(self, value: T) -> None:
        self._value = value
        if self.observer is not None:
            logger.debug("Notifying observer %r of %r", self.observer, value)
            self.observer(value)
