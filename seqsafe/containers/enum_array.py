"""Fixed-size array addressed by enumerator members instead of integers."""
from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

MAX_MEMBER = "max"


def enum_max(enum_type: Type[Enum]) -> int:
    """Integer value of the enumerator's ``max`` member, i.e. the array length.

    Args:
        enum_type: Enumerator class

    Returns:
        ``int(enum_type.max.value)``

    Raises:
        TypeError: If ``enum_type`` is not an Enum with integer values and a
            ``max`` member holding the largest value
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise TypeError(f"Expected an Enum class, got {enum_type!r}")

    members = enum_type.__members__
    if MAX_MEMBER not in members:
        logger.debug("Rejected %s: no '%s' member", enum_type.__name__, MAX_MEMBER)
        raise TypeError(f"Enum {enum_type.__name__} must define a '{MAX_MEMBER}' member")

    values = [member.value for member in members.values()]
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        raise TypeError(f"Enum {enum_type.__name__} must have integer values")

    size = members[MAX_MEMBER].value
    if size != max(values):
        logger.debug("Rejected %s: '%s' is %d, largest value is %d",
                     enum_type.__name__, MAX_MEMBER, size, max(values))
        raise TypeError(
            f"Enum {enum_type.__name__} member '{MAX_MEMBER}' ({size}) must be the largest value"
        )
    return size


class EnumIndexedArray(Generic[E, T]):
    """Array of ``enum_max(enum_type)`` elements indexed by enumerator members.

    Unlike the bounded containers, invalid positions are ordinary bounds
    violations and raise ``IndexError``.

    Attributes:
        enum_type: Enumerator class used as index type
    """

    def __init__(self, enum_type: Type[E], values: Optional[Iterable[T]] = None, *, fill: Any = None):
        size = enum_max(enum_type)
        self.enum_type = enum_type

        if values is None:
            self._data: List[T] = [fill] * size
        else:
            self._data = list(values)
            if len(self._data) != size:
                raise ValueError(
                    f"{enum_type.__name__} array needs {size} values, got {len(self._data)}"
                )

    def _position(self, e: E) -> int:
        if not isinstance(e, self.enum_type):
            raise TypeError(
                f"Index must be a {self.enum_type.__name__} member, got {type(e).__name__}"
            )
        position = e.value
        if not 0 <= position < len(self._data):
            raise IndexError(f"{e!r} is out of range for array of size {len(self._data)}")
        return position

    def __getitem__(self, e: E) -> T:
        return self._data[self._position(e)]

    def __setitem__(self, e: E, value: T) -> None:
        self._data[self._position(e)] = value

    def at(self, e: E) -> T:
        return self[e]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def items(self) -> Iterator[Tuple[E, T]]:
        """(member, value) pairs in declaration order, ``max`` excluded."""
        for member in self.enum_type:
            if member.name != MAX_MEMBER and 0 <= member.value < len(self._data):
                yield member, self._data[member.value]

    def to_list(self) -> List[T]:
        return list(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EnumIndexedArray):
            return self.enum_type is other.enum_type and self._data == other._data
        if isinstance(other, (list, tuple)):
            return self._data == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"EnumIndexedArray({self.enum_type.__name__}, {self._data!r})"
