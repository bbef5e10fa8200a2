"""Bounded containers and the enumerator-indexed array."""

from seqsafe.containers.access import (
    DetachedRef,
    ElementRef,
    bounded_access,
    bounded_back,
    bounded_front,
    bounded_ref,
    in_bounds,
)
from seqsafe.containers.bounded import (
    BoundedArray,
    BoundedList,
    BoundedStr,
    BoundedStrView,
    BoundedView,
)
from seqsafe.containers.enum_array import EnumIndexedArray, enum_max

__all__ = [
    "DetachedRef",
    "ElementRef",
    "bounded_access",
    "bounded_back",
    "bounded_front",
    "bounded_ref",
    "in_bounds",
    "BoundedArray",
    "BoundedList",
    "BoundedStr",
    "BoundedStrView",
    "BoundedView",
    "EnumIndexedArray",
    "enum_max",
]
