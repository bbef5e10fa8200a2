"""Getter/setter-backed properties."""

from seqsafe.properties.property import Observable, Property, ReadonlyProperty

__all__ = [
    "Observable",
    "Property",
    "ReadonlyProperty",
]
