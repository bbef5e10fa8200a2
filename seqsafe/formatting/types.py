"""Type definitions for sequence formatting."""
from dataclasses import dataclass

DEFAULT_SEPARATOR = ", "


@dataclass(frozen=True)
class FormatSpec:
    """Parsed sequence format specifier.

    Attributes:
        separator: Text between elements (``e'...'``)
        prefix: Text before each element (``p'...'``)
        suffix: Text after each element (``s'...'``)
        element_format: ``format()`` spec applied to each element (``f'...'``)
    """
    separator: str = DEFAULT_SEPARATOR
    prefix: str = ""
    suffix: str = ""
    element_format: str = ""
