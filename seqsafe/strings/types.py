"""Type definitions for string manipulators."""
from dataclasses import dataclass

DEFAULT_DELIMS = " \t\r\n\f\v\b"


@dataclass(frozen=True)
class WrapConfig:
    """Configuration for word wrapping.

    Attributes:
        width: Target line width in characters
        force: Cut words longer than ``width`` instead of keeping them whole
        delims: Characters a line may be broken at (consumed by the break)
    """
    width: int = 80
    force: bool = False
    delims: str = DEFAULT_DELIMS

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.width < 0:
            raise ValueError(f"width ({self.width}) must be non-negative")
        if not self.delims:
            raise ValueError("delims must not be empty")
