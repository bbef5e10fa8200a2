"""Binary chunk format and file helpers."""

from seqsafe.io.chunks import (
    SIZE_PREFIX,
    from_chunk,
    read_all,
    read_chunk,
    read_data,
    to_chunk,
    write_chunk,
    write_data,
)

__all__ = [
    "SIZE_PREFIX",
    "from_chunk",
    "read_all",
    "read_chunk",
    "read_data",
    "to_chunk",
    "write_chunk",
    "write_data",
]
