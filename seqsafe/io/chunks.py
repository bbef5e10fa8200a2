"""
Length-prefixed binary chunks.

A chunk is a run of raw bytes. On a stream it is stored as its length, a
native ``size_t`` in native byte order, followed by the bytes themselves.
Values are converted to and from chunks through numpy dtypes, which stand for
fixed-size, trivially copyable types.

Note:
    Like the native layout it mirrors, the format records no byte order, so
    files are only portable between machines of the same endianness.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

import numpy as np

logger = logging.getLogger(__name__)

SIZE_PREFIX = np.dtype(np.uintp)
"""Length prefix type (native ``size_t``)."""


def to_chunk(value: Any, dtype: Optional[Any] = None) -> bytes:
    """Raw bytes of a fixed-size value.

    Args:
        value: numpy scalar or array, bytes-like object, or a Python scalar
            together with ``dtype``
        dtype: numpy dtype to encode ``value`` as

    Returns:
        Chunk holding exactly the value's bytes

    Raises:
        TypeError: If the value's layout cannot be determined
    """
    if dtype is not None:
        return np.asarray(value, dtype=dtype).tobytes()
    if isinstance(value, (np.generic, np.ndarray)):
        return value.tobytes()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"Cannot determine binary layout of {type(value).__name__}; pass a dtype"
    )


def from_chunk(chunk: bytes, dtype: Any) -> Any:
    """Decode one value of ``dtype`` from a chunk.

    Raises:
        ValueError: If the chunk size differs from the dtype's item size
    """
    dtype = np.dtype(dtype)
    if len(chunk) != dtype.itemsize:
        raise ValueError(
            f"Chunk size ({len(chunk)}) does not match type size ({dtype.itemsize})"
        )
    return np.frombuffer(chunk, dtype=dtype)[0]


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError(
            f"Unexpected end of stream while reading {what}: expected {size} bytes, got {len(data)}"
        )
    return data


def read_chunk(stream: BinaryIO) -> bytes:
    """Read one length-prefixed chunk from a binary stream.

    Raises:
        ValueError: If the stream ends before the chunk is complete
    """
    raw_size = _read_exact(stream, SIZE_PREFIX.itemsize, "chunk size")
    size = int(np.frombuffer(raw_size, dtype=SIZE_PREFIX)[0])
    chunk = _read_exact(stream, size, "chunk data")
    logger.debug("Read chunk of %d bytes", size)
    return chunk


def write_chunk(stream: BinaryIO, chunk: bytes) -> None:
    """Write one chunk with its length prefix."""
    stream.write(np.array(len(chunk), dtype=SIZE_PREFIX).tobytes())
    stream.write(chunk)
    logger.debug("Wrote chunk of %d bytes", len(chunk))


def read_data(stream: BinaryIO, dtype: Any) -> Any:
    """Read a chunk and decode it as ``dtype``."""
    return from_chunk(read_chunk(stream), dtype)


def write_data(stream: BinaryIO, value: Any, dtype: Optional[Any] = None) -> None:
    """Encode ``value`` as a chunk and write it."""
    write_chunk(stream, to_chunk(value, dtype))


def read_all(path: Union[str, Path]) -> str:
    """Whole contents of a text file.

    Raises:
        RuntimeError: If the file cannot be opened
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to open file {path}") from exc
