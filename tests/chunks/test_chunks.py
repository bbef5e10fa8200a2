"""Tests for length-prefixed binary chunks."""
import io

import numpy as np
import pytest

from seqsafe.io import (
    SIZE_PREFIX,
    from_chunk,
    read_all,
    read_chunk,
    read_data,
    to_chunk,
    write_chunk,
    write_data,
)


class TestChunkConversion:
    def test_scalar_with_dtype(self):
        chunk = to_chunk(7, np.int32)
        assert len(chunk) == 4
        assert from_chunk(chunk, np.int32) == 7

    def test_numpy_scalar(self):
        chunk = to_chunk(np.float64(2.5))
        assert from_chunk(chunk, np.float64) == 2.5

    def test_bytes_pass_through(self):
        assert to_chunk(bytearray(b"ab")) == b"ab"

    def test_unknown_layout(self):
        with pytest.raises(TypeError, match="pass a dtype"):
            to_chunk(3)

    def test_size_mismatch(self):
        with pytest.raises(ValueError, match="does not match type size"):
            from_chunk(b"\x00\x00", np.int32)


class TestStreams:
    def test_chunk_layout(self):
        stream = io.BytesIO()
        write_chunk(stream, b"abc")
        raw = stream.getvalue()
        assert len(raw) == SIZE_PREFIX.itemsize + 3
        assert raw[SIZE_PREFIX.itemsize:] == b"abc"

    def test_sequential_values(self):
        stream = io.BytesIO()
        write_data(stream, 1, np.int16)
        write_data(stream, np.float32(0.5))
        write_chunk(stream, b"")
        stream.seek(0)
        assert read_data(stream, np.int16) == 1
        assert read_data(stream, np.float32) == np.float32(0.5)
        assert read_chunk(stream) == b""

    def test_truncated_prefix(self):
        with pytest.raises(ValueError, match="chunk size"):
            read_chunk(io.BytesIO(b"\x01"))

    def test_truncated_data(self):
        stream = io.BytesIO()
        write_chunk(stream, b"abcdef")
        truncated = io.BytesIO(stream.getvalue()[:-2])
        with pytest.raises(ValueError, match="chunk data"):
            read_chunk(truncated)


class TestReadAll:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("line one\nline two\n")
        assert read_all(path) == "line one\nline two\n"
        assert read_all(str(path)) == "line one\nline two\n"

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "accents.txt"
        path.write_bytes("caf\u00e9 \u2713\n".encode("utf-8"))
        assert read_all(path) == "caf\u00e9 \u2713\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(RuntimeError, match="Failed to open file"):
            read_all(tmp_path / "missing.txt")
