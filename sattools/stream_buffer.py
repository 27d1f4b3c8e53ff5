"""Character stream over plain or gzip-compressed files, used to parse CNF."""

from __future__ import annotations

import gzip
import io
import os
from typing import BinaryIO

READ = "rb"
COMPRESSED_WRITE = "w"
UNCOMPRESSED_WRITE = "wT"

_GZIP_MAGIC = b"\x1f\x8b"
_CHUNK_SIZE = 1 << 16
_END = "\0"
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_INT_TERMINATORS = frozenset((_END, ",", ")"))


class StreamBuffer:
    """Reads a file one character at a time, or writes text to it.

    Reading accepts both gzip-compressed and plain files.  Writing compresses
    unless the mode contains ``T``.  The end of the input reads as ``"\\0"``.
    """

    def __init__(self, filename: str | os.PathLike[str], mode: str = READ) -> None:
        self._filename = os.fspath(filename)
        if "r" in mode:
            self._writing = False
        elif "w" in mode or "a" in mode:
            self._writing = True
        else:
            raise ValueError(f"invalid mode {mode!r}")
        try:
            self._file = self._open(mode)
        except OSError as exc:
            raise OSError(f"Cannot open file '{self._filename}'") from exc
        self._buffer = b""
        self._index = 0
        self._closed = False

    def _open(self, mode: str) -> BinaryIO:
        if self._writing:
            raw_mode = "ab" if "a" in mode else "wb"
            if "T" in mode:
                return open(self._filename, raw_mode)
            return gzip.open(self._filename, raw_mode)
        with open(self._filename, "rb") as probe:
            compressed = probe.read(len(_GZIP_MAGIC)) == _GZIP_MAGIC
        if compressed:
            return gzip.open(self._filename, "rb")
        return open(self._filename, "rb")

    def __enter__(self) -> StreamBuffer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        try:
            if self._writing:
                self._file.flush()
        finally:
            self._file.close()
            self._closed = True

    # Reading

    def _require_reading(self) -> None:
        if self._writing:
            raise io.UnsupportedOperation("stream is not open for reading")

    def _peek(self) -> int | None:
        self._require_reading()
        if self._index >= len(self._buffer):
            self._buffer = self._file.read(_CHUNK_SIZE)
            self._index = 0
        if self._index >= len(self._buffer):
            return None
        return self._buffer[self._index]

    def current(self) -> str:
        """Return the character under the cursor, or ``"\\0"`` at the end."""
        byte = self._peek()
        return _END if byte is None else chr(byte)

    def advance(self) -> None:
        """Move the cursor one character forward."""
        self._index += 1
        self._peek()

    def read_int(self) -> int:
        """Skip whitespace and read an optionally signed decimal integer."""
        self.skip_whitespaces()
        c = self.current()
        negative = c == "-"
        if c in ("-", "+"):
            self.advance()
        value = 0
        while (c := self.current()) in _DIGITS:
            value = value * 10 + int(c)
            self.advance()
        if c not in _WHITESPACE and c not in _INT_TERMINATORS:
            raise ValueError(f"Cannot read literal {value}{c}")
        return -value if negative else value

    def skip_whitespaces(self) -> None:
        while (c := self.current()) != _END and c in _WHITESPACE:
            self._index += 1

    def skip_line(self) -> None:
        """Move past the next newline, or to the end of the input."""
        while (c := self.current()) != _END and c != "\n":
            self._index += 1
        self.advance()

    # Writing

    def write(self, text: str) -> None:
        if not self._writing:
            raise io.UnsupportedOperation("stream is not open for writing")
        self._file.write(text.encode())

    def write_int(self, n: int) -> None:
        self.write(str(n))

    def flush(self) -> None:
        if not self._writing:
            raise io.UnsupportedOperation("stream is not open for writing")
        self._file.flush()