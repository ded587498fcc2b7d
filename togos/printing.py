"""Byte-oriented output sinks with a stream-style ``<<`` operator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Print(ABC):
    """A sink that accepts bytes one at a time and renders values as text."""

    @abstractmethod
    def write(self, byte: int) -> int:
        """Write one byte; return 1 if it was accepted, 0 otherwise."""

    def write_bytes(self, data: bytes) -> int:
        """Write bytes until one is refused; return how many were accepted."""
        written = 0
        for byte in data:
            if not self.write(byte):
                break
            written += 1
        return written

    def print(self, thing: Any) -> int:
        """Render ``thing`` as text and write it; return bytes written."""
        if isinstance(thing, (bytes, bytearray, memoryview)):
            return self.write_bytes(bytes(thing))
        print_to = getattr(thing, "print_to", None)
        if callable(print_to):
            return print_to(self)
        if isinstance(thing, bool):
            text = str(int(thing))
        elif isinstance(thing, float):
            text = f"{thing:.2f}"
        else:
            text = str(thing)
        return self.write_bytes(text.encode("utf-8"))

    def __lshift__(self, thing: Any) -> "Print":
        self.print(thing)
        return self

    def available_for_write(self) -> int:
        """Number of bytes that can be written without blocking."""
        return 0


class BufferPrint(Print):
    """A Print that collects output into a fixed-size buffer."""

    def __init__(self, buffer_size: int) -> None:
        if buffer_size < 0:
            raise ValueError("buffer_size must not be negative")
        self._buffer = bytearray(buffer_size)
        self._buffer_size = buffer_size
        self._end = 0

    def clear(self) -> None:
        """Discard everything written so far."""
        self._end = 0

    def write(self, byte: int) -> int:
        # Single-byte writes always leave room for a terminator.
        if self._end < self._buffer_size - 1:
            self._buffer[self._end] = byte
            self._end += 1
            return 1
        return 0

    def write_bytes(self, data: bytes) -> int:
        chunk = bytes(data)[: self._buffer_size - self._end]
        self._buffer[self._end : self._end + len(chunk)] = chunk
        self._end += len(chunk)
        return len(chunk)

    def available_for_write(self) -> int:
        return self._buffer_size - self._end

    def size(self) -> int:
        """Number of bytes currently held."""
        return self._end

    def __len__(self) -> int:
        return self._end

    def getvalue(self) -> bytes:
        """The bytes written so far."""
        return bytes(self._buffer[: self._end])

    def c_str(self) -> bytes | None:
        """Nul-terminate the buffer in place and return it as a C string.

        Returns None when the buffer has no room for a terminator at all.
        """
        if self._buffer_size == 0:
            return None
        terminator = min(self._end, self._buffer_size - 1)
        self._buffer[terminator] = 0
        return bytes(self._buffer[:terminator]).split(b"\0", 1)[0]