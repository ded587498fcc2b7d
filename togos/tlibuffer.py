"""Text line input buffer: gathers characters until end of line."""

from __future__ import annotations

import enum

DEFAULT_BUFFER_SIZE = 1024


class BufferState(enum.Enum):
    READING = enum.auto()
    READY = enum.auto()
    OVERFLOWED = enum.auto()


class TLIBuffer:
    """Buffers characters until a carriage return or newline is read.

    Once a line is READY it should be taken and ``reset()`` called before
    more characters are fed.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._capacity = buffer_size - 1
        self._chars: list[str] = []
        self.state = BufferState.READING

    def reset(self) -> None:
        """Clear the buffer and get ready to read a new line."""
        self._chars.clear()
        self.state = BufferState.READING

    def _add_char(self, c: str) -> bool:
        if self.state is BufferState.READY or len(self._chars) >= self._capacity:
            return False
        self._chars.append(c)
        return True

    def on_char(self, c: str) -> BufferState:
        """Process the next character and return the new state."""
        if self.state is BufferState.READY:
            self._chars.clear()
        if c in ("\n", "\r"):
            self.state = BufferState.READY
        elif self._add_char(c):
            self.state = BufferState.READING
        else:
            self.state = BufferState.OVERFLOWED
        return self.state

    def contents(self) -> str:
        """The characters buffered so far."""
        return "".join(self._chars)