"""Tokenizing of command lines with brace-quoted arguments."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\r\n")


class ParseErrorCode(enum.Enum):
    NO_ERROR = "no error"
    UNEXPECTED_BRACE = "invalid brace"
    UNEXPECTED_EOI = "invalid end of input"


class ParseError(ValueError):
    """Raised when a command line cannot be tokenized."""

    def __init__(self, code: ParseErrorCode, offset: int) -> None:
        self.code = code
        self.offset = offset
        super().__init__(f"{code.value} at offset {offset}")

    def message(self) -> str:
        """Human-readable description of the error code."""
        return self.code.value


class _State(enum.Enum):
    BETWEEN = enum.auto()
    BARE = enum.auto()
    BRACED = enum.auto()


def tokenize(read_from: str, index0: int = 0) -> list[str]:
    """Split ``read_from`` into words.

    Words are separated by whitespace; ``{...}`` groups (which may nest)
    form a single word without the outer braces; ``#`` between words starts
    a comment. ``index0`` is added to offsets reported in errors.
    """
    words: list[str] = []
    state = _State.BETWEEN
    word_begin = 0
    depth = 0
    for pos, ch in enumerate(read_from):
        if state is _State.BETWEEN:
            if ch in _WHITESPACE:
                continue
            if ch == "#":
                return words
            if ch == "{":
                depth = 1
                state = _State.BRACED
                word_begin = pos + 1
            else:
                state = _State.BARE
                word_begin = pos
        elif state is _State.BARE:
            if ch in _WHITESPACE:
                words.append(read_from[word_begin:pos])
                state = _State.BETWEEN
            elif ch in "{}":
                raise ParseError(ParseErrorCode.UNEXPECTED_BRACE, index0 + pos)
        else:
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
            if depth == 0:
                words.append(read_from[word_begin:pos])
                state = _State.BETWEEN
    if state is _State.BARE:
        words.append(read_from[word_begin:])
    elif state is _State.BRACED:
        raise ParseError(ParseErrorCode.UNEXPECTED_EOI, index0 + len(read_from))
    return words


def _skip_whitespace(line: str, i: int) -> int:
    while i < len(line) and line[i] in _WHITESPACE:
        i += 1
    return i


@dataclass(frozen=True)
class TokenizedCommand:
    """A command path followed by its raw argument string and parsed words."""

    path: str = ""
    arg_str: str = ""
    args: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not self.path

    @classmethod
    def empty(cls) -> "TokenizedCommand":
        return cls()

    @classmethod
    def parse(cls, line: str) -> "TokenizedCommand":
        """Parse a line; blank and comment lines give an empty command.

        Raises ParseError with an offset relative to ``line``.
        """
        i = _skip_whitespace(line, 0)
        if i == len(line) or line[i] == "#":
            return cls.empty()
        path_begin = i
        while i < len(line) and line[i] not in _WHITESPACE:
            i += 1
        path = line[path_begin:i]
        i = _skip_whitespace(line, i)
        arg_str = line[i:]
        return cls(path, arg_str, tuple(tokenize(arg_str, i)))