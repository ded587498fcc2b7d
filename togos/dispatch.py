"""Command results and a dispatcher that tries handlers in order."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from togos.parsing import TokenizedCommand


class CommandSource(enum.Enum):
    """Where a command came from."""

    CEREAL = 0x01
    MQTT = 0x02


class CommandResultCode(enum.Enum):
    """Outcome of handling a command."""

    SHRUG = 0  # the handler does not know the command
    HANDLED = 1
    FAILED = 2  # understood and allowed, but failed
    NOT_ALLOWED = 3  # recognized, but permission denied
    CALLER_ERROR = 4  # bad arguments, wrong state, etc.


@dataclass(frozen=True)
class CommandResult:
    """A result code plus a return value or error message."""

    code: CommandResultCode
    value: str = ""

    @classmethod
    def ok(cls, value: str = "") -> "CommandResult":
        return cls(CommandResultCode.HANDLED, value)

    @classmethod
    def failed(cls, value: str) -> "CommandResult":
        return cls(CommandResultCode.FAILED, value)

    @classmethod
    def shrug(cls) -> "CommandResult":
        return cls(CommandResultCode.SHRUG)

    @classmethod
    def caller_error(cls, message: str) -> "CommandResult":
        return cls(CommandResultCode.CALLER_ERROR, message)


CommandHandler = Callable[[TokenizedCommand, CommandSource], CommandResult]


class CommandDispatcher:
    """Passes a command to each handler until one does not shrug."""

    def __init__(self, handlers: Iterable[CommandHandler]) -> None:
        self._handlers = list(handlers)

    def __call__(self, cmd: TokenizedCommand, source: CommandSource) -> CommandResult:
        for handler in self._handlers:
            result = handler(cmd, source)
            if result.code is not CommandResultCode.SHRUG:
                return result
        return CommandResult(CommandResultCode.SHRUG, f"Unrecognized command: {cmd.path}")