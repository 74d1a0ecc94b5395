"""Command input types and normalization errors."""

from __future__ import annotations

import shlex
from dataclasses import dataclass


class CommandError(RuntimeError):
    """Base class for every failure reported when running a command."""


class CommandParseError(CommandError):
    """Raised when a raw command string cannot be tokenized.

    Attributes:
        text: The raw command string.
        reason: The tokenizer's description of the problem.
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Failed to parse command {text!r}: {reason}")
        self.text = text
        self.reason = reason


class InvalidCommandError(CommandError):
    """Raised when a command has no program token."""


@dataclass(frozen=True)
class RawString:
    """A single command string that must be shell-tokenized before use."""

    text: str


@dataclass(frozen=True)
class TokenList:
    """Pre-split command tokens, used verbatim and never re-tokenized."""

    tokens: tuple[str, ...]


CommandInput = RawString | TokenList


@dataclass(frozen=True)
class NormalizedCommand:
    """Canonical form of a command.

    Attributes:
        program: Program to execute (the first token).
        args: Remaining tokens, in order.
    """

    program: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        """Return the full argument vector passed to the spawn primitive."""

        return [self.program, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)
