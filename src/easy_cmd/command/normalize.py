"""Conversion of caller-supplied commands into ``NormalizedCommand`` values.

A plain string is tokenized with POSIX shell quoting rules. A list or tuple
is taken as already split and each element becomes exactly one token, even
when it contains whitespace or quote characters.
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Sequence

from easy_cmd.command.base import (
    CommandInput,
    CommandParseError,
    InvalidCommandError,
    NormalizedCommand,
    RawString,
    TokenList,
)

Token = str | os.PathLike[str]
CommandLike = str | os.PathLike[str] | Sequence[Token] | RawString | TokenList


def as_command_input(value: CommandLike) -> CommandInput:
    """Wrap a concrete command value in the matching ``CommandInput`` variant.

    Args:
        value: A command string, a path to a program, a sequence of tokens,
            or an existing ``RawString``/``TokenList``.

    Returns:
        ``RawString`` for strings, ``TokenList`` for everything else.

    Raises:
        TypeError: If the value or one of its elements has an unsupported type.
    """

    if isinstance(value, (RawString, TokenList)):
        return value
    if isinstance(value, str):
        return RawString(value)
    if isinstance(value, os.PathLike):
        return TokenList((_token(value),))
    if isinstance(value, (bytes, bytearray)) or not isinstance(value, Sequence):
        raise TypeError(
            f"Unsupported command type {type(value).__name__}; "
            "expected a string or a sequence of strings."
        )
    return TokenList(tuple(_token(item) for item in value))


def split_command(text: str) -> list[str]:
    """Split a command string into tokens using POSIX shell quoting.

    Raises:
        CommandParseError: If quoting or escaping is unbalanced.
    """

    try:
        return shlex.split(text, posix=True)
    except ValueError as exc:
        raise CommandParseError(text, str(exc)) from exc


def normalize(command: CommandLike) -> NormalizedCommand:
    """Convert any supported command value into a ``NormalizedCommand``.

    Raises:
        CommandParseError: If a command string cannot be tokenized.
        InvalidCommandError: If there is no program token.
        TypeError: If the command has an unsupported type.
    """

    command_input = as_command_input(command)
    if isinstance(command_input, RawString):
        tokens = split_command(command_input.text)
        if not tokens:
            raise InvalidCommandError(
                f"Command string {command_input.text!r} does not name a program."
            )
    else:
        tokens = list(command_input.tokens)
        if not tokens:
            raise InvalidCommandError("Command must contain at least one token.")
    return NormalizedCommand(program=tokens[0], args=tuple(tokens[1:]))


def _token(item: object) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, os.PathLike):
        token = os.fspath(item)
        if isinstance(token, str):
            return token
    raise TypeError(
        f"Command tokens must be strings or paths, got {type(item).__name__}."
    )
