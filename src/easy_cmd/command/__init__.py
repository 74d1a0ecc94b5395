"""Command normalization package."""

from easy_cmd.command.base import (
    CommandError,
    CommandInput,
    CommandParseError,
    InvalidCommandError,
    NormalizedCommand,
    RawString,
    TokenList,
)
from easy_cmd.command.normalize import as_command_input, normalize, split_command

__all__ = [
    "CommandError",
    "CommandInput",
    "CommandParseError",
    "InvalidCommandError",
    "NormalizedCommand",
    "RawString",
    "TokenList",
    "as_command_input",
    "normalize",
    "split_command",
]
