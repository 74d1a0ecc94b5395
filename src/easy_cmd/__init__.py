"""Run external commands from a shell-style string or a list of tokens."""

from easy_cmd.command import (
    CommandError,
    CommandInput,
    CommandParseError,
    InvalidCommandError,
    NormalizedCommand,
    RawString,
    TokenList,
    as_command_input,
    normalize,
    split_command,
)
from easy_cmd.execution import (
    CommandExecutor,
    ExecutionResult,
    LocalExecutor,
    NonZeroExitError,
    SpawnError,
)
from easy_cmd.fail_fast import run_command_in_dir_or_exit, run_command_or_exit
from easy_cmd.runner import run_command

__all__ = [
    "CommandError",
    "CommandExecutor",
    "CommandInput",
    "CommandParseError",
    "ExecutionResult",
    "InvalidCommandError",
    "LocalExecutor",
    "NonZeroExitError",
    "NormalizedCommand",
    "RawString",
    "SpawnError",
    "TokenList",
    "as_command_input",
    "normalize",
    "run_command",
    "run_command_in_dir_or_exit",
    "run_command_or_exit",
    "split_command",
]
