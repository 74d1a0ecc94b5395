"""Run a command from any supported representation and check its outcome."""

from __future__ import annotations

import os
from pathlib import Path

from easy_cmd.command.normalize import CommandLike, normalize
from easy_cmd.execution.base import CommandExecutor, ExecutionResult, NonZeroExitError
from easy_cmd.execution.local_exec import LocalExecutor

WorkingDirectory = str | os.PathLike[str] | None


def run_command(
    command: CommandLike,
    cwd: WorkingDirectory = None,
    *,
    executor: CommandExecutor | None = None,
) -> ExecutionResult:
    """Run a system command and wait for it to exit successfully.

    A string is tokenized with shell quoting rules; a list or tuple of tokens
    is passed to the program exactly as given.

    Args:
        command: The command as a string or a sequence of tokens.
        cwd: Directory to run the command in. None runs it in the current
            working directory.
        executor: Spawn backend. Defaults to a ``LocalExecutor``.

    Returns:
        ExecutionResult for the process, which always has exit status zero.

    Raises:
        CommandParseError: If a command string cannot be tokenized.
        InvalidCommandError: If the command has no program token.
        SpawnError: If the process could not be started.
        NonZeroExitError: If the process exited with a non-zero status or
            was terminated by a signal.

    Example::

        run_command("git status")
        run_command(["ls", "-la"], cwd="src")
    """

    normalized = normalize(command)
    directory = Path(cwd) if cwd is not None else None
    result = (executor or LocalExecutor()).run(normalized, cwd=directory)
    if not result.success:
        raise NonZeroExitError(result)
    return result
