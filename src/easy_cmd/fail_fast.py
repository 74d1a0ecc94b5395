"""Print-and-exit wrappers around ``run_command`` for scripts."""

from __future__ import annotations

import sys
from typing import NoReturn

from easy_cmd.command.base import CommandError
from easy_cmd.command.normalize import CommandLike
from easy_cmd.runner import WorkingDirectory, run_command

EXIT_FAILURE = 1


def run_command_or_exit(command: CommandLike) -> None:
    """Run a command in the current directory, exiting with code 1 on failure."""

    run_command_in_dir_or_exit(command, None)


def run_command_in_dir_or_exit(command: CommandLike, cwd: WorkingDirectory) -> None:
    """Run a command in ``cwd``, exiting with code 1 on failure.

    The failure message is written to standard error before exiting.
    """

    try:
        run_command(command, cwd)
    except CommandError as exc:
        _exit_with(exc)


def _exit_with(exc: CommandError) -> NoReturn:
    print(exc, file=sys.stderr)
    raise SystemExit(EXIT_FAILURE) from exc
