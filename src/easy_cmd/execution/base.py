"""Execution engine base types and interfaces."""

from __future__ import annotations

import signal as _signal
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from easy_cmd.command.base import CommandError, NormalizedCommand


@dataclass(frozen=True)
class ExecutionResult:
    """Result of a process that was spawned and waited for.

    Attributes:
        command: The command that was executed.
        exit_code: Return code reported by the process. Negative values mean
            the process was terminated by that signal number (POSIX).
        cwd: Working directory bound at spawn time, or None if inherited.
        duration_s: Duration of the execution in seconds.
    """

    command: NormalizedCommand
    exit_code: int
    cwd: Path | None = None
    duration_s: float = 0.0

    @property
    def signal(self) -> int | None:
        """Return the terminating signal number, if any."""

        return -self.exit_code if self.exit_code < 0 else None

    @property
    def success(self) -> bool:
        """Return True when the process exited with status zero."""

        return self.exit_code == 0


class SpawnError(CommandError):
    """Raised when the operating system could not start the process.

    Attributes:
        command: The command that could not be started.
        cwd: The working directory requested for it, if any.
        reason: The error that stopped the process from starting, either an
            operating system error or a rejected argument (such as a NUL byte).
    """

    def __init__(
        self,
        command: NormalizedCommand,
        reason: OSError | ValueError,
        cwd: Path | None = None,
    ) -> None:
        location = f" in {cwd}" if cwd is not None else ""
        super().__init__(f"Failed to run command {str(command)!r}{location}: {reason}")
        self.command = command
        self.cwd = cwd
        self.reason = reason

    @property
    def os_error(self) -> OSError | None:
        """Return the operating system error, if that is what stopped the spawn."""

        return self.reason if isinstance(self.reason, OSError) else None


class NonZeroExitError(CommandError):
    """Raised when a process ran to completion but reported failure."""

    def __init__(self, result: ExecutionResult) -> None:
        super().__init__(_describe_failure(result))
        self.result = result

    @property
    def command(self) -> NormalizedCommand:
        return self.result.command

    @property
    def exit_code(self) -> int:
        return self.result.exit_code

    @property
    def signal(self) -> int | None:
        return self.result.signal


class CommandExecutor(ABC):
    """Abstract interface over the process-spawn primitive."""

    @abstractmethod
    def run(self, command: NormalizedCommand, cwd: Path | None = None) -> ExecutionResult:
        """Spawn a command and block until it terminates.

        Args:
            command: The command to execute.
            cwd: Optional working directory; None inherits the caller's.

        Returns:
            ExecutionResult for the finished process, successful or not.

        Raises:
            SpawnError: If the process could not be started.
        """


def _describe_failure(result: ExecutionResult) -> str:
    command = str(result.command)
    signum = result.signal
    if signum is None:
        return f"Command {command!r} failed with exit status {result.exit_code}"
    try:
        name = _signal.Signals(signum).name
    except ValueError:
        name = "unknown signal"
    return f"Command {command!r} was terminated by signal {name} ({signum})"
