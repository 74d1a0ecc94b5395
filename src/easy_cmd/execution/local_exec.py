"""Local execution engine implementation."""

from __future__ import annotations

import subprocess
import time
from pathlib import Path

from easy_cmd.command.base import NormalizedCommand
from easy_cmd.execution.base import CommandExecutor, ExecutionResult, SpawnError
from easy_cmd.util.logging import get_logger


class LocalExecutor(CommandExecutor):
    """Execute commands on the local host with inherited standard streams."""

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__name__)

    def run(self, command: NormalizedCommand, cwd: Path | None = None) -> ExecutionResult:
        """Run a command locally and wait for it to finish.

        Args:
            command: The command to execute.
            cwd: Optional working directory.

        Returns:
            ExecutionResult with the exit code and duration.

        Raises:
            SpawnError: If the program is missing or not executable, the
                working directory is invalid, or a token contains a NUL byte.
        """

        self._logger.info("Running command: %s", command)
        start = time.monotonic()
        try:
            completed = subprocess.run(
                command.argv,
                cwd=str(cwd) if cwd is not None else None,
                check=False,
            )
        except (OSError, ValueError) as exc:
            self._logger.warning("Unable to start %s: %s", command, exc)
            raise SpawnError(command, exc, cwd=cwd) from exc
        duration = time.monotonic() - start
        self._logger.info(
            "Command finished with exit code %s in %.2fs.",
            completed.returncode,
            duration,
        )

        return ExecutionResult(
            command=command,
            exit_code=completed.returncode,
            cwd=cwd,
            duration_s=duration,
        )
