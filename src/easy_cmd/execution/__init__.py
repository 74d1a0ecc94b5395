"""Execution engine package."""

from easy_cmd.execution.base import (
    CommandExecutor,
    ExecutionResult,
    NonZeroExitError,
    SpawnError,
)
from easy_cmd.execution.local_exec import LocalExecutor

__all__ = [
    "CommandExecutor",
    "ExecutionResult",
    "LocalExecutor",
    "NonZeroExitError",
    "SpawnError",
]
