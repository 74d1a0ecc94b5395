"""CLI entrypoints for easy-cmd."""

from __future__ import annotations

from pathlib import Path

import typer

from easy_cmd.command.base import CommandError, RawString, TokenList
from easy_cmd.command.normalize import normalize
from easy_cmd.config import AppConfig, ConfigError, load_config, update_working_dir
from easy_cmd.runner import run_command
from easy_cmd.util.logging import configure_logging

app = typer.Typer(help="Run external commands from a string or a list of tokens.")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (e.g., DEBUG, INFO, WARNING).",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Path to an easy_cmd.toml or pyproject.toml file.",
    ),
) -> None:
    """Load configuration and set up logging."""

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    configure_logging(log_level or config.log_level)
    ctx.obj = config


@app.command("run", context_settings={"ignore_unknown_options": True})
def run_command_cli(
    ctx: typer.Context,
    command: list[str] = typer.Argument(
        ...,
        help="A single quoted command string, or the program and its arguments.",
    ),
    directory: Path | None = typer.Option(
        None,
        "--dir",
        "-C",
        help="Directory to run the command in.",
    ),
) -> None:
    """Run a command and exit non-zero if it fails.

    Options this command understands (``--dir``, ``-C``, ``--help``) are
    taken by easy-cmd even after the program name. Put ``--`` before the
    command to pass every following argument to the program unchanged.
    """

    config: AppConfig = ctx.obj or AppConfig()
    if directory is not None:
        config = update_working_dir(config, directory)
    try:
        run_command(_command_input(command), config.working_dir)
    except CommandError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("split")
def split_command_cli(
    command: str = typer.Argument(..., help="Command string to tokenize."),
) -> None:
    """Print the tokens a command string would be run with, one per line."""

    try:
        normalized = normalize(command)
    except CommandError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    for token in normalized.argv:
        typer.echo(token)


def _command_input(arguments: list[str]) -> RawString | TokenList:
    if len(arguments) == 1:
        return RawString(arguments[0])
    return TokenList(tuple(arguments))
