"""Configuration models and loaders for easy-cmd."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

CONFIG_FILE_NAME = "easy_cmd.toml"


class ConfigError(ValueError):
    """Raised when a configuration file is malformed."""


@dataclass(frozen=True)
class AppConfig:
    """Top-level configuration for the command-line interface.

    Attributes:
        log_level: Logging level name used when none is given on the command line.
        working_dir: Default directory for ``easy-cmd run``. None inherits the
            current working directory.
    """

    log_level: str = "WARNING"
    working_dir: Path | None = None


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from disk.

    Args:
        path: Optional path to a configuration file or a directory to search.

    Returns:
        Parsed AppConfig with defaults applied when no config exists.

    Raises:
        ConfigError: If the file type is unsupported or the data is malformed.
    """

    config_path = _resolve_config_path(path)
    if config_path is None:
        return AppConfig()
    if config_path.suffix != ".toml":
        raise ConfigError(f"Unsupported config file type: {config_path}")
    return _parse_app_config(_load_toml(config_path), base_path=config_path.parent)


def update_working_dir(config: AppConfig, working_dir: Path | None) -> AppConfig:
    """Return a config copy with an updated working directory."""

    return replace(config, working_dir=working_dir)


def _resolve_config_path(path: Path | None) -> Path | None:
    candidate_paths: list[Path] = []
    if path is None:
        candidate_paths.append(Path(CONFIG_FILE_NAME))
        candidate_paths.append(Path("pyproject.toml"))
    elif path.is_dir():
        candidate_paths.append(path / CONFIG_FILE_NAME)
        candidate_paths.append(path / "pyproject.toml")
    else:
        candidate_paths.append(path)

    for candidate in candidate_paths:
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    if path.name == "pyproject.toml":
        tool_table = data.get("tool", {})
        if not isinstance(tool_table, dict):
            raise ConfigError("tool must be a table in pyproject.toml.")
        tool_config = tool_table.get("easy_cmd", {})
        if not isinstance(tool_config, dict):
            raise ConfigError("tool.easy_cmd must be a mapping.")
        return tool_config
    return data


def _parse_app_config(raw_data: dict[str, Any], base_path: Path) -> AppConfig:
    log_level = str(raw_data.get("log_level", "WARNING"))
    raw_dir = raw_data.get("working_dir")
    if raw_dir is None:
        return AppConfig(log_level=log_level)
    if not isinstance(raw_dir, str) or not raw_dir.strip():
        raise ConfigError("working_dir must be a non-empty string.")
    working_dir = Path(raw_dir)
    if not working_dir.is_absolute():
        working_dir = (base_path / working_dir).resolve()
    return AppConfig(log_level=log_level, working_dir=working_dir)
