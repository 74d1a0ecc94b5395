from __future__ import annotations

import sys
from pathlib import Path

import pytest

from easy_cmd.fail_fast import run_command_in_dir_or_exit, run_command_or_exit


def test_success_returns_normally() -> None:
    run_command_or_exit([sys.executable, "-c", "pass"])


def test_failure_prints_message_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_command_or_exit([sys.executable, "-c", "raise SystemExit(3)"])

    assert excinfo.value.code == 1
    assert "failed with exit status 3" in capsys.readouterr().err


def test_parse_error_exits_before_spawning(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_command_or_exit("echo 'unterminated")

    assert excinfo.value.code == 1
    assert "Failed to parse command" in capsys.readouterr().err


def test_in_dir_runs_in_directory(tmp_path: Path) -> None:
    script = "import pathlib; pathlib.Path('marker').write_text('x')"

    run_command_in_dir_or_exit([sys.executable, "-c", script], tmp_path)

    assert (tmp_path / "marker").exists()


def test_in_dir_with_missing_directory_exits(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_command_in_dir_or_exit([sys.executable, "-c", "pass"], tmp_path / "nope")

    assert excinfo.value.code == 1
    assert "Failed to run command" in capsys.readouterr().err


def test_nul_byte_token_exits_instead_of_raising(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_command_or_exit(["echo", "a\x00b"])

    assert excinfo.value.code == 1
    assert "null byte" in capsys.readouterr().err
