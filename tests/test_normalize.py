from __future__ import annotations

import shlex
from pathlib import Path

import pytest

from easy_cmd.command.base import (
    CommandError,
    CommandParseError,
    InvalidCommandError,
    NormalizedCommand,
    RawString,
    TokenList,
)
from easy_cmd.command.normalize import as_command_input, normalize, split_command


def test_string_is_tokenized() -> None:
    command = normalize("echo hi")

    assert command == NormalizedCommand(program="echo", args=("hi",))
    assert command.argv == ["echo", "hi"]


def test_quoted_string_yields_single_argument() -> None:
    command = normalize('echo "hello world"')

    assert command.program == "echo"
    assert command.args == ("hello world",)


def test_unquoted_string_splits_on_whitespace() -> None:
    assert normalize("echo hello world").args == ("hello", "world")


def test_single_quotes_and_escapes_are_honored() -> None:
    command = normalize("grep -e 'a b' c\\ d \"e\\\"f\"")

    assert command.argv == ["grep", "-e", "a b", "c d", 'e"f']


@pytest.mark.parametrize(
    "tokens",
    [
        ["echo", "hello world"],
        ("echo", "hello world"),
    ],
)
def test_token_sequences_are_not_retokenized(tokens: list[str] | tuple[str, ...]) -> None:
    command = normalize(tokens)

    assert command.program == "echo"
    assert command.args == ("hello world",)


def test_token_list_keeps_quote_characters() -> None:
    command = normalize(["echo", '"quoted"', "it's", "  padded  "])

    assert command.args == ('"quoted"', "it's", "  padded  ")


def test_token_list_preserves_order_and_duplicates() -> None:
    command = normalize(["cmd", "-v", "-v", "b", "a"])

    assert command.args == ("-v", "-v", "b", "a")


def test_program_only() -> None:
    assert normalize(["true"]) == NormalizedCommand(program="true")
    assert normalize("true").args == ()


def test_path_elements_are_accepted() -> None:
    command = normalize([Path("/usr/bin/env"), "FOO=1", Path("script name.sh")])

    assert command.argv == ["/usr/bin/env", "FOO=1", "script name.sh"]


def test_bare_path_is_a_single_program_token() -> None:
    command = normalize(Path("/opt/my tools/run"))

    assert command == NormalizedCommand(program="/opt/my tools/run")


def test_string_matches_its_split_tokens() -> None:
    text = "git commit -m 'initial import' --author=\"A B <a@b.c>\""

    assert normalize(text) == normalize(shlex.split(text))


def test_unbalanced_quote_raises_parse_error() -> None:
    with pytest.raises(CommandParseError) as excinfo:
        normalize('echo "unterminated')

    assert excinfo.value.text == 'echo "unterminated'
    assert "No closing quotation" in str(excinfo.value)
    assert isinstance(excinfo.value, CommandError)


def test_trailing_escape_raises_parse_error() -> None:
    with pytest.raises(CommandParseError):
        split_command("echo foo\\")


def test_empty_token_list_raises_invalid_command() -> None:
    with pytest.raises(InvalidCommandError):
        normalize([])


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_string_raises_invalid_command(text: str) -> None:
    with pytest.raises(InvalidCommandError):
        normalize(text)


@pytest.mark.parametrize("value", [b"echo hi", 42, None, ["echo", 1], ["echo", b"hi"]])
def test_unsupported_types_raise_type_error(value: object) -> None:
    with pytest.raises(TypeError):
        normalize(value)  # type: ignore[arg-type]


def test_as_command_input_variants() -> None:
    assert as_command_input("ls -la") == RawString("ls -la")
    assert as_command_input(["ls", "-la"]) == TokenList(("ls", "-la"))
    assert as_command_input(("ls",)) == TokenList(("ls",))


def test_as_command_input_passes_variants_through() -> None:
    raw = RawString("ls 'a b'")
    tokens = TokenList(("ls", "a b"))

    assert as_command_input(raw) is raw
    assert as_command_input(tokens) is tokens
    assert normalize(tokens).args == ("a b",)


def test_str_renders_shell_quoted_command() -> None:
    assert str(normalize(["echo", "hello world"])) == "echo 'hello world'"
    assert str(normalize("echo hi")) == "echo hi"
