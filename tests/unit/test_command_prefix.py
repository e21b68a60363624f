import pytest
from botcmd.command_prefix import validate_command_prefix


@pytest.mark.parametrize("prefix", ["!", "?", "$", ".", "~", "/"])
def test_valid_prefixes(prefix: str) -> None:
    assert validate_command_prefix(prefix) is None


@pytest.mark.parametrize(
    ("prefix", "message"),
    [
        ("", "command prefix must be a non-empty string"),
        ("!!", "command prefix must be exactly one character"),
        (" ", "command prefix cannot be whitespace"),
        ("\t", "command prefix cannot be whitespace"),
        ("§", "command prefix must be a printable character"),
        ("a", "command prefix cannot be a letter or digit"),
        ("5", "command prefix cannot be a letter or digit"),
        ('"', "command prefix cannot be the quote character"),
    ],
)
def test_invalid_prefixes(prefix: str, message: str) -> None:
    assert validate_command_prefix(prefix) == message


def test_non_string_prefix() -> None:
    assert validate_command_prefix(None) == "command prefix must be a non-empty string"  # type: ignore[arg-type]
