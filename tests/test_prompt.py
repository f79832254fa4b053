"""
Unit tests for utils/prompt.py
"""
from unittest.mock import patch

import pytest

from nanofs.utils.prompt import parse_command_line, read_command_line


@pytest.mark.parametrize("line, expected", [
    ("pwd", ("pwd", [])),
    ("write f a b c", ("write", ["f", "a", "b", "c"])),
    ("write f a  b", ("write", ["f", "a", "", "b"])),
    ("mkdir ", ("mkdir", [""])),
    ("ls\n", ("ls", [])),
    ('touch "a b"', ("touch", ['"a', 'b"'])),
    ("", ("", [])),
])
def test_parse_command_line(line, expected):
    """Test splitting on single spaces without quoting."""
    assert parse_command_line(line) == expected


@patch("builtins.input")
def test_read_command_line_returns_input(mock_input):
    mock_input.return_value = "ls"

    assert read_command_line("$: ") == "ls"
    mock_input.assert_called_once_with("$: ")


@patch("builtins.input")
def test_read_command_line_eof(mock_input):
    """Test that end of input ends the session instead of raising."""
    mock_input.side_effect = EOFError

    assert read_command_line("$: ") is None


@patch("builtins.input")
def test_read_command_line_interrupt(mock_input):
    mock_input.side_effect = KeyboardInterrupt

    assert read_command_line("$: ") is None
