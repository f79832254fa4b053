"""
Unit tests for manual.py
"""
from nanofs.commands import default_commands
from nanofs.manual import HELP_LINES, MANUALS, lookup_manual


def test_every_command_has_a_manual():
    for name in default_commands():
        page = lookup_manual(name)
        assert page, f"missing manual for {name}"
        assert page[0].split(" ")[0] == name


def test_lookup_unknown_returns_none():
    assert lookup_manual("frobnicate") is None
    assert lookup_manual("") is None


def test_help_mentions_exit():
    assert any(line.startswith("exit ") for line in HELP_LINES)


def test_exit_has_no_manual():
    assert "exit" not in MANUALS
