"""
Shared fixtures for nanofs tests.
"""
from typing import List

import pytest

from nanofs.commands import default_commands
from nanofs.dispatcher import Dispatcher
from nanofs.session import Session
from nanofs.utils.prompt import parse_command_line


@pytest.fixture
def session():
    """Fresh session with an empty root."""
    return Session()


@pytest.fixture
def dispatcher():
    """Dispatcher with the standard command table."""
    return Dispatcher(default_commands())


@pytest.fixture
def run(session, dispatcher):
    """Run one command line and return its output lines."""
    def _run(line: str) -> List[str]:
        name, args = parse_command_line(line)
        return dispatcher.dispatch(session, name, args).lines
    return _run
