"""
Utility for reading and splitting shell input lines.
"""
import logging
from typing import List, Optional, Tuple

import click


logger = logging.getLogger(__name__)


def parse_command_line(line: str) -> Tuple[str, List[str]]:
    """
    Split one input line into a command name and its arguments.

    Splitting is on single spaces with no quoting, so repeated spaces
    produce empty arguments.

    Args:
        line: Raw input line

    Returns:
        Tuple of (command name, argument list)
    """
    parts = line.rstrip("\r\n").split(" ")
    return parts[0], parts[1:]


def read_command_line(prompt: str) -> Optional[str]:
    """
    Prompt the user for one command line.

    Args:
        prompt: Prompt string to display

    Returns:
        The line entered, or None when input ends or the user cancels
    """
    try:
        return input(prompt)
    except (KeyboardInterrupt, EOFError):
        click.echo()
        logger.debug("Input closed by user")
        return None
