"""
CLI entry point for the nanofs shell.
Handles command line arguments and runs the interactive command loop.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import click

from .commands import CommandResult, default_commands
from .config import DEFAULT_LOG_LEVEL, EXIT_COMMAND, LOG_FORMAT, PROMPT
from .dispatcher import Dispatcher
from .session import Session
from .utils.prompt import parse_command_line, read_command_line


logger = logging.getLogger(__name__)


def setup_logging(log_level: str, log_file: Optional[Path] = None) -> None:
    """
    Configure logging with the specified level.

    Log records go to stderr so they never mix with command output.

    Args:
        log_level: Level name, e.g. "debug"
        log_file: Optional file to log to as well
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    logger.debug(f"Logging initialized at level {log_level}")


def setup_arg_parser() -> argparse.ArgumentParser:
    """
    Set up command line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="nanofs",
        description="In-memory filesystem shell"
    )

    parser.add_argument(
        '-c', '--command',
        dest='commands',
        metavar='CMD',
        action='append',
        help='Run CMD instead of reading from the prompt (repeatable)'
    )

    parser.add_argument(
        '--prompt',
        default=PROMPT,
        help=f'Prompt string (default: "{PROMPT}")'
    )

    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warning', 'error', 'critical'],
        default=DEFAULT_LOG_LEVEL.lower(),
        help=f'Set the logging level (default: {DEFAULT_LOG_LEVEL.lower()})'
    )

    parser.add_argument(
        '--log-file',
        metavar='PATH',
        type=Path,
        help='Also write log records to PATH'
    )

    return parser


def render(result: CommandResult) -> None:
    """Show a command result on the terminal."""
    if result.clear_screen:
        click.clear()
    for line in result.lines:
        click.echo(line)


def execute_line(session: Session, dispatcher: Dispatcher, line: str) -> bool:
    """
    Execute one input line.

    Args:
        session: Active session
        dispatcher: Command dispatcher
        line: Raw input line

    Returns:
        False when the line ends the session, True otherwise
    """
    line = line.rstrip("\r\n")
    if line == EXIT_COMMAND:
        return False
    if not line.strip():
        return True

    name, args = parse_command_line(line)
    try:
        result = dispatcher.dispatch(session, name, args)
    except Exception as e:
        logger.exception(f"Error running {name!r}")
        click.echo(f"Error: {str(e)}")
        return True

    render(result)
    return True


def run_commands(session: Session, dispatcher: Dispatcher, lines: Iterable[str]) -> None:
    """Execute lines in order, stopping early at exit."""
    for line in lines:
        if not execute_line(session, dispatcher, line):
            break


def run_shell(session: Session, dispatcher: Dispatcher, prompt: str = PROMPT) -> None:
    """
    Read and execute lines until exit or end of input.

    Args:
        session: Active session
        dispatcher: Command dispatcher
        prompt: Prompt string shown before each line
    """
    while True:
        line = read_command_line(prompt)
        if line is None:
            break
        if not execute_line(session, dispatcher, line):
            break
    logger.debug("Session ended")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    session = Session()
    dispatcher = Dispatcher(default_commands())

    if args.commands:
        run_commands(session, dispatcher, args.commands)
    else:
        run_shell(session, dispatcher, args.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
