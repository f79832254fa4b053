"""
Dispatcher mapping command names to handlers.
"""
import logging
from typing import List, Mapping

from .commands import CommandResult, Handler
from .errors import ShellError, UnknownCommandError
from .session import Session


# Configure logger
logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes parsed commands to handlers from an explicit table."""

    def __init__(self, commands: Mapping[str, Handler]):
        """
        Initialize the dispatcher.

        Args:
            commands: Mapping of command names to handlers
        """
        self.commands = dict(commands)

    def names(self) -> List[str]:
        return list(self.commands)

    def dispatch(self, session: Session, name: str, args: List[str]) -> CommandResult:
        """
        Run one command against the session's current directory.

        Unknown names and reported conditions come back as output lines.

        Args:
            session: Active session
            name: Command name
            args: Command arguments

        Returns:
            Result of the command
        """
        logger.debug(f"Dispatching {name!r} with args {args!r}")

        try:
            handler = self.commands.get(name)
            if handler is None:
                raise UnknownCommandError(name)
            return handler(session, session.current, list(args))
        except ShellError as e:
            logger.info(f"{e.__class__.__name__}: {e.message}")
            return CommandResult([e.message])
