"""
Session state and path navigation.
Tracks the root and the current directory and resolves single-segment moves.
"""
import logging
from typing import List, Optional

from .config import PARENT_TOKEN, SEPARATOR
from .errors import CannotEnterFileError
from .models import Directory


# Configure logger
logger = logging.getLogger(__name__)


def full_path(directory: Directory) -> str:
    """
    Build the absolute path of a directory by walking parent links.

    The walk is iterative so tree depth does not grow the call stack.
    The root renders as the separator alone; every other directory adds
    its name followed by a separator, e.g. "/docs/notes/".

    Args:
        directory: Directory to locate

    Returns:
        Absolute path string
    """
    parts: List[str] = []
    node = directory
    while not node.is_root:
        parts.append(node.name + SEPARATOR)
        parent = node.parent
        if parent is None:
            # Detached subtree; render what is reachable
            break
        node = parent
    parts.append(SEPARATOR)
    return "".join(reversed(parts))


class Session:
    """Single shell session over one in-memory tree."""

    def __init__(self, root: Optional[Directory] = None):
        """
        Initialize the session.

        Args:
            root: Existing root directory (a fresh one is created if None)
        """
        self.root = root if root is not None else Directory(SEPARATOR)
        self.current: Directory = self.root

    def current_path(self) -> str:
        return full_path(self.current)

    def change_directory(self, target: str) -> None:
        """
        Move the current directory by one step.

        Args:
            target: Child directory name, or the parent token

        Raises:
            CannotEnterFileError: If target names a file
        """
        if target == PARENT_TOKEN:
            parent = self.current.parent
            if parent is not None:
                self.current = parent
            return

        node = self.current.get(target)
        if node is None:
            return
        if not isinstance(node, Directory):
            raise CannotEnterFileError(target)

        self.current = node
        logger.debug(f"Changed directory to {self.current_path()}")
