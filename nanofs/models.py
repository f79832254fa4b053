"""
Models for the in-memory filesystem tree.
Contains the Directory and File node definitions.
"""
import logging
import weakref
from typing import Dict, List, Literal, Optional, Union

from .permissions import DEFAULT_MODE, Mode, flags_for


# Configure logger
logger = logging.getLogger(__name__)


def _check_name(name: str) -> str:
    if not name:
        raise ValueError("Node name must be a non-empty string")
    return name


class File:
    """A file node holding text content and an access mode."""

    def __init__(self, name: str, content: str = "", mode: Mode = DEFAULT_MODE):
        self.name: str = _check_name(name)
        self.kind: Literal["file"] = "file"
        self.content: str = content
        self._mode: Mode = Mode(mode)

    @property
    def is_directory(self) -> bool:
        return False

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def readable(self) -> bool:
        return flags_for(self._mode)[0]

    @property
    def writeable(self) -> bool:
        return flags_for(self._mode)[1]

    def set_mode(self, mode: Mode) -> None:
        """Change the access mode; readable/writeable follow from it."""
        self._mode = Mode(mode)

    def __repr__(self) -> str:
        return f"File(name={self.name!r}, mode={self._mode.name})"


class Directory:
    """
    A directory node that owns its children.

    The parent link is a weak back-reference used only for traversal;
    the root is the one directory whose parent is None.
    """

    def __init__(self, name: str, parent: Optional["Directory"] = None):
        self.name: str = _check_name(name)
        self.kind: Literal["directory"] = "directory"
        self.children: Dict[str, Union["Directory", File]] = {}
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def is_directory(self) -> bool:
        return True

    @property
    def parent(self) -> Optional["Directory"]:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def get(self, name: str) -> Optional["Node"]:
        """Exact, case-sensitive child lookup."""
        return self.children.get(name)

    def names(self) -> List[str]:
        return list(self.children)

    def make_directory(self, name: str) -> "Directory":
        """
        Create an empty subdirectory, replacing any entry with the same name.

        Args:
            name: Name of the new directory

        Returns:
            The new Directory
        """
        directory = Directory(name, parent=self)
        self.children[name] = directory
        logger.debug(f"Created directory {name!r} in {self.name!r}")
        return directory

    def make_file(self, name: str) -> File:
        """
        Create an empty file, replacing any entry with the same name.

        Args:
            name: Name of the new file

        Returns:
            The new File
        """
        file = File(name)
        self.children[name] = file
        logger.debug(f"Created file {name!r} in {self.name!r}")
        return file

    def remove(self, name: str) -> Optional["Node"]:
        """
        Detach a child together with its whole subtree.

        Args:
            name: Name of the entry to remove

        Returns:
            The removed node, or None if there was no such entry
        """
        node = self.children.pop(name, None)
        if node is not None:
            logger.debug(f"Removed {node.kind} {name!r} from {self.name!r}")
        return node

    def rename_child(self, old_name: str, new_name: str) -> bool:
        """
        Rename a child, updating its name and its key together.

        An existing entry called new_name is replaced.

        Args:
            old_name: Current name of the entry
            new_name: Name to give it

        Returns:
            False if old_name does not exist, True otherwise
        """
        _check_name(new_name)
        node = self.children.get(old_name)
        if node is None:
            return False
        if old_name == new_name:
            return True

        del self.children[old_name]
        node.name = new_name
        self.children[new_name] = node
        logger.debug(f"Renamed {old_name!r} to {new_name!r} in {self.name!r}")
        return True

    def __repr__(self) -> str:
        return f"Directory(name={self.name!r}, children={len(self.children)})"


# Tagged union over the two node kinds
Node = Union[Directory, File]
