"""
Permission model for files.
Maps each mode to its (readable, writeable) pair and guards reads and writes.
"""
import logging
from enum import IntEnum
from typing import Dict, Tuple, TYPE_CHECKING

from .config import DEFAULT_MODE_ORDINAL
from .errors import InvalidModeError, PermissionDeniedError

if TYPE_CHECKING:
    from .models import File


# Configure logger
logger = logging.getLogger(__name__)


class Mode(IntEnum):
    """File access mode. The ordinal is what chmod accepts."""

    NONE = 0
    READ_ONLY = 1
    WRITE_ONLY = 2
    READ_WRITE = 3


# (readable, writeable) per mode
MODE_TABLE: Dict[Mode, Tuple[bool, bool]] = {
    Mode.NONE: (False, False),
    Mode.READ_ONLY: (True, False),
    Mode.WRITE_ONLY: (False, True),
    Mode.READ_WRITE: (True, True),
}

DEFAULT_MODE = Mode(DEFAULT_MODE_ORDINAL)


def flags_for(mode: Mode) -> Tuple[bool, bool]:
    """
    Look up the access flags for a mode.

    Args:
        mode: File mode

    Returns:
        Tuple of (readable, writeable)
    """
    return MODE_TABLE[mode]


def parse_mode(text: str) -> Mode:
    """
    Parse a chmod argument into a Mode.

    Args:
        text: Decimal mode ordinal as typed by the user

    Returns:
        Matching Mode

    Raises:
        InvalidModeError: If text is not an integer or not a known ordinal
    """
    try:
        return Mode(int(text, 10))
    except ValueError:
        logger.debug(f"Rejected mode argument {text!r}")
        raise InvalidModeError(text) from None


def ensure_readable(file: "File") -> None:
    if not file.readable:
        raise PermissionDeniedError(file.name, "read")


def ensure_writeable(file: "File") -> None:
    if not file.writeable:
        raise PermissionDeniedError(file.name, "write")
