"""
Command handlers for the nanofs shell.

Every handler has the signature handler(session, directory, args) where
directory is the session's current directory at dispatch time. Handlers
return a CommandResult; reported conditions are raised as ShellError and
rendered by the dispatcher.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .errors import UsageError
from .manual import HELP_LINES, lookup_manual
from .models import Directory, File
from .permissions import ensure_readable, ensure_writeable, parse_mode
from .session import Session, full_path


# Configure logger
logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Output of one command."""

    lines: List[str] = field(default_factory=list)
    clear_screen: bool = False


Handler = Callable[[Session, Directory, List[str]], CommandResult]


def _operand(command: str, args: List[str], index: int = 0) -> str:
    """Fetch a required, non-empty operand or raise UsageError."""
    if len(args) <= index or not args[index]:
        raise UsageError(command)
    return args[index]


def _optional_operand(args: List[str]) -> Optional[str]:
    return args[0] if args else None


def cmd_pwd(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    return CommandResult([full_path(directory)])


def cmd_ls(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    name = _optional_operand(args)
    if name is None:
        return CommandResult(directory.names())

    node = directory.get(name)
    if not isinstance(node, Directory):
        return CommandResult()
    return CommandResult(node.names())


def cmd_cd(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    target = _optional_operand(args)
    if target is not None:
        session.change_directory(target)
    return CommandResult()


def cmd_mkdir(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    directory.make_directory(_operand("mkdir", args))
    return CommandResult()


def cmd_touch(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    directory.make_file(_operand("touch", args))
    return CommandResult()


def cmd_cat(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    node = directory.get(_operand("cat", args))
    if not isinstance(node, File):
        return CommandResult()

    ensure_readable(node)
    return CommandResult([node.content])


def cmd_write(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    name = _operand("write", args)
    node = directory.get(name)
    if not isinstance(node, File):
        return CommandResult()

    ensure_writeable(node)
    node.content = " ".join(args[1:])
    logger.debug(f"Wrote {len(node.content)} characters to {name!r}")
    return CommandResult()


def cmd_rm(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    directory.remove(_operand("rm", args))
    return CommandResult()


def cmd_mv(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    old_name = _operand("mv", args, 0)
    new_name = _operand("mv", args, 1)
    directory.rename_child(old_name, new_name)
    return CommandResult()


def cmd_chmod(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    node = directory.get(_operand("chmod", args, 0))
    mode_text = _operand("chmod", args, 1)
    # Unknown names and directories are ignored before the mode is parsed
    if not isinstance(node, File):
        return CommandResult()

    node.set_mode(parse_mode(mode_text))
    logger.debug(f"Set mode of {node.name!r} to {node.mode.name}")
    return CommandResult()


def cmd_clear(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    return CommandResult(clear_screen=True)


def cmd_help(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    return CommandResult(list(HELP_LINES))


def cmd_man(session: Session, directory: Directory, args: List[str]) -> CommandResult:
    name = _optional_operand(args)
    if not name:
        return CommandResult(["What manual page do you want?"])

    page = lookup_manual(name)
    if page is None:
        return CommandResult([f'No manual entry for "{name}"'])
    return CommandResult(list(page))


def default_commands() -> Dict[str, Handler]:
    """
    Build the standard command table.

    Returns:
        Fresh dict mapping command names to handlers
    """
    return {
        "pwd": cmd_pwd,
        "ls": cmd_ls,
        "cd": cmd_cd,
        "mkdir": cmd_mkdir,
        "touch": cmd_touch,
        "cat": cmd_cat,
        "write": cmd_write,
        "rm": cmd_rm,
        "mv": cmd_mv,
        "chmod": cmd_chmod,
        "clear": cmd_clear,
        "help": cmd_help,
        "man": cmd_man,
    }
