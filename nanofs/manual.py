"""
Static help summary and manual pages for the shell commands.
"""
from typing import Dict, List, Optional


HELP_LINES: List[str] = [
    "pwd - print the current directory",
    "ls [name] - list the current directory or directory [name]",
    "cd [name] - enter directory [name], or the parent with ..",
    "mkdir [name] - create directory [name]",
    "touch [name] - create empty file [name]",
    "cat [name] - print the contents of file [name]",
    "write [name] [content] - write [content] to file [name]",
    "rm [name] - remove file or directory [name]",
    "mv [oldName] [newName] - rename [oldName] to [newName]",
    "chmod [name] [mode] - set file mode: 0 none, 1 read, 2 write, 3 read/write",
    "clear - clear the screen",
    "help - show this summary",
    "man [command] - show the manual for [command]",
    "exit - leave the shell",
]


MANUALS: Dict[str, List[str]] = {
    "pwd": [
        "pwd",
        "Print the absolute path of the current directory.",
    ],
    "ls": [
        "ls [name]",
        "List the entries of the current directory.",
        "With [name], list the entries of that child directory instead.",
        "Nothing is printed when [name] is missing or is a file.",
    ],
    "cd": [
        "cd [name]",
        "Enter the child directory [name].",
        "cd .. moves to the parent directory; at / it does nothing.",
        "Only one path segment is accepted.",
    ],
    "mkdir": [
        "mkdir [name]",
        "Create an empty directory [name] in the current directory.",
        "An existing entry with the same name is replaced.",
    ],
    "touch": [
        "touch [name]",
        "Create an empty file [name] in the current directory.",
        "An existing entry with the same name is replaced.",
    ],
    "cat": [
        "cat [name]",
        "Print the contents of file [name].",
        "The file must be readable (see chmod).",
    ],
    "write": [
        "write [name] [content]",
        "Replace the contents of file [name] with [content].",
        "Words of [content] are joined with single spaces.",
        "The file must be writeable (see chmod).",
    ],
    "rm": [
        "rm [name]",
        "Remove file or directory [name] from the current directory.",
        "Directories are removed with everything inside them.",
    ],
    "mv": [
        "mv [oldName] [newName]",
        "Rename entry [oldName] to [newName].",
        "An existing entry called [newName] is replaced.",
    ],
    "chmod": [
        "chmod [name] [mode]",
        "Set the access mode of file [name].",
        "Modes: 0 - none, 1 - read only, 2 - write only, 3 - read and write.",
    ],
    "clear": [
        "clear",
        "Clear the terminal screen.",
    ],
    "help": [
        "help",
        "Show a one-line summary of every command.",
    ],
    "man": [
        "man [command]",
        "Show the manual page for [command].",
    ],
}


def lookup_manual(name: str) -> Optional[List[str]]:
    return MANUALS.get(name)
