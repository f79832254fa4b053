"""
Reported conditions raised by command handlers.

None of these end the session: the dispatcher turns each one into a
single line of output.
"""


class ShellError(Exception):
    """Base exception for every condition reported to the user."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PermissionDeniedError(ShellError):
    """File mode forbids the requested read or write."""

    def __init__(self, name: str, action: str):
        self.name = name
        self.action = action
        super().__init__(f'Permission denied: unable to {action} "{name}"')


class CannotEnterFileError(ShellError):
    """cd target is a file."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Unable cd to file "{name}"')


class InvalidModeError(ShellError):
    """chmod argument is not a known mode number."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f'Unable to set mod "{text}"')


class UsageError(ShellError):
    """Required operand missing."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"{command}: missing operand")


class UnknownCommandError(ShellError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Unknown command "{name}"')
