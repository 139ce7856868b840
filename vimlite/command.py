"""Ex-style commands typed after ':'."""

import sys
from enum import Enum, auto


class CommandType(Enum):
    """A recognised command."""

    QUIT = auto()
    UNKNOWN = auto()


class UnknownCommandError(ValueError):
    """Raised for a command the editor does not know."""


class QuitRequested(SystemExit):
    """Raised to leave the editor; exits with status 0 if left uncaught."""


_COMMANDS = {"q": CommandType.QUIT}


def parse_command(text: str) -> CommandType:
    """Return the command named by ``text``."""
    try:
        return _COMMANDS[text]
    except KeyError:
        raise UnknownCommandError("unrecognized command") from None


def execute_quit_command() -> None:
    """Flush pending output and leave the editor with status 0."""
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()
    raise QuitRequested(0)