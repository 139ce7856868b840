"""The command and status line at the bottom of the screen."""

from dataclasses import dataclass


@dataclass
class CommandView:
    """Holds the command being typed and the last status message."""

    command: str = ""
    status: str = ""

    def set_status(self, status: str) -> None:
        """Set the status message."""
        self.status = status

    def append(self, ch: str) -> None:
        """Add ``ch`` to the end of the command."""
        self.command += ch

    def erase_last(self) -> bool:
        """Remove the last command character; return False if there was none."""
        if not self.command:
            return False
        self.command = self.command[:-1]
        return True

    def clear(self) -> None:
        """Forget both the command and the status."""
        self.command = ""
        self.status = ""

    def line(self, in_command_mode: bool) -> str:
        """Return the text the bottom line shows."""
        if in_command_mode:
            return ":" + self.command
        return self.status