"""Abstract interfaces for user-facing input, output and processes."""

from abc import ABC, abstractmethod


class LineReader(ABC):
    """Reads lines of user input."""

    @abstractmethod
    def read_line(self, prompt: str = "") -> str | None:
        """Read one line without its line ending.

        Returns None at end of input.
        """
        pass


class Pager(ABC):
    """Shows text to the user."""

    @abstractmethod
    def echo(self, text: str) -> None:
        """Show a short message as is."""
        pass

    @abstractmethod
    def page(self, text: str) -> None:
        """Show a block of text, screen by screen if needed."""
        pass


class ProcessLauncher(ABC):
    """Runs external commands."""

    @abstractmethod
    def run(self, command: str) -> bool:
        """Execute a fully expanded shell command.

        Returns True if the command succeeded.
        """
        pass
