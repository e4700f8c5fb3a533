"""Console implementations of the user-facing interfaces."""

from .console import ConsoleLineReader, ConsolePager, SubprocessLauncher

__all__ = ["ConsoleLineReader", "ConsolePager", "SubprocessLauncher"]
