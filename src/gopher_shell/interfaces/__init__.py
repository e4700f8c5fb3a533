"""Abstract interfaces for the Gopher shell's collaborators."""

from .downloader import Downloader
from .terminal import LineReader, Pager, ProcessLauncher

__all__ = ["Downloader", "LineReader", "Pager", "ProcessLauncher"]
