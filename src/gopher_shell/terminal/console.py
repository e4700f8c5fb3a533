"""Console reader, pager and process launcher."""

import logging
import subprocess
import sys
from typing import Callable, TextIO

from ..core.paginator import Paginator
from ..interfaces import LineReader, Pager, ProcessLauncher

logger = logging.getLogger(__name__)

MORE_PROMPT = "--more--"


class ConsoleLineReader(LineReader):
    """Reads lines with input(); Ctrl-D ends input."""

    def __init__(self, input_func: Callable[[str], str] = input):
        self._input = input_func

    def read_line(self, prompt: str = "") -> str | None:
        try:
            line = self._input(prompt)
        except EOFError:
            return None
        return line.strip(" \v\t").rstrip("\r\n")


class ConsolePager(Pager):
    """Writes text to a stream, one screen at a time.

    Between screens the reader is asked for input; "q" or end of input
    stops paging.
    """

    def __init__(
        self,
        paginator: Paginator | None = None,
        reader: LineReader | None = None,
        stream: TextIO | None = None,
    ):
        self.paginator = paginator or Paginator()
        self.reader = reader
        self.stream = stream or sys.stdout

    def echo(self, text: str) -> None:
        self.stream.write(f"{text}\n")
        self.stream.flush()

    def page(self, text: str) -> None:
        pages = self.paginator.paginate(text)
        for number, content in enumerate(pages, 1):
            self.echo(content)
            if number == len(pages) or self.reader is None:
                continue
            answer = self.reader.read_line(MORE_PROMPT)
            if answer is None or answer.lower().startswith("q"):
                logger.debug(f"Paging stopped at page {number}/{len(pages)}")
                break


class SubprocessLauncher(ProcessLauncher):
    """Runs handler commands through the system shell."""

    def run(self, command: str) -> bool:
        try:
            result = subprocess.run(command, shell=True)
        except OSError as e:
            logger.error(f"Cannot run `{command}`: {e}")
            return False
        if result.returncode != 0:
            logger.debug(f"`{command}` exited with {result.returncode}")
        return result.returncode == 0
