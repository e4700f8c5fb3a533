"""GopherShell - read-eval loop of the Gopher client."""

import logging
from pathlib import Path

from .config import Config
from .core import CommandInterpreter, Navigator, Session, parse_selector, render_selector
from .errors import GopherError, QuitRequested
from .interfaces import LineReader, Pager

logger = logging.getLogger(__name__)


class GopherShell:
    """Main loop tying the user's input to the interpreter.

    A line that starts with a number of the current menu opens that item
    directly; any other line is evaluated as commands.
    """

    BANNER = """gopher-shell - a simple terminal gopher client
Type `help` for help."""

    def __init__(
        self,
        session: Session,
        navigator: Navigator,
        interpreter: CommandInterpreter,
        reader: LineReader,
        pager: Pager,
        config: Config | None = None,
    ):
        """
        Initialize the shell.

        Args:
            session: Shared session state.
            navigator: Navigation engine.
            interpreter: Command interpreter.
            reader: Source of user input lines.
            pager: Output for messages.
            config: Shell configuration (uses defaults if None).
        """
        self.session = session
        self.navigator = navigator
        self.interpreter = interpreter
        self.reader = reader
        self.pager = pager
        self.config = config or Config()

    def prompt(self) -> str:
        """Prompt showing the current location."""
        return f"({render_selector(self.session.current_location(), with_prefix=False)})> "

    def load_rc_file(self, path: str | Path) -> bool:
        """
        Evaluate a command file.

        Missing or unreadable files are skipped.

        Returns:
            True if the file was evaluated.
        """
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Skipping rc file {path}: {e}")
            return False

        logger.info(f"Loading rc file {path}")
        self.interpreter.evaluate(text, source=str(path))
        return True

    def start(self) -> None:
        """Load rc files and open the home hole."""
        for path in self.config.get_rc_paths():
            self.load_rc_file(path)

        home = parse_selector(self.config.home)
        if home is not None:
            logger.info(f"Opening home {render_selector(home)}")
            self._guard(self.navigator.navigate, home)

    def handle_line(self, line: str) -> None:
        """Handle one line of user input."""
        target = self.session.menu.find_by_text(line)
        if target is not None:
            self._guard(self.navigator.navigate, target)
        else:
            self.interpreter.evaluate(line)

    def _guard(self, func, *args) -> None:
        try:
            func(*args)
        except GopherError as e:
            logger.debug(f"{e.__class__.__name__}: {e}")
            self.pager.echo(f"error: {e}")

    def run(self) -> None:
        """Run until quit or end of input."""
        self.pager.echo(self.BANNER)
        try:
            self.start()
            while True:
                line = self.reader.read_line(self.prompt())
                if line is None:
                    break
                self.handle_line(line)
        except QuitRequested:
            logger.debug("Quit requested")
        logger.info("Shell stopped")
