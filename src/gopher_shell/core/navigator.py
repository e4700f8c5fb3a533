"""Navigation engine deciding how a selected resource is opened."""

import logging
import os
from pathlib import Path

from ..errors import FileError, GopherError, NoHandlerError, UsageError
from ..interfaces import Downloader, LineReader, Pager, ProcessLauncher
from .handlers import expand_handler
from .menu_renderer import MenuRenderer
from .protocol import parse_selector_list
from .selector import BINARY_TYPES, INFO_TYPES, MENU_TYPE, SEARCH_TYPE, TEXT_TYPE, Selector
from .session import DOWNLOAD_DIRECTORY_VAR, Session

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"
DEFAULT_FILENAME = "download"


class Navigator:
    """Opens selectors according to their Gopher type.

    Menus replace the session's menu and are recorded in history, text is
    paged, binaries are saved to disk and every other type is passed to the
    external handler registered for it.
    """

    SEARCH_PROMPT = "enter gopher search string: "
    FILENAME_PROMPT = "enter filename (press ENTER for `{default}`): "

    def __init__(
        self,
        session: Session,
        downloader: Downloader,
        reader: LineReader,
        pager: Pager,
        launcher: ProcessLauncher,
        renderer: MenuRenderer | None = None,
    ):
        self.session = session
        self.downloader = downloader
        self.reader = reader
        self.pager = pager
        self.launcher = launcher
        self.renderer = renderer or MenuRenderer()

    def navigate(self, target: Selector) -> None:
        """
        Open a selector.

        Args:
            target: The selector to open.

        Raises:
            NoHandlerError: If the type is not built in and has no handler.
            GopherError: Any download or file error.
        """
        kind = target.type
        logger.info(f"Navigating to type {kind!r}: {target.host}:{target.port} {target.path!r}")

        if kind == SEARCH_TYPE:
            query = self.reader.read_line(self.SEARCH_PROMPT)
            if query is None:
                logger.debug("Search cancelled")
                return
            self._open_menu(target, query)
        elif kind == MENU_TYPE:
            self._open_menu(target)
        elif kind in INFO_TYPES:
            return
        elif kind == TEXT_TYPE:
            self._show_text(target)
        elif kind in BINARY_TYPES:
            self.save(target)
        else:
            handler = self.session.handler_for(kind)
            if handler is None:
                raise NoHandlerError(f"no handler for type `{kind}`")
            self.execute_handler(handler, target)

    def _open_menu(self, target: Selector, query: str | None = None) -> None:
        data = self.downloader.download(target, query)
        menu = parse_selector_list(data)
        logger.debug(f"Menu has {len(menu)} entries")

        self.session.record_visit(target)
        self.session.replace_menu(menu)
        self.pager.page(self.renderer.render(menu))

    def _show_text(self, target: Selector) -> None:
        data = self.downloader.download(target)
        text = data.decode(TEXT_ENCODING, errors="replace")
        self.pager.page(strip_terminator(text))

    def back(self) -> None:
        """
        Return to the previously visited menu.

        The current history head is dropped and the new head is downloaded
        again. If that download fails the dropped entry is restored.

        Raises:
            UsageError: If there is no previous menu.
        """
        history = self.session.history
        if len(history) < 2:
            raise UsageError("history empty")

        current = history.pop()
        try:
            self.navigate(history.head)
        except GopherError:
            history.push(current)
            raise

    def default_filename(self, target: Selector) -> str:
        """Suggested local path for saving target."""
        basename = target.path.rsplit("/", 1)[-1] or DEFAULT_FILENAME
        directory = self.session.variables.get(DOWNLOAD_DIRECTORY_VAR) or "."
        return str(Path(directory).expanduser() / basename)

    def save(self, target: Selector) -> str | None:
        """
        Download a selector and write it to a file chosen by the user.

        Returns:
            The written path, or None if the user cancelled.

        Raises:
            FileError: If the file cannot be written.
        """
        data = self.downloader.download(target)
        default = self.default_filename(target)

        filename = self.reader.read_line(self.FILENAME_PROMPT.format(default=default))
        if filename is None:
            logger.debug("Save cancelled")
            return None
        filename = os.path.expanduser(filename.strip()) if filename.strip() else default

        try:
            with open(filename, "wb") as f:
                f.write(data)
        except OSError as e:
            raise FileError(f"cannot create file `{filename}`: {e.strerror or e}") from e

        logger.info(f"Saved {len(data)} bytes to {filename}")
        self.pager.echo(f"saved {len(data)} bytes to `{filename}`")
        return filename

    def execute_handler(self, handler: str, target: Selector) -> bool:
        """
        Run an external handler for a selector.

        When the template uses %f the selector is downloaded to a temporary
        file first; that file is removed once the command returns, whether
        or not it succeeded.

        Args:
            handler: The handler command template.
            target: The selector to hand over.

        Returns:
            True if the command reported success.
        """
        command, filename = expand_handler(
            handler, target, lambda: self.downloader.download_to_temp(target)
        )
        logger.info(f"Running handler: {command}")
        try:
            ok = self.launcher.run(command)
        finally:
            if filename is not None:
                _remove_quietly(filename)

        if not ok:
            logger.info(f"Handler failed: {command}")
        return ok


def strip_terminator(text: str) -> str:
    """Drop the "." line that ends a Gopher text response."""
    lines = text.rstrip("\r\n").split("\n")
    if lines and lines[-1].rstrip("\r") == ".":
        lines.pop()
    return "\n".join(line.rstrip("\r") for line in lines)


def _remove_quietly(filename: str) -> None:
    try:
        os.remove(filename)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Cannot remove temporary file {filename}: {e}")
