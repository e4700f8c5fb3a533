"""Command interpreter: builtin commands, aliases and variables."""

import logging
from typing import Callable

from ..errors import (
    GopherError,
    NoSuchItemError,
    QuitRequested,
    RecursionLimitError,
    UnknownCommandError,
    UsageError,
)
from ..interfaces import Pager
from .help_topics import HELP_TOPICS, format_columns
from .navigator import Navigator
from .protocol import parse_selector, render_selector
from .selector import Selector, SelectorList
from .session import Session
from .text_utils import split_lines
from .tokenizer import Tokenizer
from .variables import VariableStore

logger = logging.getLogger(__name__)


class CommandInterpreter:
    """Evaluates command text line by line.

    The first token of a line names a builtin command (case-insensitive)
    or an alias. Alias expansion recurses into evaluate() with an explicit
    depth, bounded by MAX_DEPTH.
    """

    MAX_DEPTH = 10

    def __init__(
        self,
        session: Session,
        navigator: Navigator,
        pager: Pager,
        on_error: Callable[[GopherError], None] | None = None,
    ):
        """
        Initialize the interpreter.

        Args:
            session: Shared session state.
            navigator: Navigation engine used by the commands.
            pager: Output for listings and messages.
            on_error: Receives errors of top-level lines; defaults to
                showing them through the pager.
        """
        self.session = session
        self.navigator = navigator
        self.pager = pager
        self.on_error = on_error or self._show_error
        self._commands: dict[str, Callable[[Tokenizer], None]] = {
            "quit": self._cmd_quit,
            "open": self._cmd_open,
            "show": self._cmd_show,
            "save": self._cmd_save,
            "back": self._cmd_back,
            "help": self._cmd_help,
            "history": self._cmd_history,
            "bookmarks": self._cmd_bookmarks,
            "set": self._cmd_set,
            "see": self._cmd_see,
            "alias": self._cmd_alias,
            "type": self._cmd_type,
        }

    def command_names(self) -> list[str]:
        """Names of all builtin commands, sorted."""
        return sorted(self._commands)

    def complete(self, prefix: str) -> list[str]:
        """Builtin and alias names starting with prefix."""
        key = prefix.casefold()
        names = set(self._commands) | set(self.session.aliases.names())
        return sorted(name for name in names if name.casefold().startswith(key))

    def evaluate(self, text: str, source: str | None = None, depth: int = 0) -> None:
        """
        Evaluate command text line by line.

        At the top level an error aborts only the offending line and is
        passed to on_error; inside an alias it aborts the whole expansion.

        Args:
            text: One or more command lines.
            source: Name of the file the text was loaded from, if any.
            depth: Alias nesting depth of this call.

        Raises:
            RecursionLimitError: If depth reached MAX_DEPTH.
            QuitRequested: If a quit command was evaluated.
            GopherError: Errors of nested (depth > 0) evaluation.
        """
        if depth >= self.MAX_DEPTH:
            raise RecursionLimitError("eval() nested too deeply")

        for line_no, line in enumerate(split_lines(text), 1):
            try:
                self._evaluate_line(line, source, line_no, depth)
            except GopherError as e:
                if depth > 0:
                    raise
                self._report(e)

    def _evaluate_line(self, line: str, source: str | None, line_no: int, depth: int) -> None:
        tokens = Tokenizer(line, self.session.variables)
        name = tokens.next_token()
        if name is None:
            return

        command = self._commands.get(name.casefold())
        if command is not None:
            command(tokens)
            return

        # the rest of the invoking line is not passed on to the alias
        expansion = self.session.aliases.get(name)
        if expansion is not None:
            logger.debug(f"Expanding alias {name!r} at depth {depth + 1}")
            self.evaluate(expansion, depth=depth + 1)
            return

        if source:
            raise UnknownCommandError(f"unknown command `{name}` in file `{source}` at line {line_no}")
        raise UnknownCommandError(f"unknown command `{name}`")

    def _report(self, error: GopherError) -> None:
        logger.debug(f"{error.__class__.__name__}: {error}")
        self.on_error(error)

    def _show_error(self, error: GopherError) -> None:
        self.pager.echo(f"error: {error}")

    def _find_item(self, selectors: SelectorList, text: str) -> Selector:
        if not text.strip():
            raise UsageError("missing <item-id>")
        sel = selectors.find_by_text(text)
        if sel is None:
            raise NoSuchItemError(f"no item `{text.strip()}`")
        return sel

    def _cmd_quit(self, tokens: Tokenizer) -> None:
        raise QuitRequested()

    def _cmd_open(self, tokens: Tokenizer) -> None:
        target = parse_selector(tokens.next_token())
        if target is None:
            raise UsageError("usage: open <url>")
        self.navigator.navigate(target)

    def _cmd_show(self, tokens: Tokenizer) -> None:
        self.pager.page(self.navigator.renderer.render(self.session.menu, tokens.next_token()))

    def _cmd_save(self, tokens: Tokenizer) -> None:
        self.navigator.save(self._find_item(self.session.menu, tokens.rest()))

    def _cmd_back(self, tokens: Tokenizer) -> None:
        self.navigator.back()

    def _cmd_help(self, tokens: Tokenizer) -> None:
        topic = tokens.next_token()
        if topic:
            key = topic.casefold()
            if key == "commands":
                self.pager.page("available commands\n" + format_columns(self.command_names()))
                return
            if key in HELP_TOPICS:
                self.pager.page(HELP_TOPICS[key])
                return

        topics = sorted(set(HELP_TOPICS) | {"commands"})
        self.pager.page(
            "available topics, type `help <topic>` to get more information\n"
            + format_columns(topics)
        )

    def _cmd_history(self, tokens: Tokenizer) -> None:
        target = self.session.history.find_by_text(tokens.rest())
        if target is not None:
            self.navigator.navigate(target)
        else:
            self.pager.page(self.navigator.renderer.render(self.session.history, tokens.next_token()))

    def _cmd_bookmarks(self, tokens: Tokenizer) -> None:
        bookmarks = self.session.bookmarks
        target = bookmarks.find_by_text(tokens.rest())
        if target is not None:
            self.navigator.navigate(target)
            return

        name = tokens.next_token()
        url = tokens.next_token()
        if url:
            bookmark = parse_selector(url)
            bookmark.name = name
            bookmarks.append(bookmark)
            logger.debug(f"Added bookmark {name!r}: {url}")
        else:
            self.pager.page(self.navigator.renderer.render(bookmarks, name))

    def _cmd_see(self, tokens: Tokenizer) -> None:
        target = self._find_item(self.session.menu, tokens.rest())
        if target.is_navigable():
            self.pager.echo(render_selector(target))

    def _cmd_set(self, tokens: Tokenizer) -> None:
        self._edit_store(self.session.variables, tokens)

    def _cmd_alias(self, tokens: Tokenizer) -> None:
        self._edit_store(self.session.aliases, tokens)

    def _cmd_type(self, tokens: Tokenizer) -> None:
        self._edit_store(self.session.typehandlers, tokens)

    def _edit_store(self, store: VariableStore, tokens: Tokenizer) -> None:
        """List all entries, show one entry, or create/update one entry."""
        name = tokens.next_token()
        value = tokens.next_token()

        if name is None:
            listing = "\n".join(f'{var.name} = "{var.value}"' for var in store)
            if listing:
                self.pager.page(listing)
        elif value is None:
            current = store.get(name)
            self.pager.echo(current if current is not None else f"{name} is not set")
        else:
            store.set(name, value)
