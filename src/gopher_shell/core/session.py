"""Session state shared by the navigator and the interpreter."""

from dataclasses import dataclass, field

from .selector import Selector, SelectorList
from .variables import VariableStore

DOWNLOAD_DIRECTORY_VAR = "download_directory"


@dataclass
class Session:
    """All mutable state of one running client.

    Attributes:
        variables: User variables, referenced as $name.
        aliases: Command name to command line.
        typehandlers: Selector type character to command template.
        menu: The currently displayed menu.
        history: Visited menus, newest first.
        bookmarks: User-defined bookmarks.
    """

    variables: VariableStore = field(default_factory=VariableStore)
    aliases: VariableStore = field(default_factory=VariableStore)
    typehandlers: VariableStore = field(default_factory=VariableStore)
    menu: SelectorList = field(default_factory=SelectorList)
    history: SelectorList = field(default_factory=SelectorList)
    bookmarks: SelectorList = field(default_factory=SelectorList)

    @classmethod
    def create(cls, download_directory: str = "~") -> "Session":
        """Create a session with the built-in variables set."""
        session = cls()
        session.variables.set(DOWNLOAD_DIRECTORY_VAR, download_directory)
        return session

    def current_location(self) -> Selector | None:
        """The menu the user is looking at, i.e. the history head."""
        return self.history.head

    def replace_menu(self, menu: SelectorList) -> None:
        """Swap in a freshly loaded menu."""
        self.menu = menu

    def record_visit(self, selector: Selector) -> bool:
        """
        Push a copy of selector onto history unless it already is the head.

        Returns:
            True if a new history entry was added.
        """
        if self.history.head is selector:
            return False
        self.history.push(selector.copy())
        return True

    def handler_for(self, type_char: str) -> str | None:
        """Get the handler template registered for a type."""
        return self.typehandlers.get(type_char)
