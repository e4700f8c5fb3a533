"""Gopher selector model and ordered selector lists."""

import re
from dataclasses import dataclass, replace
from typing import Iterator

from .text_utils import contains_ignore_case

DEFAULT_PORT = "70"

LEADING_NUMBER = re.compile(r"[0-9]+")

MENU_TYPE = "1"
TEXT_TYPE = "0"
SEARCH_TYPE = "7"
BINARY_TYPES = frozenset("4569")
INFO_TYPES = frozenset("i3")


@dataclass
class Selector:
    """One addressable Gopher resource.

    Attributes:
        type: Gopher type character.
        name: Display string.
        host: Server hostname.
        port: Server port as text.
        path: Selector string sent to the server.
        index: 1-based position in the owning list, 0 when detached.
    """

    type: str = MENU_TYPE
    name: str = ""
    host: str = ""
    port: str = DEFAULT_PORT
    path: str = ""
    index: int = 0

    def copy(self) -> "Selector":
        """Return a detached copy."""
        return replace(self, index=0)

    def is_navigable(self) -> bool:
        """Informational and error lines cannot be selected."""
        return self.type not in INFO_TYPES

    def matches(self, text: str) -> bool:
        """Check if text occurs in the name or path, ignoring case."""
        return contains_ignore_case(self.name, text) or contains_ignore_case(self.path, text)


class SelectorList:
    """Insertion-ordered list of selectors with dense 1-based indices.

    Appending assigns the next index. The head operations push/pop are used
    for history, where the newest entry sits in front and carries the
    highest index, so existing indices never move.
    """

    def __init__(self, selectors: list[Selector] | None = None):
        self._items: list[Selector] = []
        for sel in selectors or []:
            self.append(sel)

    def append(self, sel: Selector) -> Selector:
        """Add sel to the end, numbering it after the current last entry."""
        sel.index = len(self._items) + 1
        self._items.append(sel)
        return sel

    def push(self, sel: Selector) -> Selector:
        """Add sel to the front with the next free index."""
        sel.index = len(self._items) + 1
        self._items.insert(0, sel)
        return sel

    def pop(self) -> Selector | None:
        """Remove and return the head entry."""
        if not self._items:
            return None
        sel = self._items.pop(0)
        sel.index = 0
        return sel

    @property
    def head(self) -> Selector | None:
        return self._items[0] if self._items else None

    def find(self, index: int) -> Selector | None:
        """Find the entry showing the given number."""
        if index <= 0:
            return None
        for sel in self._items:
            if sel.index == index:
                return sel
        return None

    def find_by_text(self, text: str | None) -> Selector | None:
        """
        Resolve user input that starts with a displayed number.

        Leading blanks are skipped and the ASCII digits that follow are
        read, so "3." and "3foo" both select entry 3. Input that does not
        start with a digit resolves to None.
        """
        if not text:
            return None
        match = LEADING_NUMBER.match(text.lstrip())
        if match is None:
            return None
        return self.find(int(match.group()))

    def filter(self, text: str | None) -> list[Selector]:
        """Entries whose name or path contains text; all when text is empty."""
        if not text:
            return list(self._items)
        return [sel for sel in self._items if sel.matches(text)]

    def __iter__(self) -> Iterator[Selector]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
