"""Case-insensitive name/value store for variables, aliases and handlers."""

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Variable:
    """A single name/value pair."""

    name: str
    value: str = ""


class VariableStore:
    """Ordered, case-insensitive mapping of names to string values.

    New names are inserted at the head; setting an existing name replaces
    its value in place and keeps the name as first spelled.
    """

    def __init__(self, entries: dict[str, str] | None = None):
        self._entries: list[Variable] = []
        for name, value in (entries or {}).items():
            self.set(name, value)

    def _find(self, name: str) -> Variable | None:
        key = name.casefold()
        for var in self._entries:
            if var.name.casefold() == key:
                return var
        return None

    def get(self, name: str) -> str | None:
        """Get the value for name, or None if unset."""
        var = self._find(name)
        return var.value if var else None

    def set(self, name: str, value: str | None) -> str:
        """
        Create or update an entry.

        Args:
            name: Entry name (matched case-insensitively).
            value: New value; None is stored as the empty string.

        Returns:
            The stored value.
        """
        value = value if value is not None else ""
        var = self._find(name)
        if var is None:
            self._entries.insert(0, Variable(name=name, value=value))
        else:
            var.value = value
        return value

    def names(self) -> list[str]:
        """All entry names in store order."""
        return [var.name for var in self._entries]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name) is not None

    def __iter__(self) -> Iterator[Variable]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
