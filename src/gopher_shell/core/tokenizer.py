"""Tokenizer for command lines."""

from .text_utils import BLANKS, skip_chars, split_token
from .variables import VariableStore

COMMENT = "#"
QUOTE = '"'
VARIABLE = "$"


class Tokenizer:
    """Splits one command line into tokens.

    Tokens are separated by blanks. A token starting with a double quote
    runs verbatim to the closing quote, a token starting with $ is replaced
    by the value of that variable (empty if unset) and # starts a comment.
    """

    def __init__(self, line: str, variables: VariableStore | None = None):
        self.line = line
        self.variables = variables
        self.pos = 0

    def next_token(self) -> str | None:
        """
        Return the next token, or None at the end of the line.
        """
        self.pos = skip_chars(self.line, self.pos, BLANKS)
        if self.pos >= len(self.line) or self.line[self.pos] == COMMENT:
            self.pos = len(self.line)
            return None

        char = self.line[self.pos]
        if char == QUOTE:
            token, self.pos = split_token(self.line, self.pos + 1, QUOTE)
            return token if token is not None else ""

        token, self.pos = split_token(self.line, self.pos, BLANKS)
        if char == VARIABLE:
            return self._lookup(token[1:])
        return token

    def _lookup(self, name: str) -> str:
        if self.variables is None:
            return ""
        return self.variables.get(name) or ""

    def rest(self) -> str:
        """The unconsumed remainder of the line."""
        return self.line[self.pos :]
