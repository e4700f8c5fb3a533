"""String helpers used by the protocol codec and the tokenizer."""

import re

BLANKS = " \v\t"
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def skip_chars(text: str, pos: int, chars: str) -> int:
    """Return the first position at or after pos not in chars."""
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def split_token(text: str, pos: int, delims: str) -> tuple[str | None, int]:
    """
    Cut the text starting at pos up to the next delimiter.

    The delimiter itself is consumed. Returns (None, pos) when nothing is
    left to split.

    Args:
        text: The text to split.
        pos: Position to start from.
        delims: Characters that end the token.

    Returns:
        Tuple of (token, position after the delimiter).
    """
    if pos >= len(text):
        return None, pos

    end = pos
    while end < len(text) and text[end] not in delims:
        end += 1

    token = text[pos:end]
    if end < len(text):
        end += 1
    return token, end


def contains_ignore_case(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.casefold() in haystack.casefold()


def split_lines(text: str) -> list[str]:
    """Split text on CRLF, CR or LF line endings."""
    return LINE_BREAK.split(text)
