"""Expansion of external handler command templates."""

from typing import Callable

from .selector import Selector


def expand_handler(template: str, selector: Selector, fetch_file: Callable[[], str]) -> tuple[str, str | None]:
    """
    Substitute the placeholders of a handler template.

    Placeholders: %h host, %p port, %s path, %n name, %% a literal percent,
    %f a temporary file holding the downloaded selector. fetch_file is
    called at most once, and only if %f occurs. Unknown placeholders expand
    to nothing.

    Args:
        template: The handler command template.
        selector: The selector being opened.
        fetch_file: Downloads the selector and returns the file path.

    Returns:
        Tuple of (expanded command, temporary file path or None).
    """
    filename = None
    parts = []
    i = 0
    while i < len(template):
        char = template[i]
        if char != "%" or i + 1 >= len(template):
            parts.append(char)
            i += 1
            continue

        code = template[i + 1]
        if code == "%":
            parts.append("%")
        elif code == "h":
            parts.append(selector.host)
        elif code == "p":
            parts.append(selector.port)
        elif code == "s":
            parts.append(selector.path)
        elif code == "n":
            parts.append(selector.name)
        elif code == "f":
            if filename is None:
                filename = fetch_file()
            parts.append(filename)
        i += 2

    return "".join(parts), filename
