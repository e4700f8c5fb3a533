"""Parsing of selector URLs and Gopher directory listings."""

from .selector import DEFAULT_PORT, MENU_TYPE, Selector, SelectorList
from .text_utils import split_lines, split_token

URL_PREFIX = "gopher://"
LISTING_ENCODING = "utf-8"


def render_selector(sel: Selector | None, with_prefix: bool = True) -> str:
    """
    Render the canonical textual form of a selector.

    Args:
        sel: The selector to render.
        with_prefix: Whether to prepend "gopher://".

    Returns:
        "host:port/<type><path>", or "" for None.
    """
    if sel is None:
        return ""
    prefix = URL_PREFIX if with_prefix else ""
    return f"{prefix}{sel.host}:{sel.port}/{sel.type}{sel.path}"


def parse_selector(text: str | None) -> Selector | None:
    """
    Parse a selector from "[gopher://]host[:port]/[type]path".

    A missing port defaults to 70 and a missing type to a menu. The
    canonical URL becomes the selector's display name.

    Args:
        text: The URL-like string.

    Returns:
        A detached Selector, or None for empty input.
    """
    if not text:
        return None

    if text.startswith(URL_PREFIX):
        text = text[len(URL_PREFIX):]

    sel = Selector(type=MENU_TYPE)
    colon = text.find(":")
    slash = text.find("/")

    if colon == -1 and slash == -1:
        sel.host = text
        sel.port = DEFAULT_PORT
        sel.path = ""
    else:
        if colon != -1 and (slash == -1 or colon < slash):
            host, pos = split_token(text, 0, ":")
            port, pos = split_token(text, pos, "/")
            sel.host = host or ""
            sel.port = port or ""
        else:
            host, pos = split_token(text, 0, "/")
            sel.host = host or ""
            sel.port = DEFAULT_PORT
        if pos < len(text):
            sel.type = text[pos]
            pos += 1
        sel.path = text[pos:]

    sel.name = render_selector(sel)
    return sel


def parse_selector_list(raw: bytes | str) -> SelectorList:
    """
    Parse a directory listing into a selector list.

    Each line is "<type><name>\\t<path>\\t<host>\\t<port>". Parsing stops at
    an empty line, a line starting with "." or the end of input. Lines with
    missing fields still produce a selector with empty fields.

    Args:
        raw: Response body as bytes (decoded as UTF-8) or text.

    Returns:
        The parsed selectors, numbered from 1.
    """
    if isinstance(raw, bytes):
        raw = raw.decode(LISTING_ENCODING, errors="replace")

    selectors = SelectorList()
    for line in split_lines(raw):
        if line == "" or line.startswith("."):
            break
        selectors.append(_parse_listing_line(line))

    return selectors


def _parse_listing_line(line: str) -> Selector:
    fields = line[1:].split("\t")
    fields += [""] * (4 - len(fields))
    name, path, host, port = fields[:4]
    return Selector(type=line[0], name=name, path=path, host=host, port=port)
