"""Error types reported by the Gopher shell.

Every error derived from GopherError aborts the current operation and is
shown to the user; the session and its state stay intact.
"""


class GopherError(Exception):
    """Base class for all reportable errors."""

    pass


class ResolutionError(GopherError):
    """A hostname could not be resolved."""

    pass


class GopherConnectionError(GopherError):
    """No resolved address accepted a connection."""

    pass


class TransferError(GopherError):
    """Receiving a response failed."""

    pass


class FileError(GopherError):
    """A local file could not be created or written."""

    pass


class NoHandlerError(GopherError):
    """A selector type has no registered handler."""

    pass


class UnknownCommandError(GopherError):
    """A command matches neither a builtin nor an alias."""

    pass


class RecursionLimitError(GopherError):
    """Alias expansion nested too deeply."""

    pass


class UsageError(GopherError):
    """A command was given missing or invalid arguments."""

    pass


class NoSuchItemError(GopherError):
    """An item-id does not exist in the addressed list."""

    pass


class QuitRequested(Exception):
    """Raised by the quit command to end the shell loop."""

    pass
