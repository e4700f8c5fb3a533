"""gopher-shell - an interactive client for the Gopher protocol."""

__version__ = "0.6.0"
