"""Network transports for fetching Gopher resources."""

from .socket_downloader import SocketDownloader

__all__ = ["SocketDownloader"]
