"""Socket-based Gopher download engine."""

import logging
import os
import socket
import tempfile

from ..core.selector import DEFAULT_PORT, Selector
from ..errors import FileError, GopherConnectionError, ResolutionError, TransferError
from ..interfaces import Downloader

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
REQUEST_ENCODING = "utf-8"
TEMP_PREFIX = "gopher_shell."


class SocketDownloader(Downloader):
    """Fetches selectors over a fresh TCP connection per request.

    Supports IPv4 and IPv6; resolved addresses are tried in resolver
    order until one connects. No timeout is applied, so an unresponsive
    server blocks the caller.
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE, temp_dir: str | None = None):
        """
        Initialize the downloader.

        Args:
            chunk_size: Receive buffer growth increment in bytes.
            temp_dir: Directory for temporary files (system default if None).
        """
        self.chunk_size = chunk_size
        self.temp_dir = temp_dir

    def _connect(self, host: str, port: str) -> socket.socket:
        """
        Resolve host/port and connect to the first reachable address.

        Raises:
            ResolutionError: If the host cannot be resolved.
            GopherConnectionError: If no address accepts the connection.
        """
        try:
            candidates = socket.getaddrinfo(
                host, port, socket.AF_UNSPEC, socket.SOCK_STREAM, socket.IPPROTO_TCP
            )
        except (socket.gaierror, UnicodeError) as e:
            raise ResolutionError(f"cannot resolve hostname `{host}`") from e

        if not candidates:
            raise ResolutionError(f"cannot resolve hostname `{host}`")

        for family, socktype, proto, _, address in candidates:
            try:
                sock = socket.socket(family, socktype, proto)
            except OSError:
                continue
            try:
                sock.connect(address)
            except OSError as e:
                logger.debug(f"Connect to {address} failed: {e}")
                sock.close()
                continue
            logger.debug(f"Connected to {address}")
            return sock

        raise GopherConnectionError(f"cannot connect to `{host}`:`{port}`")

    def download(self, selector: Selector, query: str | None = None) -> bytes:
        """
        Fetch the full response for a selector.

        Sends "path\\r\\n", or "path\\tquery\\r\\n" with a query, and reads
        until the server closes the connection.

        Args:
            selector: The resource to fetch.
            query: Optional search string.

        Returns:
            The raw response bytes.

        Raises:
            ResolutionError: If the host cannot be resolved.
            GopherConnectionError: If no address accepts the connection.
            TransferError: If sending or receiving fails.
        """
        port = selector.port or DEFAULT_PORT
        if query is not None:
            request = f"{selector.path}\t{query}\r\n"
        else:
            request = f"{selector.path}\r\n"

        logger.debug(f"Requesting {selector.path!r} from {selector.host}:{port}")
        sock = self._connect(selector.host, port)
        data = bytearray()
        try:
            sock.sendall(request.encode(REQUEST_ENCODING))
            while True:
                received = sock.recv(self.chunk_size)
                if not received:
                    break
                data.extend(received)
        except OSError as e:
            raise TransferError(f"transfer from `{selector.host}` failed: {e}") from e
        finally:
            sock.close()

        logger.debug(f"Received {len(data)} bytes from {selector.host}:{port}")
        return bytes(data)

    def download_to_temp(self, selector: Selector) -> str:
        """
        Fetch a selector into a new, uniquely named temporary file.

        Returns:
            Path of the file; the caller must remove it.

        Raises:
            FileError: If the temporary file cannot be written.
        """
        data = self.download(selector)
        try:
            fd, filename = tempfile.mkstemp(prefix=TEMP_PREFIX, dir=self.temp_dir)
        except OSError as e:
            raise FileError(f"cannot create temporary file: {e}") from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            os.remove(filename)
            raise FileError(f"cannot write temporary file `{filename}`: {e}") from e

        logger.debug(f"Wrote {len(data)} bytes to {filename}")
        return filename
