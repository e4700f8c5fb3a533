"""Abstract interface for fetching Gopher resources."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.selector import Selector


class Downloader(ABC):
    """Abstract interface for turning a selector into bytes."""

    @abstractmethod
    def download(self, selector: "Selector", query: str | None = None) -> bytes:
        """Fetch the full response for a selector.

        Args:
            selector: The resource to fetch.
            query: Search string sent after a tab, for type 7 selectors.
        """
        pass

    @abstractmethod
    def download_to_temp(self, selector: "Selector") -> str:
        """Fetch a selector into a new temporary file and return its path.

        The caller owns the file and must remove it.
        """
        pass
