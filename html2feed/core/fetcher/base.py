"""Abstract base class for document fetchers."""

from abc import ABC, abstractmethod

from html2feed.models import FetchResult


class HTMLFetcher(ABC):
    """Abstract base class for HTML fetchers.

    Implement this interface to plug in a different transport.
    """

    @abstractmethod
    def fetch(self, url: str) -> FetchResult:
        """Fetch a document.

        Args:
            url: URL to fetch

        Returns:
            FetchResult with the raw body and status

        Raises:
            FetchError: If the document cannot be retrieved

        """
        pass

    def close(self) -> None:
        """Release transport resources."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
