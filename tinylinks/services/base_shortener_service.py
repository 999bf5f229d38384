"""Abstract base class for URL shortening services.

HTTP handlers and the CLI depend only on this interface, so the storage
backend behind a concrete service can be swapped without touching them.

Example:
    >>> from tinylinks.services import ShortLinkService
    >>> from tinylinks.dao.memory import KeyValueMemoryDAO

    >>> service = ShortLinkService(dao=KeyValueMemoryDAO())
    >>> code = service.shorten('https://example.com', expiration_in_minutes=60)
    >>> service.unshorten(code)
    'https://example.com'
    >>> service.short_link_info(code).expiration_in_minutes
    60
"""

from abc import ABC, abstractmethod

from tinylinks.models import ShortLinkDetail


class ShortenerBaseService(ABC):
    """Interface for URL shortening services.

    Methods:
        shorten(url: str, expiration_in_minutes: int = 0) -> str:
            Map a URL to a short code, reusing a live code for the same URL.
            Raises InvalidInputError for an empty/malformed URL or a negative expiration.
            Raises DataStoreError on data store failures.

        unshorten(shortcode: str) -> str:
            Resolve a short code back to its URL.
            Raises ShortLinkNotFoundError if the code was never minted or has expired.
            Raises DataStoreError on data store failures.

        short_link_info(shortcode: str) -> ShortLinkDetail:
            Return the detail document of a short code.
            Raises ShortLinkNotFoundError if the code was never minted or has expired.
            Raises DataStoreError on data store failures.
    """

    @abstractmethod
    def shorten(self, url: str, expiration_in_minutes: int = 0) -> str:
        pass

    @abstractmethod
    def unshorten(self, shortcode: str) -> str:
        pass

    @abstractmethod
    def short_link_info(self, shortcode: str) -> ShortLinkDetail:
        pass
