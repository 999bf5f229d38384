"""Shortening engine backed by a key/value DAO

ShortLinkService implements create, resolve and detail lookup of short links.
It keeps no state of its own: every record lives in the data store, so a single
instance can be shared by concurrent workers as long as the DAO is thread-safe.

Records written for every newly minted short link (all with the same TTL):

    <prefix>:short_link:<code>:url          -> original URL
    <prefix>:url_hash:<fingerprint>:url     -> code
    <prefix>:shortlink:<code>:detail        -> {"url", "created_at", "expiration_in_minutes"}

Example:
    >>> service = ShortLinkService(dao=KeyValueRedisDAO(...))
    >>> service.shorten('https://example.com', expiration_in_minutes=60)
    '1'
    >>> service.shorten('https://example.com', expiration_in_minutes=60)  # deduplicated
    '1'
    >>> service.unshorten('1')
    'https://example.com'
"""

import logging
from urllib.parse import urlparse

from beartype import beartype

from tinylinks.constants import EXPIRED_SENTINEL
from tinylinks.models import ShortLinkDetail
from tinylinks.exceptions import InvalidInputError
from tinylinks.dao.base import KeyValueBaseDAO
from tinylinks.dao.exceptions import DataStoreError, ShortLinkNotFoundError
from tinylinks.services.base_shortener_service import ShortenerBaseService
from tinylinks.utils.encoder import encode_base62
from tinylinks.utils.fingerprint import fingerprint
from tinylinks.utils.helpers import utc_now_iso, minutes_to_ttl


logger = logging.getLogger(__name__)


def validate_url(url: str) -> str:
    """Reject URLs that can't be redirected to

    Raises:
        InvalidInputError:
            If the URL is blank, unparsable or lacks a scheme or host.
    """
    if not url.strip():
        raise InvalidInputError('URL must be a non-empty string.')

    try:
        components = urlparse(url)
    except ValueError as e:
        raise InvalidInputError(f'URL is malformed: {e} (given value: {url!r}).') from e
    if not components.scheme or not components.netloc:
        raise InvalidInputError(f'URL must be absolute, with a scheme and a host (given value: {url!r}).')
    return url


class ShortLinkService(ShortenerBaseService):
    """Shorten URLs and resolve short links against a key/value DAO

    Attributes:
        dao (KeyValueBaseDAO):
            Data store holding the counter and all short link records.
        keys (KeySchema):
            Key schema of the DAO.
    """

    def __init__(self, dao: KeyValueBaseDAO):
        self.dao = dao
        self.keys = dao.keys

    @beartype
    def shorten(self, url: str, expiration_in_minutes: int = 0) -> str:
        """Map a URL to a short code

        Procedure:
        - Step 1: Reject invalid input before touching the data store
        - Step 2: Return the live code already minted for this URL, if any
        - Step 3: Atomically increment the global counter and encode it
        - Step 4: Write the URL, fingerprint and detail records with one shared TTL

        Args:
            url (str):
                Absolute URL to shorten.
            expiration_in_minutes (int):
                Lifetime of the short link, counted from creation. 0 means never expire.

        Returns:
            str: The short code.

        Raises:
            InvalidInputError:
                If the URL is malformed or the expiration is negative.
            DataStoreError:
                On data store connectivity issues.

        NOTE: Two concurrent first-time requests for the same URL may both mint a
              code. The last one to write owns the fingerprint record; both codes
              stay resolvable until they expire.
        NOTE: If the write in step 4 fails, the counter value is skipped for good.
              No code is ever reused.
        """
        # 1- Validate input
        validate_url(url)
        if isinstance(expiration_in_minutes, bool) or expiration_in_minutes < 0:
            raise InvalidInputError(f'Expiration must be a non-negative integer (given value: {expiration_in_minutes}).')

        # 2- Deduplicate on the URL fingerprint
        url_hash = fingerprint(url)
        url_hash_key = self.keys.url_hash_key(url_hash)
        existing = self.dao.get(url_hash_key)
        if existing is not None and existing != EXPIRED_SENTINEL:
            logger.debug('URL already shortened. Reusing short link %s.', existing, extra={'urlHash': url_hash})
            return existing

        # 3- Mint a new code from the global counter
        counter = self.dao.increment(self.keys.counter_key())
        shortcode = encode_base62(counter)

        # 4- Store all records for the new code
        detail = ShortLinkDetail(
            url=url,
            created_at=utc_now_iso(),
            expiration_in_minutes=expiration_in_minutes,
        )
        self.dao.set_many(
            {
                self.keys.link_url_key(shortcode): url,
                url_hash_key: shortcode,
                self.keys.link_detail_key(shortcode): detail.to_json(),
            },
            ttl=minutes_to_ttl(expiration_in_minutes),
        )

        logger.info(
            'Minted new short link.',
            extra={'shortcode': shortcode, 'counter': counter, 'expirationInMinutes': expiration_in_minutes},
        )
        return shortcode

    @beartype
    def unshorten(self, shortcode: str) -> str:
        """Resolve a short code to its original URL

        Lookups never extend the lifetime of a short link.

        Raises:
            ShortLinkNotFoundError:
                If the code was never minted or has expired.
            DataStoreError:
                On data store connectivity issues.
        """
        url = self.dao.get(self.keys.link_url_key(shortcode))
        if url is None:
            logger.debug('Short link %s not found.', shortcode)
            raise ShortLinkNotFoundError(f"Short link '{shortcode}' not found.")
        return url

    @beartype
    def short_link_info(self, shortcode: str) -> ShortLinkDetail:
        """Return the detail document of a short code

        Raises:
            ShortLinkNotFoundError:
                If the code was never minted or has expired.
            DataStoreError:
                On data store connectivity issues, or if the stored document is corrupted.
        """
        detail_key = self.keys.link_detail_key(shortcode)
        document = self.dao.get(detail_key)
        if document is None:
            logger.debug('Short link detail for %s not found.', shortcode)
            raise ShortLinkNotFoundError(f"Short link '{shortcode}' not found.")

        try:
            return ShortLinkDetail.from_json(document)
        except ValueError as e:
            raise DataStoreError(f"Corrupted detail document at key '{detail_key}'.") from e
