"""In-process implementation of the key/value store

KeyValueMemoryDAO honors the same contract as KeyValueRedisDAO (misses return
None, TTLs expire values, increments are atomic) without a network round trip.
It is meant for tests and local runs: nothing is shared between processes and
nothing survives a restart.

Expiry is evaluated lazily against the wall clock (datetime.now(UTC)), so it
can be driven with freezegun in tests.

Example:
    >>> dao = KeyValueMemoryDAO()
    >>> dao.set('go_tiny_url:short_link:1:url', 'https://example.com', ttl=60)
    <KeyValueMemoryDAO prefix='go_tiny_url'>
    >>> dao.get('go_tiny_url:short_link:1:url')
    'https://example.com'
"""

from collections.abc import Mapping
from datetime import datetime, timedelta, UTC
from threading import Lock

from beartype import beartype

from tinylinks.constants import Defaults
from tinylinks.dao.base import KeyValueBaseDAO, validate_ttl
from tinylinks.dao.key_schema import KeySchema
from tinylinks.dao.exceptions import DataStoreError


class KeyValueMemoryDAO(KeyValueBaseDAO):
    """Thread-safe dictionary-backed key/value DAO with TTL support

    Attributes:
        keys (KeySchema):
            Key schema helper for generating namespaced keys.
    """

    def __init__(self, prefix: str | None = Defaults.KEY_PREFIX):
        self.keys = KeySchema(prefix=prefix)
        self._data: dict[str, tuple[str, datetime | None]] = {}
        self.lock = Lock()

    def _expires_at(self, ttl: int | None) -> datetime | None:
        return None if ttl is None else datetime.now(UTC) + timedelta(seconds=ttl)

    def _live_value(self, key: str) -> str | None:
        entry = self._data.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at is not None and expires_at <= datetime.now(UTC):
            del self._data[key]
            return None
        return value

    @beartype
    def get(self, key: str, **kwargs) -> str | None:
        with self.lock:
            return self._live_value(key)

    @beartype
    def set(self, key: str, value: str, ttl: int | None = None, **kwargs) -> 'KeyValueMemoryDAO':
        validate_ttl(ttl)
        with self.lock:
            self._data[key] = (value, self._expires_at(ttl))
        return self

    @beartype
    def set_many(self, mapping: Mapping[str, str], ttl: int | None = None, **kwargs) -> 'KeyValueMemoryDAO':
        validate_ttl(ttl)
        with self.lock:
            expires_at = self._expires_at(ttl)
            for key, value in mapping.items():
                self._data[key] = (value, expires_at)
        return self

    @beartype
    def increment(self, key: str, **kwargs) -> int:
        """Increment a counter, keeping its TTL (like Redis INCR)

        Raises:
            DataStoreError:
                If the stored value isn't an integer.
        """
        with self.lock:
            current = self._live_value(key)
            try:
                counter = int(current or 0) + 1
            except ValueError:
                raise DataStoreError(f"Value at key '{key}' is not an integer.") from None

            expires_at = self._data[key][1] if key in self._data else None
            self._data[key] = (str(counter), expires_at)
            return counter

    def ping(self, **kwargs) -> bool:
        return True

    def __len__(self) -> int:
        with self.lock:
            return sum(1 for key in list(self._data) if self._live_value(key) is not None)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} prefix={self.keys.prefix!r}>'
