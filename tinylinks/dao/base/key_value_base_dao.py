"""Abstract base class for key/value data access objects (DAOs).

This class establishes a consistent contract for all key/value DAO implementations
used by the shortening engine, regardless of the underlying storage mechanism
(e.g., Redis or an in-process dictionary).

Responsibilities:
    - Provide get / set-with-TTL / atomic increment primitives.
    - Standardize error handling across multiple data store implementations.
    - Expose the key schema used to lay out short link records.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from tinylinks.dao.redis import KeyValueRedisDAO

        >>> dao = KeyValueRedisDAO(...)
        >>> dao.set('go_tiny_url:short_link:1:url', 'https://example.com', ttl=3600)

        >>> dao.get('go_tiny_url:short_link:1:url')
        'https://example.com'

        >>> dao.get('go_tiny_url:short_link:2:url') is None
        True

        >>> dao.increment(dao.keys.counter_key())
        1
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from tinylinks.dao.key_schema import KeySchema


class KeyValueBaseDAO(ABC):
    """Interface for key/value data access objects (DAOs).

    Attributes:
        keys (KeySchema):
            Key schema helper for generating namespaced key names.

    Methods:
        get(key: str, **kwargs) -> str | None:
            Retrieve a value. Returns None on a miss.
            Raises DataStoreError on connection or read failure.

        set(key: str, value: str, ttl: int | None = None, **kwargs) -> KeyValueBaseDAO:
            Upsert a value with an optional TTL in seconds.
            Raises DataStoreError on connection or write failure.

        set_many(mapping: Mapping[str, str], ttl: int | None = None, **kwargs) -> KeyValueBaseDAO:
            Upsert several values atomically, all sharing the same TTL.
            Raises DataStoreError on connection or write failure.

        increment(key: str, **kwargs) -> int:
            Atomically increment an integer counter and return its new value.
            Raises DataStoreError on connection or write failure.

        ping(**kwargs) -> bool:
            Check data store connectivity.

    Subclassing:
        Datastore-specific implementations (e.g., KeyValueRedisDAO or
        KeyValueMemoryDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Values are expected to expire automatically. The DAO does not
          provide an interface to manually delete entries.
        - A TTL of None means the value never expires.
    """

    keys: KeySchema

    @abstractmethod
    def get(self, key: str, **kwargs) -> str | None:
        """Retrieve a value from the data store.

        Args:
            key (str):
                Fully qualified key name.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str | None: The stored value, or None if the key is missing or expired.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str, ttl: int | None = None, **kwargs) -> 'KeyValueBaseDAO':
        """Insert or overwrite a value in the data store.

        Args:
            key (str):
                Fully qualified key name.

            value (str):
                Value to store.

            ttl (int | None):
                Time-To-Live in seconds. None for no expiry.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            KeyValueBaseDAO: self (for method chaining)

        Raises:
            ValueError:
                If ttl is not a positive integer.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def set_many(self, mapping: Mapping[str, str], ttl: int | None = None, **kwargs) -> 'KeyValueBaseDAO':
        """Insert or overwrite several values as one atomic operation.

        Args:
            mapping (Mapping[str, str]):
                Key names mapped to values to store.

            ttl (int | None):
                Time-To-Live in seconds shared by all keys. None for no expiry.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            KeyValueBaseDAO: self (for method chaining)

        Raises:
            ValueError:
                If ttl is not a positive integer.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def increment(self, key: str, **kwargs) -> int:
        """Atomically increment a counter by 1.

        The counter is created (at 0) on first increment.

        Args:
            key (str):
                Fully qualified counter key name.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The counter value after incrementing.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def ping(self, **kwargs) -> bool:
        """Check data store connectivity.

        Returns:
            bool: True if the data store is reachable.

        Raises:
            DataStoreError:
                If the data store is unreachable.
        """
        pass


def validate_ttl(ttl: int | None) -> None:
    """Reject TTL values the data stores can't honor

    Raises:
        ValueError:
            If ttl is given and isn't a positive integer.
    """
    if ttl is not None and ttl <= 0:
        raise ValueError(f'TTL must be a positive number of seconds or None (given value: {ttl}).')
