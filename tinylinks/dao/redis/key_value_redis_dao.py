"""Data Access Object (DAO) implementation of the key/value store in Redis

This module provides a Redis-based implementation of KeyValueBaseDAO used by
the shortening engine to persist short link records.

Responsibilities:
    - Read and write string values with an optional TTL;
    - Write groups of related records in a single MULTI/EXEC transaction;
    - Increment the global counter with Redis' native INCR;
    - Provide defensive error handling and raise appropriate DAO exceptions.

Classes:
    KeyValueRedisDAO:
        DAO for storing and retrieving short link records in a Redis datastore.

Example:
    >>> from tinylinks.dao.redis import KeyValueRedisDAO

    >>> dao = KeyValueRedisDAO(redis_host='localhost', redis_port=6479)

    >>> dao.increment(dao.keys.counter_key())
    1
    >>> dao.set_many(
    ...     {
    ...         dao.keys.link_url_key('1'): 'https://example.com',
    ...         dao.keys.link_detail_key('1'): '{"url": "https://example.com", ...}',
    ...     },
    ...     ttl=3600,
    ... )
    <KeyValueRedisDAO prefix='go_tiny_url'>
    >>> dao.get(dao.keys.link_url_key('1'))
    'https://example.com'
"""

from collections.abc import Mapping

from beartype import beartype

from tinylinks.dao.base import KeyValueBaseDAO, validate_ttl
from tinylinks.dao.redis.mixins import RedisClientMixin
from tinylinks.dao.redis.helpers import handle_redis_connection_error


class KeyValueRedisDAO(RedisClientMixin, KeyValueBaseDAO):
    """Redis-based Data Access Object (DAO) for short link records

    This class implements the KeyValueBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (KeySchema):
            Key schema helper for generating namespaced keys.

    Methods:
        get(key: str, **kwargs) -> str | None:
            GET a value. Returns None on a miss.

        set(key: str, value: str, ttl: int | None = None, **kwargs) -> KeyValueRedisDAO:
            SET a value with EX <ttl> (or without expiry when ttl is None).

        set_many(mapping: Mapping[str, str], ttl: int | None = None, **kwargs) -> KeyValueRedisDAO:
            SET several values inside one MULTI/EXEC transaction.

        increment(key: str, **kwargs) -> int:
            INCR a counter and return the new value.

        ping(**kwargs) -> bool:
            PING Redis.

        All methods raise DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def get(self, key: str, **kwargs) -> str | None:
        value = self.redis.get(key)
        if isinstance(value, bytes):
            value = value.decode('utf-8')
        return value

    @handle_redis_connection_error
    @beartype
    def set(self, key: str, value: str, ttl: int | None = None, **kwargs) -> 'KeyValueRedisDAO':
        validate_ttl(ttl)
        self.redis.set(key, value, ex=ttl)
        return self

    @handle_redis_connection_error
    @beartype
    def set_many(self, mapping: Mapping[str, str], ttl: int | None = None, **kwargs) -> 'KeyValueRedisDAO':
        """SET several keys atomically with the same TTL

        NOTE: The SET commands are executed as an atomic operation to avoid
              a state where only some of the related records exist, e.g.:

              (worker 1): KeyValueRedisDAO.set_many():
                          -> SET go_tiny_url:short_link:<code>:url <url> EX <ttl>
                          ... interruption
              (worker 2): ShortLinkService.short_link_info():
                          -> GET go_tiny_url:shortlink:<code>:detail  => returns 'nil'
              (worker 1): KeyValueRedisDAO.set_many() continued...:
                          -> SET go_tiny_url:shortlink:<code>:detail <json> EX <ttl>
        """
        validate_ttl(ttl)
        with self.redis.pipeline(transaction=True) as pipe:
            for key, value in mapping.items():
                pipe.set(key, value, ex=ttl)
            pipe.execute()
        return self

    @handle_redis_connection_error
    @beartype
    def increment(self, key: str, **kwargs) -> int:
        # INCR returns the incremented value atomically
        return int(self.redis.incr(key))

    def ping(self, **kwargs) -> bool:
        return self._healthcheck(raise_error=True)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} prefix={self.keys.prefix!r}>'
