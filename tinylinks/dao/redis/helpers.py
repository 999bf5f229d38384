import functools
import redis
from collections.abc import Callable
from typing import TypeVar

from tinylinks.dao.exceptions import DataStoreError


__all__ = ['handle_redis_connection_error', 'redis_location']


F = TypeVar('F')


def redis_location(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' for a Redis client's connection pool"""
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_connection_error(method: F) -> F:
    """Wrap Redis-interacting DAO methods to surface Redis failures as DataStoreError

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise any redis.exceptions.RedisError
            (connection errors, timeouts, or errors replied by the server).

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_connection_error
        ... def get_count(self):
        ...     return self.redis.get('count')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e
        except redis.exceptions.TimeoutError as e:
            raise DataStoreError(f'Timed out talking to Redis at {redis_location(self.redis)}.') from e
        except redis.exceptions.RedisError as e:
            # e.g. READONLY replica, OOM, WRONGTYPE / non-integer counter
            raise DataStoreError(f'Redis at {redis_location(self.redis)} rejected the command: {e}') from e

    return wrapper
