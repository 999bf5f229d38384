"""Helper utilities shared by the shortening engine and its handlers.

Functions:
    utc_now_iso() -> str
        Current UTC time as an ISO-8601 string (seconds precision)
    minutes_to_ttl(minutes: int) -> int | None
        Convert a link lifetime in minutes into a store TTL in seconds
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
"""

import os
import functools
from datetime import datetime, UTC
from collections.abc import Callable

from tinylinks.constants import TTL
from tinylinks.exceptions import MissingEnvironmentVariableError


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string

    Example:
        >>> utc_now_iso()
        '2025-10-15T12:00:00+00:00'
    """
    return datetime.now(UTC).isoformat(timespec='seconds')


def minutes_to_ttl(minutes: int) -> int | None:
    """Convert a lifetime in minutes into a TTL in seconds

    A lifetime of 0 minutes means the records never expire.

    Example:
        >>> minutes_to_ttl(60)
        3600
        >>> minutes_to_ttl(0) is None
        True
    """
    return minutes * TTL.ONE_MINUTE if minutes > 0 else None


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('TINYURL_APP_REDIS_ADDR')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'TINYURL_APP_REDIS_ADDR'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
