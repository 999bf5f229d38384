"""Utility functions for application configuration management.

Configuration is read from environment variables. Variable names match
those of existing deployments:

    TINYURL_APP_REDIS_ADDR      – '<host>:<port>' of Redis (default: 'localhost:6479')
    TINYURL_APP_REDIS_PWD       – Redis password (default: none)
    TINYURL_APP_REDIS_USER      – Redis ACL username (optional)
    TINYURL_APP_REDIS_DB        – Redis database index (default: 0)
    TINYURL_APP_REDIS_TIMEOUT   – socket timeout in seconds (default: 5)
    TINYURL_APP_KEY_PREFIX      – key namespace prefix (default: 'go_tiny_url')

The loaded configuration follows this structure:

    {
        "redis": {
            "host": "localhost",
            "port": 6479,
            "db": 0,
            "username": None,
            "password": None,
            "socket_timeout": 5.0
        },
        "prefix": "go_tiny_url"
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    parse_redis_addr(addr: str) -> tuple[str, int]
        Split a '<host>:<port>' address.

    load_config() -> dict
        Load the application configuration from the environment.

Example:
    Typical usage inside a handler:

        >>> from tinylinks.utils.config import load_config
        >>> config = load_config()
        >>> redis_config = {f'redis_{k}': v for k, v in config['redis'].items()}
        >>> dao = KeyValueRedisDAO(**redis_config, prefix=config['prefix'])
"""

import os
import logging

from tinylinks.types import AppConfiguration
from tinylinks.constants import ENV, Defaults
from tinylinks.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def _int_setting(name: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(name, '')
    if not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise BadConfigurationError(f"'{name}' must be an integer (given value: {raw!r}).") from None
    if value < minimum:
        raise BadConfigurationError(f"'{name}' must be >= {minimum} (given value: {value}).")
    return value


def parse_redis_addr(addr: str) -> tuple[str, int]:
    """Split a Redis address into host and port

    Raises:
        BadConfigurationError:
            If the address lacks a host or its port isn't a valid integer.

    Example:
        >>> parse_redis_addr('redis.internal:6379')
        ('redis.internal', 6379)
    """
    host, sep, port = addr.strip().rpartition(':')
    if not sep or not host:
        raise BadConfigurationError(f"Redis address must look like '<host>:<port>' (given value: {addr!r}).")
    try:
        port_number = int(port)
    except ValueError:
        raise BadConfigurationError(f'Redis port must be an integer (given value: {port!r}).') from None
    if not 0 < port_number < 65536:
        raise BadConfigurationError(f'Redis port must be within 1-65535 (given value: {port_number}).')
    return host, port_number


def load_config() -> AppConfiguration:
    """Load the application configuration from environment variables

    Returns:
        dict: Redis connection parameters and the key prefix.

    Raises:
        BadConfigurationError:
            If any variable holds an invalid value.

    Example:
        >>> os.environ['TINYURL_APP_REDIS_ADDR'] = 'redis.internal:6379'
        >>> load_config()['redis']['host']
        'redis.internal'
    """
    host, port = parse_redis_addr(os.environ.get(ENV.Redis.ADDR) or Defaults.REDIS_ADDR)
    config = {
        'redis': {
            'host': host,
            'port': port,
            'db': _int_setting(ENV.Redis.DB, Defaults.REDIS_DB),
            'username': os.environ.get(ENV.Redis.USERNAME) or None,
            'password': os.environ.get(ENV.Redis.PASSWORD) or None,
            'socket_timeout': float(_int_setting(ENV.Redis.TIMEOUT, Defaults.REDIS_SOCKET_TIMEOUT, minimum=1)),
        },
        'prefix': os.environ.get(ENV.Redis.KEY_PREFIX) or Defaults.KEY_PREFIX,
    }

    logger.debug(
        'Loaded configuration from environment.',
        extra={'appEnv': app_env(), 'redisHost': host, 'redisPort': port, 'redisDb': config['redis']['db']},
    )
    return config
