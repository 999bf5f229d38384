import re
from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    ONE_MINUTE = 60


class Defaults:
    """Default configuration values."""

    REDIS_ADDR = 'localhost:6479'
    REDIS_DB = 0
    REDIS_SOCKET_TIMEOUT = 5
    KEY_PREFIX = 'go_tiny_url'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        LOG_LEVEL = 'LOG_LEVEL'

    class Redis(StrEnum):
        ADDR = 'TINYURL_APP_REDIS_ADDR'
        PASSWORD = 'TINYURL_APP_REDIS_PWD'  # noqa: S105
        USERNAME = 'TINYURL_APP_REDIS_USER'
        DB = 'TINYURL_APP_REDIS_DB'
        TIMEOUT = 'TINYURL_APP_REDIS_TIMEOUT'
        KEY_PREFIX = 'TINYURL_APP_KEY_PREFIX'


# Fingerprint record value marking a mapping as expired
EXPIRED_SENTINEL = '{}'

# Short links accepted by the HTTP routes
SHORT_LINK_PATTERN = re.compile(r'[a-zA-Z0-9]{1,11}')  # use with fullmatch()

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'
INVALID_REQUEST_BODY = 'INVALID_REQUEST_BODY'
MISSING_SHORT_LINK = 'MISSING_SHORT_LINK'
INVALID_SHORT_LINK = 'INVALID_SHORT_LINK'
SHORT_LINK_NOT_FOUND = 'SHORT_LINK_NOT_FOUND'

# Response events
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
INFO_SUCCESS = 'INFO_SUCCESS'
