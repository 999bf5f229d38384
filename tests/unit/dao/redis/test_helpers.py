"""Unit tests for handle_redis_connection_error decorator.

This test suite verifies that the decorator properly handles Redis
connection failures and preserves the original method's behavior.

Test coverage includes:
    1. Normal function execution
       - Ensures the wrapped method executes and returns its result.
    2. Connection error handling
       - Ensures Redis connection errors and timeouts are converted into DataStoreError.
       - Ensures errors replied by the server (READONLY, OOM, ...) become DataStoreError.
       - Ensures non-Redis errors propagate unchanged.
    3. Function metadata preservation
       - Confirms functools.wraps preserves the original function's name and docstring.
"""

import pytest
import redis
from unittest.mock import MagicMock

from tinylinks.dao.redis.helpers import handle_redis_connection_error
from tinylinks.dao.exceptions import DataStoreError


class DummyDAO:
    def __init__(self, error: Exception | None = None):
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {
            'host': 'localhost',
            'port': 6379,
            'db': 0,
        }
        self.error = error

    @handle_redis_connection_error
    def ping(self):
        """Ping the data store."""
        if self.error is not None:
            raise self.error
        return 'OK'


# -------------------------------
# 1. Normal execution
# -------------------------------


def test_decorator_allows_normal_execution():
    """Ensure the wrapped function executes normally when no error occurs."""
    assert DummyDAO().ping() == 'OK'


# -------------------------------
# 2. Connection error handling
# -------------------------------


def test_decorator_transforms_redis_connection_error():
    """Ensure Redis ConnectionError is caught and re-raised as DataStoreError."""
    dao = DummyDAO(error=redis.exceptions.ConnectionError('Connection refused'))

    with pytest.raises(DataStoreError, match="Can't connect to Redis at localhost:6379/0.") as exc_info:
        dao.ping()
    assert isinstance(exc_info.value.__cause__, redis.exceptions.ConnectionError)


def test_decorator_transforms_redis_timeout_error():
    dao = DummyDAO(error=redis.exceptions.TimeoutError('Timeout reading from socket'))

    with pytest.raises(DataStoreError, match='Timed out talking to Redis at localhost:6379/0.'):
        dao.ping()


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ReadOnlyError("You can't write against a read only replica."),
        redis.exceptions.ResponseError("OOM command not allowed when used memory > 'maxmemory'."),
        redis.exceptions.ResponseError('value is not an integer or out of range'),
    ],
)
def test_decorator_transforms_server_errors(error):
    """Ensure errors replied by the server are raised as DataStoreError too."""
    dao = DummyDAO(error=error)

    with pytest.raises(DataStoreError, match='Redis at localhost:6379/0 rejected the command') as exc_info:
        dao.ping()
    assert exc_info.value.__cause__ is error


def test_decorator_ignores_non_redis_errors():
    dao = DummyDAO(error=KeyError('boom'))

    with pytest.raises(KeyError):
        dao.ping()


# -------------------------------
# 3. Metadata preservation
# -------------------------------


def test_decorator_preserves_metadata():
    assert DummyDAO.ping.__name__ == 'ping'
    assert DummyDAO.ping.__doc__ == 'Ping the data store.'
