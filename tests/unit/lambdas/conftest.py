import pytest

from tinylinks.dao.memory import KeyValueMemoryDAO
from tinylinks.services import ShortLinkService


@pytest.fixture
def service():
    """Shortening service backed by an in-process store."""
    return ShortLinkService(dao=KeyValueMemoryDAO())
