from tinylinks.dao.key_schema import KeySchema
from tinylinks.dao.exceptions import DAOError, DataStoreError, ShortLinkNotFoundError


__all__ = [
    'KeySchema',
    'DAOError',
    'DataStoreError',
    'ShortLinkNotFoundError',
]
