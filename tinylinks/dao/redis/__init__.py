from tinylinks.dao.redis.mixins import RedisClientMixin
from tinylinks.dao.redis.key_value_redis_dao import KeyValueRedisDAO


__all__ = [
    'KeyValueRedisDAO',
    'RedisClientMixin',
]
