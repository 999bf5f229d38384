from tinylinks.dao.base.key_value_base_dao import KeyValueBaseDAO, validate_ttl


__all__ = [
    'KeyValueBaseDAO',
    'validate_ttl',
]
