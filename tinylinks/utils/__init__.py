from tinylinks.utils.config import app_env, load_config, parse_redis_addr
from tinylinks.utils.helpers import utc_now_iso, minutes_to_ttl, require_environment
from tinylinks.utils.encoder import encode_base62, decode_base62
from tinylinks.utils.fingerprint import fingerprint
from tinylinks.utils.logging import initialize_logging


__all__ = [
    'encode_base62',
    'decode_base62',
    'fingerprint',
    'app_env',
    'load_config',
    'parse_redis_addr',
    'utc_now_iso',
    'minutes_to_ttl',
    'require_environment',
    'initialize_logging',
]
