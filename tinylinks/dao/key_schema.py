import functools
from collections.abc import Callable


__all__ = ['KeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class KeySchema:
    """Provide standardized key names for storing short link records.

    An optional prefix can be provided to namespace all generated keys.
    Data stores default to the "go_tiny_url" prefix, which keeps keys
    compatible with existing deployments:

        go_tiny_url:next.url.id
        go_tiny_url:short_link:<shortcode>:url
        go_tiny_url:url_hash:<fingerprint>:url
        go_tiny_url:shortlink:<shortcode>:detail

    NOTE: "short_link" and "shortlink" are both part of the existing layout.
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def counter_key(self) -> str:
        return 'next.url.id'

    @prefix_key
    def link_url_key(self, shortcode: str) -> str:
        return f'short_link:{shortcode}:url'

    @prefix_key
    def url_hash_key(self, fingerprint: str) -> str:
        return f'url_hash:{fingerprint}:url'

    @prefix_key
    def link_detail_key(self, shortcode: str) -> str:
        return f'shortlink:{shortcode}:detail'
