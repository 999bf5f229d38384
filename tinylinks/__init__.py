from tinylinks.models import ShortLinkDetail
from tinylinks.services import ShortenerBaseService, ShortLinkService


__all__ = [
    'ShortLinkDetail',
    'ShortenerBaseService',
    'ShortLinkService',
]
