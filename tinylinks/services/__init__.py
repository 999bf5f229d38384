from tinylinks.services.base_shortener_service import ShortenerBaseService
from tinylinks.services.short_link_service import ShortLinkService, validate_url


__all__ = [
    'ShortenerBaseService',
    'ShortLinkService',
    'validate_url',
]
