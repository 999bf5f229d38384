import hashlib


def fingerprint(url: str) -> str:
    """Return a stable fingerprint of a URL used to deduplicate short links

    The fingerprint is the hex SHA-1 digest of the raw (UTF-8 encoded) URL.
    No normalization is applied, so 'https://example.com' and
    'https://example.com/' get different fingerprints.

    Example:
        >>> fingerprint('https://example.com')
        '327c3fda87ce286848a574982ddd0b7c7487f816'
    """
    if not isinstance(url, str):
        raise TypeError(f'URL must be of type string (given type: {type(url)}).')
    return hashlib.sha1(url.encode('utf-8'), usedforsecurity=False).hexdigest()
