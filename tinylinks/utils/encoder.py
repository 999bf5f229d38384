"""Shortcode encoding utility

This module converts the global link counter into a compact, URL-safe shortcode
(and back, for diagnostics).

Functions:
    encode_base62(counter) -> str:
        Encode a non-negative integer into a Base62 string.
    decode_base62(shortcode) -> int:
        Decode a Base62 string back into the integer it was encoded from.

Example:
    >>> from tinylinks.utils import encode_base62
    >>> encode_base62(125)
    '21'
    >>> decode_base62('21')
    125

NOTE:
    - Uniqueness of shortcodes comes from the counter being monotonic, the encoding
      itself only has to be injective.
    - The alphabet ordering (digits, upper-case, lower-case) matches the codes
      already stored by existing deployments.
"""

import string


ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
BASE = len(ALPHABET)  # 10 digits + 26 uppercase + 26 lowercase
_INDEX = {char: i for i, char in enumerate(ALPHABET)}


def encode_base62(counter: int) -> str:
    """Encode a counter into a Base62 shortcode.

    Output grows with log62(counter) and is never padded, e.g. 0 -> '0',
    61 -> 'z', 62 -> '10'.

    Args:
        counter (int):
            Non-negative integer identifying the link.

    Returns:
        str: Base62 string over [0-9A-Za-z].

    Raises:
        TypeError: If counter isn't an integer.
        ValueError: If counter is negative.
    """
    if not isinstance(counter, int) or isinstance(counter, bool):
        raise TypeError(f'Counter must be of type integer (given type: {type(counter)}).')
    if counter < 0:
        raise ValueError(f'Counter must be a non-negative integer (given value: {counter}).')

    if counter == 0:
        return ALPHABET[0]

    digits = []
    while counter:
        counter, remainder = divmod(counter, BASE)
        digits.append(ALPHABET[remainder])
    return ''.join(reversed(digits))


def decode_base62(shortcode: str) -> int:
    """Decode a Base62 shortcode back into its counter value.

    Raises:
        TypeError: If shortcode isn't a string.
        ValueError: If shortcode is empty or contains characters outside [0-9A-Za-z].
    """
    if not isinstance(shortcode, str):
        raise TypeError(f'Shortcode must be of type string (given type: {type(shortcode)}).')
    if not shortcode:
        raise ValueError('Shortcode must be a non-empty string.')

    counter = 0
    for char in shortcode:
        if char not in _INDEX:
            raise ValueError(f'Invalid Base62 character {char!r} in shortcode {shortcode!r}.')
        counter = counter * BASE + _INDEX[char]
    return counter
