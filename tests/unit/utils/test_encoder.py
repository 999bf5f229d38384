"""Unit tests for the Base62 shortcode encoder

Test coverage includes:

1. Known encodings
   - Single and multi-character codes, no padding.

2. Decoding
   - decode_base62() inverts encode_base62() on a range of counters.
   - Invalid characters and empty codes are rejected.

3. Invalid input
   - Non-integer and negative counters are rejected.
"""

import pytest

from tinylinks.utils.encoder import ALPHABET, encode_base62, decode_base62


def test_alphabet_ordering():
    assert ALPHABET[:10] == '0123456789'
    assert ALPHABET[10:36] == 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    assert ALPHABET[36:] == 'abcdefghijklmnopqrstuvwxyz'


# -------------------------------
# 1. Known encodings
# -------------------------------


@pytest.mark.parametrize(
    'counter, expected',
    [
        (0, '0'),
        (1, '1'),
        (9, '9'),
        (10, 'A'),
        (35, 'Z'),
        (36, 'a'),
        (61, 'z'),
        (62, '10'),
        (125, '21'),
        (62**2, '100'),
        (62**11 - 1, 'zzzzzzzzzzz'),
    ],
)
def test_encode_base62(counter, expected):
    assert encode_base62(counter) == expected


def test_encoding_is_injective():
    codes = {encode_base62(counter) for counter in range(1, 10_000)}
    assert len(codes) == 9_999


# -------------------------------
# 2. Decoding
# -------------------------------


@pytest.mark.parametrize('counter', [0, 1, 61, 62, 125, 3844, 987654321, 2**63 - 1])
def test_decode_inverts_encode(counter):
    assert decode_base62(encode_base62(counter)) == counter


@pytest.mark.parametrize('shortcode', ['', 'abc-def', 'a b', 'ü'])
def test_decode_invalid_shortcode(shortcode):
    with pytest.raises(ValueError):
        decode_base62(shortcode)


def test_decode_non_string():
    with pytest.raises(TypeError):
        decode_base62(125)


# -------------------------------
# 3. Invalid input
# -------------------------------


@pytest.mark.parametrize('counter', ['1', 1.0, None, True])
def test_encode_non_integer(counter):
    with pytest.raises(TypeError):
        encode_base62(counter)


def test_encode_negative():
    with pytest.raises(ValueError):
        encode_base62(-1)
