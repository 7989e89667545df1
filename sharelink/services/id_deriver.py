"""
Short Id Derivation

Short ids are content addressed: the id of a link is a pure function of the
canonical bytes of its record.

Design Decisions:
- SHA-256 over the canonical bytes, reduced to a fixed-width base62 token
- Base62 ([0-9a-zA-Z]) so the id is usable as a path segment unescaped
- 20 characters (~119 bits) keeps accidental collisions negligible
- No lookup before writing: identical content yields the identical id,
  which is what makes re-creating a link idempotent
"""

import hashlib

BASE62_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE62_LENGTH = len(BASE62_CHARS)

SHORT_ID_LENGTH = 20


def encode_base62(number: int, min_length: int = SHORT_ID_LENGTH) -> str:
    """
    Encode a non-negative number to a base62 string of at least min_length.

    Example:
        encode_base62(0, 7) -> "0000000"
        encode_base62(62, 7) -> "0000010"
    """
    if number < 0:
        raise ValueError("Cannot encode a negative number")

    digits = []
    while number > 0:
        number, remainder = divmod(number, BASE62_LENGTH)
        digits.append(BASE62_CHARS[remainder])

    code = ''.join(reversed(digits))
    return code.rjust(min_length, BASE62_CHARS[0])


def decode_base62(encoded: str) -> int:
    """
    Decode a base62 string back to a number.

    Raises:
        ValueError: if ``encoded`` contains a non-base62 character
    """
    number = 0
    for char in encoded:
        number = number * BASE62_LENGTH + BASE62_CHARS.index(char)
    return number


def derive_short_id(data: bytes, length: int = SHORT_ID_LENGTH) -> str:
    """
    Derive the short id for canonical record bytes.

    The digest is reduced modulo 62**length, so the result is always exactly
    ``length`` base62 characters. Defined for every input, including b"".

    Args:
        data: Canonical serialization of a link record
        length: Number of characters in the id

    Returns:
        URL-safe short id
    """
    if length < 1:
        raise ValueError("Short id length must be positive")
    digest = hashlib.sha256(data).digest()
    number = int.from_bytes(digest, "big") % (BASE62_LENGTH ** length)
    return encode_base62(number, min_length=length)
