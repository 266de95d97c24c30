"""Base32 (RFC 4648) decoding of shared OTP secrets."""

import base64
import binascii

from pwstore_otp.errors import DecodeError


BASE32_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")
_CASE_INSENSITIVE_ALPHABET = BASE32_ALPHABET | frozenset("abcdefghijklmnopqrstuvwxyz")

# Trailing group sizes that carry fewer than 8 bits and cannot be decoded
# by the standard library as-is.
_DANGLING_LENGTHS = (1, 3, 6)


def decode_secret(secret: str) -> bytes:
    """
    Decode an OTP secret from Base32 text.

    Decoding is case-insensitive and padding is optional. Leftover bits that
    do not fill a whole byte are discarded.

    Args:
        secret: The Base32 encoded secret.

    Returns:
        The raw key bytes.

    Raises:
        DecodeError: If the secret contains characters outside the Base32
            alphabet or decodes to an empty key.
    """
    normalized = secret.strip().rstrip("=")

    # Checked before upper-casing, which maps some non-ASCII characters into A-Z.
    invalid = sorted(set(normalized) - _CASE_INSENSITIVE_ALPHABET)
    if invalid:
        raise DecodeError(
            f"Secret is not valid Base32: unexpected characters {''.join(invalid)!r}"
        )
    normalized = normalized.upper()

    if len(normalized) % 8 in _DANGLING_LENGTHS:
        normalized = normalized[:-1]

    normalized += "=" * (-len(normalized) % 8)
    try:
        key = base64.b32decode(normalized)
    except binascii.Error as e:
        raise DecodeError(f"Secret is not valid Base32: {e}") from e

    if not key:
        raise DecodeError("Secret decodes to an empty key")
    return key
