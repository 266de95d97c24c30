"""RFC 4226 HOTP building blocks: keyed digest and dynamic truncation."""

from cryptography.hazmat.primitives import hashes, hmac

from pwstore_otp.errors import AlgorithmError, CounterError


SUPPORTED_ALGORITHMS = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}

DEFAULT_ALGORITHM = "sha1"

_COUNTER_SIZE = 8
_MAX_TRUNCATED = 1 << 31


def counter_to_bytes(counter: int) -> bytes:
    """
    Serialize a counter as an 8-byte big-endian unsigned integer.

    Raises:
        CounterError: If the counter is negative or does not fit in 64 bits.
    """
    try:
        return counter.to_bytes(_COUNTER_SIZE, byteorder="big", signed=False)
    except OverflowError as e:
        raise CounterError(
            f"Counter must be between 0 and 2**64 - 1, got {counter}"
        ) from e


def hmac_digest(key: bytes, counter: int, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Compute the HMAC of the serialized counter.

    Args:
        key: Raw secret key bytes.
        counter: The moving factor (event counter or TOTP time step).
        algorithm: One of "sha1", "sha256" or "sha512", case-insensitive.

    Returns:
        The digest, 20, 32 or 64 bytes long depending on the algorithm.

    Raises:
        AlgorithmError: If the algorithm is not supported.
        CounterError: If the counter is out of range.
    """
    try:
        hash_cls = SUPPORTED_ALGORITHMS[algorithm.lower()]
    except KeyError:
        supported = ", ".join(SUPPORTED_ALGORITHMS)
        raise AlgorithmError(
            f"Unsupported algorithm {algorithm!r} (expected one of: {supported})"
        ) from None

    mac = hmac.HMAC(key, hash_cls())
    mac.update(counter_to_bytes(counter))
    return mac.finalize()


def dynamic_truncate(digest: bytes) -> int:
    """
    Extract a 31-bit integer from a digest (RFC 4226, Section 5.3).

    The low 4 bits of the last byte select a 4-byte window, whose most
    significant bit is cleared before it is read as a big-endian integer.
    """
    offset = digest[-1] & 0x0F
    window = bytearray(digest[offset : offset + 4])
    window[0] &= 0x7F
    code = int.from_bytes(window, byteorder="big")

    if not 0 <= code < _MAX_TRUNCATED:
        raise AssertionError(f"Truncated code {code} is outside the 31-bit range")
    return code
