"""Rendering of truncated codes as decimal or Steam Guard strings."""

import re
from dataclasses import dataclass
from typing import Optional, Union

from pwstore_otp.errors import (
    InvalidDigitSpecError,
    TooFewDigitsError,
    TooManyDigitsError,
)


MIN_DIGITS = 6
MAX_DIGITS = 10
DEFAULT_DIGITS = "6"

# Steam Guard drops 0, 1 and letters that are easily confused.
STEAM_ALPHABET = "23456789BCDFGHJKMNPQRTVWXY"
STEAM_CODE_LENGTH = 5
STEAM_DIGIT_SPEC = "s"
STEAM_ISSUER = "Steam"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def format_decimal(code: int, digits: int) -> str:
    """
    Render a code as exactly ``digits`` decimal characters.

    The code is padded to the widest possible 31-bit value before the
    rightmost digits are kept, so leading zeros are preserved.
    """
    return str(code).rjust(MAX_DIGITS, "0")[-digits:]


def format_steam(code: int) -> str:
    """Render a code as a 5 character Steam Guard code, least significant first."""
    chars = []
    for _ in range(STEAM_CODE_LENGTH):
        code, index = divmod(code, len(STEAM_ALPHABET))
        chars.append(STEAM_ALPHABET[index])
    return "".join(chars)


@dataclass(frozen=True)
class DecimalFormat:
    """Standard RFC 4226 decimal output."""

    digits: int

    def render(self, code: int) -> str:
        """Render a truncated code as zero-padded decimal digits."""
        return format_decimal(code, self.digits)


@dataclass(frozen=True)
class SteamFormat:
    """Steam Guard base-26 output."""

    def render(self, code: int) -> str:
        """Render a truncated code as a Steam Guard code."""
        return format_steam(code)


def resolve_format(
    digit_spec: Union[str, int], issuer: Optional[str] = None
) -> Union[DecimalFormat, SteamFormat]:
    """
    Choose the output format for a digit specifier.

    A specifier of "s" or an issuer of exactly "Steam" selects the Steam
    Guard format, whatever number the specifier holds. Otherwise the
    specifier must be an integer between 6 and 10.

    Args:
        digit_spec: "s" or the number of decimal digits.
        issuer: Optional issuer name of the account.

    Returns:
        A format object with a ``render(code)`` method.

    Raises:
        InvalidDigitSpecError: If the specifier is not "s" or an integer.
        TooFewDigitsError: If fewer than 6 digits are requested.
        TooManyDigitsError: If more than 10 digits are requested.
    """
    digit_spec = str(digit_spec)
    if digit_spec == STEAM_DIGIT_SPEC or issuer == STEAM_ISSUER:
        return SteamFormat()

    if not _INTEGER.fullmatch(digit_spec):
        raise InvalidDigitSpecError(
            f"Digits specifier has to be either 's' or numeric, got {digit_spec!r}"
        )

    digits = int(digit_spec)
    if not _INT32_MIN <= digits <= _INT32_MAX:
        raise InvalidDigitSpecError(
            f"Digits specifier is not a 32-bit integer, got {digit_spec!r}"
        )
    if digits < MIN_DIGITS:
        raise TooFewDigitsError(
            f"OTP codes have to be at least {MIN_DIGITS} digits long, got {digits}"
        )
    if digits > MAX_DIGITS:
        raise TooManyDigitsError(
            f"OTP codes can be at most {MAX_DIGITS} digits long, got {digits}"
        )
    return DecimalFormat(digits)
