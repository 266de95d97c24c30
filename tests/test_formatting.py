"""Tests for output format selection and rendering."""

import pytest

from pwstore_otp.errors import (
    ConfigError,
    InvalidDigitSpecError,
    TooFewDigitsError,
    TooManyDigitsError,
)
from pwstore_otp.formatting import (
    STEAM_ALPHABET,
    DecimalFormat,
    SteamFormat,
    format_decimal,
    format_steam,
    resolve_format,
)


def test_format_decimal_keeps_rightmost_digits():
    assert format_decimal(1284755224, 6) == "755224"
    assert format_decimal(1284755224, 8) == "84755224"
    assert format_decimal(1284755224, 10) == "1284755224"


def test_format_decimal_pads_with_zeros():
    assert format_decimal(42, 8) == "00000042"
    assert format_decimal(0, 6) == "000000"
    assert format_decimal(82162583, 10) == "0082162583"


@pytest.mark.parametrize("digits", range(6, 11))
def test_format_decimal_length(digits):
    for code in (0, 7, 123456, 2**31 - 1):
        assert len(format_decimal(code, digits)) == digits


def test_format_steam_known_values():
    assert format_steam(0) == "22222"
    assert format_steam(1) == "32222"
    assert format_steam(25) == "Y2222"
    assert format_steam(26) == "23222"
    assert format_steam(1284755224) == "GG5F5"


def test_format_steam_alphabet_and_length():
    for code in range(0, 2**31, 2**31 // 997):
        rendered = format_steam(code)
        assert len(rendered) == 5
        assert set(rendered) <= set(STEAM_ALPHABET)


def test_steam_alphabet_excludes_ambiguous_characters():
    assert len(STEAM_ALPHABET) == 26
    for char in "01AEILOSUZ":
        assert char not in STEAM_ALPHABET


@pytest.mark.parametrize("spec", ["6", "7", "8", "9", "10", 8, "+8", "08"])
def test_resolve_decimal(spec):
    choice = resolve_format(spec)
    assert isinstance(choice, DecimalFormat)
    assert choice.digits == int(spec)


def test_resolve_steam_by_digit_spec():
    assert resolve_format("s") == SteamFormat()


def test_steam_issuer_overrides_numeric_spec():
    assert resolve_format("8", issuer="Steam") == SteamFormat()


def test_steam_issuer_overrides_invalid_spec():
    assert resolve_format("abc", issuer="Steam") == SteamFormat()
    assert resolve_format("5", issuer="Steam") == SteamFormat()


@pytest.mark.parametrize("issuer", ["steam", "STEAM", "Steam ", "SteamPowered", "Valve"])
def test_steam_issuer_match_is_exact(issuer):
    assert resolve_format("8", issuer=issuer) == DecimalFormat(8)


@pytest.mark.parametrize("spec", ["S", "abc", "", " 6", "6 ", "6.0", "1_0", "six"])
def test_invalid_digit_spec(spec):
    with pytest.raises(InvalidDigitSpecError, match="either 's' or numeric"):
        resolve_format(spec)


@pytest.mark.parametrize("spec", ["5", "0", "-8"])
def test_too_few_digits(spec):
    with pytest.raises(TooFewDigitsError, match="at least 6 digits"):
        resolve_format(spec)


@pytest.mark.parametrize("spec", ["11", "100"])
def test_too_many_digits(spec):
    with pytest.raises(TooManyDigitsError, match="at most 10 digits"):
        resolve_format(spec)


def test_config_errors_share_base_class():
    for spec in ("abc", "5", "11"):
        with pytest.raises(ConfigError):
            resolve_format(spec)


def test_format_objects_render():
    assert DecimalFormat(6).render(1284755224) == "755224"
    assert SteamFormat().render(1284755224) == "GG5F5"


@pytest.mark.parametrize("spec", ["2147483648", "99999999999", "-2147483649"])
def test_digit_spec_outside_32_bit_range_is_invalid(spec):
    with pytest.raises(InvalidDigitSpecError, match="not a 32-bit integer"):
        resolve_format(spec)


def test_digit_spec_at_32_bit_limit_is_too_many():
    with pytest.raises(TooManyDigitsError):
        resolve_format("2147483647")
