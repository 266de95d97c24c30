"""Error types raised by the one-time password engine."""


class OtpError(ValueError):
    """Base class for every user-facing OTP computation failure."""


class DecodeError(OtpError):
    """The secret is not valid Base32 text."""


class AlgorithmError(OtpError):
    """The requested digest algorithm is not supported."""


class CounterError(OtpError):
    """The counter does not fit in an unsigned 64-bit integer."""


class ConfigError(OtpError):
    """The digit specifier cannot be turned into an output format."""


class InvalidDigitSpecError(ConfigError):
    """The digit specifier is neither 's' nor an integer."""


class TooFewDigitsError(ConfigError):
    """The requested code is shorter than 6 digits."""


class TooManyDigitsError(ConfigError):
    """The requested code is longer than 10 digits."""
