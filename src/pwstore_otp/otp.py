"""HOTP/TOTP and Steam Guard code computation."""

from dataclasses import dataclass
from typing import Optional, Union

from pwstore_otp.errors import OtpError
from pwstore_otp.formatting import DEFAULT_DIGITS, resolve_format
from pwstore_otp.hotp import DEFAULT_ALGORITHM, dynamic_truncate, hmac_digest
from pwstore_otp.secret import decode_secret


@dataclass(frozen=True)
class OtpRequest:
    """
    Inputs of a single code computation.

    For TOTP the caller derives ``counter`` from the clock, usually
    ``int(time.time()) // 30``.
    """

    secret: str
    counter: int
    algorithm: str = DEFAULT_ALGORITHM
    digits: Union[str, int] = DEFAULT_DIGITS
    issuer: Optional[str] = None

    def compute(self) -> "OtpResult":
        try:
            return OtpResult(code=_calculate(self))
        except OtpError as e:
            return OtpResult(error=e)


@dataclass(frozen=True)
class OtpResult:
    """Either a formatted code or the error that prevented computing one."""

    code: Optional[str] = None
    error: Optional[OtpError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the code, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        return self.code


def _calculate(request: OtpRequest) -> str:
    # Validate the output format before doing any hashing.
    output_format = resolve_format(request.digits, request.issuer)
    key = decode_secret(request.secret)
    digest = hmac_digest(key, request.counter, request.algorithm)
    return output_format.render(dynamic_truncate(digest))


def compute_code(
    secret: str,
    counter: int,
    algorithm: str = DEFAULT_ALGORITHM,
    digits: Union[str, int] = DEFAULT_DIGITS,
    issuer: Optional[str] = None,
) -> OtpResult:
    """
    Compute a one-time code.

    Args:
        secret: Base32 encoded shared secret (case-insensitive, unpadded accepted).
        counter: HOTP event counter or TOTP time step.
        algorithm: "sha1", "sha256" or "sha512" (case-insensitive).
        digits: "s" for Steam Guard, or a number of digits between 6 and 10.
        issuer: Optional issuer; "Steam" forces a Steam Guard code.

    Returns:
        An OtpResult holding the code, or the OtpError describing why the
        inputs were rejected.
    """
    request = OtpRequest(
        secret=secret,
        counter=counter,
        algorithm=algorithm,
        digits=digits,
        issuer=issuer,
    )
    return request.compute()


def generate_code(
    secret: str,
    counter: int,
    algorithm: str = DEFAULT_ALGORITHM,
    digits: Union[str, int] = DEFAULT_DIGITS,
    issuer: Optional[str] = None,
) -> str:
    """
    Compute a one-time code, raising on invalid input.

    Raises:
        OtpError: If the secret, algorithm, counter or digit specifier is invalid.
    """
    return compute_code(secret, counter, algorithm, digits, issuer).unwrap()
