#!/usr/bin/env python3
"""
otp_core.py — Core library for TOTP / HOTP over HMAC-SHA512.

Goals:
- Hold the pure functions used by the CLI (otp_cli.py) and the REST API.
- No argparse / CLI loop here, and no clock read inside `generate`:
  the caller passes `now` in.
- Every helper documents its arguments and the errors it raises.

Counter encoding note:
- The time counter is fed to the HMAC as its decimal ASCII text
  (counter 1 -> b"1"), NOT as the 8-byte big-endian value of RFC 4226.
  Codes are only reproducible by a verifier using the same encoding, so
  standard authenticator apps will not agree with this generator.
"""

from typing import Optional, Tuple, Union
import hmac
import hashlib
import time

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 8          # output length
DEFAULT_TIME_STEP = 30      # TOTP step X (seconds)
DEFAULT_T0 = 0              # epoch offset T0 (seconds)
MIN_DIGITS = 1
MAX_DIGITS = 18             # 10**18 still fits an unsigned 64-bit modulus
HASH_NAME = "sha512"

Key = Union[bytes, bytearray, str]


# --- Errors ----------------------------------------------------------------
class OTPError(ValueError):
    """Base class for every error raised while generating a code."""


class ConfigurationError(OTPError):
    """Resolution, digit count or another numeric input is out of range."""


class ClockUnderflowError(OTPError):
    """The offset is later than the current time."""

    def __init__(self, now: int, offset: int):
        super().__init__(
            f"offset {offset}s is ahead of current time {now}s"
        )
        self.now = now
        self.offset = offset


class KeyConstructionError(OTPError):
    """The keyed hash could not be initialised with the given key."""


# --- Validation helpers ----------------------------------------------------
def _require_uint(name: str, value: int) -> int:
    # bool is an int subclass; True as a digit count is a caller bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value


def check_digits(digits: int) -> int:
    """
    Validate the requested output length.

    Raises:
        ConfigurationError: if digits is not in [MIN_DIGITS, MAX_DIGITS]
    """
    _require_uint("digits", digits)
    if not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise ConfigurationError(
            f"digits must be between {MIN_DIGITS} and {MAX_DIGITS}, got {digits}"
        )
    return digits


def check_resolution(resolution: int) -> int:
    """
    Validate the time step.

    Raises:
        ConfigurationError: if resolution is zero (it is used as a divisor)
    """
    _require_uint("resolution", resolution)
    if resolution == 0:
        raise ConfigurationError("resolution must be greater than 0")
    return resolution


def _key_bytes(key: Key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise KeyConstructionError(
        f"key must be bytes or str, got {type(key).__name__}"
    )


# --- RFC helpers -----------------------------------------------------------
def counter_to_bytes(counter: int) -> bytes:
    """
    Encode the counter as the HMAC message: decimal ASCII text.

    Example: counter_to_bytes(1) -> b'1', counter_to_bytes(56666666) -> b'56666666'
    """
    _require_uint("counter", counter)
    return str(counter).encode("ascii")


def hmac_sha512(key: Key, msg: bytes) -> bytes:
    """
    Compute HMAC-SHA512(key, msg) and return the 64-byte digest.

    Raises:
        KeyConstructionError: if the MAC cannot be built from `key`
    """
    raw = _key_bytes(key)
    try:
        mac = hmac.new(raw, msg, hashlib.sha512)
    except (TypeError, ValueError) as e:
        raise KeyConstructionError(f"could not create HMAC: {e}") from e
    return mac.digest()


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    Apply RFC 4226 dynamic truncation.

    - offset = last_byte & 0x0F
    - take 4 bytes from offset, clear the MSB (0x7F) of the first one
    - return the resulting 31-bit unsigned integer

    Arguments:
        hmac_digest: HMAC digest (64 bytes for SHA512, at least 20 for SHA1)
    Raises:
        IndexError: if hmac_digest is shorter than offset + 4
    """
    # offset in 0..15, so the furthest byte read is index 18
    offset = hmac_digest[-1] & 0x0F
    code = (
        ((hmac_digest[offset] & 0x7F) << 24)
        | ((hmac_digest[offset + 1] & 0xFF) << 16)
        | ((hmac_digest[offset + 2] & 0xFF) << 8)
        | (hmac_digest[offset + 3] & 0xFF)
    )
    return code


def hotp(key: Key, counter: int, digits: int = DEFAULT_DIGITS) -> str:
    """
    Derive the code for a given counter.

    Steps:
    1. Message = decimal text of counter
    2. HMAC-SHA512(key, message)
    3. Dynamic truncate -> dbc
    4. otp = dbc % 10^digits
    5. Zero-pad to exactly "digits" characters

    Arguments:
        key: shared secret (str is UTF-8 encoded)
        counter: non-negative integer counter
        digits: output length, 1..18

    Returns:
        str: zero-padded code

    Raises:
        ConfigurationError: bad counter or digits
        KeyConstructionError: key rejected by the HMAC
    """
    check_digits(digits)
    msg = counter_to_bytes(counter)
    digest = hmac_sha512(key, msg)

    dbc = dynamic_truncate(digest)
    otp_val = dbc % (10 ** digits)
    # zero-pad
    return str(otp_val).zfill(digits)


def time_counter(now: int, offset: int, resolution: int) -> int:
    """
    Compute T = floor((now - offset) / resolution).

    Raises:
        ConfigurationError: resolution is 0 or an input is negative
        ClockUnderflowError: offset is later than now
    """
    _require_uint("now", now)
    _require_uint("offset", offset)
    check_resolution(resolution)
    if offset > now:
        raise ClockUnderflowError(now, offset)
    return (now - offset) // resolution


def seconds_remaining(now: int, offset: int, resolution: int) -> int:
    """Seconds left before the counter window containing `now` closes."""
    time_counter(now, offset, resolution)
    return resolution - ((now - offset) % resolution)


def generate(now: int, offset: int, resolution: int, key: Key,
             digits: int = DEFAULT_DIGITS) -> str:
    """
    Generate the TOTP code for an explicit point in time.

    Pure: same inputs, same output. All `now` values inside
    [offset + k*resolution, offset + (k+1)*resolution) share one code.

    Arguments:
        now: seconds since the Unix epoch
        offset: T0, seconds
        resolution: X, seconds (> 0)
        key: shared secret
        digits: output length, 1..18

    Returns:
        str: code of exactly `digits` characters

    Raises:
        ConfigurationError, ClockUnderflowError, KeyConstructionError
    """
    # digits first so a bad length is reported before any clock problem
    check_digits(digits)
    counter = time_counter(now, offset, resolution)
    return hotp(key, counter, digits)


def totp(
    key: Key,
    timestamp: Optional[int] = None,
    timestep: int = DEFAULT_TIME_STEP,
    t0: int = DEFAULT_T0,
    digits: int = DEFAULT_DIGITS,
) -> Tuple[str, int]:
    """
    Current TOTP code, reading the wall clock when no timestamp is given.

    Arguments:
        key: shared secret
        timestamp: epoch seconds (None -> int(time.time()))
        timestep: X (seconds), default 30
        t0: start time offset, default 0
        digits: number of digits

    Returns:
        (code, remaining_seconds)
    """
    if timestamp is None:
        timestamp = int(time.time())
    code = generate(timestamp, t0, timestep, key, digits)
    remaining = seconds_remaining(timestamp, t0, timestep)
    return code, remaining


if __name__ == "__main__":
    print("otp_core.py is a library module. Use otp_cli.py or import it instead.")
