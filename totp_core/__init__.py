"""
totp_core package
=================

TOTP code generator over HMAC-SHA512 (RFC 4226 / RFC 6238 family).

──────────────────────────────────────────────
Core algorithm
──────────────────────────────────────────────
- Counter:
  T = floor((now - T0) / X), X = time step (default 30 s), T0 = offset.

- Code:
  code = Truncate(HMAC-SHA512(key, str(T))) mod 10^digits
  → the counter is hashed as decimal text, not as 8 raw bytes, so codes
    only match a verifier using the same encoding.

- Dynamic Truncation:
  4 bytes taken at offset (last byte & 0x0F), top bit cleared.

──────────────────────────────────────────────
Quick usage
──────────────────────────────────────────────
>>> from totp_core import generate
>>> generate(59, 0, 30, b"12345678901234567890", 8)
'52477064'
"""

__version__ = "1.0.0"

from totp_core.otp_core import (  # noqa: E402
    DEFAULT_DIGITS,
    DEFAULT_T0,
    DEFAULT_TIME_STEP,
    MAX_DIGITS,
    MIN_DIGITS,
    ClockUnderflowError,
    ConfigurationError,
    KeyConstructionError,
    OTPError,
    generate,
    hotp,
    seconds_remaining,
    time_counter,
    totp,
)
