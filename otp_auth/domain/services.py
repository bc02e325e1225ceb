# otp_auth/domain/services.py
from __future__ import annotations

import random

from otp_auth.domain.ports.random_source import RandomSourcePort

OTP_MIN = 100_000
OTP_MAX = 999_999

_default_rng: RandomSourcePort = random.SystemRandom()


def default_random_source() -> RandomSourcePort:
    return _default_rng


def generate_otp_code(rng: RandomSourcePort | None = None) -> str:
    """6-digit numeric code, uniform over [OTP_MIN, OTP_MAX]."""
    value = (rng or _default_rng).randint(OTP_MIN, OTP_MAX)
    if not OTP_MIN <= value <= OTP_MAX:
        raise ValueError(f"random source returned out-of-range value: {value}")
    return str(value)


def normalize_identity(email: str | None) -> str:
    """Strip and lower-case an email so issue/verify share one key."""
    return (email or "").strip().lower()
