from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class VerifyOutcome(str, Enum):
    VERIFIED = "verified"
    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class CredentialRecord:
    identity: str
    code: str
    issued_at: datetime
    expires_at: datetime

    def __post_init__(self):
        if not self.identity:
            raise ValueError("identity is required")
        if self.expires_at < self.issued_at:
            raise ValueError("expires_at must not precede issued_at")

    def is_expired(self, now: datetime) -> bool:
        # still valid at exactly expires_at
        return now > self.expires_at
