from __future__ import annotations

import logging
import threading
from datetime import timedelta
from typing import Optional

from otp_auth.domain.entities import CredentialRecord, VerifyOutcome
from otp_auth.domain.ports.clock import ClockPort
from otp_auth.domain.ports.random_source import RandomSourcePort
from otp_auth.domain.services import default_random_source, generate_otp_code

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(minutes=5)


class OtpRegistry:
    """
    In-memory mapping of identity -> pending CredentialRecord.

    - at most one live record per identity; issuing again overwrites
    - records are removed on successful verification or when found expired
    - every mapping access happens under one lock, so it is safe to share
      between threads as well as between coroutines on one event loop
    """

    def __init__(
        self,
        clock: ClockPort,
        *,
        rng: RandomSourcePort | None = None,
        ttl: timedelta = DEFAULT_TTL,
    ) -> None:
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        self._clock = clock
        self._rng = rng or default_random_source()
        self._ttl = ttl
        self._records: dict[str, CredentialRecord] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, identity: str) -> str:
        code = generate_otp_code(self._rng)
        issued_at = self._clock.now()
        record = CredentialRecord(
            identity=identity,
            code=code,
            issued_at=issued_at,
            expires_at=issued_at + self._ttl,
        )
        with self._lock:
            replaced = identity in self._records
            self._records[identity] = record
        logger.info(
            "otp issued",
            extra={"identity": identity, "replaced": replaced},
        )
        return code

    def verify(self, identity: str, submitted_code: str) -> VerifyOutcome:
        now = self._clock.now()
        with self._lock:
            record = self._records.get(identity)
            if record is None:
                outcome = VerifyOutcome.NOT_FOUND
            elif record.is_expired(now):
                del self._records[identity]
                outcome = VerifyOutcome.EXPIRED
            elif submitted_code != record.code:
                outcome = VerifyOutcome.MISMATCH
            else:
                del self._records[identity]
                outcome = VerifyOutcome.VERIFIED
        logger.info(
            "otp verification",
            extra={"identity": identity, "outcome": outcome.value},
        )
        return outcome

    def sweep_expired(self) -> int:
        """Drop every record past its deadline. Returns how many were removed."""
        now = self._clock.now()
        with self._lock:
            expired = [
                identity
                for identity, record in self._records.items()
                if record.is_expired(now)
            ]
            for identity in expired:
                del self._records[identity]
        return len(expired)

    def get(self, identity: str) -> Optional[CredentialRecord]:
        with self._lock:
            return self._records.get(identity)

    def __contains__(self, identity: object) -> bool:
        with self._lock:
            return identity in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
