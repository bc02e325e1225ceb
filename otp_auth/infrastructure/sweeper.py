from __future__ import annotations

import asyncio
import logging

from otp_auth.domain.registry import OtpRegistry

logger = logging.getLogger(__name__)


class RegistrySweeper:
    """
    Periodically drops expired records from the registry.

    Verification already deletes expired records lazily; this only keeps
    abandoned codes from piling up in memory.
    """

    def __init__(self, *, registry: OtpRegistry, interval: float = 60.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.registry = registry
        self.interval = interval

    async def run_forever(self) -> None:
        logger.info("registry sweeper started", extra={"interval": self.interval})
        try:
            while True:
                await asyncio.sleep(self.interval)
                self.sweep_once()
        except asyncio.CancelledError:
            logger.info("registry sweeper stopped")
            raise

    def sweep_once(self) -> int:
        removed = self.registry.sweep_expired()
        if removed:
            logger.info(
                "swept expired codes",
                extra={"removed": removed, "remaining": len(self.registry)},
            )
        return removed
