from __future__ import annotations

import logging

from otp_auth.domain.ports.email_port import EmailPort

logger = logging.getLogger(__name__)


class LoggingEmailAdapter(EmailPort):
    """DEV sender: writes the message to the log instead of mailing it."""

    async def send(
        self,
        *,
        to: str,
        subject: str,
        body: str,
        idempotency_key: str | None = None,
    ) -> None:
        logger.info(
            "dev email",
            extra={"to": to, "subject": subject, "body": body},
        )

    async def aclose(self) -> None:
        return None
